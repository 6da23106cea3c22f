from __future__ import annotations

from .common import BaseParser
from ...constants import (
    ACL4SSR_CDN_BASE,
    ACL4SSR_RELATIVE_PREFIX,
    CLASH_CLASSIC_PREFIX,
    CLASH_DOMAIN_PREFIX,
    CLASH_IPCIDR_PREFIX,
    INLINE_RULE_PREFIX,
)
from ...models import (
    BEHAVIOR_CLASSICAL,
    BEHAVIOR_DOMAIN,
    BEHAVIOR_IPCIDR,
    Ruleset,
)

# Checked in order; the first matching prefix decides the behavior.
TYPED_PREFIXES = (
    (CLASH_CLASSIC_PREFIX, BEHAVIOR_CLASSICAL),
    (CLASH_DOMAIN_PREFIX, BEHAVIOR_DOMAIN),
    (CLASH_IPCIDR_PREFIX, BEHAVIOR_IPCIDR),
)


class RulesetParser(BaseParser):
    """
    Decodes the body of a ``ruleset=<group>,<spec>`` directive.

    Supported spec forms:

    - ``clash-classic:https://...yaml,28800`` (type prefix and interval)
    - ``clash-domain:https://...yaml`` (type prefix)
    - ``https://...list`` (plain URL)
    - ``rules/ACL4SSR/Clash/xxx.list`` (relative path, rewritten to the CDN)
    - ``[]GEOIP,CN`` (inline rule)
    """

    def __init__(self, group: str, rule_spec: str):
        super().__init__(rule_spec)
        self.group = group

    def parse(self) -> Ruleset:
        ruleset = Ruleset(group=self.group)
        spec = self._extract_interval(ruleset, self.body)

        for prefix, behavior in TYPED_PREFIXES:
            if spec.startswith(prefix):
                ruleset.behavior = behavior
                ruleset.rule_url = spec[len(prefix):]
                return ruleset

        if spec.startswith(INLINE_RULE_PREFIX) or spec.startswith("http"):
            ruleset.rule_url = spec
        elif spec.startswith(ACL4SSR_RELATIVE_PREFIX):
            ruleset.rule_url = ACL4SSR_CDN_BASE + spec[len(ACL4SSR_RELATIVE_PREFIX):]
        else:
            ruleset.rule_url = spec
        return ruleset

    def _extract_interval(self, ruleset: Ruleset, spec: str) -> str:
        """
        Move a trailing ``,<int>`` suffix into ``ruleset.interval``.

        Returns the spec with the suffix removed. When the text after the last
        comma is not an integer (``[]GEOIP,CN``) the comma belongs to the
        content and the spec is returned unchanged. An inline rule ending in a
        numeric segment, such as ``[]SRC-PORT,443``, is indistinguishable
        from an interval and loses that segment.
        """
        idx = spec.rfind(",")
        if idx <= 0:
            return spec
        interval = self.parse_int_strict(spec[idx + 1:])
        if interval is None:
            return spec
        ruleset.interval = interval
        return spec[:idx]


def parse_ruleset(group: str, rule_spec: str) -> Ruleset:
    """Decode a ruleset directive's target group and rule spec."""
    return RulesetParser(group, rule_spec).parse()
