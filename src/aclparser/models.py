"""Shared data types for the aclparser application."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterator, List, NamedTuple

from .constants import DEFAULT_RULESET_INTERVAL

BEHAVIOR_CLASSICAL = "classical"
BEHAVIOR_DOMAIN = "domain"
BEHAVIOR_IPCIDR = "ipcidr"


@dataclass
class Ruleset:
    """
    A ``ruleset=`` directive routing a rule list into a proxy group.

    ``rule_url`` is a remote URL, an inline rule such as ``[]GEOIP,CN``, or
    a CDN URL rewritten from an ``rules/ACL4SSR/`` relative path.
    """
    group: str
    rule_url: str = ""
    behavior: str = BEHAVIOR_CLASSICAL
    interval: int = DEFAULT_RULESET_INTERVAL

    @property
    def is_inline(self) -> bool:
        return self.rule_url.startswith("[]")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ProxyGroup:
    """
    A ``custom_proxy_group=`` directive.

    ``proxies`` keeps member order and may contain regex patterns such as
    ``(香港|HK)``. The ``.*`` member is recorded as ``has_wildcard`` instead.
    """
    name: str = ""
    type: str = ""
    proxies: List[str] = field(default_factory=list)
    has_wildcard: bool = False
    url: str = ""
    interval: int = 0
    tolerance: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ACLConfig(NamedTuple):
    """Result of parsing one ACL4SSR document."""
    rulesets: List[Ruleset]
    proxy_groups: List[ProxyGroup]

    def group_names(self) -> Iterator[str]:
        return (group.name for group in self.proxy_groups)
