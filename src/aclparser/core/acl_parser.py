"""Line scanner for ACL4SSR configuration documents.

``parse_acl_config`` walks the document line by line, hands ``ruleset=`` and
``custom_proxy_group=`` directives to their field decoders and collapses
repeated proxy group names. Anything it does not recognise (section headers
such as ``[custom]``, ``enable_rule_generator=``, stray text) is skipped, so
documents written for newer converters still parse.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Set

from ..constants import COMMENT_PREFIXES, PROXY_GROUP_PREFIX, RULESET_PREFIX
from ..models import ACLConfig, ProxyGroup, Ruleset
from .parsers import parse_proxy_group, parse_ruleset

logger = logging.getLogger(__name__)


def parse_acl_config(content: str) -> ACLConfig:
    """
    Parse ACL4SSR content into rulesets and proxy groups.

    Rulesets are returned in line order. Proxy groups are deduplicated by
    name, the later definition replacing the earlier one.

    Args:
        content: The full text of an ACL4SSR ``.ini`` document.

    Returns:
        An ``ACLConfig`` that unpacks as ``(rulesets, proxy_groups)``.
    """
    rulesets: List[Ruleset] = []
    proxy_groups: List[ProxyGroup] = []

    # Only "\n" ends a line; strip() drops the "\r" of CRLF files.
    for lineno, raw_line in enumerate(content.split("\n"), start=1):
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_PREFIXES):
            continue

        if line.startswith(RULESET_PREFIX):
            parts = line[len(RULESET_PREFIX):].split(",", 1)
            if len(parts) < 2:
                logger.debug("Skipping ruleset without rule spec on line %d", lineno)
                continue
            rulesets.append(parse_ruleset(parts[0].strip(), parts[1].strip()))
        elif line.startswith(PROXY_GROUP_PREFIX):
            group = parse_proxy_group(line[len(PROXY_GROUP_PREFIX):])
            if not group.name:
                logger.debug("Skipping unnamed proxy group on line %d", lineno)
                continue
            proxy_groups.append(group)

    unique_groups = deduplicate_proxy_groups(proxy_groups)
    logger.debug(
        "Parsed %d rulesets and %d proxy groups (%d duplicate definitions replaced)",
        len(rulesets),
        len(unique_groups),
        len(proxy_groups) - len(unique_groups),
    )
    return ACLConfig(rulesets, unique_groups)


def deduplicate_proxy_groups(groups: List[ProxyGroup]) -> List[ProxyGroup]:
    """
    Keep the last definition of each proxy group name.

    The result is ordered by the position of each name's last occurrence.
    """
    if len(groups) <= 1:
        return list(groups)

    last_index: Dict[str, int] = {group.name: idx for idx, group in enumerate(groups)}
    seen: Set[str] = set()
    result: List[ProxyGroup] = []
    for idx, group in enumerate(groups):
        if last_index[group.name] == idx and group.name not in seen:
            result.append(group)
            seen.add(group.name)
    return result
