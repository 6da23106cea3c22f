from __future__ import annotations

from .acl_parser import deduplicate_proxy_groups, parse_acl_config
from .regex_filters import extract_surge_regex_filter, is_regex_proxy_pattern, merge_regex_filters

__all__ = [
    "deduplicate_proxy_groups",
    "extract_surge_regex_filter",
    "is_regex_proxy_pattern",
    "merge_regex_filters",
    "parse_acl_config",
]
