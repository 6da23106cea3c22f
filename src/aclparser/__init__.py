"""
aclparser - ACL4SSR rule configuration parser

Reads ``ruleset=`` and ``custom_proxy_group=`` definitions from ACL4SSR
``.ini`` documents into typed records for subscription converters.
"""

__version__ = "1.0.0"

from .core import (
    deduplicate_proxy_groups,
    extract_surge_regex_filter,
    is_regex_proxy_pattern,
    merge_regex_filters,
    parse_acl_config,
)
from .core.file_utils import load_acl_file
from .core.parsers import parse_proxy_group, parse_ruleset
from .models import ACLConfig, ProxyGroup, Ruleset

__all__ = [
    "ACLConfig",
    "ProxyGroup",
    "Ruleset",
    "deduplicate_proxy_groups",
    "extract_surge_regex_filter",
    "is_regex_proxy_pattern",
    "load_acl_file",
    "merge_regex_filters",
    "parse_acl_config",
    "parse_proxy_group",
    "parse_ruleset",
    "__version__",
]
