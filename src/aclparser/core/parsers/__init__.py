"""Field decoders for ACL4SSR directives.

Each module decodes the body of one directive kind into its record type:
``ruleset`` for ``ruleset=`` lines and ``proxy_group`` for
``custom_proxy_group=`` lines. Decoders never raise on malformed input;
unreadable numeric fields keep their defaults.
"""
from __future__ import annotations

from .proxy_group import FieldKind, GroupField, ProxyGroupParser, classify_field, parse_proxy_group
from .ruleset import RulesetParser, parse_ruleset

__all__ = [
    "FieldKind",
    "GroupField",
    "ProxyGroupParser",
    "RulesetParser",
    "classify_field",
    "parse_proxy_group",
    "parse_ruleset",
]
