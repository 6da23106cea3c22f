"""Helpers for regex-pattern proxy members such as ``(香港|HK)``.

Formatters that turn proxy groups into Clash or Surge output use these to
tell pattern members from literal proxy names and to fold several patterns
into one filter expression.
"""
from __future__ import annotations

from typing import List, Sequence


def is_regex_proxy_pattern(proxy: str) -> bool:
    """Return True if ``proxy`` looks like ``(option1|option2|...)``."""
    proxy = proxy.strip()
    if len(proxy) < 3:
        return False
    return proxy.startswith("(") and proxy.endswith(")") and "|" in proxy


def _inner_options(filters: Sequence[str]) -> List[str]:
    """Strip one outer pair of parentheses from each filter."""
    options = []
    for pattern in filters:
        inner = pattern[:-1] if pattern.endswith(")") else pattern
        if inner.startswith("("):
            inner = inner[1:]
        options.append(inner)
    return options


def merge_regex_filters(filters: Sequence[str]) -> str:
    """
    Merge several regex filters into one.

    ``["(香港|HK)", "(日本|JP)"]`` becomes ``"(香港|HK|日本|JP)"``. A single
    filter is returned as given.
    """
    if len(filters) == 1:
        return filters[0]
    return "(" + "|".join(_inner_options(filters)) + ")"


def extract_surge_regex_filter(filters: Sequence[str]) -> str:
    """
    Merge regex filters for Surge's ``policy-regex-filter``, which takes the
    alternation without surrounding parentheses.

    ``["(香港|HK)", "(日本|JP)"]`` becomes ``"香港|HK|日本|JP"``.
    """
    return "|".join(_inner_options(filters))
