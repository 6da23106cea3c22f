from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .common import BaseParser
from ...constants import (
    EXPLICIT_PROXY_PREFIX,
    HEALTH_CHECK_SCHEMES,
    LEADING_DIGITS_RE,
    PROXY_GROUP_SEPARATOR,
    WILDCARD_PROXY,
)
from ...models import ProxyGroup


class FieldKind(Enum):
    """Classification of a proxy group field after name and type."""

    HEALTH_CHECK_URL = "url"
    TIMING = "timing"
    WILDCARD = "wildcard"
    PROXY = "proxy"
    EMPTY = "empty"


@dataclass(frozen=True)
class GroupField:
    """
    A classified proxy group field.

    ``value`` holds the URL or proxy name. For ``TIMING`` fields, ``interval``
    and ``tolerance`` are None when the field does not set them.
    """
    kind: FieldKind
    value: str = ""
    interval: Optional[int] = None
    tolerance: Optional[int] = None


def _classify_timing(raw: str) -> GroupField:
    """Read ``interval``, ``interval,tolerance`` or ``interval,,tolerance``."""
    if "," not in raw:
        return GroupField(FieldKind.TIMING, raw, interval=BaseParser.scan_int(raw))

    parts = raw.split(",")
    interval = BaseParser.scan_int(parts[0]) if parts[0] else None
    tolerance = None
    # Tolerance is the last non-empty element after the first.
    for part in reversed(parts[1:]):
        if part:
            tolerance = BaseParser.scan_int(part)
            break
    return GroupField(FieldKind.TIMING, raw, interval=interval, tolerance=tolerance)


def classify_field(raw: str) -> GroupField:
    """Classify one backtick-separated field of a ``custom_proxy_group=`` line."""
    if raw.startswith(HEALTH_CHECK_SCHEMES):
        return GroupField(FieldKind.HEALTH_CHECK_URL, raw)

    if LEADING_DIGITS_RE.match(raw):
        return _classify_timing(raw)

    name = raw[len(EXPLICIT_PROXY_PREFIX):] if raw.startswith(EXPLICIT_PROXY_PREFIX) else raw
    if not name:
        return GroupField(FieldKind.EMPTY)
    if name == WILDCARD_PROXY:
        return GroupField(FieldKind.WILDCARD, name)
    return GroupField(FieldKind.PROXY, name)


class ProxyGroupParser(BaseParser):
    """
    Decodes ``name`type`member`...`url`interval,,tolerance``.

    Members may be ``[]``-prefixed group references, bare proxy names or
    regex patterns such as ``(港|HK)``. A body with fewer than two fields
    yields an empty ProxyGroup, which callers discard.
    """

    def parse(self) -> ProxyGroup:
        parts = self.body.split(PROXY_GROUP_SEPARATOR)
        if len(parts) < 2:
            return ProxyGroup()

        group = ProxyGroup(name=parts[0], type=parts[1])
        for raw in parts[2:]:
            self._apply(group, classify_field(raw))
        return group

    @staticmethod
    def _apply(group: ProxyGroup, field: GroupField) -> None:
        if field.kind is FieldKind.HEALTH_CHECK_URL:
            group.url = field.value
        elif field.kind is FieldKind.TIMING:
            if field.interval is not None:
                group.interval = field.interval
            if field.tolerance is not None:
                group.tolerance = field.tolerance
        elif field.kind is FieldKind.WILDCARD:
            group.has_wildcard = True
        elif field.kind is FieldKind.PROXY:
            group.proxies.append(field.value)


def parse_proxy_group(body: str) -> ProxyGroup:
    """Decode the text following ``custom_proxy_group=``."""
    return ProxyGroupParser(body).parse()
