from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from ...constants import INT64_MAX, INT64_MIN, LEADING_INT_RE, STRICT_INT_RE


class BaseParser(ABC):
    """Abstract base class for ACL4SSR directive decoders."""

    def __init__(self, body: str):
        self.body = body

    @abstractmethod
    def parse(self) -> Any:
        """Decode the directive body into its record type."""
        raise NotImplementedError

    @staticmethod
    def parse_int_strict(value: str) -> Optional[int]:
        """
        Parse ``value`` as a whole integer.

        Only an optional sign followed by ASCII digits is accepted, so
        ``"CN"``, ``" 5"`` and ``"1_000"`` are all rejected. Values outside the
        signed 64-bit range are rejected too.
        """
        if STRICT_INT_RE.fullmatch(value) is None:
            return None
        return _in_int64_range(int(value))

    @staticmethod
    def scan_int(value: str) -> Optional[int]:
        """
        Read the leading integer of ``value``, ignoring trailing text.

        ``"300s"`` yields 300; ``"abc"`` yields None. Out-of-range values
        yield None.
        """
        match = LEADING_INT_RE.match(value)
        if match is None:
            return None
        return _in_int64_range(int(match.group(1)))


def _in_int64_range(value: int) -> Optional[int]:
    if INT64_MIN <= value <= INT64_MAX:
        return value
    return None
