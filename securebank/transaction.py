"""A single account transaction and its pipe-separated text form."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["Transaction"]

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _parse_float(text: str) -> float:
    """Parse the leading number of ``text``, ignoring anything after it."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group())


def _parse_int(text: str) -> int:
    """Parse the leading 32-bit integer of ``text``, ignoring anything after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group())
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _fields(line: str) -> list[str]:
    """Split ``line`` on '|' the way successive delimited reads see it."""
    parts = line.split("|")
    if parts[-1] == "":
        parts.pop()
    return parts


@dataclass
class Transaction:
    """A deposit, withdrawal or transfer recorded against an account."""

    timestamp: str = ""
    type: str = ""
    amount: float = 0.0
    related_account: int = -1

    def serialize(self) -> str:
        """Return ``timestamp|type|amount|related_account``."""
        return f"{self.timestamp}|{self.type}|{self.amount:g}|{self.related_account}"

    @classmethod
    def deserialize(cls, line: str) -> "Transaction":
        """Parse a serialized line; lines with fewer than three fields give an empty transaction."""
        fields = _fields(line)
        if len(fields) < 3:
            return cls()
        timestamp, kind, amount_text = fields[:3]
        related_text = fields[3] if len(fields) > 3 else "-1"
        return cls(
            timestamp=timestamp,
            type=kind,
            amount=_parse_float(amount_text),
            related_account=_parse_int(related_text),
        )