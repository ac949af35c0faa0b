"""WAL Position — parse and compare PostgreSQL write-ahead-log positions ("16/B374D848").

Invariants:
    - A position is two hex words of 1-8 digits separated by "/" (case-insensitive)
    - Parsed positions are totally ordered by (high, low)
    - Parsing never raises for bad input: it returns a ValidationFailure

Design Decisions:
    - NamedTuple: tuple ordering gives comparison for free
"""

import re
from typing import NamedTuple

from topoguard.core.domain_types import ValidationErrorCode
from topoguard.core.validation_result import ValidationFailure


_WAL_PATTERN = re.compile(r"([0-9a-f]{1,8})/([0-9a-f]{1,8})", re.IGNORECASE)


class WalPosition(NamedTuple):
    high: int
    low: int

    def __str__(self) -> str:
        return f"{self.high:X}/{self.low:08X}"


def parse_wal_position(text: object) -> WalPosition | ValidationFailure:
    """Parse a WAL position string. Returns WalPosition or a failure."""
    if not isinstance(text, str):
        return ValidationFailure.invariant(
            ValidationErrorCode.INVALID_WAL_POSITION,
            f"WAL position must be a string (found {type(text).__name__})",
            initWal=None if text is None else repr(text),
        )
    match = _WAL_PATTERN.fullmatch(text)
    if match is None:
        return ValidationFailure.invariant(
            ValidationErrorCode.INVALID_WAL_POSITION,
            f'invalid WAL position (found "{text}")',
            initWal=text,
        )
    return WalPosition(int(match.group(1), 16), int(match.group(2), 16))


def compare_wal_positions(a: WalPosition, b: WalPosition) -> int:
    """-1, 0 or 1 as a is behind, equal to, or ahead of b."""
    return (a > b) - (a < b)
