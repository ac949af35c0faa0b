"""Timestamp Parsing — turn an operator-supplied expiry literal into an aware datetime.

Invariants:
    - Returns None for anything unparseable (never raises)
    - Result is always timezone-aware; naive ISO strings are read as UTC
    - All-digit strings are milliseconds since the Unix epoch
"""

import re
from datetime import datetime, timezone


_EPOCH_MS_PATTERN = re.compile(r"^-?\d+$")


def parse_date_time(text: object) -> datetime | None:
    if not isinstance(text, str) or not text.strip():
        return None
    text = text.strip()
    if _EPOCH_MS_PATTERN.match(text):
        try:
            return datetime.fromtimestamp(int(text) / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
