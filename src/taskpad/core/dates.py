# src/taskpad/core/dates.py

"""
Clock / time helpers.

All timestamps handled by the app are timezone-aware datetimes in the local zone.
On disk they are written as naive local "YYYY-MM-DD HH:MM:SS" strings.

Due dates can be typed in two ways:
- relative: "<int><unit>" tokens separated by spaces, units w/d/h/m/s, e.g. "2d 3h" or "1w -1d"
- absolute: "YYYY-MM-DD HH:MM" (seconds default to 0, local timezone)
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
INPUT_FORMAT = "%Y-%m-%d %H:%M"

DATE_HINT = "Invalid date! (use format: YYYY-MM-DD HH:MM or Xw Xd Xh Xm)"

# Largest unit first: time_left() picks the first non-zero one.
_UNITS: tuple[tuple[str, int], ...] = (
    ("w", 7 * 24 * 3600),
    ("d", 24 * 3600),
    ("h", 3600),
    ("m", 60),
    ("s", 1),
)
_UNIT_SECONDS = dict(_UNITS)

_TOKEN_RE = re.compile(r"^([+-]?\d+)([wdhms])$")


class InvalidDateError(ValueError):
    """Raised when a due-date expression matches neither accepted form."""


def current_time() -> datetime:
    return datetime.now().astimezone()


def format_timestamp(dt: datetime) -> str:
    return dt.astimezone().strftime(TIMESTAMP_FORMAT)


def parse_timestamp(text: str) -> datetime:
    """Parse a stored "YYYY-MM-DD HH:MM:SS" string as local time. Raises ValueError."""
    return datetime.strptime(text.strip(), TIMESTAMP_FORMAT).astimezone()


def time_left(due: datetime, now: datetime | None = None) -> str:
    """
    Human-readable remaining time, e.g. "3d" or "-5h" for an overdue task.

    Uses the largest unit with a non-zero whole count (truncated toward zero).
    """
    if now is None:
        now = current_time()
    secs = int((due - now).total_seconds())
    sign = -1 if secs < 0 else 1
    for suffix, size in _UNITS:
        n = abs(secs) // size
        if n:
            return f"{sign * n}{suffix}"
    return "0s"


def parse_relative(expr: str, now: datetime | None = None) -> datetime:
    """
    Parse "2d 5h" style expressions into an absolute timestamp.

    Tokens are applied additively to `now` in any order. A single bad token
    invalidates the whole expression.
    """
    tokens = expr.split()
    if not tokens:
        raise InvalidDateError("Empty time expression.")

    seconds = 0
    for token in tokens:
        m = _TOKEN_RE.match(token)
        if not m:
            raise InvalidDateError(f"Invalid time token: {token!r}")
        seconds += int(m.group(1)) * _UNIT_SECONDS[m.group(2)]

    if now is None:
        now = current_time()
    # Well-formed but outside the datetime range ("10000000d").
    try:
        return now + timedelta(seconds=seconds)
    except (OverflowError, ValueError) as e:
        raise InvalidDateError(DATE_HINT) from e


def parse_absolute(expr: str) -> datetime:
    """Parse "YYYY-MM-DD HH:MM" as local time. Raises InvalidDateError."""
    try:
        return datetime.strptime(expr.strip(), INPUT_FORMAT).astimezone()
    except (OverflowError, ValueError) as e:
        raise InvalidDateError(DATE_HINT) from e


def parse_due(expr: str, now: datetime | None = None) -> datetime:
    """Relative grammar first, absolute date as a fallback."""
    try:
        return parse_relative(expr, now)
    except InvalidDateError:
        return parse_absolute(expr)
