"""Conversion between textual timing values and canonical seconds.

Timing sheets carry three kinds of text:

* lap and sector times: ``H:MM:SS.fff``, ``M:SS.fff`` or bare ``SS.fff``
* gap-to-leader intervals: ``M'SS.fff`` (apostrophe separator)
* lap deficits such as ``"1 Lap"`` or ``"3 laps"``, which are not durations

Malformed values from CSV exports resolve to ``None`` rather than raising.
"""

from __future__ import annotations

import math
import re

from lapmetrics.exceptions import LapMetricsTypeError

_GAP_RE = re.compile(r"(\d+)'(\d+\.\d+)")


def _is_blank(text: str) -> bool:
    """Return True for values that carry no duration at all."""
    return text == "" or text == "-" or "lap" in text.lower()


def _finite(value: float) -> float | None:
    return value if math.isfinite(value) else None


def parse_duration(text: str | None) -> float | None:
    """Parse a lap or sector time string into seconds.

    Layouts are tried by colon count: two colons is ``H:MM:SS.fff``, one colon
    is ``M:SS.fff`` and none is plain seconds. A leading sign applies to the
    whole value. Returns None for empty values, ``"-"``, lap deficits and
    anything that matches no layout.
    """
    if text is None:
        return None
    if not isinstance(text, str):
        raise LapMetricsTypeError(
            f"parse_duration expects str or None, got {type(text).__name__}"
        )

    text = text.strip()
    if _is_blank(text):
        return None

    sign = -1.0 if text.startswith("-") else 1.0
    if text[0] in "+-":
        text = text[1:]
    parts = text.split(":")
    try:
        if len(parts) == 3:
            seconds = int(parts[0]) * 3600 + int(parts[1]) * 60 + float(parts[2])
        elif len(parts) == 2:
            seconds = int(parts[0]) * 60 + float(parts[1])
        elif len(parts) == 1:
            seconds = float(parts[0])
        else:
            return None
    except ValueError:
        return None
    return _finite(sign * seconds)


def parse_gap_interval(text: str | None) -> str | None:
    """Normalize a ``M'SS.fff`` gap into the ``00:MM:SS.fff`` interval form.

    Values in any other layout pass through unchanged. Empty values, ``"-"``
    and lap deficits map to None.
    """
    if text is None:
        return None
    if not isinstance(text, str):
        raise LapMetricsTypeError(
            f"parse_gap_interval expects str or None, got {type(text).__name__}"
        )

    if _is_blank(text.strip()):
        return None
    match = _GAP_RE.search(text)
    if match is None:
        return text
    minutes = int(match.group(1))
    seconds = float(match.group(2))
    return f"00:{minutes:02d}:{seconds:06.3f}"


def format_seconds(seconds: float) -> str:
    """Format seconds as ``M:SS.fff`` with unpadded minutes."""
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
        raise LapMetricsTypeError(
            f"format_seconds expects a number, got {type(seconds).__name__}"
        )
    if not math.isfinite(seconds):
        raise LapMetricsTypeError(f"format_seconds expects a finite number, got {seconds}")
    if seconds < 0:
        return "-" + format_seconds(-seconds)

    # Split on whole milliseconds so 59.9996 becomes 1:00.000, not 0:60.000
    minutes, millis = divmod(round(seconds * 1000), 60_000)
    return f"{minutes}:{millis / 1000:06.3f}"


def to_seconds(value: object) -> float | None:
    """Coerce a stored timing value (number, text or None) to seconds."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise LapMetricsTypeError("to_seconds does not accept booleans")
    if isinstance(value, (int, float)):
        return _finite(float(value))
    if isinstance(value, str):
        return parse_duration(value)
    raise LapMetricsTypeError(
        f"to_seconds expects a number, str or None, got {type(value).__name__}"
    )
