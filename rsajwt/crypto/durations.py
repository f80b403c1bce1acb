"""Parse token lifetimes such as ``"24h"`` or ``"2 days"`` into seconds."""

import re

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE
_MS_PER_DAY = 24 * _MS_PER_HOUR
_MS_PER_WEEK = 7 * _MS_PER_DAY
_MS_PER_YEAR = 365.25 * _MS_PER_DAY

_UNITS: dict[str, float] = {
    "years": _MS_PER_YEAR,
    "year": _MS_PER_YEAR,
    "yrs": _MS_PER_YEAR,
    "yr": _MS_PER_YEAR,
    "y": _MS_PER_YEAR,
    "weeks": _MS_PER_WEEK,
    "week": _MS_PER_WEEK,
    "w": _MS_PER_WEEK,
    "days": _MS_PER_DAY,
    "day": _MS_PER_DAY,
    "d": _MS_PER_DAY,
    "hours": _MS_PER_HOUR,
    "hour": _MS_PER_HOUR,
    "hrs": _MS_PER_HOUR,
    "hr": _MS_PER_HOUR,
    "h": _MS_PER_HOUR,
    "minutes": _MS_PER_MINUTE,
    "minute": _MS_PER_MINUTE,
    "mins": _MS_PER_MINUTE,
    "min": _MS_PER_MINUTE,
    "m": _MS_PER_MINUTE,
    "seconds": _MS_PER_SECOND,
    "second": _MS_PER_SECOND,
    "secs": _MS_PER_SECOND,
    "sec": _MS_PER_SECOND,
    "s": _MS_PER_SECOND,
    "milliseconds": 1,
    "millisecond": 1,
    "msecs": 1,
    "msec": 1,
    "ms": 1,
}

_DURATION_RE = re.compile(
    r"^(?P<value>-?(?:\d+)?\.?\d+)\s*(?P<unit>[a-z]+)?$",
    re.IGNORECASE,
)


def parse_duration(value: int | str) -> int:
    """Convert a lifetime to whole seconds.

    Integers are seconds. Strings are a number with an optional unit; a bare
    number string is milliseconds, matching the ``ms`` convention that JWT
    libraries use for ``expiresIn``.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid duration: {value!r}")
    if isinstance(value, int):
        return value
    match = _DURATION_RE.match(value.strip())
    if match is None:
        raise ValueError(f"Invalid duration: {value!r}")
    unit = (match.group("unit") or "ms").lower()
    if unit not in _UNITS:
        raise ValueError(f"Unknown duration unit: {unit!r}")
    millis = float(match.group("value")) * _UNITS[unit]
    return int(millis / _MS_PER_SECOND)
