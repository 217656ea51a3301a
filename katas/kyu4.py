"""Duration formatting."""

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_YEAR = 365 * _DAY
_MAX_SECONDS = 2**64 - 1


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''}"


def format_duration(seconds: int) -> str:
    """Describe a number of seconds in words, e.g. '1 hour, 1 minute and 2 seconds'."""
    if not 0 <= seconds <= _MAX_SECONDS:
        raise ValueError(f"seconds out of range: {seconds}")
    if seconds == 0:
        return "now"

    units = (
        ("year", seconds // _YEAR),
        ("day", seconds % _YEAR // _DAY),
        ("hour", seconds % _DAY // _HOUR),
        ("minute", seconds % _HOUR // _MINUTE),
        ("second", seconds % _MINUTE),
    )
    parts = [_plural(count, unit) for unit, count in units if count > 0]
    if len(parts) > 1:
        return f"{', '.join(parts[:-1])} and {parts[-1]}"
    return parts[0]