"""Human-readable byte counts for the ``-h`` size column."""

from __future__ import annotations

KILO = 1024
MEGA = KILO * 1024
GIGA = MEGA * 1024
TERA = GIGA * 1024
PETA = TERA * 1024

# Each unit covers sizes above the previous threshold up to and including its own.
_UNITS = (
    (MEGA, KILO, "K"),
    (GIGA, MEGA, "M"),
    (TERA, GIGA, "G"),
    (PETA, TERA, "T"),
)


def format_size(size: int) -> str:
    """Format ``size`` bytes using 1024-based units with one decimal digit.

    Values up to 1024 are printed as plain integers and anything above one
    pebibyte collapses to ``">1P"``.
    """
    if size <= KILO:
        return str(size)
    for upper, divisor, suffix in _UNITS:
        if size <= upper:
            return f"{size / divisor:.1f}{suffix}"
    return ">1P"


__all__ = [
    "KILO",
    "MEGA",
    "GIGA",
    "TERA",
    "PETA",
    "format_size",
]
