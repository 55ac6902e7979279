#!/usr/bin/env python3
"""Human readable formatting for console output."""

from typing import Dict

from rosa_ops.core.constants import BYTE_UNIT, IEC_BASE, IEC_PREFIXES


def byte_count_iec(b: int, unit: str) -> str:
    """Format a memory quantity using IEC binary prefixes.

    ``byte_count_iec(500, "B")`` gives ``"500 B"`` and
    ``byte_count_iec(2048, "B")`` gives ``"2.0 KiB"``.

    Only raw bytes (``"B"``) are scaled. Any other unit is returned unscaled
    as ``"<b> <unit>"``. Values beyond the exbibyte range stay in EiB.
    """
    if unit != BYTE_UNIT:
        return f"{b} {unit}"

    if b < IEC_BASE:
        return f"{b} B"

    div, exp = IEC_BASE, 0
    n = b // IEC_BASE
    while n >= IEC_BASE and exp < len(IEC_PREFIXES) - 1:
        div *= IEC_BASE
        exp += 1
        n //= IEC_BASE

    return f"{b / div:.1f} {IEC_PREFIXES[exp]}iB"


def format_key_values(fields: Dict[str, str]) -> str:
    """Render ``key: value`` lines with values aligned one space past the longest key."""
    if not fields:
        return ""
    width = max(len(key) for key in fields) + 1
    return "\n".join(f"{key + ':':<{width + 1}}{value}" for key, value in fields.items())
