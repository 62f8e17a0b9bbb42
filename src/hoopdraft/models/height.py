"""Lenient numeric parsing shared by the player model and ingestion."""

from __future__ import annotations

import logging
import re
from typing import Any, Optional


logger = logging.getLogger(__name__)

DEFAULT_HEIGHT_INCHES = 72

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_leading_int(value: Any) -> Optional[int]:
    """Read the leading integer of ``value`` the way a lenient parser would.

    ``"85"``, ``85.9`` and ``"85 OVR"`` all yield 85; text without a leading
    integer yields ``None``.
    """

    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    if match is None:
        return None
    return int(match.group(1))


def parse_height_inches(label: Any) -> int:
    """Convert a ``feet'inches`` label to inches, e.g. ``6'6"`` -> 78."""

    if not isinstance(label, str):
        logger.warning("Error parsing height %r; using %d inches", label, DEFAULT_HEIGHT_INCHES)
        return DEFAULT_HEIGHT_INCHES
    parts = label.split("'")
    feet = parse_leading_int(parts[0])
    if feet is None:
        logger.warning("Error parsing height %r; using %d inches", label, DEFAULT_HEIGHT_INCHES)
        return DEFAULT_HEIGHT_INCHES
    inches = parse_leading_int(parts[1]) if len(parts) > 1 else None
    return feet * 12 + (inches or 0)
