from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .parsing import CoordinateGroups

FORMAT_DEGREES = "degdec"
FORMAT_MINUTES = "mindec"
FORMAT_DMS = "dms"

FORMAT_DISPLAY_NAMES = {
    FORMAT_DEGREES: "DegDec",
    FORMAT_MINUTES: "MinDec",
    FORMAT_DMS: "DMS",
}

# Default templates used by str(Coord) and str(Point)
TEMPLATE_LAT = "48-33.0N"
TEMPLATE_LON = "048-33.0E"
TEMPLATE_NONE = "48.557489"
TEMPLATE_POINT_SEPARATOR = " "


def format_class(groups: CoordinateGroups) -> str:
    """Return the format class of matched coordinate components."""
    if not groups.minutes:
        return FORMAT_DEGREES
    if not groups.seconds:
        return FORMAT_MINUTES
    return FORMAT_DMS


def format_display_name(format: str) -> str:
    """Return the display name for a format class."""
    try:
        return FORMAT_DISPLAY_NAMES[format]
    except KeyError as exc:
        raise ValueError(f'Unknown format "{format}".') from exc
