"""Parse and format geographic coordinates and points."""

from importlib.metadata import PackageNotFoundError, version

from .coordinates import parse_coord, parse_point, string_to_coord, string_to_point
from .exceptions import (
    GeocException,
    GeocInvalidCoordException,
    GeocInvalidStringException,
    GeocOutOfRangeException,
)
from .formats import (
    FORMAT_DEGREES,
    FORMAT_DMS,
    FORMAT_MINUTES,
    format_class,
    format_display_name,
)
from .locations import LOCATION_LAT, LOCATION_LON, LOCATION_NONE, location_display_name
from .models import Coord, Point

try:
    __version__ = version("geoc")
except PackageNotFoundError:
    __version__ = "0+unknown"

__all__ = [
    "Coord",
    "FORMAT_DEGREES",
    "FORMAT_DMS",
    "FORMAT_MINUTES",
    "GeocException",
    "GeocInvalidCoordException",
    "GeocInvalidStringException",
    "GeocOutOfRangeException",
    "LOCATION_LAT",
    "LOCATION_LON",
    "LOCATION_NONE",
    "Point",
    "__version__",
    "format_class",
    "format_display_name",
    "location_display_name",
    "parse_coord",
    "parse_point",
    "string_to_coord",
    "string_to_point",
]
