from __future__ import annotations

import logging
from dataclasses import dataclass

from .exceptions import GeocException
from .formats import TEMPLATE_LAT, TEMPLATE_LON, TEMPLATE_NONE, TEMPLATE_POINT_SEPARATOR
from .formatting import format_coordinate
from .locations import LOCATION_LAT, LOCATION_LON, LOCATION_NONE
from .utils import plain_decimal

__all__ = [
    "Coord",
    "Point",
]

logger = logging.getLogger(__name__)

_DEFAULT_TEMPLATES = {
    LOCATION_LAT: TEMPLATE_LAT,
    LOCATION_LON: TEMPLATE_LON,
    LOCATION_NONE: TEMPLATE_NONE,
}


@dataclass(frozen=True)
class Coord:
    """A geographic coordinate in signed decimal degrees with its location."""

    value: float
    loc: str = LOCATION_NONE

    def format(self, template: str) -> str:
        """Format the coordinate in the shape of an example string such as 48°33'27"N."""
        return format_coordinate(self.value, self.loc, template)

    def __str__(self) -> str:
        template = _DEFAULT_TEMPLATES.get(self.loc, TEMPLATE_NONE)
        try:
            return self.format(template)
        except GeocException as exc:
            logger.debug("Falling back to plain decimal for %r: %s", self, exc)
            return plain_decimal(self.value)


@dataclass(frozen=True)
class Point:
    """A geographic point with latitude and longitude."""

    lat: Coord
    lon: Coord

    def format(self, lat_template: str, lon_template: str, separator: str = TEMPLATE_POINT_SEPARATOR) -> str:
        """Format latitude and longitude with their templates and join them with separator."""
        lat = self.lat.format(lat_template)
        lon = self.lon.format(lon_template)
        return lat + separator + lon

    def __str__(self) -> str:
        try:
            return self.format(TEMPLATE_LAT, TEMPLATE_LON)
        except GeocException as exc:
            logger.debug("Cannot format %r: %s", self, exc)
            return ""
