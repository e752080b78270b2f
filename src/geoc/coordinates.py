import warnings

from geoc.decode import decode_coordinate
from geoc.exceptions import GeocInvalidStringException
from geoc.formats import format_class
from geoc.locations import LOCATION_LAT, LOCATION_LON
from geoc.models import Coord, Point
from geoc.parsing import match_coordinate, match_point


def parse_coord(text: str) -> Coord:
    """Parse a coordinate string, detecting latitude/longitude from the hemisphere letter (N/S/E/W)."""
    groups = match_coordinate(text)
    return decode_coordinate(groups)


def parse_point(text: str) -> Point:
    """
    Parse a string containing a latitude followed by a longitude.

    Both coordinates must use the same format class (decimal degrees, decimal minutes or DMS).

    :param text: Point text such as 48-33-27N; 120-57-49E
    :return: Point
    """
    lat_groups, lon_groups = match_point(text)
    lat = decode_coordinate(lat_groups, LOCATION_LAT)
    if lat.loc != LOCATION_LAT:
        raise GeocInvalidStringException(f'Bad latitude location in string "{text}".', value=text)
    lon = decode_coordinate(lon_groups, LOCATION_LON)
    if lon.loc != LOCATION_LON:
        raise GeocInvalidStringException(f'Bad longitude location in string "{text}".', value=text)
    if format_class(lat_groups) != format_class(lon_groups):
        raise GeocInvalidStringException(f'Incompatible latitude/longitude formats in string "{text}".', value=text)
    return Point(lat, lon)


def string_to_coord(text: str) -> Coord:
    """Convert a coordinate string to Coord. Deprecated, use parse_coord."""
    warnings.warn("string_to_coord() is deprecated, use parse_coord().", DeprecationWarning, stacklevel=2)
    return parse_coord(text)


def string_to_point(lat: str, lon: str) -> Point:
    """Convert latitude and longitude strings to Point. Deprecated, use parse_point."""
    warnings.warn("string_to_point() is deprecated, use parse_point().", DeprecationWarning, stacklevel=2)
    return parse_point(f"{lat}; {lon}")
