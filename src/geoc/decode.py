from geoc.exceptions import GeocInvalidCoordException, GeocOutOfRangeException
from geoc.locations import (
    LATITUDE_HEMISPHERES,
    LATITUDE_LIMIT,
    LOCATION_LAT,
    LOCATION_NONE,
    LONGITUDE_HEMISPHERES,
    LONGITUDE_LIMIT,
    NEGATIVE_HEMISPHERES,
    location_from_hemisphere,
)
from geoc.models import Coord
from geoc.parsing import CoordinateGroups
from geoc.utils import has_decimal_mark, normalize_decimal_mark

MINUTES_LIMIT = 60.0
SECONDS_LIMIT = 60.0


def decode_coordinate(groups: CoordinateGroups, location: str = LOCATION_NONE) -> Coord:
    """
    Convert matched coordinate components into a Coord.

    :param groups: Components from the pattern matcher
    :param location: Expected location; latitude lowers the degrees limit to 90
    :return: Coord with signed decimal degrees and the location implied by the hemisphere letter
    """
    _check_sign(groups)
    coord_location = _decode_location(groups)
    degrees = _decode_degrees(groups, location)
    minutes = _decode_minutes(groups)
    seconds = _decode_seconds(groups)
    value = degrees + minutes / 60 + seconds / 3600
    if groups.sign == "-" or groups.hemisphere in NEGATIVE_HEMISPHERES:
        value = -value
    return Coord(value, coord_location)


def _check_sign(groups: CoordinateGroups) -> None:
    """A sign and a hemisphere letter cannot be combined."""
    if groups.sign and groups.hemisphere:
        raise GeocInvalidCoordException(
            f'Sign "{groups.sign}" conflicts with hemisphere letter "{groups.hemisphere}".',
            value=groups.sign + groups.hemisphere,
        )


def _decode_location(groups: CoordinateGroups) -> str:
    """Return the location implied by the hemisphere letter."""
    hemisphere = groups.hemisphere
    if hemisphere and hemisphere not in LATITUDE_HEMISPHERES | LONGITUDE_HEMISPHERES:
        raise GeocInvalidCoordException(f'Bad hemisphere letter "{hemisphere}".', value=hemisphere)
    return location_from_hemisphere(hemisphere)


def _degrees_limit(groups: CoordinateGroups, location: str) -> float:
    if groups.hemisphere in LATITUDE_HEMISPHERES or location == LOCATION_LAT:
        return LATITUDE_LIMIT
    return LONGITUDE_LIMIT


def _parse_number(value: str, name: str) -> float:
    """Parse a component with either decimal mark."""
    try:
        return float(normalize_decimal_mark(value))
    except ValueError:
        raise GeocInvalidCoordException(f'Bad {name} "{value}".', value=value)


def _check_limit(value: float, limit: float, name: str, raw: str) -> float:
    if value < limit:
        return value
    raise GeocOutOfRangeException(f'{name.capitalize()} "{raw}" must be less than {limit:g}.', value=raw)


def _decode_degrees(groups: CoordinateGroups, location: str) -> float:
    if not groups.degrees:
        raise GeocInvalidCoordException("Missing degrees.", value="")
    # Decimal degrees cannot be combined with minutes or seconds
    if has_decimal_mark(groups.degrees) and (groups.minutes or groups.seconds):
        raise GeocInvalidCoordException(
            f'Degrees "{groups.degrees}" with decimals cannot have minutes or seconds.', value=groups.degrees
        )
    degrees = _parse_number(groups.degrees, "degrees")
    return _check_limit(degrees, _degrees_limit(groups, location), "degrees", groups.degrees)


def _decode_minutes(groups: CoordinateGroups) -> float:
    if not groups.minutes:
        return 0.0
    if has_decimal_mark(groups.minutes) and groups.seconds:
        raise GeocInvalidCoordException(
            f'Minutes "{groups.minutes}" with decimals cannot have seconds.', value=groups.minutes
        )
    minutes = _parse_number(groups.minutes, "minutes")
    return _check_limit(minutes, MINUTES_LIMIT, "minutes", groups.minutes)


def _decode_seconds(groups: CoordinateGroups) -> float:
    if not groups.seconds:
        return 0.0
    seconds = _parse_number(groups.seconds, "seconds")
    return _check_limit(seconds, SECONDS_LIMIT, "seconds", groups.seconds)
