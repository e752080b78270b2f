"""Tests for format classes and locations."""

import pytest

from geoc.formats import FORMAT_DEGREES, FORMAT_DMS, FORMAT_MINUTES, format_class, format_display_name
from geoc.locations import (
    LOCATION_LAT,
    LOCATION_LON,
    LOCATION_NONE,
    hemisphere_for,
    location_display_name,
    location_from_hemisphere,
    normalize_location,
)
from geoc.parsing import match_coordinate


@pytest.mark.parametrize(
    "text,expected",
    [
        ("48.557489", FORMAT_DEGREES),
        ("48N", FORMAT_DEGREES),
        ("48°33.4493'N", FORMAT_MINUTES),
        ("48-33N", FORMAT_MINUTES),
        ("48-33-27N", FORMAT_DMS),
        ("48-3327N", FORMAT_DMS),
    ],
)
def test_format_class(text, expected):
    assert format_class(match_coordinate(text)) == expected


def test_format_display_name():
    assert format_display_name(FORMAT_DEGREES) == "DegDec"
    assert format_display_name(FORMAT_MINUTES) == "MinDec"
    assert format_display_name(FORMAT_DMS) == "DMS"
    with pytest.raises(ValueError, match="Unknown format"):
        format_display_name("utm")


def test_location_display_name():
    assert location_display_name(LOCATION_NONE) == "None"
    assert location_display_name(LOCATION_LAT) == "Lat"
    assert location_display_name(LOCATION_LON) == "Lon"
    with pytest.raises(ValueError, match="Unknown location"):
        location_display_name("alt")


def test_location_from_hemisphere():
    assert location_from_hemisphere("N") == LOCATION_LAT
    assert location_from_hemisphere("S") == LOCATION_LAT
    assert location_from_hemisphere("E") == LOCATION_LON
    assert location_from_hemisphere("W") == LOCATION_LON
    assert location_from_hemisphere("") == LOCATION_NONE


def test_hemisphere_for():
    assert hemisphere_for(LOCATION_LAT, negative=False) == "N"
    assert hemisphere_for(LOCATION_LAT, negative=True) == "S"
    assert hemisphere_for(LOCATION_LON, negative=False) == "E"
    assert hemisphere_for(LOCATION_LON, negative=True) == "W"


def test_normalize_location_accepts_aliases():
    assert normalize_location("lat") == LOCATION_LAT
    assert normalize_location("Latitude") == LOCATION_LAT
    assert normalize_location("lon") == LOCATION_LON
    assert normalize_location("lng") == LOCATION_LON
    assert normalize_location("none") == LOCATION_NONE


def test_normalize_location_rejects_unknown():
    with pytest.raises(ValueError, match="Unknown location"):
        normalize_location("altitude")
