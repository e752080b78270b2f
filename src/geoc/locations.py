LOCATION_NONE = "none"
LOCATION_LAT = "lat"
LOCATION_LON = "lon"

LOCATION_DISPLAY_NAMES = {
    LOCATION_NONE: "None",
    LOCATION_LAT: "Lat",
    LOCATION_LON: "Lon",
}

LOCATION_VALUES = {
    LOCATION_NONE,
    LOCATION_LAT,
    LOCATION_LON,
}

LATITUDE_HEMISPHERES = {"N", "S"}
LONGITUDE_HEMISPHERES = {"E", "W"}
NEGATIVE_HEMISPHERES = {"S", "W"}

LATITUDE_LIMIT = 90.0
LONGITUDE_LIMIT = 180.0


def normalize_location(location: str) -> str:
    """Normalize string to a location constant."""
    raw = location.strip().lower()
    if raw in LOCATION_VALUES:
        return raw
    if raw in {"latitude", "n", "s"}:
        return LOCATION_LAT
    if raw in {"longitude", "lng", "e", "w"}:
        return LOCATION_LON
    if raw in {"", "unspecified"}:
        return LOCATION_NONE
    raise ValueError(f'Unknown location "{location}". Use {LOCATION_LAT}, {LOCATION_LON}, or {LOCATION_NONE}.')


def location_display_name(location: str) -> str:
    """Return the display name for a location constant."""
    try:
        return LOCATION_DISPLAY_NAMES[location]
    except KeyError as exc:
        raise ValueError(f'Unknown location "{location}".') from exc


def location_from_hemisphere(hemisphere: str) -> str:
    """Return the location implied by a hemisphere letter, or LOCATION_NONE."""
    if hemisphere in LATITUDE_HEMISPHERES:
        return LOCATION_LAT
    if hemisphere in LONGITUDE_HEMISPHERES:
        return LOCATION_LON
    return LOCATION_NONE


def hemisphere_for(location: str, negative: bool) -> str:
    """Return the hemisphere letter for a location and sign."""
    if location == LOCATION_LAT:
        return "S" if negative else "N"
    return "W" if negative else "E"


def location_limit(location: str) -> float | None:
    """Return the exclusive absolute limit for a location, None when unspecified."""
    if location == LOCATION_LAT:
        return LATITUDE_LIMIT
    if location == LOCATION_LON:
        return LONGITUDE_LIMIT
    return None
