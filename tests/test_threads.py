"""Concurrent use of the shared compiled pattern."""

from concurrent.futures import ThreadPoolExecutor

from geoc import parse_coord, parse_point

TEXTS = ["48-33-27N", "120-5749E", "48°33.4493'N", "-48.557489", "048-33.0E"]


def _convert(text: str) -> str:
    coord = parse_coord(text)
    return coord.format(text)


def test_parse_and_format_from_many_threads():
    inputs = TEXTS * 200
    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(_convert, inputs))
    assert results == inputs


def test_parse_point_from_many_threads():
    with ThreadPoolExecutor(max_workers=8) as executor:
        points = list(executor.map(parse_point, ["48-33-27N; 120-5749E"] * 200))
    assert len({(point.lat.value, point.lon.value) for point in points}) == 1
