"""Pattern matching of coordinate strings into their lexical components."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from itertools import islice

from .exceptions import GeocInvalidStringException
from .utils import has_decimal_mark

__all__ = [
    "COORDINATE_PATTERN",
    "CoordinateGroups",
    "match_coordinate",
    "match_coordinates",
    "match_point",
]

COORDINATE_PATTERN = re.compile(
    r"(?P<leading>\s*)"
    r"(?P<sign>[-+])?"
    r"(?:(?P<degrees>\d+(?:[.,]\d+)?)(?P<degrees_separator>\s*[-°]?\s*)?)"
    r"(?:(?P<minutes>\d+(?:[.,]\d+)?)(?P<minutes_separator>\s*[-']?\s*)?)?"
    r"(?:(?P<seconds>\d+(?:[.,]\d+)?)(?P<seconds_separator>\s*[ \"]?\s*)?)?"
    r"(?P<hemisphere>[NSEW])?"
    r"(?P<trailing>\s*)",
    re.ASCII,
)

# Text allowed between the latitude and longitude of a point
_POINT_GAP_RE = re.compile(r"[\s;,/]*", re.ASCII)


def _normalize_separator(value: str | None) -> str:
    """Return trimmed separator punctuation, a single space for whitespace, or empty."""
    if not value:
        return ""
    trimmed = value.strip()
    if trimmed:
        return trimmed
    return " "


@dataclass(frozen=True)
class CoordinateGroups:
    """Raw text of the components of one coordinate occurrence."""

    sign: str = ""
    degrees: str = ""
    minutes: str = ""
    seconds: str = ""
    hemisphere: str = ""
    degrees_separator: str = ""
    minutes_separator: str = ""
    seconds_separator: str = ""
    compact: bool = False

    @classmethod
    def from_match(cls, match: re.Match[str]) -> CoordinateGroups:
        """Build groups from a pattern match."""
        return cls(
            sign=match.group("sign") or "",
            degrees=match.group("degrees") or "",
            minutes=match.group("minutes") or "",
            seconds=match.group("seconds") or "",
            hemisphere=match.group("hemisphere") or "",
            degrees_separator=_normalize_separator(match.group("degrees_separator")),
            minutes_separator=_normalize_separator(match.group("minutes_separator")),
            seconds_separator=_normalize_separator(match.group("seconds_separator")),
        )

    def normalize_compact(self) -> CoordinateGroups:
        """Split compact MMSS minutes (e.g. "5749") into minutes "57" and seconds "49"."""
        if (
            len(self.minutes) == 4
            and not self.seconds
            and self.hemisphere
            and not has_decimal_mark(self.minutes)
        ):
            return replace(self, minutes=self.minutes[:2], seconds=self.minutes[2:], compact=True)
        return self


def _matched_length(match: re.Match[str]) -> int:
    """Return the total length of all captured substrings of a match."""
    return sum(len(value) for value in match.groups() if value)


def _find_matches(text: str, count: int) -> list[re.Match[str]]:
    """Find exactly `count` coordinate occurrences in text."""
    # Request one more match than needed to detect the "too many" case
    matches = list(islice(COORDINATE_PATTERN.finditer(text), count + 1))
    if not matches:
        raise GeocInvalidStringException(f'Coordinates not found in string "{text}".', value=text)
    if len(matches) < count:
        raise GeocInvalidStringException(f'Too few coordinates found in string "{text}".', value=text)
    if len(matches) > count:
        raise GeocInvalidStringException(f'Too many coordinates found in string "{text}".', value=text)
    return matches


def match_coordinates(text: str, count: int) -> list[CoordinateGroups]:
    """
    Match `count` coordinate occurrences in text, left to right.

    :param text: Text containing the coordinates
    :param count: Number of occurrences required
    :return: List of groups, compact minutes already split
    """
    matches = _find_matches(text, count)
    if count == 1 and _matched_length(matches[0]) != len(text):
        raise GeocInvalidStringException(f'Extra characters detected in string "{text}".', value=text)
    if count > 1:
        _check_gaps(text, matches)
    return [CoordinateGroups.from_match(match).normalize_compact() for match in matches]


def _check_gaps(text: str, matches: list[re.Match[str]]) -> None:
    """Reject characters outside the occurrences other than list separators between them."""
    if matches[0].start() != 0 or matches[-1].end() != len(text):
        raise GeocInvalidStringException(f'Extra characters detected in string "{text}".', value=text)
    for previous, current in zip(matches, matches[1:]):
        gap = text[previous.end() : current.start()]
        if not _POINT_GAP_RE.fullmatch(gap):
            raise GeocInvalidStringException(
                f'Unexpected text "{gap}" between coordinates in string "{text}".', value=text
            )


def match_coordinate(text: str) -> CoordinateGroups:
    """Match exactly one coordinate spanning the whole text."""
    return match_coordinates(text, 1)[0]


def match_point(text: str) -> tuple[CoordinateGroups, CoordinateGroups]:
    """Match latitude and longitude occurrences, in that order."""
    lat_groups, lon_groups = match_coordinates(text, 2)
    return lat_groups, lon_groups
