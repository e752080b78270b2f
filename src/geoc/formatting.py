"""Format-by-example rendering of decimal degrees."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .exceptions import GeocInvalidStringException, GeocOutOfRangeException
from .formats import FORMAT_DEGREES, FORMAT_MINUTES, format_class
from .locations import (
    LOCATION_NONE,
    hemisphere_for,
    location_display_name,
    location_from_hemisphere,
    location_limit,
)
from .parsing import CoordinateGroups, match_coordinate
from .utils import apply_decimal_mark, decimal_places, integer_width

__all__ = [
    "TemplateLayout",
    "format_coordinate",
    "template_layout",
]


@dataclass(frozen=True)
class TemplateLayout:
    """Rendering options derived from a template string."""

    groups: CoordinateGroups
    format: str
    precision: int
    decimal_mark: str
    degrees_width: int


def template_layout(template: str) -> TemplateLayout:
    """Derive precision, decimal mark, degree width and format class from a template."""
    try:
        groups = match_coordinate(template)
    except GeocInvalidStringException as exc:
        raise GeocInvalidStringException(f'Invalid template "{template}".', value=template) from exc
    # The most specific non-compact component decides precision
    precision, decimal_mark = 0, "."
    if groups.seconds and not groups.compact:
        precision, decimal_mark = decimal_places(groups.seconds)
    elif groups.minutes and not groups.compact:
        precision, decimal_mark = decimal_places(groups.minutes)
    elif not groups.minutes:
        precision, decimal_mark = decimal_places(groups.degrees)
    return TemplateLayout(
        groups=groups,
        format=format_class(groups),
        precision=precision,
        decimal_mark=decimal_mark,
        degrees_width=integer_width(groups.degrees),
    )


def format_coordinate(value: float, location: str, template: str) -> str:
    """
    Format a coordinate value in the shape of a template.

    :param value: Signed decimal degrees
    :param location: Location of the value; LOCATION_NONE takes it from the template hemisphere letter
    :param template: Example coordinate string, e.g. 48°33'27"N
    :return: Formatted coordinate
    """
    layout = template_layout(template)
    groups = layout.groups
    if location == LOCATION_NONE:
        location = location_from_hemisphere(groups.hemisphere)

    absolute = abs(value)
    if not math.isfinite(absolute):
        raise GeocOutOfRangeException(f"Value {value!r} is not a finite number.", value=f"{value!r}")
    limit = location_limit(location)
    if limit is not None and absolute >= limit:
        raise GeocOutOfRangeException(
            f"{location_display_name(location)} {value:f} is out of range.",
            value=f"{value!r}",
        )

    negative = value < 0
    hemisphere = hemisphere_for(location, negative) if groups.hemisphere else ""

    if layout.format == FORMAT_DEGREES:
        text = _format_degrees(absolute, hemisphere, layout)
    elif layout.format == FORMAT_MINUTES:
        text = _format_minutes(absolute, hemisphere, layout)
    else:
        text = _format_dms(absolute, hemisphere, layout)
    return _sign_prefix(negative, groups) + text


def _number(value: float, precision: int, decimal_mark: str, width: int = 0) -> str:
    """Format a non-negative number with fixed precision, zero-padded integer part."""
    if width and precision > 0:
        width += 1 + precision
    text = f"{value:0{width}.{precision}f}" if width else f"{value:.{precision}f}"
    return apply_decimal_mark(text, decimal_mark)


def _sign_prefix(negative: bool, groups: CoordinateGroups) -> str:
    """Signed output is used only when the template has no hemisphere letter."""
    if negative and not groups.hemisphere:
        return "-"
    if groups.sign == "+":
        return "+"
    return ""


def _format_degrees(absolute: float, hemisphere: str, layout: TemplateLayout) -> str:
    groups = layout.groups
    text = _number(absolute, layout.precision, layout.decimal_mark, layout.degrees_width)
    return text + groups.degrees_separator + hemisphere


def _format_minutes(absolute: float, hemisphere: str, layout: TemplateLayout) -> str:
    groups = layout.groups
    degrees = math.floor(absolute)
    minutes = round((absolute - degrees) * 60, layout.precision)
    if minutes >= 60:
        minutes -= 60
        degrees += 1
    return (
        f"{degrees:0{layout.degrees_width}d}"
        + groups.degrees_separator
        + _number(minutes, layout.precision, layout.decimal_mark)
        + groups.minutes_separator
        + hemisphere
    )


def _format_dms(absolute: float, hemisphere: str, layout: TemplateLayout) -> str:
    groups = layout.groups
    degrees = math.floor(absolute)
    total_minutes = (absolute - degrees) * 60
    minutes = math.floor(total_minutes)
    seconds = round((total_minutes - minutes) * 60, layout.precision)
    if seconds >= 60:
        seconds -= 60
        minutes += 1
    if minutes == 60:
        minutes = 0
        degrees += 1
    degrees_text = f"{degrees:0{layout.degrees_width}d}" + groups.degrees_separator
    if groups.compact:
        return degrees_text + f"{minutes:02d}{seconds:02.0f}" + hemisphere
    return (
        degrees_text
        + f"{minutes}"
        + groups.minutes_separator
        + _number(seconds, layout.precision, layout.decimal_mark)
        + groups.seconds_separator
        + hemisphere
    )
