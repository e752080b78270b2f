import re
from decimal import Decimal

_DECIMAL_MARK_RE = re.compile(r"[.,]")


def decimal_mark_index(value: str) -> int:
    """Return the position of the decimal mark in a number string, or -1."""
    match = _DECIMAL_MARK_RE.search(value)
    return match.start() if match else -1


def has_decimal_mark(value: str) -> bool:
    """Return True when a number string contains a decimal mark."""
    return decimal_mark_index(value) != -1


def normalize_decimal_mark(value: str) -> str:
    """Replace a comma decimal mark with a period."""
    return value.replace(",", ".", 1)


def decimal_places(value: str) -> tuple[int, str]:
    """
    Return precision and decimal mark of a number string.

    :param value: Number string such as "26,9604"
    :return: Tuple of (digits after the mark, mark), (0, ".") without a mark
    """
    index = decimal_mark_index(value)
    if index == -1:
        return 0, "."
    return len(value) - index - 1, value[index]


def integer_width(value: str) -> int:
    """Return the number of digits before the decimal mark."""
    index = decimal_mark_index(value)
    return len(value) if index == -1 else index


def apply_decimal_mark(text: str, mark: str) -> str:
    """Substitute the decimal mark in formatted number text."""
    if mark == ".":
        return text
    return text.replace(".", mark, 1)


def plain_decimal(value: float) -> str:
    """Return a float as plain decimal text without exponent notation."""
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
