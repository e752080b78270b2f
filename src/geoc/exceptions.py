class GeocException(Exception):
    """Base exception for coordinate errors."""

    def __init__(self, message: str, value: str | None = None) -> None:
        super().__init__(message)
        self.value = value


class GeocInvalidStringException(GeocException):
    """Raised when text does not match the coordinate grammar."""


class GeocInvalidCoordException(GeocException):
    """Raised when matched coordinate components are inconsistent."""


class GeocOutOfRangeException(GeocException):
    """Raised when a coordinate component is outside its allowed limits."""
