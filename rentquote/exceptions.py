"""
Custom exception classes for the rental quote engine.

These exceptions provide precise error types that controllers can catch
to render a friendly JSON error instead of a generic 500.
"""


class InvalidListingError(Exception):
    """Raised when a listing record cannot be turned into a priceable listing."""

    def __init__(self, message: str = "Error: invalid listing") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class InvalidDateRangeError(Exception):
    """Raised when a date cannot be parsed or a booking is requested without a range."""

    def __init__(self, message: str = "Error: invalid date range") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class RateSelectionError(Exception):
    """Raised when no pricing rule of a listing matches the requested duration."""

    def __init__(self, message: str = "Error: no pricing rule matched") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message
