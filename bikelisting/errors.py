class ListingError(Exception):
    """Base exception for the bikelisting package."""


class InvalidListingPayload(ListingError):
    """Raised when external data cannot be converted into a Listing."""

    def __init__(self, message, errors=None):
        super().__init__(message)
        self.errors = errors or []


class UnknownField(ListingError):
    """Raised when an update names a field that cannot be updated."""
