from .enums import Category, Condition, FuelType
from .errors import InvalidListingPayload, ListingError, UnknownField
from .models import Listing, Location

__all__ = [
    "Category",
    "Condition",
    "FuelType",
    "InvalidListingPayload",
    "Listing",
    "ListingError",
    "Location",
    "UnknownField",
]
