"""In-memory filtering and ordering of listings.

Criteria mirror the marketplace's browse page: inclusive price and year
bounds, exact brand/category/condition/fuel matches, a location substring
and a free-text search over title, brand, model and description. A listing
that lacks the value a criterion looks at never matches that criterion.
"""
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .models import Listing
from .schemas import ListingFilter

SORT_OPTIONS: Dict[str, Tuple[Callable[[Listing], Any], bool]] = {
    "newest": (lambda listing: listing.created_at, True),
    "price_low": (lambda listing: listing.price, False),
    "price_high": (lambda listing: listing.price, True),
    "year_new": (lambda listing: listing.year, True),
    "year_old": (lambda listing: listing.year, False),
}


def _contains(haystack: Optional[str], needle: str) -> bool:
    return haystack is not None and needle.casefold() in haystack.casefold()


def _in_range(value, low, high) -> bool:
    if low is None and high is None:
        return True
    if value is None:
        return False
    if low is not None and value < low:
        return False
    if high is not None and value > high:
        return False
    return True


def matches(listing: Listing, filters: ListingFilter) -> bool:
    if not _in_range(listing.price, filters.min_price, filters.max_price):
        return False
    if not _in_range(listing.year, filters.min_year, filters.max_year):
        return False
    if filters.brand is not None:
        if listing.brand is None or listing.brand.casefold() != filters.brand.casefold():
            return False
    if filters.category is not None and listing.category != filters.category:
        return False
    if filters.condition is not None and listing.condition != filters.condition:
        return False
    if filters.fuel_type is not None and listing.fuel_type != filters.fuel_type:
        return False
    if filters.location:
        rendered = str(listing.location) if listing.location is not None else None
        if not _contains(rendered, filters.location):
            return False
    if filters.search:
        fields = (listing.title, listing.brand, listing.model, listing.description)
        if not any(_contains(field, filters.search) for field in fields):
            return False
    if filters.available_only and not listing.is_available:
        return False
    return True


def sort_listings(listings: Iterable[Listing], sort_by: str = "newest") -> List[Listing]:
    try:
        key, reverse = SORT_OPTIONS[sort_by]
    except KeyError:
        raise ValueError(f"unknown sort option: {sort_by!r}") from None
    items = list(listings)
    present = [listing for listing in items if key(listing) is not None]
    missing = [listing for listing in items if key(listing) is None]
    return sorted(present, key=key, reverse=reverse) + missing


def filter_listings(
    listings: Iterable[Listing],
    filters: Optional[ListingFilter] = None,
    sort_by: Optional[str] = None,
    skip: int = 0,
    limit: Optional[int] = None,
) -> Dict[str, Any]:
    items = list(listings)
    if filters is not None:
        items = [listing for listing in items if matches(listing, filters)]
    items = sort_listings(items, sort_by or "newest")
    total = len(items)
    end = None if limit is None else skip + limit
    return {"total": total, "items": items[skip:end]}
