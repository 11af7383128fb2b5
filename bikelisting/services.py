# bikelisting/services.py
import re
from typing import Any, Dict, Mapping, Union

from pydantic import ValidationError

from .errors import InvalidListingPayload, UnknownField
from .models import Listing
from .schemas import ListingUpdate
from .utils import logger

_PRICE_JUNK = re.compile(r"[^\d.\-]")


def _normalize_price(value):
    # "₹ 75,000" / "$7,500.00" style strings from form posts
    if isinstance(value, str):
        cleaned = _PRICE_JUNK.sub("", value)
        return cleaned or None
    return value


def ingest_listing(payload: Mapping[str, Any]) -> Listing:
    data = dict(payload)
    if "price" in data:
        data["price"] = _normalize_price(data["price"])
    listing = Listing.from_document(data)
    logger.info("Ingested listing %s", listing.id)
    return listing


def _resolve_field(key: str) -> str:
    fields = ListingUpdate.model_fields
    if key in fields:
        return key
    for name, info in fields.items():
        if info.alias == key:
            return name
    raise UnknownField(f"Listing has no updatable field {key!r}")


def _validated_update(updates: Mapping[str, Any]) -> ListingUpdate:
    data = {_resolve_field(key): value for key, value in updates.items()}
    try:
        return ListingUpdate.model_validate(data)
    except ValidationError as exc:
        logger.warning("Rejected listing update: %d error(s)", exc.error_count())
        raise InvalidListingPayload(f"invalid listing update: {exc}", exc.errors()) from exc


def apply_update(listing: Listing, updates: Union[ListingUpdate, Mapping[str, Any]]) -> Listing:
    """Set the given attributes on `listing` and refresh `updated_at`.

    Only fields the caller set are applied. A plain mapping, keyed by
    attribute or camelCase name, is validated as a `ListingUpdate` first.
    """
    if not isinstance(updates, ListingUpdate):
        updates = _validated_update(updates)
    changes: Dict[str, Any] = {name: getattr(updates, name) for name in updates.model_fields_set}
    for name, value in changes.items():
        setattr(listing, name, value)
    listing.touch()
    logger.debug("Updated listing %s: %s", listing.id, ", ".join(sorted(changes)))
    return listing
