# bikelisting/models.py
"""Pydantic models for the bike listing entity.

`Listing` is a passive value object: attribute assignment is not validated,
`updated_at` and `views` are never maintained implicitly, and `features` /
`images` are handed out by reference. Conversion to and from the external
JSON form (camelCase keys, decimal price as a string, ISO-8601 timestamps,
enum labels) happens only through the `to_*` / `from_*` helpers.
"""
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .config import settings
from .enums import Category, Condition, FuelType
from .errors import InvalidListingPayload
from .utils import get_logger

logger = get_logger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _format_price(value: Any) -> str:
    if value is None:
        return "None"
    try:
        step = Decimal(1).scaleb(-settings.price_places)
        return str(Decimal(str(value)).quantize(step))
    except (InvalidOperation, ValueError):
        return str(value)


def _variant_name(value: Any) -> str:
    return str(getattr(value, "name", value))


class Location(BaseModel):
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None

    @classmethod
    def parse(cls, text: str) -> "Location":
        """Split a "city, state, country" string; missing parts stay None."""
        parts = [part.strip() or None for part in text.split(",", 2)]
        parts += [None] * (3 - len(parts))
        city, state, country = parts
        return cls(city=city, state=state, country=country)

    def __str__(self) -> str:
        return ", ".join(part or "" for part in (self.city, self.state, self.country))


class Listing(BaseModel):
    """One bike for sale."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[str] = None
    title: Optional[str] = None
    brand: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    price: Optional[Decimal] = None
    mileage: Optional[int] = None
    engine_capacity: Optional[int] = None
    description: Optional[str] = None
    condition: Optional[Condition] = None
    color: Optional[str] = None
    fuel_type: Optional[FuelType] = None
    category: Optional[Category] = None
    location: Optional[Location] = None
    features: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)
    seller_id: Optional[str] = None
    is_available: bool = False
    is_featured: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    # filled from created_at after validation, so never None on an instance
    updated_at: Optional[datetime] = None
    views: int = 0

    @field_validator("location", mode="before")
    @classmethod
    def _location_from_text(cls, value):
        if isinstance(value, str):
            return Location.parse(value)
        return value

    @field_validator("created_at", "updated_at")
    @classmethod
    def _as_utc(cls, value):
        # stored documents often carry naive timestamps; those are UTC
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @field_validator("features", "images", mode="before")
    @classmethod
    def _empty_when_missing(cls, value):
        return [] if value is None else value

    @model_validator(mode="after")
    def _stamp_updated_at(self) -> "Listing":
        if self.updated_at is None:
            self.updated_at = self.created_at
        return self

    def add_feature(self, feature: str) -> None:
        self.features.append(feature)

    def add_image(self, image_url: str) -> None:
        self.images.append(image_url)

    @property
    def thumbnail(self) -> Optional[str]:
        return self.images[0] if self.images else None

    def touch(self) -> datetime:
        self.updated_at = utcnow()
        return self.updated_at

    def record_view(self) -> int:
        self.views += 1
        return self.views

    def summary(self) -> str:
        return (
            f"Listing{{id={self.id!r}, title={self.title!r}, brand={self.brand!r}, "
            f"model={self.model!r}, year={self.year}, price={_format_price(self.price)}, "
            f"condition={_variant_name(self.condition)}, category={_variant_name(self.category)}}}"
        )

    def __str__(self) -> str:
        return self.summary()

    # external representation

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=settings.json_indent)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Listing":
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            logger.warning("Rejected listing payload: %d error(s)", exc.error_count())
            raise InvalidListingPayload(f"invalid listing payload: {exc}", exc.errors()) from exc

    @classmethod
    def from_json(cls, raw: Union[str, bytes]) -> "Listing":
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning("Rejected listing JSON: %d error(s)", exc.error_count())
            raise InvalidListingPayload(f"invalid listing JSON: {exc}", exc.errors()) from exc

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Listing":
        """Build a Listing from a stored marketplace document.

        Stored documents use `_id` for the identifier, `seller` for the seller
        reference (an id or an embedded seller object), a single-string
        location and a `status` of Active/Sold/Draft/Inactive.
        """
        data = dict(doc)
        if "_id" in data:
            raw_id = data.pop("_id")
            data.setdefault("id", None if raw_id is None else str(raw_id))
        seller = data.pop("seller", None)
        if isinstance(seller, Mapping):
            seller = seller.get("_id") or seller.get("id")
        if seller is not None and "sellerId" not in data and "seller_id" not in data:
            data["sellerId"] = str(seller)
        status = data.pop("status", None)
        if status is not None and "isAvailable" not in data and "is_available" not in data:
            data["isAvailable"] = str(status).lower() == "active"
        logger.debug("Converting stored document %s", data.get("id"))
        return cls.from_dict(data)
