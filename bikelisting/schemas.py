# bikelisting/schemas.py
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from .enums import Category, Condition, FuelType
from .models import Location


class ListingUpdate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

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
    features: Optional[List[str]] = None
    images: Optional[List[str]] = None
    is_available: Optional[bool] = None
    is_featured: Optional[bool] = None
    seller_id: Optional[str] = None
    views: Optional[int] = None

    @field_validator("location", mode="before")
    @classmethod
    def _location_from_text(cls, value):
        if isinstance(value, str):
            return Location.parse(value)
        return value


class ListingFilter(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    min_year: Optional[int] = None
    max_year: Optional[int] = None
    brand: Optional[str] = None
    category: Optional[Category] = None
    condition: Optional[Condition] = None
    fuel_type: Optional[FuelType] = None
    location: Optional[str] = None
    search: Optional[str] = None
    available_only: bool = False
