from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from bikelisting import Category, Condition, FuelType, Listing, Location


@pytest.fixture
def listing():
    return Listing()


def test_new_listing_has_empty_collections(listing):
    assert listing.features == []
    assert listing.images == []


def test_new_listing_timestamps_match(listing):
    assert listing.created_at is not None
    assert listing.updated_at == listing.created_at
    assert listing.created_at.tzinfo is not None
    assert abs(datetime.now(timezone.utc) - listing.created_at) < timedelta(seconds=5)


def test_collections_are_not_shared_between_instances():
    first, second = Listing(), Listing()
    first.add_feature("ABS")
    assert second.features == []


def test_add_feature_appends_last(listing):
    listing.add_feature("ABS")
    listing.add_feature("Quickshifter")
    before = list(listing.features)
    listing.add_feature("ABS")
    assert len(listing.features) == len(before) + 1
    assert listing.features[:-1] == before
    assert listing.features[-1] == "ABS"


def test_features_exposed_by_reference(listing):
    listing.features.append("Heated grips")
    assert listing.features == ["Heated grips"]


def test_every_field_round_trips(listing):
    created = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    values = {
        "id": "bike-1",
        "title": "Clean MT-07",
        "brand": "Yamaha",
        "model": "MT-07",
        "year": -5,
        "price": Decimal("7500.00"),
        "mileage": 12000,
        "engine_capacity": 689,
        "description": "",
        "condition": Condition.GOOD,
        "color": "Blue",
        "fuel_type": FuelType.PETROL,
        "category": Category.OFF_ROAD,
        "location": Location(city="Pune", state="Maharashtra", country="India"),
        "features": ["ABS"],
        "images": ["a.jpg"],
        "seller_id": "seller-9",
        "is_available": True,
        "is_featured": True,
        "created_at": created,
        "updated_at": created,
        "views": 42,
    }
    for name, value in values.items():
        setattr(listing, name, value)
    for name, value in values.items():
        assert getattr(listing, name) is value


def test_summary_example():
    listing = Listing()
    listing.brand = "Yamaha"
    listing.model = "MT-07"
    listing.year = 2022
    listing.price = Decimal("7500.00")
    listing.condition = Condition.EXCELLENT
    listing.category = Category.SPORT
    listing.add_image("img1.jpg")
    listing.add_image("img2.jpg")

    summary = listing.summary()
    for part in ("Yamaha", "MT-07", "2022", "7500.00", "EXCELLENT", "SPORT"):
        assert part in summary
    assert str(listing) == summary
    assert listing.images == ["img1.jpg", "img2.jpg"]


def test_summary_pads_price_and_tolerates_missing_values():
    listing = Listing(price=7500)
    assert "price=7500.00" in listing.summary()
    assert "condition=None" in Listing().summary()


def test_thumbnail_is_first_image(listing):
    assert listing.thumbnail is None
    listing.add_image("front.jpg")
    listing.add_image("side.jpg")
    assert listing.thumbnail == "front.jpg"


def test_touch_and_record_view_are_explicit(listing):
    stamp = listing.updated_at
    listing.title = "changed"
    listing.add_feature("ABS")
    assert listing.updated_at == stamp
    assert listing.views == 0

    assert listing.touch() >= stamp
    assert listing.updated_at >= listing.created_at
    assert listing.record_view() == 1
    assert listing.record_view() == 2


def test_location_rendering_and_parse():
    location = Location(city="Pune", state="Maharashtra", country="India")
    assert str(location) == "Pune, Maharashtra, India"
    assert Location.parse(" Pune ,Maharashtra,  India ") == location
    goa = Location.parse("Goa")
    assert (goa.city, goa.state, goa.country) == ("Goa", None, None)
    assert str(Location()) == ", , "
