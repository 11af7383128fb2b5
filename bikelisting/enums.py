# bikelisting/enums.py
"""Closed value sets used by `Listing`.

Each member's value is its display label, so `Condition.NEW.label == "New"`.
Lookups also accept the member name, case-insensitively.
"""
from enum import Enum
from typing import List


class _LabelledEnum(str, Enum):

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def labels(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        as_name = key.replace("-", "_").replace(" ", "_")
        for member in cls:
            if key == member.value.lower() or as_name == member.name.lower():
                return member
        return None


class Condition(_LabelledEnum):
    NEW = "New"
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


class FuelType(_LabelledEnum):
    PETROL = "Petrol"
    DIESEL = "Diesel"
    ELECTRIC = "Electric"
    HYBRID = "Hybrid"


class Category(_LabelledEnum):
    SPORT = "Sport"
    CRUISER = "Cruiser"
    TOURING = "Touring"
    OFF_ROAD = "Off-road"
    SCOOTER = "Scooter"
    ELECTRIC = "Electric"
    VINTAGE = "Vintage"
    OTHER = "Other"
