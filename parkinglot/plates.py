"""Vehicle kinds and licence-plate validation."""

from __future__ import annotations

import re
from enum import Enum

__all__ = ["VehicleType", "is_valid_plate", "plate_matches_type"]

_CAR_PLATE = re.compile(r"[0-9]{2}[A-Z]-[0-9]{3}\.[0-9]{2}")
_MOTORBIKE_PLATE = re.compile(r"[0-9]{2}-[A-Z][0-9]_[0-9]{3}\.[0-9]{2}")

_CAR_PLATE_LENGTH = 10
_MOTORBIKE_PLATE_LENGTH = 12


class VehicleType(Enum):
    """Kind of vehicle; the value is the code used in the parking data file."""

    MOTORBIKE = "XE_MAY"
    CAR = "O_TO"

    def rate(self) -> int:
        """Hourly parking rate in VND."""
        return 2000 if self is VehicleType.MOTORBIKE else 5000

    def label(self) -> str:
        """Name written to the activity log."""
        return "Xe_máy" if self is VehicleType.MOTORBIKE else "Ô_tô"


def is_valid_plate(plate: str) -> bool:
    """Return True for a car plate ``DDA-DDD.DD`` or a motorbike plate ``DD-AD_DDD.DD``."""
    if len(plate) == _CAR_PLATE_LENGTH:
        return _CAR_PLATE.fullmatch(plate) is not None
    if len(plate) == _MOTORBIKE_PLATE_LENGTH:
        return _MOTORBIKE_PLATE.fullmatch(plate) is not None
    return False


def plate_matches_type(plate: str, vehicle_type: VehicleType) -> bool:
    """Return True when the plate's length fits the chosen vehicle type."""
    expected = (
        _MOTORBIKE_PLATE_LENGTH
        if vehicle_type is VehicleType.MOTORBIKE
        else _CAR_PLATE_LENGTH
    )
    return len(plate) == expected