"""The set of vehicles currently parked."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime

from parkinglot.plates import VehicleType

__all__ = ["MAX_SLOTS", "MAX_FLOORS", "ParkingError", "Vehicle", "ParkingLot"]

MAX_SLOTS = 50
MAX_FLOORS = 4


class ParkingError(Exception):
    """Raised when a parking operation cannot be carried out."""


@dataclass(frozen=True)
class Vehicle:
    """A parked vehicle."""

    plate: str
    floor: int
    vehicle_type: VehicleType
    entry_time: datetime
    fee: int = 0

    def parked_seconds(self, now: datetime) -> float:
        """Seconds between entry and ``now``."""
        return (now - self.entry_time).total_seconds()

    def fee_at(self, now: datetime) -> int:
        """Fee owed at ``now``: every started hour is charged in full."""
        hours = int((self.parked_seconds(now) + 3599) / 3600)
        return hours * self.vehicle_type.rate()


def _check_floor(floor: int) -> None:
    if not 1 <= floor <= MAX_FLOORS:
        raise ParkingError(f"Tầng phải từ 1 đến {MAX_FLOORS}!")


class ParkingLot:
    """Vehicles in the lot, in order of arrival."""

    def __init__(self, vehicles: Iterable[Vehicle] = (), capacity: int = MAX_SLOTS):
        self.capacity = capacity
        self._vehicles: list[Vehicle] = []
        for vehicle in vehicles:
            if len(self._vehicles) >= capacity:
                break
            self._vehicles.append(vehicle)

    def __len__(self) -> int:
        return len(self._vehicles)

    def __iter__(self) -> Iterator[Vehicle]:
        return iter(list(self._vehicles))

    def has_space(self) -> bool:
        return len(self._vehicles) < self.capacity

    def contains(self, plate: str) -> bool:
        return self.find(plate) is not None

    def find(self, plate: str) -> Vehicle | None:
        return next((v for v in self._vehicles if v.plate == plate), None)

    def _position(self, plate: str) -> int:
        for position, vehicle in enumerate(self._vehicles):
            if vehicle.plate == plate:
                return position
        raise ParkingError("Không tìm thấy xe!")

    def add(self, vehicle: Vehicle) -> None:
        """Park a vehicle; the floor must exist and the plate must be new."""
        _check_floor(vehicle.floor)
        if self.contains(vehicle.plate):
            raise ParkingError("Biển số này đã tồn tại!")
        if not self.has_space():
            raise ParkingError("Bãi xe đã đầy!")
        self._vehicles.append(vehicle)

    def remove(self, plate: str) -> Vehicle:
        """Take a vehicle out of the lot and return it."""
        return self._vehicles.pop(self._position(plate))

    def update(self, old_plate: str, new_plate: str, floor: int) -> Vehicle:
        """Change a vehicle's plate and floor, keeping its place in the order."""
        _check_floor(floor)
        if new_plate != old_plate and self.contains(new_plate):
            raise ParkingError("Biển số đã tồn tại!")
        position = self._position(old_plate)
        updated = dataclasses.replace(
            self._vehicles[position], plate=new_plate, floor=floor
        )
        self._vehicles[position] = updated
        return updated

    def floor_counts(self) -> list[int]:
        """Number of vehicles on each floor, floor 1 first."""
        counts = [0] * MAX_FLOORS
        for vehicle in self._vehicles:
            if 1 <= vehicle.floor <= MAX_FLOORS:
                counts[vehicle.floor - 1] += 1
        return counts

    def by_floor(self, keyword: str = "") -> dict[int, list[str]]:
        """Plates containing ``keyword``, grouped by floor."""
        floors: dict[int, list[str]] = {n: [] for n in range(1, MAX_FLOORS + 1)}
        for vehicle in self._vehicles:
            if keyword in vehicle.plate and vehicle.floor in floors:
                floors[vehicle.floor].append(vehicle.plate)
        return floors