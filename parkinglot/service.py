"""Operations on the parking lot, kept in step with the data files."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from parkinglot.formatting import (
    floor_statistics_text,
    format_currency,
    vehicle_count_text,
)
from parkinglot.lot import MAX_FLOORS, ParkingError, ParkingLot, Vehicle
from parkinglot.plates import VehicleType, is_valid_plate, plate_matches_type
from parkinglot.storage import LogAction, Storage

__all__ = ["Payment", "ParkingService"]

_INVALID_PLATE = (
    "Biển số không hợp lệ!\n"
    "Định dạng ô tô: XXA-XXX.XX\n"
    "Định dạng xe máy: XX-AX_XXX.XX"
)
_TYPE_MISMATCH = (
    "Loại xe không khớp với định dạng biển số!\nVui lòng chọn đúng loại xe."
)
_FLOOR_RANGE = f"Chỉ chấp nhận tầng từ 1 đến {MAX_FLOORS}."


@dataclass(frozen=True)
class Payment:
    """Result of a vehicle leaving the lot."""

    vehicle: Vehicle
    fee: int
    parked_seconds: float

    def summary(self) -> str:
        """Receipt text shown to the operator."""
        return (
            f"Xe: {self.vehicle.plate}\n"
            f"Thời gian gửi: {self.parked_seconds / 3600:.1f} giờ\n"
            f"Phí: {format_currency(self.fee)} VND"
        )


class ParkingService:
    """Parks, charges and edits vehicles, persisting every change."""

    def __init__(
        self,
        storage: Storage,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.storage = storage
        self.clock = clock
        self.revenue = storage.load_revenue()
        self.lot = ParkingLot(storage.load_vehicles(clock()))

    def enter(self, plate: str, floor: int, vehicle_type: VehicleType) -> Vehicle:
        """Park a new vehicle and record its arrival."""
        if not is_valid_plate(plate):
            raise ParkingError(_INVALID_PLATE)
        if not plate_matches_type(plate, vehicle_type):
            raise ParkingError(_TYPE_MISMATCH)
        if not 1 <= floor <= MAX_FLOORS:
            raise ParkingError(_FLOOR_RANGE)
        now = self.clock()
        vehicle = Vehicle(
            plate=plate, floor=floor, vehicle_type=vehicle_type, entry_time=now
        )
        self.lot.add(vehicle)
        self.storage.save_vehicles(self.lot)
        self.storage.append_log(plate, vehicle_type, LogAction.IN, 0, now)
        return vehicle

    def pay(self, plate: str) -> Payment:
        """Charge a vehicle, take it out of the lot and record the revenue."""
        vehicle = self.lot.find(plate)
        if vehicle is None:
            raise ParkingError("Không tìm thấy xe!")
        now = self.clock()
        fee = vehicle.fee_at(now)
        self.revenue += fee
        self.storage.save_revenue(self.revenue)
        self.storage.add_daily_revenue(fee, now.date())
        self.storage.append_log(plate, vehicle.vehicle_type, LogAction.OUT, fee, now)
        self.lot.remove(plate)
        self.storage.save_vehicles(self.lot)
        return Payment(
            vehicle=dataclasses.replace(vehicle, fee=fee),
            fee=fee,
            parked_seconds=vehicle.parked_seconds(now),
        )

    def change(self, old_plate: str, new_plate: str, floor: int) -> Vehicle:
        """Give a parked vehicle a new plate and floor."""
        if not is_valid_plate(new_plate):
            raise ParkingError(_INVALID_PLATE)
        updated = self.lot.update(old_plate, new_plate, floor)
        self.storage.save_vehicles(self.lot)
        return updated

    def search(self, keyword: str = "") -> dict[int, list[str]]:
        """Plates containing ``keyword``, grouped by floor."""
        return self.lot.by_floor(keyword)

    def floor_statistics(self) -> str:
        """Per-floor vehicle counts as text."""
        return floor_statistics_text(self.lot.floor_counts())

    def vehicle_count(self) -> str:
        """Number of vehicles in the lot as text."""
        return vehicle_count_text(len(self.lot))

    def statistics_text(self) -> str:
        """Arrivals, departures and total revenue as recorded on disk."""
        self.revenue = self.storage.load_revenue()
        arrivals, departures = self.storage.log_counts()
        return (
            f"Xe vào: {arrivals}\n"
            f"Xe ra: {departures}\n"
            f"Doanh thu: {format_currency(self.revenue)} VND"
        )