"""Plain-text files that keep the lot's state between runs."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from pathlib import Path

from parkinglot.formatting import format_currency
from parkinglot.lot import MAX_SLOTS, Vehicle
from parkinglot.plates import VehicleType

__all__ = ["LogAction", "HistoryEntry", "Storage"]

PARKING_FILE = "parking_data.txt"
REVENUE_FILE = "revenue.txt"
DAILY_REVENUE_FILE = "revenue_theo_ngay.txt"
LOG_FILE = "log.txt"

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
_DATE_FORMAT = "%Y-%m-%d"
_UNKNOWN_TYPE = "Không rõ"
_FIELDS_PER_VEHICLE = 6


class LogAction(Enum):
    """Direction of a vehicle movement recorded in the log."""

    IN = "in"
    OUT = "out"


@dataclass(frozen=True)
class HistoryEntry:
    """One row of the activity log."""

    number: int
    plate: str
    vehicle_label: str
    action: LogAction
    time: str
    fee: int | None = None

    @property
    def status(self) -> str:
        """Direction as shown to the operator."""
        return "Ra" if self.action is LogAction.OUT else "Vào"

    @property
    def fee_text(self) -> str:
        """Fee with thousands grouped, or a dash for arrivals."""
        if self.action is LogAction.OUT and self.fee is not None:
            return f"{format_currency(self.fee)} VND"
        return "-"


def _parse_vehicle(fields: list[str], tzinfo) -> Vehicle:
    plate, fee, day, clock, floor, type_code = fields
    entry_time = datetime.strptime(f"{day} {clock}", _TIME_FORMAT)
    if tzinfo is not None:
        entry_time = entry_time.replace(tzinfo=tzinfo)
    vehicle_type = VehicleType.CAR if type_code == VehicleType.CAR.value else VehicleType.MOTORBIKE
    return Vehicle(
        plate=plate,
        floor=int(floor),
        vehicle_type=vehicle_type,
        entry_time=entry_time,
        fee=int(fee),
    )


def _parse_daily_line(line: str) -> tuple[str, int] | None:
    day, sep, amount = line.partition(":")
    if not sep or not day:
        return None
    parts = amount.split()
    if not parts:
        return None
    try:
        return day, int(parts[0])
    except ValueError:
        return None


class Storage:
    """Reads and writes the lot's data files inside one directory."""

    def __init__(self, directory: str | os.PathLike = "."):
        self.directory = Path(directory)

    def _path(self, name: str) -> Path:
        return self.directory / name

    def load_vehicles(self, now: datetime | None = None) -> list[Vehicle]:
        """Read parked vehicles; an absent data file is created empty.

        Entry times take the time zone of ``now`` when it has one, so that
        they can be compared with it.  Reading stops at the first malformed
        record and at most ``MAX_SLOTS`` vehicles are returned.
        """
        path = self._path(PARKING_FILE)
        if not path.exists():
            path.touch()
            return []
        tzinfo = now.tzinfo if now is not None else None
        tokens = path.read_text(encoding="utf-8").split()
        vehicles: list[Vehicle] = []
        for start in range(0, len(tokens) - _FIELDS_PER_VEHICLE + 1, _FIELDS_PER_VEHICLE):
            try:
                vehicle = _parse_vehicle(tokens[start : start + _FIELDS_PER_VEHICLE], tzinfo)
            except ValueError:
                break
            if len(vehicles) < MAX_SLOTS:
                vehicles.append(vehicle)
        return vehicles

    def save_vehicles(self, vehicles: Iterable[Vehicle]) -> None:
        """Overwrite the data file with the given vehicles."""
        lines = (
            f"{v.plate} {v.fee} {v.entry_time.strftime(_TIME_FORMAT)} "
            f"{v.floor} {v.vehicle_type.value}\n"
            for v in vehicles
        )
        self._path(PARKING_FILE).write_text("".join(lines), encoding="utf-8")

    def load_revenue(self) -> float:
        """Total revenue recorded so far; 0 when nothing is recorded."""
        path = self._path(REVENUE_FILE)
        try:
            parts = path.read_text(encoding="utf-8").split()
        except FileNotFoundError:
            return 0.0
        if not parts:
            return 0.0
        try:
            return float(parts[0])
        except ValueError:
            return 0.0

    def save_revenue(self, amount: float) -> None:
        """Record the total revenue, rounded to whole units."""
        self._path(REVENUE_FILE).write_text(f"{amount:.0f}", encoding="utf-8")

    def add_daily_revenue(self, amount: int, day: date | None = None) -> int:
        """Add ``amount`` to the revenue of ``day`` (today by default); return the day's total."""
        key = (day or date.today()).strftime(_DATE_FORMAT)
        path = self._path(DAILY_REVENUE_FILE)
        try:
            lines = path.read_text(encoding="utf-8").splitlines(keepends=True)
        except FileNotFoundError:
            lines = []
        output: list[str] = []
        total: int | None = None
        for line in lines:
            parsed = _parse_daily_line(line)
            if parsed is not None and parsed[0] == key:
                total = parsed[1] + amount
                output.append(f"{key}: {total}\n")
            else:
                output.append(line if line.endswith("\n") else line + "\n")
        if total is None:
            total = amount
            output.append(f"{key}: {total}\n")
        temporary = self._path(DAILY_REVENUE_FILE + ".tmp")
        temporary.write_text("".join(output), encoding="utf-8")
        os.replace(temporary, path)
        return total

    def daily_revenue(self) -> list[tuple[str, int]]:
        """Recorded revenue per day, in file order."""
        try:
            text = self._path(DAILY_REVENUE_FILE).read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        return [entry for entry in map(_parse_daily_line, text.splitlines()) if entry]

    def append_log(
        self,
        plate: str,
        vehicle_type: VehicleType | None,
        action: LogAction,
        fee: int = 0,
        when: datetime | None = None,
    ) -> None:
        """Append one movement to the activity log."""
        label = vehicle_type.label() if vehicle_type is not None else _UNKNOWN_TYPE
        stamp = (when or datetime.now()).strftime(_TIME_FORMAT)
        if action is LogAction.OUT:
            line = f"{plate} {label} {action.value} {fee} {stamp}\n"
        else:
            line = f"{plate} {label} {action.value} {stamp}\n"
        with self._path(LOG_FILE).open("a", encoding="utf-8") as log:
            log.write(line)

    def history(self) -> list[HistoryEntry]:
        """Entries of the activity log, numbered from 1; stops at a malformed line."""
        try:
            text = self._path(LOG_FILE).read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        entries: list[HistoryEntry] = []
        for line in text.splitlines():
            parts = line.split(maxsplit=3)
            if len(parts) < 3:
                break
            plate, label, action_code = parts[:3]
            rest = parts[3] if len(parts) > 3 else ""
            number = len(entries) + 1
            if action_code == LogAction.OUT.value:
                fee_text, _, stamp = rest.partition(" ")
                try:
                    fee = int(fee_text)
                except ValueError:
                    break
                entries.append(
                    HistoryEntry(number, plate, label, LogAction.OUT, stamp.strip(), fee)
                )
            else:
                entries.append(HistoryEntry(number, plate, label, LogAction.IN, rest.strip()))
        return entries

    def log_counts(self) -> tuple[int, int]:
        """Number of arrivals and departures in the activity log."""
        try:
            text = self._path(LOG_FILE).read_text(encoding="utf-8")
        except FileNotFoundError:
            return 0, 0
        arrivals = departures = 0
        for line in text.splitlines(keepends=True):
            if " in " in line:
                arrivals += 1
            elif " out " in line:
                departures += 1
        return arrivals, departures