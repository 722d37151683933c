from datetime import date, datetime, timezone

import pytest

from parkinglot.lot import MAX_SLOTS, Vehicle
from parkinglot.plates import VehicleType
from parkinglot.storage import HistoryEntry, LogAction, Storage

CAR_PLATE = "00A-000.01"
BIKE_PLATE = "00-A0_000.01"
ENTRY = datetime(2024, 1, 2, 3, 4, 5)


@pytest.fixture
def storage(tmp_path):
    return Storage(tmp_path)


def _car(plate=CAR_PLATE, floor=2):
    return Vehicle(plate, floor, VehicleType.CAR, ENTRY)


def test_load_vehicles_creates_missing_file(storage, tmp_path):
    assert storage.load_vehicles() == []
    assert (tmp_path / "parking_data.txt").exists()


def test_save_vehicles_line_format(storage, tmp_path):
    car = _car()
    storage.save_vehicles([car])
    text = (tmp_path / "parking_data.txt").read_text(encoding="utf-8")
    assert text == f"{CAR_PLATE} 0 2024-01-02 03:04:05 2 O_TO\n"
    [loaded] = storage.load_vehicles()
    assert loaded.plate == CAR_PLATE
    assert loaded.floor == 2
    assert loaded.vehicle_type is VehicleType.CAR
    assert loaded.entry_time == ENTRY


def test_vehicles_round_trip(storage):
    vehicles = [
        _car(),
        Vehicle(BIKE_PLATE, 4, VehicleType.MOTORBIKE, ENTRY, fee=2000),
    ]
    storage.save_vehicles(vehicles)
    assert storage.load_vehicles() == vehicles


def test_load_vehicles_unknown_type_is_motorbike(storage, tmp_path):
    (tmp_path / "parking_data.txt").write_text(
        f"{BIKE_PLATE} 0 2024-01-02 03:04:05 1 SOMETHING\n", encoding="utf-8"
    )
    [vehicle] = storage.load_vehicles()
    assert vehicle.vehicle_type is VehicleType.MOTORBIKE


def test_load_vehicles_stops_at_malformed_record(storage, tmp_path):
    (tmp_path / "parking_data.txt").write_text(
        f"{CAR_PLATE} 0 2024-01-02 03:04:05 1 O_TO\n"
        f"{BIKE_PLATE} zero 2024-01-02 03:04:05 1 XE_MAY\n"
        f"00A-000.02 0 2024-01-02 03:04:05 1 O_TO\n",
        encoding="utf-8",
    )
    assert [v.plate for v in storage.load_vehicles()] == [CAR_PLATE]


def test_load_vehicles_caps_at_max_slots(storage):
    vehicles = [_car(plate=f"00A-000.{i:02d}", floor=1) for i in range(MAX_SLOTS + 5)]
    storage.save_vehicles(vehicles)
    assert storage.load_vehicles() == vehicles[:MAX_SLOTS]


def test_load_vehicles_takes_time_zone_of_now(storage):
    storage.save_vehicles([_car()])
    now = datetime(2024, 1, 2, 5, 0, 0, tzinfo=timezone.utc)
    [vehicle] = storage.load_vehicles(now)
    assert vehicle.entry_time.tzinfo is timezone.utc
    assert vehicle.fee_at(now) == 2 * VehicleType.CAR.rate()


def test_revenue_missing_is_zero(storage):
    assert storage.load_revenue() == 0.0


def test_revenue_round_trip_rounds(storage, tmp_path):
    storage.save_revenue(7000.4)
    assert (tmp_path / "revenue.txt").read_text(encoding="utf-8") == "7000"
    assert storage.load_revenue() == 7000.0


def test_daily_revenue_accumulates_per_day(storage):
    first = date(2024, 1, 2)
    second = date(2024, 1, 3)
    assert storage.add_daily_revenue(5000, first) == 5000
    assert storage.add_daily_revenue(2000, second) == 2000
    assert storage.add_daily_revenue(2000, first) == 7000
    assert storage.daily_revenue() == [("2024-01-02", 7000), ("2024-01-03", 2000)]


def test_daily_revenue_file_format(storage, tmp_path):
    assert storage.add_daily_revenue(5000, date(2024, 1, 2)) == 5000
    text = (tmp_path / "revenue_theo_ngay.txt").read_text(encoding="utf-8")
    assert text == "2024-01-02: 5000\n"
    assert storage.daily_revenue() == [("2024-01-02", 5000)]


def test_daily_revenue_missing_is_empty(storage):
    assert storage.daily_revenue() == []


def test_log_line_formats(storage, tmp_path):
    storage.append_log(CAR_PLATE, VehicleType.CAR, LogAction.IN, when=ENTRY)
    storage.append_log(CAR_PLATE, VehicleType.CAR, LogAction.OUT, 5000, ENTRY)
    storage.append_log(BIKE_PLATE, None, LogAction.IN, when=ENTRY)
    lines = (tmp_path / "log.txt").read_text(encoding="utf-8").splitlines()
    assert lines == [
        f"{CAR_PLATE} Ô_tô in 2024-01-02 03:04:05",
        f"{CAR_PLATE} Ô_tô out 5000 2024-01-02 03:04:05",
        f"{BIKE_PLATE} Không rõ in 2024-01-02 03:04:05",
    ]


def test_history_round_trip(storage):
    storage.append_log(BIKE_PLATE, VehicleType.MOTORBIKE, LogAction.IN, when=ENTRY)
    storage.append_log(BIKE_PLATE, VehicleType.MOTORBIKE, LogAction.OUT, 2000, ENTRY)
    entries = storage.history()
    assert entries == [
        HistoryEntry(1, BIKE_PLATE, "Xe_máy", LogAction.IN, "2024-01-02 03:04:05"),
        HistoryEntry(2, BIKE_PLATE, "Xe_máy", LogAction.OUT, "2024-01-02 03:04:05", 2000),
    ]
    assert [e.status for e in entries] == ["Vào", "Ra"]
    assert [e.fee_text for e in entries] == ["-", "2.000 VND"]


def test_history_missing_log_is_empty(storage):
    assert storage.history() == []


def test_log_counts(storage):
    assert storage.log_counts() == (0, 0)
    storage.append_log(CAR_PLATE, VehicleType.CAR, LogAction.IN, when=ENTRY)
    storage.append_log(BIKE_PLATE, VehicleType.MOTORBIKE, LogAction.IN, when=ENTRY)
    storage.append_log(CAR_PLATE, VehicleType.CAR, LogAction.OUT, 5000, ENTRY)
    assert storage.log_counts() == (2, 1)
    assert len(storage.history()) == sum(storage.log_counts())