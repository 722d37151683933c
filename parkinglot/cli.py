"""Command-line front end for the parking lot."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from parkinglot.formatting import format_currency
from parkinglot.lot import ParkingError
from parkinglot.plates import VehicleType
from parkinglot.service import ParkingService
from parkinglot.storage import Storage

__all__ = ["build_parser", "main"]

_WELCOME = "Chào mừng đến với hệ thống quản lý bãi giữ xe"
_FEES = "Phí giữ xe: 5.000 VND (ô tô) || 2.000 VND (xe máy)"
_NOTE = (
    "Phí giữ xe được tính theo giờ. "
    "Nếu bạn gửi xe chưa đủ 1 giờ thì vẫn tính tròn là 1 giờ."
)

_TYPES = {"motorbike": VehicleType.MOTORBIKE, "car": VehicleType.CAR}


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one sub-command per operation."""
    parser = argparse.ArgumentParser(
        prog="parkinglot", description="Quản lý bãi giữ xe"
    )
    parser.add_argument(
        "--data-dir",
        default=".",
        help="directory holding the data files (default: current directory)",
    )
    commands = parser.add_subparsers(dest="command")

    commands.add_parser("status", help="show the home screen summary")

    enter = commands.add_parser("enter", help="park a vehicle")
    enter.add_argument("plate")
    enter.add_argument("--floor", type=int, default=1)
    enter.add_argument("--type", choices=sorted(_TYPES), default="motorbike")

    pay = commands.add_parser("pay", help="charge a vehicle and remove it")
    pay.add_argument("plate")

    change = commands.add_parser("change", help="change a vehicle's plate and floor")
    change.add_argument("old_plate")
    change.add_argument("new_plate")
    change.add_argument("--floor", type=int, required=True)

    search = commands.add_parser("search", help="list plates by floor")
    search.add_argument("keyword", nargs="?", default="")

    commands.add_parser("stats", help="show arrivals, departures and revenue")
    commands.add_parser("history", help="show the activity log")
    commands.add_parser("revenue", help="show revenue per day")
    return parser


def _status(service: ParkingService) -> str:
    return "\n".join(
        [_WELCOME, _FEES, _NOTE, service.vehicle_count(), service.floor_statistics()]
    )


def _search(service: ParkingService, keyword: str) -> str:
    return "\n".join(
        f"Tầng {floor}: {', '.join(plates) if plates else '-'}"
        for floor, plates in service.search(keyword).items()
    )


def _history(storage: Storage) -> str:
    return "\n".join(
        "\t".join(
            [str(e.number), e.plate, e.vehicle_label, e.status, e.time, e.fee_text]
        )
        for e in storage.history()
    )


def _revenue(storage: Storage) -> str:
    return "\n".join(
        f"{day}: {format_currency(amount)} VND"
        for day, amount in storage.daily_revenue()
    )


def _run(args: argparse.Namespace, service: ParkingService, storage: Storage) -> str:
    command = args.command or "status"
    if command == "enter":
        vehicle = service.enter(args.plate, args.floor, _TYPES[args.type])
        return f"Xe {vehicle.plate} đã thêm vào tầng {vehicle.floor}"
    if command == "pay":
        return service.pay(args.plate).summary()
    if command == "change":
        service.change(args.old_plate, args.new_plate, args.floor)
        return "Đã thay đổi thông tin xe thành công!"
    if command == "search":
        return _search(service, args.keyword)
    if command == "stats":
        return service.statistics_text()
    if command == "history":
        return _history(storage)
    if command == "revenue":
        return _revenue(storage)
    return _status(service)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command; return 0 on success and 1 when the operation is refused."""
    args = build_parser().parse_args(argv)
    storage = Storage(args.data_dir)
    service = ParkingService(storage)
    try:
        output = _run(args, service, storage)
    except ParkingError as error:
        print(error, file=sys.stderr)
        return 1
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())