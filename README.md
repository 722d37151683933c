# parkinglot

A small manager for a four-floor parking lot. It keeps track of the vehicles
currently parked, bills them by the hour when they leave, and records the
takings and a history of every arrival and departure. Messages shown to the
operator are in Vietnamese.

## Rules

- The lot has four floors and holds up to 50 vehicles at a time.
- Motorbikes pay 2.000 VND per hour, cars pay 5.000 VND per hour.
- Every started hour counts as a full hour.
- Number plates must follow one of two shapes:
  - car: `00A-000.00` (two digits, an upper-case letter, `-`, three digits, `.`, two digits)
  - motorbike: `00-A0_000.00` (two digits, `-`, an upper-case letter, a digit, `_`,
    three digits, `.`, two digits)
- When a vehicle is parked its plate must match the chosen vehicle type, and no
  plate may be parked twice.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The package installs a `parkinglot` command:

```
parkinglot --help
```

Every sub-command accepts the global option `--data-dir DIR` (default: the
current directory), which says where the data files are kept.

| Command | What it does |
| --- | --- |
| `parkinglot status` | Welcome text, fees, number of vehicles in the lot and vehicles per floor. Also run when no command is given. |
| `parkinglot enter PLATE [--floor N] [--type motorbike\|car]` | Park a vehicle (floor 1 and motorbike by default). |
| `parkinglot pay PLATE` | Charge a vehicle, remove it and print a receipt with time parked and fee. |
| `parkinglot change OLD_PLATE NEW_PLATE --floor N` | Give a parked vehicle a new plate and floor. |
| `parkinglot search [KEYWORD]` | List the plates containing `KEYWORD`, floor by floor. |
| `parkinglot stats` | Number of arrivals and departures logged, and the total revenue. |
| `parkinglot history` | The activity log, one numbered, tab-separated row per movement. |
| `parkinglot revenue` | Revenue per day. |

When an operation is refused (invalid plate, wrong floor, duplicate plate,
unknown vehicle, full lot) the reason is printed to standard error and the
command exits with status 1.

Example:

```
parkinglot enter 00A-000.00 --type car --floor 2
parkinglot search 00A
parkinglot pay 00A-000.00
```

## Data files

The state is kept in plain text files inside the data directory:

- `parking_data.txt` — vehicles currently parked (created empty if absent)
- `revenue.txt` — total revenue
- `revenue_theo_ngay.txt` — revenue per day, one `YYYY-MM-DD: amount` line each
- `log.txt` — every arrival and departure

## Using it from Python

- `parkinglot.plates` — `VehicleType` (with `rate()` and `label()`),
  `is_valid_plate`, `plate_matches_type`
- `parkinglot.lot` — `Vehicle` (with `parked_seconds(now)` and `fee_at(now)`),
  `ParkingLot` and the `ParkingError` raised when an operation is refused
- `parkinglot.formatting` — `format_currency` (thousands separated by dots),
  `floor_statistics_text`, `vehicle_count_text`
- `parkinglot.storage` — `Storage`, which reads and writes the data files, with
  `LogAction` and `HistoryEntry` for the activity log
- `parkinglot.service` — `ParkingService`, which ties it all together:
  `enter`, `pay` (returning a `Payment` with `summary()`), `change`, `search`,
  `floor_statistics`, `vehicle_count` and `statistics_text`. Its `clock`
  argument supplies the current time.
- `parkinglot.cli` — `build_parser` and `main(argv=None)`

```python
from parkinglot.plates import is_valid_plate
from parkinglot.formatting import format_currency

is_valid_plate("00A-000.00")    # True
is_valid_plate("00-A0_000.00")  # True
format_currency(1234567)        # "1.234.567"
```

## What it does not do

There is no graphical window: the lot is operated through the command line,
one command per run, or from Python. There is no font or display setting.