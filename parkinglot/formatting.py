"""Text shown to the operator: money amounts and lot summaries."""

from __future__ import annotations

from collections.abc import Sequence

from parkinglot.lot import MAX_FLOORS, MAX_SLOTS

__all__ = ["format_currency", "floor_statistics_text", "vehicle_count_text"]

_FLOORS_PER_LINE = 2


def format_currency(amount: float) -> str:
    """Round to whole units and group thousands with dots, e.g. ``5.000``."""
    rounded = f"{abs(amount):.0f}"
    grouped = f"{int(rounded):,}".replace(",", ".")
    if amount < 0 and int(rounded) != 0:
        return "-" + grouped
    return grouped


def floor_statistics_text(counts: Sequence[int]) -> str:
    """Per-floor vehicle counts, two floors to a line."""
    if len(counts) != MAX_FLOORS:
        raise ValueError(f"expected {MAX_FLOORS} floor counts, got {len(counts)}")
    cells = [f"Tầng {floor}: {count} xe" for floor, count in enumerate(counts, start=1)]
    lines = (
        " | ".join(cells[start : start + _FLOORS_PER_LINE])
        for start in range(0, len(cells), _FLOORS_PER_LINE)
    )
    return "\n".join(lines)


def vehicle_count_text(count: int, capacity: int = MAX_SLOTS * MAX_FLOORS) -> str:
    """Line telling how many vehicles are in the lot out of its capacity."""
    return f"Xe hiện tại trong bãi: {count} / {capacity}"