"""Milk yield statistics and trends."""

from enum import Enum
from typing import TypedDict

from goatherd.data.goats import Goat, MilkRecord

# Records considered for the trend (two windows of seven)
TREND_WINDOW = 7

# Relative change of the recent window that counts as a trend
TREND_THRESHOLD = 0.10


class MilkTrend(Enum):
    INCREASING = "Increasing"
    DECREASING = "Decreasing"
    STABLE = "Stable"


class MilkTotals(TypedDict):
    record_count: int
    total_litres: float
    average_litres: float
    last_record: MilkRecord | None


def _mean(records: list[MilkRecord]) -> float:
    return sum(r.quantity for r in records) / len(records)


def recent_records(goat: Goat, limit: int = TREND_WINDOW * 2) -> list[MilkRecord]:
    return sorted(goat.milk_production, key=lambda r: r.date, reverse=True)[:limit]


def milk_totals(goat: Goat) -> MilkTotals:
    records = goat.milk_production
    total = sum(r.quantity for r in records)
    return {
        "record_count": len(records),
        "total_litres": total,
        "average_litres": total / len(records) if records else 0.0,
        "last_record": max(records, key=lambda r: r.date, default=None),
    }


def milk_trend(goat: Goat) -> MilkTrend:
    """Compare the newest seven records to the seven before them."""
    recent = recent_records(goat)
    newest, previous = recent[:TREND_WINDOW], recent[TREND_WINDOW:]
    if not newest or not previous:
        return MilkTrend.STABLE

    newest_avg = _mean(newest)
    previous_avg = _mean(previous)
    if newest_avg > previous_avg * (1 + TREND_THRESHOLD):
        return MilkTrend.INCREASING
    if newest_avg < previous_avg * (1 - TREND_THRESHOLD):
        return MilkTrend.DECREASING
    return MilkTrend.STABLE


def producing_goats(goats: list[Goat]) -> list[Goat]:
    return [g for g in goats if g.milk_production]


def herd_milk_log(goats: list[Goat]) -> list[tuple[Goat, MilkRecord]]:
    """All milk records with their goat, newest first."""
    pairs = [(goat, record) for goat in goats for record in goat.milk_production]
    return sorted(pairs, key=lambda pair: pair[1].date, reverse=True)
