"""Feeding schedule and consumption summaries."""

import uuid
from collections import defaultdict

from goatherd.data.feeding import FeedConsumption, FeedingSchedule


def consumption_for_goat(entries: list[FeedConsumption], goat_id: uuid.UUID) -> list[FeedConsumption]:
    return [e for e in entries if e.goat_id == goat_id]


def average_consumption_rate(entries: list[FeedConsumption]) -> float:
    """Mean consumption rate in percent (0 when there are no entries)."""
    if not entries:
        return 0.0
    return sum(e.consumption_rate for e in entries) / len(entries)


def sorted_schedules(schedules: list[FeedingSchedule]) -> list[FeedingSchedule]:
    """Schedules in order of feeding time."""
    return sorted(schedules, key=lambda s: s.feeding_time)


def daily_feed_totals(schedules: list[FeedingSchedule]) -> dict[str, float]:
    """Scheduled kilograms per feed type."""
    totals: dict[str, float] = defaultdict(float)
    for schedule in schedules:
        totals[schedule.feed_type.value] += schedule.quantity
    return dict(totals)
