"""Tests for feeding summaries."""

from datetime import datetime

from goatherd.analysis.feeding import (
    average_consumption_rate,
    consumption_for_goat,
    daily_feed_totals,
    sorted_schedules,
)
from goatherd.data.feeding import FeedConsumption, FeedingSchedule, FeedType


def test_consumption_for_goat(doe, buck):
    entries = [
        FeedConsumption(goat_id=doe.id, planned_quantity=2.0, actual_quantity=2.0),
        FeedConsumption(goat_id=buck.id, planned_quantity=2.0, actual_quantity=1.0),
    ]
    assert consumption_for_goat(entries, buck.id) == [entries[1]]


def test_average_consumption_rate(doe):
    entries = [
        FeedConsumption(goat_id=doe.id, planned_quantity=2.0, actual_quantity=2.0),
        FeedConsumption(goat_id=doe.id, planned_quantity=2.0, actual_quantity=1.0),
    ]
    assert average_consumption_rate(entries) == 75.0
    assert average_consumption_rate([]) == 0.0


def test_sorted_schedules_by_time():
    evening = FeedingSchedule(is_group_feeding=True, feeding_time=datetime(2024, 5, 1, 17, 0))
    morning = FeedingSchedule(is_group_feeding=True, feeding_time=datetime(2024, 5, 1, 7, 0))
    assert sorted_schedules([evening, morning]) == [morning, evening]


def test_daily_feed_totals(doe):
    schedules = [
        FeedingSchedule(goat_id=doe.id, feed_type=FeedType.HAY, quantity=1.5),
        FeedingSchedule(is_group_feeding=True, feed_type=FeedType.HAY, quantity=4.0),
        FeedingSchedule(goat_id=doe.id, feed_type=FeedType.GRAIN, quantity=0.5),
    ]
    assert daily_feed_totals(schedules) == {"Hay": 5.5, "Grain": 0.5}
