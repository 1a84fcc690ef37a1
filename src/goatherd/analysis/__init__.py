"""Analysis modules - herd health, breeding, milk, feeding, pastures, equipment."""

from goatherd.analysis.breeding import breeding_summary, days_until, sorted_records, upcoming_events
from goatherd.analysis.equipment import (
    condition_counts,
    inventory_value,
    maintenance_due,
    maintenance_overdue,
    sorted_inventory,
    total_maintenance_cost,
)
from goatherd.analysis.feeding import (
    average_consumption_rate,
    consumption_for_goat,
    daily_feed_totals,
    sorted_schedules,
)
from goatherd.analysis.health import all_medical_records, health_alerts, health_status_counts
from goatherd.analysis.milk import MilkTrend, herd_milk_log, milk_totals, milk_trend, producing_goats
from goatherd.analysis.pastures import (
    available_capacity,
    days_rested,
    is_over_capacity,
    is_ready_for_grazing,
    rotation_candidates,
)

__all__ = [
    # Health
    "all_medical_records",
    "health_alerts",
    "health_status_counts",
    # Breeding
    "upcoming_events",
    "days_until",
    "sorted_records",
    "breeding_summary",
    # Milk
    "MilkTrend",
    "milk_totals",
    "milk_trend",
    "herd_milk_log",
    "producing_goats",
    # Feeding
    "average_consumption_rate",
    "consumption_for_goat",
    "sorted_schedules",
    "daily_feed_totals",
    # Pastures
    "days_rested",
    "is_ready_for_grazing",
    "available_capacity",
    "is_over_capacity",
    "rotation_candidates",
    # Equipment
    "maintenance_overdue",
    "maintenance_due",
    "sorted_inventory",
    "inventory_value",
    "total_maintenance_cost",
    "condition_counts",
]
