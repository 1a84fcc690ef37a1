"""Equipment inventory and maintenance summaries."""

from collections import Counter
from datetime import date, datetime

from goatherd.data.equipment import Equipment, EquipmentCondition


def _as_datetime(today: datetime | date | None) -> datetime:
    if today is None:
        return datetime.now()
    if isinstance(today, datetime):
        return today
    return datetime.combine(today, datetime.max.time())


def maintenance_overdue(item: Equipment, today: datetime | date | None = None) -> bool:
    """True when the next maintenance date is today or already past."""
    if item.next_maintenance_date is None:
        return False
    return item.next_maintenance_date <= _as_datetime(today)


def maintenance_due(equipment: list[Equipment], today: datetime | date | None = None) -> list[Equipment]:
    """Overdue items, earliest due date first."""
    due = [item for item in equipment if maintenance_overdue(item, today)]
    return sorted(due, key=lambda item: item.next_maintenance_date)


def sorted_inventory(equipment: list[Equipment]) -> list[Equipment]:
    return sorted(equipment, key=lambda item: item.name)


def inventory_value(equipment: list[Equipment]) -> float:
    """Total purchase cost of the inventory."""
    return sum(item.cost for item in equipment)


def total_maintenance_cost(item: Equipment) -> float:
    return sum(record.cost for record in item.maintenance_history)


def condition_counts(equipment: list[Equipment]) -> dict[str, int]:
    counts = Counter(item.condition for item in equipment)
    return {condition.value: counts.get(condition, 0) for condition in EquipmentCondition}
