"""Pasture rest and rotation helpers."""

from datetime import date, datetime

from goatherd.data.pastures import Pasture, PastureCondition

# Best first; Resting and Overgrazed pastures sort last
CONDITION_RANK = {
    PastureCondition.EXCELLENT: 0,
    PastureCondition.GOOD: 1,
    PastureCondition.FAIR: 2,
    PastureCondition.POOR: 3,
    PastureCondition.RESTING: 4,
    PastureCondition.OVERGRAZED: 5,
}


def _as_date(today: datetime | date | None) -> date:
    if today is None:
        return date.today()
    if isinstance(today, datetime):
        return today.date()
    return today


def days_rested(pasture: Pasture, today: datetime | date | None = None) -> int | None:
    """Days since the pasture was last grazed, None if it never was."""
    if pasture.last_grazed_date is None:
        return None
    return (_as_date(today) - pasture.last_grazed_date.date()).days


def is_ready_for_grazing(pasture: Pasture, today: datetime | date | None = None) -> bool:
    rested = days_rested(pasture, today)
    return rested is None or rested >= pasture.rest_period


def available_capacity(pasture: Pasture) -> int:
    return max(pasture.capacity - pasture.current_occupancy, 0)


def is_over_capacity(pasture: Pasture) -> bool:
    return pasture.current_occupancy > pasture.capacity


def rotation_candidates(pastures: list[Pasture], today: datetime | date | None = None) -> list[Pasture]:
    """Empty pastures that have finished resting, best condition first."""
    ready = [p for p in pastures if p.current_occupancy == 0 and is_ready_for_grazing(p, today)]
    return sorted(ready, key=lambda p: (CONDITION_RANK[p.condition], -p.size))


def total_acreage(pastures: list[Pasture]) -> float:
    return sum(p.size for p in pastures)
