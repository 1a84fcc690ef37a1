"""Herd health alerts and medical record views."""

from collections import Counter
from datetime import date, datetime
from typing import TypedDict

from goatherd.data.goats import Goat, HealthStatus, MedicalRecord, MedicalType

# Vaccination considered due after this many whole months
VACCINATION_INTERVAL_MONTHS = 6


class HealthAlert(TypedDict):
    """One alert line for a goat."""

    goat_id: str
    goat_name: str
    message: str


def whole_months_between(start: date, end: date) -> int:
    """Calendar months from start to end, counting only completed months."""
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if end.day < start.day:
        months -= 1
    return months


def all_medical_records(goats: list[Goat]) -> list[tuple[Goat, MedicalRecord]]:
    """Every medical record in the herd, newest first."""
    pairs = [(goat, record) for goat in goats for record in goat.medical_history]
    return sorted(pairs, key=lambda pair: pair[1].date, reverse=True)


def last_vaccination(goat: Goat) -> MedicalRecord | None:
    vaccinations = [r for r in goat.medical_history if r.type == MedicalType.VACCINATION]
    return max(vaccinations, key=lambda r: r.date, default=None)


def health_alerts(goats: list[Goat], today: datetime | date | None = None) -> list[HealthAlert]:
    """Status and vaccination alerts for each goat."""
    if today is None:
        today = date.today()
    elif isinstance(today, datetime):
        today = today.date()

    alerts: list[HealthAlert] = []

    def alert(goat: Goat, message: str) -> None:
        alerts.append({"goat_id": str(goat.id), "goat_name": goat.name, "message": message})

    for goat in goats:
        if goat.health_status == HealthStatus.SICK:
            alert(goat, "Currently sick - needs attention")
        elif goat.health_status == HealthStatus.CHECKUP:
            alert(goat, "Scheduled for health checkup")

        latest = last_vaccination(goat)
        if latest is None:
            alert(goat, "No vaccination records found")
            continue
        months_ago = whole_months_between(latest.date.date(), today)
        if months_ago >= VACCINATION_INTERVAL_MONTHS:
            alert(goat, f"Vaccination due (last: {months_ago} months ago)")

    return alerts


def health_status_counts(goats: list[Goat]) -> dict[str, int]:
    """Number of goats per health status (every status present, zero included)."""
    counts = Counter(goat.health_status for goat in goats)
    return {status.value: counts.get(status, 0) for status in HealthStatus}
