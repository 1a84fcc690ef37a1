"""Breeding calendar derived from breeding records."""

from collections import Counter
from datetime import date, datetime, timedelta

from goatherd.data.breeding import (
    PREGNANCY_CHECK_DAYS,
    BreedingEvent,
    BreedingEventType,
    BreedingRecord,
    PregnancyStatus,
)


def _as_datetime(today: datetime | date | None) -> datetime:
    if today is None:
        return datetime.now()
    if isinstance(today, datetime):
        return today
    return datetime.combine(today, datetime.min.time())


def upcoming_events(records: list[BreedingRecord], today: datetime | date | None = None) -> list[BreedingEvent]:
    """Expected births and pregnancy checks that have not passed yet.

    - Confirmed pregnancies without a recorded birth yield an Expected Birth
      event on the expected birth date.
    - Records with an unknown status yield a Pregnancy Check event 21 days
      after mating.
    """
    now = _as_datetime(today)
    events = []

    for record in records:
        if record.pregnancy_status == PregnancyStatus.CONFIRMED and record.actual_birth_date is None:
            events.append(
                BreedingEvent(
                    title="Expected Birth",
                    date=record.expected_birth_date,
                    type=BreedingEventType.EXPECTED_BIRTH,
                    goat_id=record.doe_id,
                    description="Expected kidding date",
                )
            )

        if record.pregnancy_status == PregnancyStatus.UNKNOWN:
            events.append(
                BreedingEvent(
                    title="Pregnancy Check",
                    date=record.mating_date + timedelta(days=PREGNANCY_CHECK_DAYS),
                    type=BreedingEventType.PREGNANCY_CHECK,
                    goat_id=record.doe_id,
                    description="Time to check for pregnancy",
                )
            )

    return sorted((e for e in events if e.date >= now), key=lambda e: e.date)


def days_until(event: BreedingEvent, today: datetime | date | None = None) -> int:
    """Whole days from today to the event (negative once it has passed)."""
    return (event.date - _as_datetime(today)).days


def sorted_records(records: list[BreedingRecord]) -> list[BreedingRecord]:
    """Breeding records, most recent mating first."""
    return sorted(records, key=lambda r: r.mating_date, reverse=True)


def breeding_summary(records: list[BreedingRecord]) -> dict:
    """Counts by pregnancy status plus total kids born."""
    counts = Counter(r.pregnancy_status for r in records)
    return {
        "total": len(records),
        "by_status": {status.value: counts.get(status, 0) for status in PregnancyStatus},
        "kids_born": sum(r.number_of_kids for r in records),
    }
