"""Breeding records and the calendar events derived from them."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum

from goatherd.data.records import (
    decode_datetime,
    decode_enum,
    decode_id,
    decode_ids,
    encode_datetime,
    encode_id,
    encode_ids,
    new_id,
    require_datetime,
)

# Goat gestation, mating to kidding
GESTATION_DAYS = 150

# Pregnancy check reminder after mating
PREGNANCY_CHECK_DAYS = 21


class PregnancyStatus(Enum):
    UNKNOWN = "Unknown"
    CONFIRMED = "Confirmed"
    NOT_PREGNANT = "Not Pregnant"
    DELIVERED = "Delivered"
    COMPLICATIONS = "Complications"


class BreedingEventType(Enum):
    MATING = "Mating"
    PREGNANCY_CHECK = "Pregnancy Check"
    EXPECTED_BIRTH = "Expected Birth"
    WEANING = "Weaning"
    BREEDING = "Breeding Season"


def expected_birth_date(mating_date: datetime) -> datetime:
    return mating_date + timedelta(days=GESTATION_DAYS)


@dataclass
class BreedingRecord:
    doe_id: uuid.UUID
    buck_id: uuid.UUID | None = None
    mating_date: datetime = field(default_factory=datetime.now)
    pregnancy_status: PregnancyStatus = PregnancyStatus.UNKNOWN
    number_of_kids: int = 0
    notes: str = ""
    complications: str = ""
    expected_birth_date: datetime | None = None
    actual_birth_date: datetime | None = None
    kid_ids: list[uuid.UUID] = field(default_factory=list)
    date_created: datetime = field(default_factory=datetime.now)
    id: uuid.UUID = field(default_factory=new_id)

    def __post_init__(self):
        if self.expected_birth_date is None:
            self.expected_birth_date = expected_birth_date(self.mating_date)

    def reschedule(self, mating_date: datetime) -> None:
        """Move the mating date and recompute the expected birth date."""
        self.mating_date = mating_date
        self.expected_birth_date = expected_birth_date(mating_date)

    def record_birth(self, birth_date: datetime, number_of_kids: int, kid_ids: list[uuid.UUID] | None = None) -> None:
        self.actual_birth_date = birth_date
        self.number_of_kids = number_of_kids
        self.kid_ids = list(kid_ids or [])
        self.pregnancy_status = PregnancyStatus.DELIVERED

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "doeId": str(self.doe_id),
            "buckId": encode_id(self.buck_id),
            "matingDate": encode_datetime(self.mating_date),
            "expectedBirthDate": encode_datetime(self.expected_birth_date),
            "actualBirthDate": encode_datetime(self.actual_birth_date),
            "pregnancyStatus": self.pregnancy_status.value,
            "numberOfKids": self.number_of_kids,
            "kidIds": encode_ids(self.kid_ids),
            "notes": self.notes,
            "complications": self.complications,
            "dateCreated": encode_datetime(self.date_created),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BreedingRecord":
        doe_id = decode_id(data.get("doeId"))
        if doe_id is None:
            raise ValueError("breeding record without doeId")
        return cls(
            id=decode_id(data.get("id")) or new_id(),
            doe_id=doe_id,
            buck_id=decode_id(data.get("buckId")),
            mating_date=require_datetime(data.get("matingDate")),
            expected_birth_date=decode_datetime(data.get("expectedBirthDate")),
            actual_birth_date=decode_datetime(data.get("actualBirthDate")),
            pregnancy_status=decode_enum(PregnancyStatus, data.get("pregnancyStatus"), PregnancyStatus.UNKNOWN),
            number_of_kids=int(data.get("numberOfKids", 0)),
            kid_ids=decode_ids(data.get("kidIds")),
            notes=data.get("notes", ""),
            complications=data.get("complications", ""),
            date_created=require_datetime(data.get("dateCreated")),
        )


@dataclass
class BreedingEvent:
    goat_id: uuid.UUID
    title: str = ""
    date: datetime = field(default_factory=datetime.now)
    type: BreedingEventType = BreedingEventType.MATING
    description: str = ""
    completed: bool = False
    id: uuid.UUID = field(default_factory=new_id)


def validate_breeding_record(record: BreedingRecord, *, editing: bool = False) -> list[str]:
    """Return the problems that block saving a breeding record.

    New records only need a doe; the edit form also insists on a buck.
    """
    problems = []
    if record.doe_id is None:
        problems.append("doe is required")
    if editing and record.buck_id is None:
        problems.append("buck is required")
    if record.number_of_kids < 0:
        problems.append("number of kids cannot be negative")
    return problems
