"""Pastures and their grazing history."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from goatherd.data.records import (
    decode_datetime,
    decode_enum,
    decode_id,
    decode_ids,
    encode_datetime,
    encode_ids,
    new_id,
    require_datetime,
)

DEFAULT_REST_PERIOD_DAYS = 30


class GrassType(Enum):
    MIXED = "Mixed Grass"
    BERMUDA = "Bermuda"
    FESCUE = "Fescue"
    CLOVER = "Clover"
    ALFALFA = "Alfalfa"
    ORCHARD = "Orchard Grass"
    TIMOTHY = "Timothy"
    OTHER = "Other"


class PastureCondition(Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    OVERGRAZED = "Overgrazed"
    RESTING = "Resting"


@dataclass
class GrazingRecord:
    start_date: datetime = field(default_factory=datetime.now)
    end_date: datetime | None = None
    number_of_goats: int = 0
    goat_ids: list[uuid.UUID] = field(default_factory=list)
    condition_before: PastureCondition = PastureCondition.GOOD
    condition_after: PastureCondition | None = None
    notes: str = ""
    id: uuid.UUID = field(default_factory=new_id)

    @property
    def is_active(self) -> bool:
        return self.end_date is None

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "startDate": encode_datetime(self.start_date),
            "endDate": encode_datetime(self.end_date),
            "numberOfGoats": self.number_of_goats,
            "goatIds": encode_ids(self.goat_ids),
            "conditionBefore": self.condition_before.value,
            "conditionAfter": self.condition_after.value if self.condition_after else None,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GrazingRecord":
        after = data.get("conditionAfter")
        return cls(
            id=decode_id(data.get("id")) or new_id(),
            start_date=require_datetime(data.get("startDate")),
            end_date=decode_datetime(data.get("endDate")),
            number_of_goats=int(data.get("numberOfGoats", 0)),
            goat_ids=decode_ids(data.get("goatIds")),
            condition_before=decode_enum(PastureCondition, data.get("conditionBefore"), PastureCondition.GOOD),
            condition_after=PastureCondition(after) if after is not None else None,
            notes=data.get("notes", ""),
        )


@dataclass
class Pasture:
    name: str = ""
    size: float = 0.0  # acres
    grass_type: GrassType = GrassType.MIXED
    condition: PastureCondition = PastureCondition.GOOD
    rest_period: int = DEFAULT_REST_PERIOD_DAYS  # days
    capacity: int = 0  # goats
    current_occupancy: int = 0
    notes: str = ""
    last_grazed_date: datetime | None = None
    grazing_history: list[GrazingRecord] = field(default_factory=list)
    date_created: datetime = field(default_factory=datetime.now)
    id: uuid.UUID = field(default_factory=new_id)

    def start_grazing(self, goat_ids: list[uuid.UUID], start: datetime | None = None, notes: str = "") -> GrazingRecord:
        """Put goats on the pasture and open a grazing record."""
        record = GrazingRecord(
            start_date=start or datetime.now(),
            number_of_goats=len(goat_ids),
            goat_ids=list(goat_ids),
            condition_before=self.condition,
            notes=notes,
        )
        self.grazing_history.append(record)
        self.current_occupancy = len(goat_ids)
        return record

    def end_grazing(self, end: datetime | None = None, condition_after: PastureCondition | None = None) -> GrazingRecord | None:
        """Close the open grazing record, empty the pasture and start its rest."""
        open_records = [r for r in self.grazing_history if r.is_active]
        if not open_records:
            return None
        record = open_records[-1]
        record.end_date = end or datetime.now()
        record.condition_after = condition_after
        if condition_after is not None:
            self.condition = condition_after
        self.last_grazed_date = record.end_date
        self.current_occupancy = 0
        return record

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "size": self.size,
            "grassType": self.grass_type.value,
            "condition": self.condition.value,
            "lastGrazedDate": encode_datetime(self.last_grazed_date),
            "restPeriod": self.rest_period,
            "capacity": self.capacity,
            "currentOccupancy": self.current_occupancy,
            "notes": self.notes,
            "grazingHistory": [r.to_dict() for r in self.grazing_history],
            "dateCreated": encode_datetime(self.date_created),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Pasture":
        return cls(
            id=decode_id(data.get("id")) or new_id(),
            name=data.get("name", ""),
            size=float(data.get("size", 0.0)),
            grass_type=decode_enum(GrassType, data.get("grassType"), GrassType.MIXED),
            condition=decode_enum(PastureCondition, data.get("condition"), PastureCondition.GOOD),
            last_grazed_date=decode_datetime(data.get("lastGrazedDate")),
            rest_period=int(data.get("restPeriod", DEFAULT_REST_PERIOD_DAYS)),
            capacity=int(data.get("capacity", 0)),
            current_occupancy=int(data.get("currentOccupancy", 0)),
            notes=data.get("notes", ""),
            grazing_history=[GrazingRecord.from_dict(r) for r in data.get("grazingHistory", [])],
            date_created=require_datetime(data.get("dateCreated")),
        )


def validate_pasture(pasture: Pasture) -> list[str]:
    problems = []
    if not pasture.name.strip():
        problems.append("name is required")
    if pasture.size < 0:
        problems.append("size cannot be negative")
    if pasture.capacity < 0:
        problems.append("capacity cannot be negative")
    return problems
