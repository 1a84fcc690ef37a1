"""Feeding schedules and per-goat feed consumption entries."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from goatherd.data.records import (
    decode_enum,
    decode_id,
    encode_datetime,
    encode_id,
    new_id,
    require_datetime,
)


class FeedType(Enum):
    HAY = "Hay"
    GRAIN = "Grain"
    PELLETS = "Pellets"
    GRASS = "Fresh Grass"
    BROWSE = "Browse"
    SILAGE = "Silage"
    MINERALS = "Minerals"


def consumption_rate(planned: float, actual: float) -> float:
    """Actual intake as a percentage of planned (0 when nothing was planned)."""
    if planned > 0:
        return actual / planned * 100
    return 0.0


@dataclass
class FeedingSchedule:
    goat_id: uuid.UUID | None = None  # None for herd-wide group feedings
    feed_type: FeedType = FeedType.HAY
    quantity: float = 0.0  # kg
    feeding_time: datetime = field(default_factory=datetime.now)
    supplements: list[str] = field(default_factory=list)
    notes: str = ""
    is_group_feeding: bool = False
    date_created: datetime = field(default_factory=datetime.now)
    id: uuid.UUID = field(default_factory=new_id)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "goatId": encode_id(self.goat_id),
            "feedType": self.feed_type.value,
            "quantity": self.quantity,
            "feedingTime": encode_datetime(self.feeding_time),
            "supplements": list(self.supplements),
            "notes": self.notes,
            "isGroupFeeding": self.is_group_feeding,
            "dateCreated": encode_datetime(self.date_created),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FeedingSchedule":
        return cls(
            id=decode_id(data.get("id")) or new_id(),
            goat_id=decode_id(data.get("goatId")),
            feed_type=decode_enum(FeedType, data.get("feedType"), FeedType.HAY),
            quantity=float(data.get("quantity", 0.0)),
            feeding_time=require_datetime(data.get("feedingTime")),
            supplements=list(data.get("supplements", [])),
            notes=data.get("notes", ""),
            is_group_feeding=bool(data.get("isGroupFeeding", False)),
            date_created=require_datetime(data.get("dateCreated")),
        )


@dataclass
class FeedConsumption:
    goat_id: uuid.UUID
    date: datetime = field(default_factory=datetime.now)
    feed_type: FeedType = FeedType.HAY
    planned_quantity: float = 0.0
    actual_quantity: float = 0.0
    notes: str = ""
    consumption_rate: float | None = None  # percent, derived when not given
    id: uuid.UUID = field(default_factory=new_id)

    def __post_init__(self):
        if self.consumption_rate is None:
            self.consumption_rate = consumption_rate(self.planned_quantity, self.actual_quantity)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "goatId": str(self.goat_id),
            "date": encode_datetime(self.date),
            "feedType": self.feed_type.value,
            "plannedQuantity": self.planned_quantity,
            "actualQuantity": self.actual_quantity,
            "consumptionRate": self.consumption_rate,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FeedConsumption":
        goat_id = decode_id(data.get("goatId"))
        if goat_id is None:
            raise ValueError("feed consumption entry without goatId")
        rate = data.get("consumptionRate")
        return cls(
            id=decode_id(data.get("id")) or new_id(),
            goat_id=goat_id,
            date=require_datetime(data.get("date")),
            feed_type=decode_enum(FeedType, data.get("feedType"), FeedType.HAY),
            planned_quantity=float(data.get("plannedQuantity", 0.0)),
            actual_quantity=float(data.get("actualQuantity", 0.0)),
            consumption_rate=float(rate) if rate is not None else None,
            notes=data.get("notes", ""),
        )


def validate_feeding_schedule(schedule: FeedingSchedule) -> list[str]:
    """A schedule targets one goat unless it is a group feeding."""
    problems = []
    if not schedule.is_group_feeding and schedule.goat_id is None:
        problems.append("goat is required unless this is a group feeding")
    if schedule.quantity < 0:
        problems.append("quantity cannot be negative")
    return problems
