"""Farm equipment inventory and maintenance history."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from goatherd.data.records import (
    decode_datetime,
    decode_enum,
    decode_id,
    encode_datetime,
    new_id,
    require_datetime,
)


class EquipmentType(Enum):
    FEEDER = "Feeder"
    WATERER = "Waterer"
    FENCE = "Fence"
    GATE = "Gate"
    SHELTER = "Shelter"
    MILKING_STAND = "Milking Stand"
    SCALE = "Scale"
    TOOLS = "Tools"
    MEDICAL = "Medical Equipment"
    OTHER = "Other"


class EquipmentCondition(Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    NEEDS_REPLACEMENT = "Needs Replacement"


class MaintenanceType(Enum):
    ROUTINE = "Routine"
    REPAIR = "Repair"
    REPLACEMENT = "Replacement"
    CLEANING = "Cleaning"
    INSPECTION = "Inspection"


@dataclass
class MaintenanceRecord:
    date: datetime = field(default_factory=datetime.now)
    type: MaintenanceType = MaintenanceType.ROUTINE
    description: str = ""
    cost: float = 0.0
    performed_by: str = ""
    next_maintenance_date: datetime | None = None
    id: uuid.UUID = field(default_factory=new_id)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "date": encode_datetime(self.date),
            "type": self.type.value,
            "description": self.description,
            "cost": self.cost,
            "performedBy": self.performed_by,
            "nextMaintenanceDate": encode_datetime(self.next_maintenance_date),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MaintenanceRecord":
        return cls(
            id=decode_id(data.get("id")) or new_id(),
            date=require_datetime(data.get("date")),
            type=decode_enum(MaintenanceType, data.get("type"), MaintenanceType.ROUTINE),
            description=data.get("description", ""),
            cost=float(data.get("cost", 0.0)),
            performed_by=data.get("performedBy", ""),
            next_maintenance_date=decode_datetime(data.get("nextMaintenanceDate")),
        )


@dataclass
class Equipment:
    name: str = ""
    type: EquipmentType = EquipmentType.FEEDER
    condition: EquipmentCondition = EquipmentCondition.GOOD
    purchase_date: datetime = field(default_factory=datetime.now)
    cost: float = 0.0
    location: str = ""
    notes: str = ""
    last_maintenance_date: datetime | None = None
    next_maintenance_date: datetime | None = None
    maintenance_history: list[MaintenanceRecord] = field(default_factory=list)
    date_created: datetime = field(default_factory=datetime.now)
    id: uuid.UUID = field(default_factory=new_id)

    def log_maintenance(self, record: MaintenanceRecord) -> None:
        """Append a maintenance entry and roll the maintenance dates forward."""
        self.maintenance_history.append(record)
        self.last_maintenance_date = record.date
        if record.next_maintenance_date is not None:
            self.next_maintenance_date = record.next_maintenance_date

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "type": self.type.value,
            "condition": self.condition.value,
            "purchaseDate": encode_datetime(self.purchase_date),
            "lastMaintenanceDate": encode_datetime(self.last_maintenance_date),
            "nextMaintenanceDate": encode_datetime(self.next_maintenance_date),
            "cost": self.cost,
            "location": self.location,
            "notes": self.notes,
            "maintenanceHistory": [r.to_dict() for r in self.maintenance_history],
            "dateCreated": encode_datetime(self.date_created),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Equipment":
        return cls(
            id=decode_id(data.get("id")) or new_id(),
            name=data.get("name", ""),
            type=decode_enum(EquipmentType, data.get("type"), EquipmentType.FEEDER),
            condition=decode_enum(EquipmentCondition, data.get("condition"), EquipmentCondition.GOOD),
            purchase_date=require_datetime(data.get("purchaseDate")),
            last_maintenance_date=decode_datetime(data.get("lastMaintenanceDate")),
            next_maintenance_date=decode_datetime(data.get("nextMaintenanceDate")),
            cost=float(data.get("cost", 0.0)),
            location=data.get("location", ""),
            notes=data.get("notes", ""),
            maintenance_history=[MaintenanceRecord.from_dict(r) for r in data.get("maintenanceHistory", [])],
            date_created=require_datetime(data.get("dateCreated")),
        )


def validate_equipment(item: Equipment) -> list[str]:
    problems = []
    if not item.name.strip():
        problems.append("name is required")
    if item.cost < 0:
        problems.append("cost cannot be negative")
    return problems
