"""Goat records with their medical and milk histories."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from goatherd.data.records import (
    decode_enum,
    decode_id,
    encode_datetime,
    new_id,
    require_datetime,
)


class GoatSex(Enum):
    MALE = "Male"
    FEMALE = "Female"


class HealthStatus(Enum):
    HEALTHY = "Healthy"
    SICK = "Sick"
    RECOVERING = "Recovering"
    CHECKUP = "Needs Checkup"


class MedicalType(Enum):
    VACCINATION = "Vaccination"
    ILLNESS = "Illness"
    INJURY = "Injury"
    CHECKUP = "Checkup"
    TREATMENT = "Treatment"


class MilkQuality(Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


@dataclass
class MedicalRecord:
    date: datetime = field(default_factory=datetime.now)
    type: MedicalType = MedicalType.VACCINATION
    description: str = ""
    treatment: str = ""
    veterinarian: str = ""
    id: uuid.UUID = field(default_factory=new_id)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "date": encode_datetime(self.date),
            "type": self.type.value,
            "description": self.description,
            "treatment": self.treatment,
            "veterinarian": self.veterinarian,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MedicalRecord":
        return cls(
            id=decode_id(data.get("id")) or new_id(),
            date=require_datetime(data.get("date")),
            type=decode_enum(MedicalType, data.get("type"), MedicalType.VACCINATION),
            description=data.get("description", ""),
            treatment=data.get("treatment", ""),
            veterinarian=data.get("veterinarian", ""),
        )


@dataclass
class MilkRecord:
    date: datetime = field(default_factory=datetime.now)
    quantity: float = 0.0  # litres
    quality: MilkQuality = MilkQuality.GOOD
    notes: str = ""
    id: uuid.UUID = field(default_factory=new_id)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "date": encode_datetime(self.date),
            "quantity": self.quantity,
            "quality": self.quality.value,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MilkRecord":
        return cls(
            id=decode_id(data.get("id")) or new_id(),
            date=require_datetime(data.get("date")),
            quantity=float(data.get("quantity", 0.0)),
            quality=decode_enum(MilkQuality, data.get("quality"), MilkQuality.GOOD),
            notes=data.get("notes", ""),
        )


@dataclass
class Goat:
    """A goat in the herd.

    Medical and milk histories are embedded in the goat record and stored
    with it; there is no separate collection for them.
    """

    name: str = ""
    breed: str = ""
    age: int = 0  # years
    sex: GoatSex = GoatSex.FEMALE
    health_status: HealthStatus = HealthStatus.HEALTHY
    lineage: str = ""
    temperament_notes: str = ""
    photo: str = "goat"
    medical_history: list[MedicalRecord] = field(default_factory=list)
    milk_production: list[MilkRecord] = field(default_factory=list)
    date_added: datetime = field(default_factory=datetime.now)
    id: uuid.UUID = field(default_factory=new_id)

    @property
    def is_doe(self) -> bool:
        return self.sex == GoatSex.FEMALE

    @property
    def is_buck(self) -> bool:
        return self.sex == GoatSex.MALE

    def add_medical_record(self, record: MedicalRecord) -> None:
        self.medical_history.append(record)

    def add_milk_record(self, record: MilkRecord) -> None:
        self.milk_production.append(record)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "breed": self.breed,
            "age": self.age,
            "sex": self.sex.value,
            "healthStatus": self.health_status.value,
            "lineage": self.lineage,
            "medicalHistory": [r.to_dict() for r in self.medical_history],
            "milkProduction": [r.to_dict() for r in self.milk_production],
            "temperamentNotes": self.temperament_notes,
            "photo": self.photo,
            "dateAdded": encode_datetime(self.date_added),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Goat":
        return cls(
            id=decode_id(data.get("id")) or new_id(),
            name=data.get("name", ""),
            breed=data.get("breed", ""),
            age=int(data.get("age", 0)),
            sex=decode_enum(GoatSex, data.get("sex"), GoatSex.FEMALE),
            health_status=decode_enum(HealthStatus, data.get("healthStatus"), HealthStatus.HEALTHY),
            lineage=data.get("lineage", ""),
            medical_history=[MedicalRecord.from_dict(r) for r in data.get("medicalHistory", [])],
            milk_production=[MilkRecord.from_dict(r) for r in data.get("milkProduction", [])],
            temperament_notes=data.get("temperamentNotes", ""),
            photo=data.get("photo", "goat"),
            date_added=require_datetime(data.get("dateAdded")),
        )


def validate_goat(goat: Goat) -> list[str]:
    """Return the problems that block saving a goat (empty when valid)."""
    problems = []
    if not goat.name.strip():
        problems.append("name is required")
    if not goat.breed.strip():
        problems.append("breed is required")
    if goat.age < 0:
        problems.append("age cannot be negative")
    return problems
