"""Data modules - farm records and the record store."""

from goatherd.data.breeding import (
    BreedingEvent,
    BreedingEventType,
    BreedingRecord,
    PregnancyStatus,
    validate_breeding_record,
)
from goatherd.data.equipment import (
    Equipment,
    EquipmentCondition,
    EquipmentType,
    MaintenanceRecord,
    MaintenanceType,
    validate_equipment,
)
from goatherd.data.feeding import (
    FeedConsumption,
    FeedingSchedule,
    FeedType,
    validate_feeding_schedule,
)
from goatherd.data.goats import (
    Goat,
    GoatSex,
    HealthStatus,
    MedicalRecord,
    MedicalType,
    MilkQuality,
    MilkRecord,
    validate_goat,
)
from goatherd.data.pastures import (
    GrassType,
    GrazingRecord,
    Pasture,
    PastureCondition,
    validate_pasture,
)
from goatherd.data.store import FarmStore, JsonFileBackend, MemoryBackend

__all__ = [
    "FarmStore",
    "JsonFileBackend",
    "MemoryBackend",
    # Goats
    "Goat",
    "GoatSex",
    "HealthStatus",
    "MedicalRecord",
    "MedicalType",
    "MilkQuality",
    "MilkRecord",
    "validate_goat",
    # Breeding
    "BreedingEvent",
    "BreedingEventType",
    "BreedingRecord",
    "PregnancyStatus",
    "validate_breeding_record",
    # Feeding
    "FeedConsumption",
    "FeedingSchedule",
    "FeedType",
    "validate_feeding_schedule",
    # Pastures
    "GrassType",
    "GrazingRecord",
    "Pasture",
    "PastureCondition",
    "validate_pasture",
    # Equipment
    "Equipment",
    "EquipmentCondition",
    "EquipmentType",
    "MaintenanceRecord",
    "MaintenanceType",
    "validate_equipment",
]
