"""
Farm record store.

Holds the six record collections in memory and persists each one as a single
JSON blob under its own key. Every mutation rewrites all six blobs; there are
no partial updates, migrations or indices.

Loading is best-effort: a missing or undecodable blob leaves that collection
empty (and logs a warning), after which the starter herd may be seeded.
"""

import json
import logging
import uuid
from datetime import datetime, timedelta
from pathlib import Path

from goatherd.core.config import get_data_dir
from goatherd.core.errors import RecordNotFoundError
from goatherd.data.breeding import BreedingRecord
from goatherd.data.equipment import Equipment, EquipmentCondition, EquipmentType
from goatherd.data.feeding import FeedConsumption, FeedingSchedule
from goatherd.data.goats import Goat, GoatSex, HealthStatus
from goatherd.data.pastures import GrassType, Pasture, PastureCondition

logger = logging.getLogger(__name__)

UNKNOWN_NAME = "Unknown"

# Storage key -> (store attribute, record type)
COLLECTIONS = {
    "goats": ("goats", Goat),
    "feedingSchedules": ("feeding_schedules", FeedingSchedule),
    "breedingRecords": ("breeding_records", BreedingRecord),
    "equipment": ("equipment", Equipment),
    "pastures": ("pastures", Pasture),
    "feedConsumption": ("feed_consumption", FeedConsumption),
}


# =============================================================================
# Storage Backends
# =============================================================================


class JsonFileBackend:
    """Key-value storage with one <key>.json file per key."""

    def __init__(self, data_dir: Path | None = None):
        self.data_dir = data_dir if data_dir is not None else get_data_dir()

    def path_for(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def read(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        with open(path, encoding="utf-8") as f:
            return f.read()

    def write(self, key: str, blob: str) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        with open(self.path_for(key), "w", encoding="utf-8") as f:
            f.write(blob)


class MemoryBackend:
    """Key-value storage held in a dict."""

    def __init__(self, blobs: dict[str, str] | None = None):
        self.blobs: dict[str, str] = dict(blobs or {})

    def read(self, key: str) -> str | None:
        return self.blobs.get(key)

    def write(self, key: str, blob: str) -> None:
        self.blobs[key] = blob


# =============================================================================
# Store
# =============================================================================


class FarmStore:
    def __init__(self, backend: JsonFileBackend | MemoryBackend | None = None):
        self.backend = backend if backend is not None else JsonFileBackend()
        self.goats: list[Goat] = []
        self.feeding_schedules: list[FeedingSchedule] = []
        self.breeding_records: list[BreedingRecord] = []
        self.equipment: list[Equipment] = []
        self.pastures: list[Pasture] = []
        self.feed_consumption: list[FeedConsumption] = []

    @classmethod
    def open(cls, backend: JsonFileBackend | MemoryBackend | None = None, seed: bool = True) -> "FarmStore":
        """Create a store, load every collection and seed the starter herd."""
        store = cls(backend)
        store.load()
        if seed:
            store.seed_sample_data()
        return store

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def load(self) -> None:
        """Load all six collections, keeping the default for any bad blob."""
        for key, (attr, record_type) in COLLECTIONS.items():
            try:
                blob = self.backend.read(key)
                if blob is None:
                    continue
                records = [record_type.from_dict(item) for item in json.loads(blob)]
            except (OSError, ValueError, TypeError, KeyError, AttributeError) as e:
                logger.warning("Could not decode %s, keeping default: %s", key, e)
                continue
            setattr(self, attr, records)

    def save(self) -> None:
        """Serialize and write all six collections."""
        for key, (attr, _) in COLLECTIONS.items():
            try:
                blob = json.dumps([record.to_dict() for record in getattr(self, attr)], indent=2)
            except (TypeError, ValueError) as e:
                logger.warning("Could not encode %s, not saved: %s", key, e)
                continue
            self.backend.write(key, blob)

    # -------------------------------------------------------------------------
    # Generic list operations
    # -------------------------------------------------------------------------

    def _add(self, attr: str, record) -> None:
        getattr(self, attr).append(record)
        self.save()

    def _update(self, attr: str, record) -> bool:
        records = getattr(self, attr)
        for index, existing in enumerate(records):
            if existing.id == record.id:
                records[index] = record
                self.save()
                return True
        return False

    def _delete(self, attr: str, record) -> None:
        setattr(self, attr, [r for r in getattr(self, attr) if r.id != record.id])
        self.save()

    @staticmethod
    def _find(records: list, record_id: uuid.UUID | None):
        if record_id is None:
            return None
        return next((r for r in records if r.id == record_id), None)

    # -------------------------------------------------------------------------
    # Goats
    # -------------------------------------------------------------------------

    def add_goat(self, goat: Goat) -> None:
        self._add("goats", goat)

    def update_goat(self, goat: Goat) -> bool:
        return self._update("goats", goat)

    def delete_goat(self, goat: Goat) -> None:
        self._delete("goats", goat)

    def get_goat(self, goat_id: uuid.UUID | None) -> Goat | None:
        return self._find(self.goats, goat_id)

    def require_goat(self, goat_id: uuid.UUID) -> Goat:
        goat = self.get_goat(goat_id)
        if goat is None:
            raise RecordNotFoundError("Goat", goat_id)
        return goat

    def goat_name(self, goat_id: uuid.UUID | None) -> str:
        """Name for a goat reference, "Unknown" when it does not resolve."""
        goat = self.get_goat(goat_id)
        return goat.name if goat else UNKNOWN_NAME

    def does(self) -> list[Goat]:
        return [g for g in self.goats if g.sex == GoatSex.FEMALE]

    def bucks(self) -> list[Goat]:
        return [g for g in self.goats if g.sex == GoatSex.MALE]

    # -------------------------------------------------------------------------
    # Feeding schedules
    # -------------------------------------------------------------------------

    def add_feeding_schedule(self, schedule: FeedingSchedule) -> None:
        self._add("feeding_schedules", schedule)

    def update_feeding_schedule(self, schedule: FeedingSchedule) -> bool:
        return self._update("feeding_schedules", schedule)

    def delete_feeding_schedule(self, schedule: FeedingSchedule) -> None:
        self._delete("feeding_schedules", schedule)

    # -------------------------------------------------------------------------
    # Breeding records
    # -------------------------------------------------------------------------

    def add_breeding_record(self, record: BreedingRecord) -> None:
        self._add("breeding_records", record)

    def update_breeding_record(self, record: BreedingRecord) -> bool:
        return self._update("breeding_records", record)

    def delete_breeding_record(self, record: BreedingRecord) -> None:
        self._delete("breeding_records", record)

    def get_breeding_record(self, record_id: uuid.UUID | None) -> BreedingRecord | None:
        return self._find(self.breeding_records, record_id)

    # -------------------------------------------------------------------------
    # Equipment
    # -------------------------------------------------------------------------

    def add_equipment(self, item: Equipment) -> None:
        self._add("equipment", item)

    def update_equipment(self, item: Equipment) -> bool:
        return self._update("equipment", item)

    def delete_equipment(self, item: Equipment) -> None:
        self._delete("equipment", item)

    def get_equipment(self, item_id: uuid.UUID | None) -> Equipment | None:
        return self._find(self.equipment, item_id)

    # -------------------------------------------------------------------------
    # Pastures
    # -------------------------------------------------------------------------

    def add_pasture(self, pasture: Pasture) -> None:
        self._add("pastures", pasture)

    def update_pasture(self, pasture: Pasture) -> bool:
        return self._update("pastures", pasture)

    def delete_pasture(self, pasture: Pasture) -> None:
        self._delete("pastures", pasture)

    def get_pasture(self, pasture_id: uuid.UUID | None) -> Pasture | None:
        return self._find(self.pastures, pasture_id)

    # -------------------------------------------------------------------------
    # Feed consumption
    # -------------------------------------------------------------------------

    def add_feed_consumption(self, entry: FeedConsumption) -> None:
        self._add("feed_consumption", entry)

    def update_feed_consumption(self, entry: FeedConsumption) -> bool:
        return self._update("feed_consumption", entry)

    def delete_feed_consumption(self, entry: FeedConsumption) -> None:
        self._delete("feed_consumption", entry)

    # -------------------------------------------------------------------------
    # Starter data
    # -------------------------------------------------------------------------

    def seed_sample_data(self) -> None:
        """Seed goats, pastures and equipment when those collections are empty."""
        seeded = False

        if not self.goats:
            self.goats = [
                Goat(name="Bella", breed="Nubian", age=3, sex=GoatSex.FEMALE, health_status=HealthStatus.HEALTHY,
                     lineage="Champion bloodline", temperament_notes="Gentle and friendly", photo="🐐"),
                Goat(name="Max", breed="Boer", age=2, sex=GoatSex.MALE, health_status=HealthStatus.HEALTHY,
                     lineage="Strong genetics", temperament_notes="Protective leader", photo="🐐"),
                Goat(name="Luna", breed="Alpine", age=1, sex=GoatSex.FEMALE, health_status=HealthStatus.CHECKUP,
                     lineage="Mountain heritage", temperament_notes="Playful and curious", photo="🐐"),
            ]
            seeded = True

        if not self.pastures:
            self.pastures = [
                Pasture(name="North Field", size=2.5, grass_type=GrassType.MIXED, condition=PastureCondition.GOOD,
                        rest_period=30, capacity=6, current_occupancy=0, notes="Well-drained area with natural shade"),
                Pasture(name="South Meadow", size=1.8, grass_type=GrassType.CLOVER, condition=PastureCondition.EXCELLENT,
                        rest_period=25, capacity=4, current_occupancy=0, notes="Rich soil, recently reseeded"),
            ]
            seeded = True

        if not self.equipment:
            now = datetime.now()
            self.equipment = [
                Equipment(name="Main Feeder", type=EquipmentType.FEEDER, condition=EquipmentCondition.GOOD,
                          purchase_date=now - timedelta(days=365), cost=150.0, location="Barn",
                          notes="Holds 50 lbs of feed"),
                Equipment(name="Water Trough", type=EquipmentType.WATERER, condition=EquipmentCondition.EXCELLENT,
                          purchase_date=now - timedelta(days=200), cost=85.0, location="Pasture",
                          notes="Automatic refill system"),
            ]
            seeded = True

        if seeded:
            logger.info("Seeded starter records")
            self.save()
