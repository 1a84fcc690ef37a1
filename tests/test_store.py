"""Tests for the farm record store."""

import json
import logging
import uuid
from datetime import datetime

import pytest

from goatherd.core.errors import RecordNotFoundError
from goatherd.data.breeding import BreedingRecord
from goatherd.data.feeding import FeedConsumption, FeedingSchedule
from goatherd.data.goats import Goat
from goatherd.data.store import COLLECTIONS, UNKNOWN_NAME, FarmStore, JsonFileBackend, MemoryBackend


class TestBackends:
    """Tests for the storage backends."""

    def test_json_file_backend_reads_what_it_writes(self, tmp_path):
        backend = JsonFileBackend(tmp_path / "nested")
        assert backend.read("goats") is None
        backend.write("goats", "[]")
        assert backend.read("goats") == "[]"
        assert (tmp_path / "nested" / "goats.json").exists()

    def test_json_file_backend_uses_configured_dir(self, data_dir):
        assert JsonFileBackend().data_dir == data_dir

    def test_memory_backend(self):
        backend = MemoryBackend({"goats": "[]"})
        backend.write("pastures", "[]")
        assert backend.blobs == {"goats": "[]", "pastures": "[]"}


class TestPersistence:
    """Tests for loading and saving collections."""

    def test_save_writes_all_six_collections(self, empty_store, doe):
        empty_store.add_goat(doe)
        assert set(empty_store.backend.blobs) == set(COLLECTIONS)
        assert json.loads(empty_store.backend.blobs["goats"])[0]["name"] == "Bella"
        assert json.loads(empty_store.backend.blobs["pastures"]) == []

    def test_round_trip_through_files(self, tmp_path, milking_doe, buck, pasture):
        store = FarmStore.open(JsonFileBackend(tmp_path), seed=False)
        store.add_goat(milking_doe)
        store.add_goat(buck)
        store.add_pasture(pasture)
        store.add_breeding_record(BreedingRecord(doe_id=milking_doe.id, buck_id=buck.id))
        store.add_feeding_schedule(FeedingSchedule(goat_id=buck.id, quantity=1.0))
        store.add_feed_consumption(FeedConsumption(goat_id=buck.id, planned_quantity=1.0, actual_quantity=0.5))

        reopened = FarmStore.open(JsonFileBackend(tmp_path), seed=False)
        assert reopened.goats == store.goats
        assert reopened.pastures == store.pastures
        assert reopened.breeding_records == store.breeding_records
        assert reopened.feeding_schedules == store.feeding_schedules
        assert reopened.feed_consumption == store.feed_consumption

    def test_undecodable_blob_keeps_default(self, caplog, doe):
        backend = MemoryBackend(
            {
                "goats": json.dumps([doe.to_dict()]),
                "pastures": "not json",
                "equipment": json.dumps([{"name": "Feeder", "type": "Spaceship"}]),
            }
        )
        with caplog.at_level(logging.WARNING, logger="goatherd"):
            store = FarmStore.open(backend, seed=False)

        assert [g.name for g in store.goats] == ["Bella"]
        assert store.pastures == []
        assert store.equipment == []
        assert "pastures" in caplog.text
        assert "equipment" in caplog.text

    def test_invalid_utf8_file_keeps_default(self, tmp_path, caplog, doe):
        """Verify a collection file that is not UTF-8 is skipped, not fatal."""
        backend = JsonFileBackend(tmp_path)
        backend.write("goats", json.dumps([doe.to_dict()]))
        (tmp_path / "pastures.json").write_bytes(b"[\xff\xfe]")

        with caplog.at_level(logging.WARNING, logger="goatherd"):
            store = FarmStore.open(backend, seed=False)

        assert store.pastures == []
        assert [g.name for g in store.goats] == ["Bella"]
        assert "pastures" in caplog.text

    def test_unencodable_collection_does_not_block_others(self, empty_store, caplog, doe, pasture):
        """Verify one collection failing to encode leaves the rest written."""
        pasture.notes = {"shade", "water"}
        empty_store.pastures.append(pasture)

        with caplog.at_level(logging.WARNING, logger="goatherd"):
            empty_store.add_goat(doe)

        assert "pastures" not in empty_store.backend.blobs
        assert json.loads(empty_store.backend.blobs["goats"])[0]["name"] == "Bella"
        assert "equipment" in empty_store.backend.blobs
        assert "Could not encode pastures" in caplog.text


class TestCrud:
    """Tests for add/update/delete and lookups."""

    def test_update_replaces_by_id(self, empty_store, doe):
        empty_store.add_goat(doe)
        edited = Goat.from_dict(doe.to_dict())
        edited.name = "Bella II"
        assert empty_store.update_goat(edited) is True
        assert empty_store.goats[0].name == "Bella II"

    def test_update_unknown_id_is_noop(self, empty_store, doe):
        assert empty_store.update_goat(doe) is False
        assert empty_store.goats == []
        assert empty_store.backend.blobs == {}

    def test_delete(self, empty_store, doe, buck):
        empty_store.add_goat(doe)
        empty_store.add_goat(buck)
        empty_store.delete_goat(doe)
        assert empty_store.goats == [buck]

    def test_delete_goat_keeps_dangling_references(self, empty_store, doe, buck):
        record = BreedingRecord(doe_id=doe.id, buck_id=buck.id)
        empty_store.add_goat(doe)
        empty_store.add_breeding_record(record)
        empty_store.delete_goat(doe)
        assert empty_store.breeding_records == [record]
        assert empty_store.goat_name(record.doe_id) == UNKNOWN_NAME

    def test_goat_lookups(self, empty_store, doe, buck):
        empty_store.add_goat(doe)
        empty_store.add_goat(buck)
        assert empty_store.get_goat(doe.id) is doe
        assert empty_store.goat_name(buck.id) == "Max"
        assert empty_store.goat_name(None) == UNKNOWN_NAME
        assert empty_store.does() == [doe]
        assert empty_store.bucks() == [buck]

    def test_require_goat_raises(self, empty_store):
        with pytest.raises(RecordNotFoundError, match="not found"):
            empty_store.require_goat(uuid.uuid4())

    def test_get_pasture_and_equipment(self, empty_store, pasture):
        empty_store.add_pasture(pasture)
        assert empty_store.get_pasture(pasture.id) is pasture
        assert empty_store.get_equipment(pasture.id) is None


class TestSeeding:
    """Tests for the starter herd."""

    def test_seeds_empty_store(self):
        store = FarmStore.open(MemoryBackend())
        assert [g.name for g in store.goats] == ["Bella", "Max", "Luna"]
        assert [p.name for p in store.pastures] == ["North Field", "South Meadow"]
        assert [e.name for e in store.equipment] == ["Main Feeder", "Water Trough"]
        assert store.breeding_records == []
        assert "goats" in store.backend.blobs

    def test_does_not_reseed_existing_goats(self, doe):
        backend = MemoryBackend({"goats": json.dumps([doe.to_dict()])})
        store = FarmStore.open(backend)
        assert [g.name for g in store.goats] == ["Bella"]
        assert len(store.pastures) == 2

    def test_seed_is_stable_across_reopen(self):
        backend = MemoryBackend()
        first = FarmStore.open(backend)
        second = FarmStore.open(backend)
        assert [g.id for g in second.goats] == [g.id for g in first.goats]

    def test_seeded_equipment_purchase_dates_in_past(self):
        store = FarmStore.open(MemoryBackend())
        assert all(item.purchase_date < datetime.now() for item in store.equipment)
