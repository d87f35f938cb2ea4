from __future__ import annotations

import json
import sys
from datetime import date

from scripts import seed_local_data
from src.repositories.ops_repository import LocalOpsRepository


def run_seed(monkeypatch, *args: str) -> None:
    monkeypatch.setattr(sys, "argv", ["seed_local_data.py", *args])
    seed_local_data.main()


def test_seed_writes_catalog_and_bookings(tmp_path, monkeypatch):
    store = tmp_path / "data" / "ops_store.json"

    run_seed(monkeypatch, "--path", str(store))

    repository = LocalOpsRepository(store)
    assert len(repository.list_tours()) == len(seed_local_data.DEFAULT_TOURS)
    assert {guide.id for guide in repository.list_guides()} == {"g1", "g2"}
    assert repository.list_vehicles()[0].license_plate == "GAM-001"
    assert len(repository.list_bookings()) == 5


def test_seed_does_not_overwrite_existing_data(tmp_path, monkeypatch):
    store = tmp_path / "ops_store.json"
    store.write_text(json.dumps({"tours": [{"name": "Custom Tour"}]}), encoding="utf-8")

    run_seed(monkeypatch, "--path", str(store))
    assert [tour.name for tour in LocalOpsRepository(store).list_tours()] == ["Custom Tour"]

    run_seed(monkeypatch, "--path", str(store), "--force", "--no-bookings")
    repository = LocalOpsRepository(store)
    assert len(repository.list_tours()) == len(seed_local_data.DEFAULT_TOURS)
    assert repository.list_bookings() == []


def test_sample_bookings_are_relative_to_today():
    bookings = seed_local_data.build_sample_bookings(date(2026, 10, 18))

    assert bookings[0]["tourDate"] == "2026-10-18"
    assert bookings[-1]["tourDate"] == "2026-09-28"
    assert "assignedGuide" not in bookings[3]
    assert "assignedVehicle" not in bookings[4]


def test_seed_keeps_unrecognized_store_without_force(tmp_path, monkeypatch):
    store = tmp_path / "ops_store.json"
    store.write_text(json.dumps([{"name": "Custom Tour"}]), encoding="utf-8")

    run_seed(monkeypatch, "--path", str(store))

    assert json.loads(store.read_text(encoding="utf-8")) == [{"name": "Custom Tour"}]


def test_seed_force_replaces_invalid_json(tmp_path, monkeypatch):
    store = tmp_path / "ops_store.json"
    store.write_text("{not json", encoding="utf-8")

    run_seed(monkeypatch, "--path", str(store), "--force")

    repository = LocalOpsRepository(store)
    assert len(repository.list_tours()) == len(seed_local_data.DEFAULT_TOURS)
    assert len(repository.list_bookings()) == 5
