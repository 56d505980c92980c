"""
Tests for the per-user planner store.
"""
from datetime import date, datetime
from decimal import Decimal
import pytest
from sqlalchemy.exc import SQLAlchemyError
from travelplanner.core.config import settings
from travelplanner.db.session import SessionLocal
from travelplanner.schemas.photo import Photo
from travelplanner.schemas.settings import Currency, UserSettings
from travelplanner.schemas.trip import Trip
from travelplanner.services import storage
from travelplanner.services.storage import PlannerStore, TRIPS_KEY, PHOTOS_KEY


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def store(db):
    return PlannerStore(db, owner_id=1)


def make_trip(id="t1"):
    return Trip(id=id, name="Oslo", destination="Oslo, Norway", start_date=date(2030, 2, 1),
                end_date=date(2030, 2, 4), budget=Decimal("800.00"))


def test_missing_values_are_empty_without_seeding(store):
    assert store.load_trips() == []
    assert store.load_packing_lists() == []
    assert store.load_documents() == []
    assert store.load_photos() == []
    assert store.load_settings() == UserSettings()


def test_missing_values_seed_samples(monkeypatch, store):
    monkeypatch.setattr(settings, "SEED_SAMPLE_DATA", True)
    assert [t.id for t in store.load_trips()] == ["trip_1", "trip_2", "trip_3"]
    assert [p.id for p in store.load_packing_lists()] == ["pack_1", "pack_2", "pack_3"]
    assert len(store.load_documents()) == 6
    # Samples are not persisted until something is saved
    assert store.blobs.get(TRIPS_KEY) is None


def test_round_trip_keeps_decimals_and_dates(store):
    assert store.save_trips([make_trip()])
    loaded = store.load_trips()[0]
    assert loaded.budget == Decimal("800.00")
    assert loaded.start_date == date(2030, 2, 1)


def test_corrupt_value_falls_back(store):
    store.blobs.set(TRIPS_KEY, "{not json")
    assert store.load_trips() == []


def test_stores_are_per_user(db):
    PlannerStore(db, owner_id=1).save_trips([make_trip()])
    assert PlannerStore(db, owner_id=2).load_trips() == []


def test_clear_all_and_load_sample(store):
    store.save_trips([make_trip()])
    store.save_settings(UserSettings(currency=Currency.EUR, theme="dark"))

    store.load_sample()
    assert [t.id for t in store.load_trips()] == ["trip_1", "trip_2", "trip_3"]
    assert store.load_settings().theme == "light"

    store.clear_all()
    assert store.load_trips() == []
    assert store.load_packing_lists() == []
    assert store.load_documents() == []
    assert store.load_settings() == UserSettings()


def test_photos_use_collection_and_mirror_blob(store):
    photo = Photo(id="p1", file_name="a.png", size=3, date=datetime(2030, 1, 1))
    assert store.save_photos([photo])

    assert [p["id"] for p in store.documents.list(storage.PHOTOS_COLLECTION)] == ["p1"]
    assert "p1" in store.blobs.get(PHOTOS_KEY)
    assert [p.id for p in store.load_photos()] == ["p1"]

    store.save_photos([])
    assert store.documents.list(storage.PHOTOS_COLLECTION) == []
    assert store.load_photos() == []


def test_photos_fall_back_to_blob(monkeypatch, store):
    def unavailable(*args, **kwargs):
        raise SQLAlchemyError("collection offline")

    monkeypatch.setattr(store.documents, "replace_all", unavailable)
    monkeypatch.setattr(store.documents, "list", unavailable)

    photo = Photo(id="p2", file_name="b.png", size=5, date=datetime(2030, 1, 1))
    assert store.save_photos([photo])
    assert [p.id for p in store.load_photos()] == ["p2"]
