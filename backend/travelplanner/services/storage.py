"""
Load-all/save-all persistence for the planner collections.

Every collection is stored as one JSON value under a fixed key per user and is
replaced as a whole on save. Photo metadata is additionally kept as one
document per record in the "photos" collection of the document store.
"""
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from pydantic import TypeAdapter, ValidationError
from typing import Callable, List, Optional, TypeVar
import logging
from travelplanner.core.config import settings
from travelplanner.models.blob import StoredBlob
from travelplanner.models.document_record import DocumentRecord
from travelplanner.schemas.trip import Trip
from travelplanner.schemas.packing import PackingList
from travelplanner.schemas.document import TravelDocument
from travelplanner.schemas.photo import Photo
from travelplanner.schemas.settings import UserSettings
from travelplanner.schemas.template import TripTemplate
from travelplanner.services.sample_data import (
    get_sample_trips, get_sample_packing_lists, get_sample_documents
)

logger = logging.getLogger(__name__)

TRIPS_KEY = "travelPlannerTrips"
SETTINGS_KEY = "travelPlannerSettings"
PACKING_LISTS_KEY = "travelPlannerPackingLists"
DOCUMENTS_KEY = "travelPlannerDocuments"
CUSTOM_TEMPLATES_KEY = "customTemplates"
PHOTOS_KEY = "tripPhotos"

PHOTOS_COLLECTION = "photos"

T = TypeVar("T")

_trips_adapter = TypeAdapter(List[Trip])
_packing_adapter = TypeAdapter(List[PackingList])
_documents_adapter = TypeAdapter(List[TravelDocument])
_templates_adapter = TypeAdapter(List[TripTemplate])
_photos_adapter = TypeAdapter(List[Photo])


def _no_samples() -> list:
    return []


class BlobStore:
    """Per-user key-value store of JSON text values."""

    def __init__(self, db: Session, owner_id: int):
        self.db = db
        self.owner_id = owner_id

    def get(self, key: str) -> Optional[str]:
        """Return the raw value for a key, or None when it was never written."""
        try:
            blob = self.db.query(StoredBlob).filter(
                StoredBlob.owner_id == self.owner_id,
                StoredBlob.key == key
            ).first()
        except SQLAlchemyError as e:
            logger.error(f"Error reading {key}: {e}")
            self.db.rollback()
            return None
        return blob.value if blob else None

    def set(self, key: str, value: str) -> bool:
        """Replace the value for a key. Failures are logged, never raised."""
        try:
            blob = self.db.query(StoredBlob).filter(
                StoredBlob.owner_id == self.owner_id,
                StoredBlob.key == key
            ).first()
            if blob:
                blob.value = value
            else:
                self.db.add(StoredBlob(owner_id=self.owner_id, key=key, value=value))
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error saving {key}: {e}")
            self.db.rollback()
            return False
        return True

    def delete(self, key: str) -> bool:
        try:
            self.db.query(StoredBlob).filter(
                StoredBlob.owner_id == self.owner_id,
                StoredBlob.key == key
            ).delete()
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error deleting {key}: {e}")
            self.db.rollback()
            return False
        return True


class DocumentStore:
    """Per-user collections holding one JSON document per record."""

    def __init__(self, db: Session, owner_id: int):
        self.db = db
        self.owner_id = owner_id

    def list(self, collection: str) -> List[dict]:
        """Return every document in a collection. Raises SQLAlchemyError."""
        records = self.db.query(DocumentRecord).filter(
            DocumentRecord.owner_id == self.owner_id,
            DocumentRecord.collection == collection
        ).order_by(DocumentRecord.id).all()
        return [record.data for record in records]

    def replace_all(self, collection: str, documents: List[dict]) -> None:
        """
        Delete every document in the collection and write the given ones,
        as a single transaction. Raises SQLAlchemyError after rolling back.
        """
        try:
            self.db.query(DocumentRecord).filter(
                DocumentRecord.owner_id == self.owner_id,
                DocumentRecord.collection == collection
            ).delete()
            for document in documents:
                self.db.add(DocumentRecord(
                    owner_id=self.owner_id,
                    collection=collection,
                    doc_id=str(document["id"]),
                    data=document
                ))
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise


class PlannerStore:
    """
    Loads and saves the planner collections of one user.

    Loads never fail: a missing value yields the sample data (when
    SEED_SAMPLE_DATA is on) or an empty list, and an unreadable value is
    logged and replaced the same way. Saves log failures and return False.
    """

    def __init__(self, db: Session, owner_id: int):
        self.blobs = BlobStore(db, owner_id)
        self.documents = DocumentStore(db, owner_id)

    def _load_list(self, key: str, adapter: TypeAdapter, samples: Callable[[], List[T]]) -> List[T]:
        raw = self.blobs.get(key)
        if raw is None:
            return samples() if settings.SEED_SAMPLE_DATA else []
        try:
            return adapter.validate_json(raw)
        except ValidationError as e:
            logger.error(f"Error loading {key}: {e}")
            return samples() if settings.SEED_SAMPLE_DATA else []

    def _save_list(self, key: str, adapter: TypeAdapter, values: list) -> bool:
        return self.blobs.set(key, adapter.dump_json(values).decode("utf-8"))

    # Trips
    def load_trips(self) -> List[Trip]:
        return self._load_list(TRIPS_KEY, _trips_adapter, get_sample_trips)

    def save_trips(self, trips: List[Trip]) -> bool:
        return self._save_list(TRIPS_KEY, _trips_adapter, trips)

    # Packing lists
    def load_packing_lists(self) -> List[PackingList]:
        return self._load_list(PACKING_LISTS_KEY, _packing_adapter, get_sample_packing_lists)

    def save_packing_lists(self, packing_lists: List[PackingList]) -> bool:
        return self._save_list(PACKING_LISTS_KEY, _packing_adapter, packing_lists)

    # Documents
    def load_documents(self) -> List[TravelDocument]:
        return self._load_list(DOCUMENTS_KEY, _documents_adapter, get_sample_documents)

    def save_documents(self, documents: List[TravelDocument]) -> bool:
        return self._save_list(DOCUMENTS_KEY, _documents_adapter, documents)

    # Custom templates
    def load_custom_templates(self) -> List[TripTemplate]:
        return self._load_list(CUSTOM_TEMPLATES_KEY, _templates_adapter, _no_samples)

    def save_custom_templates(self, templates: List[TripTemplate]) -> bool:
        return self._save_list(CUSTOM_TEMPLATES_KEY, _templates_adapter, templates)

    # Settings
    def load_settings(self) -> UserSettings:
        defaults = UserSettings(currency=settings.DEFAULT_CURRENCY, theme=settings.DEFAULT_THEME)
        raw = self.blobs.get(SETTINGS_KEY)
        if raw is None:
            return defaults
        try:
            return UserSettings.model_validate_json(raw)
        except ValidationError as e:
            logger.error(f"Error loading settings: {e}")
            return defaults

    def save_settings(self, user_settings: UserSettings) -> bool:
        return self.blobs.set(SETTINGS_KEY, user_settings.model_dump_json())

    # Photos
    def load_photos(self) -> List[Photo]:
        """Read photo metadata from the document store, falling back to the blob."""
        try:
            documents = self.documents.list(PHOTOS_COLLECTION)
        except SQLAlchemyError as e:
            logger.warning(f"Photo collection unavailable, using local copy: {e}")
            documents = []
        if documents:
            try:
                return _photos_adapter.validate_python(documents)
            except ValidationError as e:
                logger.error(f"Error loading photos from collection: {e}")
        return self._load_list(PHOTOS_KEY, _photos_adapter, _no_samples)

    def save_photos(self, photos: List[Photo]) -> bool:
        """
        Rewrite the photo collection in one batch. When the batch fails the
        metadata is written to the blob store instead.
        """
        try:
            self.documents.replace_all(
                PHOTOS_COLLECTION,
                [photo.model_dump(mode="json") for photo in photos]
            )
            logger.info(f"Saved {len(photos)} photos to collection")
        except SQLAlchemyError as e:
            logger.warning(f"Error saving photos to collection, using local copy: {e}")
            return self._save_list(PHOTOS_KEY, _photos_adapter, photos)
        # The blob mirrors the collection
        return self._save_list(PHOTOS_KEY, _photos_adapter, photos)

    # Whole-planner operations
    def clear_all(self) -> None:
        """Empty trips, packing lists and documents and reset settings."""
        self.save_trips([])
        self.save_packing_lists([])
        self.save_documents([])
        self.save_settings(UserSettings(currency=settings.DEFAULT_CURRENCY, theme=settings.DEFAULT_THEME))
        logger.info("Cleared all planner data")

    def load_sample(self) -> None:
        """Replace trips, packing lists and documents with the sample data."""
        self.save_trips(get_sample_trips())
        self.save_packing_lists(get_sample_packing_lists())
        self.save_documents(get_sample_documents())
        self.save_settings(UserSettings(currency=settings.DEFAULT_CURRENCY, theme=settings.DEFAULT_THEME))
        logger.info("Loaded sample planner data")
