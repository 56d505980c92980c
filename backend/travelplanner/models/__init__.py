"""Models package - Import all models for SQLAlchemy registration."""
from travelplanner.models.user import User
from travelplanner.models.blob import StoredBlob
from travelplanner.models.document_record import DocumentRecord

__all__ = [
    "User",
    "StoredBlob",
    "DocumentRecord",
]
