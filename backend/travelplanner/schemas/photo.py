"""
Pydantic schemas for photo metadata.
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from travelplanner.core.utils import generate_id


class Photo(BaseModel):
    """Metadata for an uploaded trip photo."""
    id: str = Field(default_factory=generate_id)
    trip_id: Optional[str] = None
    caption: str = ""
    date: datetime = Field(default_factory=datetime.utcnow)
    file_name: str
    size: int
    original_size: Optional[int] = None
    has_image: bool = True
    file_path: Optional[str] = None


class PhotoUpdate(BaseModel):
    """Schema for caption edits."""
    caption: str


class PhotoResponse(Photo):
    """Photo with its static URL."""
    file_url: Optional[str] = None


class StorageUsage(BaseModel):
    """Photo storage statistics."""
    total_size: int
    total_photos: int
    average_size: float
    storage_used: str
    average_size_formatted: str


class StorageCapacity(BaseModel):
    """Estimated metadata capacity of the document store."""
    max_photos: int
    metadata_size: int
    current_usage: int
    free_tier_bytes: int


class PhotoCleanupResult(BaseModel):
    """Outcome of removing old photos."""
    removed: int
    freed_bytes: int
    freed: str


class PhotoExport(BaseModel):
    """Metadata export of every photo."""
    photos: List[dict]
    export_date: datetime
    total_photos: int
    total_size: int
