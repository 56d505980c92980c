"""
Photo service for trip photo files and their metadata.
"""
from datetime import datetime, timedelta
from typing import List, Optional, Tuple
import math
import os
import uuid
import logging
from travelplanner.core.config import settings
from travelplanner.schemas.photo import Photo
from travelplanner.schemas.trip import Trip
from travelplanner.services.aggregation import find_trip

logger = logging.getLogger(__name__)

MAX_PHOTO_AGE_DAYS = 30
FREE_TIER_BYTES = 1024 * 1024 * 1024
METADATA_BYTES_PER_PHOTO = 150
SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]


class PhotoNotFoundError(LookupError):
    pass


def format_file_size(size: float) -> str:
    """Human-readable size, e.g. 1536 -> "1.5 KB"."""
    if not size:
        return "0 Bytes"
    index = min(int(math.floor(math.log(size, 1024))), len(SIZE_UNITS) - 1)
    value = round(size / 1024 ** index, 2)
    return f"{value:g} {SIZE_UNITS[index]}"


def get_file_url(file_path: Optional[str]) -> Optional[str]:
    """Convert a stored file path to its static URL."""
    if not file_path:
        return None
    return f"/static/{os.path.basename(file_path)}"


def save_file(content: bytes, original_name: str) -> str:
    """Write an upload under UPLOAD_DIR with a unique name and return its path."""
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    file_ext = os.path.splitext(original_name or "")[1]
    file_path = os.path.join(settings.UPLOAD_DIR, f"{uuid.uuid4()}{file_ext}")
    with open(file_path, "wb") as buffer:
        buffer.write(content)
    return file_path


def remove_file(file_path: Optional[str]) -> None:
    if file_path and os.path.exists(file_path):
        try:
            os.remove(file_path)
        except OSError as e:
            logger.warning(f"Could not remove photo file {file_path}: {e}")


def add_photo(photos: List[Photo], trip_id: Optional[str], file_name: str, content: bytes) -> Photo:
    photo = Photo(
        trip_id=trip_id or None,
        caption="",
        file_name=file_name,
        size=len(content),
        original_size=len(content),
        has_image=True,
        file_path=save_file(content, file_name)
    )
    photos.append(photo)
    logger.info(f"Stored photo {photo.id} ({format_file_size(photo.size)})")
    return photo


def find_photo(photos: List[Photo], photo_id: str) -> Photo:
    photo = next((p for p in photos if p.id == photo_id), None)
    if not photo:
        raise PhotoNotFoundError("Photo not found")
    return photo


def update_caption(photos: List[Photo], photo_id: str, caption: str) -> Photo:
    photo = find_photo(photos, photo_id)
    photo.caption = caption.strip()
    return photo


def delete_photo(photos: List[Photo], photo_id: str) -> Tuple[List[Photo], Photo]:
    """
    Drop a photo from the metadata list.

    Returns (remaining, removed). The stored file is left in place; call
    remove_files once the remaining metadata has been saved.
    """
    photo = find_photo(photos, photo_id)
    return [p for p in photos if p.id != photo_id], photo


def remove_files(photos: List[Photo]) -> None:
    for photo in photos:
        remove_file(photo.file_path)


def storage_usage(photos: List[Photo]) -> dict:
    total_size = sum(photo.size for photo in photos)
    total_photos = len(photos)
    average = total_size / total_photos if total_photos else 0
    return {
        "total_size": total_size,
        "total_photos": total_photos,
        "average_size": average,
        "storage_used": format_file_size(total_size),
        "average_size_formatted": format_file_size(average),
    }


def storage_capacity(photos: List[Photo]) -> dict:
    """How many metadata records fit in the free document-store tier."""
    return {
        "max_photos": FREE_TIER_BYTES // METADATA_BYTES_PER_PHOTO,
        "metadata_size": METADATA_BYTES_PER_PHOTO,
        "current_usage": len(photos) * METADATA_BYTES_PER_PHOTO,
        "free_tier_bytes": FREE_TIER_BYTES,
    }


def cleanup_old_photos(photos: List[Photo], now: Optional[datetime] = None) -> Tuple[List[Photo], List[Photo]]:
    """
    Split photos into (kept, removed); photos older than 30 days are removed.

    Files are not touched here, see remove_files.
    """
    cutoff = (now or datetime.utcnow()) - timedelta(days=MAX_PHOTO_AGE_DAYS)
    kept = [photo for photo in photos if photo.date >= cutoff]
    removed = [photo for photo in photos if photo.date < cutoff]
    return kept, removed


def export_metadata(photos: List[Photo], trips: List[Trip], now: Optional[datetime] = None) -> dict:
    exported = []
    for photo in photos:
        trip = find_trip(trips, photo.trip_id)
        exported.append({
            "id": photo.id,
            "trip_id": photo.trip_id,
            "trip_name": trip.name if trip else "Unknown Trip",
            "caption": photo.caption,
            "date": photo.date.isoformat(),
            "file_name": photo.file_name,
            "size": photo.size,
            "original_size": photo.original_size or photo.size,
        })
    return {
        "photos": exported,
        "export_date": now or datetime.utcnow(),
        "total_photos": len(photos),
        "total_size": sum(photo.size for photo in photos),
    }
