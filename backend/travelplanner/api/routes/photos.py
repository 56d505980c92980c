"""
Trip photo routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File, Form
from typing import List, Optional
import logging
from travelplanner.core.config import settings
from travelplanner.schemas.photo import (
    Photo, PhotoResponse, PhotoUpdate, StorageUsage, StorageCapacity,
    PhotoCleanupResult, PhotoExport
)
from travelplanner.api.dependencies import get_planner_store
from travelplanner.services.storage import PlannerStore
from travelplanner.services import photo_service
from travelplanner.services.photo_service import PhotoNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/photos", tags=["photos"])


def to_response(photo: Photo) -> PhotoResponse:
    return PhotoResponse(**photo.model_dump(), file_url=photo_service.get_file_url(photo.file_path))


def _save_failed() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Could not save photo changes. Please try again."
    )


@router.get("", response_model=List[PhotoResponse])
async def list_photos(trip_id: Optional[str] = None, store: PlannerStore = Depends(get_planner_store)):
    """List photo metadata, optionally for one trip."""
    photos = store.load_photos()
    if trip_id:
        photos = [photo for photo in photos if photo.trip_id == trip_id]
    return [to_response(photo) for photo in photos]


@router.post("", response_model=PhotoResponse, status_code=status.HTTP_201_CREATED)
async def upload_photo(
    file: UploadFile = File(...),
    trip_id: Optional[str] = Form(None),
    store: PlannerStore = Depends(get_planner_store)
):
    """Upload an image (5MB max) and store its metadata."""
    if file.content_type not in settings.ALLOWED_IMAGE_TYPES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid file type: {file.content_type}"
        )

    content = await file.read()
    if len(content) > settings.MAX_UPLOAD_SIZE:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail="Photo too large. Please choose a file under 5MB."
        )

    photos = store.load_photos()
    photo = photo_service.add_photo(photos, trip_id, file.filename, content)
    store.save_photos(photos)
    return to_response(photo)


@router.get("/storage", response_model=StorageUsage)
async def get_storage_usage(store: PlannerStore = Depends(get_planner_store)):
    """Total and average photo size."""
    return photo_service.storage_usage(store.load_photos())


@router.get("/capacity", response_model=StorageCapacity)
async def get_storage_capacity(store: PlannerStore = Depends(get_planner_store)):
    """Estimated metadata capacity of the photo collection."""
    return photo_service.storage_capacity(store.load_photos())


@router.post("/cleanup", response_model=PhotoCleanupResult)
async def cleanup_old_photos(store: PlannerStore = Depends(get_planner_store)):
    """Remove photos older than 30 days."""
    kept, removed = photo_service.cleanup_old_photos(store.load_photos())
    if removed:
        if not store.save_photos(kept):
            raise _save_failed()
        photo_service.remove_files(removed)
        logger.info(f"Removed {len(removed)} old photos")
    freed = sum(photo.size for photo in removed)
    return {
        "removed": len(removed),
        "freed_bytes": freed,
        "freed": photo_service.format_file_size(freed),
    }


@router.get("/export", response_model=PhotoExport)
async def export_photos(store: PlannerStore = Depends(get_planner_store)):
    """Photo metadata export with trip names."""
    return photo_service.export_metadata(store.load_photos(), store.load_trips())


@router.put("/{photo_id}", response_model=PhotoResponse)
async def update_photo(
    photo_id: str,
    data: PhotoUpdate,
    store: PlannerStore = Depends(get_planner_store)
):
    """Edit a photo caption."""
    photos = store.load_photos()
    try:
        photo = photo_service.update_caption(photos, photo_id, data.caption)
    except PhotoNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    store.save_photos(photos)
    return to_response(photo)


@router.delete("/{photo_id}")
async def delete_photo(photo_id: str, store: PlannerStore = Depends(get_planner_store)):
    """Delete a photo and its file."""
    try:
        remaining, removed = photo_service.delete_photo(store.load_photos(), photo_id)
    except PhotoNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    # Files go only after the metadata no longer points at them
    if not store.save_photos(remaining):
        raise _save_failed()
    photo_service.remove_files([removed])
    return {"message": "Photo deleted successfully"}
