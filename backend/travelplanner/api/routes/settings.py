"""
Settings and data management routes.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from travelplanner.schemas.settings import UserSettings, SettingsUpdate
from travelplanner.api.dependencies import get_planner_store
from travelplanner.services.storage import PlannerStore
from travelplanner.services import export_service

router = APIRouter(tags=["settings"])


@router.get("/settings", response_model=UserSettings)
async def get_settings(store: PlannerStore = Depends(get_planner_store)):
    """Get currency and theme."""
    return store.load_settings()


@router.put("/settings", response_model=UserSettings)
async def update_settings(data: SettingsUpdate, store: PlannerStore = Depends(get_planner_store)):
    """Change currency and/or theme."""
    current = store.load_settings()
    updated = current.model_copy(update=data.model_dump(exclude_unset=True, exclude_none=True))
    store.save_settings(updated)
    return updated


@router.get("/data/export")
async def export_data(store: PlannerStore = Depends(get_planner_store)):
    """Download trips and settings as a JSON backup."""
    backup = export_service.build_backup(store.load_trips(), store.load_settings())
    return JSONResponse(
        content=backup.model_dump(mode="json"),
        headers={"Content-Disposition": f'attachment; filename="{export_service.backup_filename()}"'}
    )


@router.post("/data/clear")
async def clear_data(store: PlannerStore = Depends(get_planner_store)):
    """Empty trips, packing lists and documents and reset settings."""
    store.clear_all()
    return {"message": "All data cleared successfully!"}


@router.post("/data/sample")
async def load_sample_data(store: PlannerStore = Depends(get_planner_store)):
    """Replace trips, packing lists and documents with the sample data."""
    store.load_sample()
    return {"message": "Sample data loaded successfully!"}
