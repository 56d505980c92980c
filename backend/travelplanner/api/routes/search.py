"""
Global search route.
"""
from fastapi import APIRouter, Depends, Query
from travelplanner.schemas.search import SearchResults
from travelplanner.api.dependencies import get_planner_store
from travelplanner.services.storage import PlannerStore
from travelplanner.services.search_service import search_all

router = APIRouter(prefix="/search", tags=["search"])


@router.get("", response_model=SearchResults)
async def search(q: str = Query(""), store: PlannerStore = Depends(get_planner_store)):
    """Search trips, packing lists, documents and photos."""
    return search_all(
        q,
        store.load_trips(),
        store.load_packing_lists(),
        store.load_documents(),
        store.load_photos()
    )
