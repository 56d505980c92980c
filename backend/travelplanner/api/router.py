"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from travelplanner.api.routes import (
    auth, users, trips, dashboard, budget, packing,
    documents, photos, calendar, templates, settings, search
)

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(trips.router)
api_router.include_router(dashboard.router)
api_router.include_router(budget.router)
api_router.include_router(packing.router)
api_router.include_router(documents.router)
api_router.include_router(photos.router)
api_router.include_router(calendar.router)
api_router.include_router(templates.router)
api_router.include_router(settings.router)
api_router.include_router(search.router)
