"""
Trip template routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List, Optional
from datetime import date
from travelplanner.schemas.template import (
    TripTemplate, TemplateApplication, TemplateGenerateRequest, CustomTemplateCreate
)
from travelplanner.api.dependencies import get_planner_store
from travelplanner.services.storage import PlannerStore
from travelplanner.services import template_service

router = APIRouter(prefix="/templates", tags=["templates"])


def all_templates(store: PlannerStore) -> List[TripTemplate]:
    """Built-in presets followed by the user's custom templates."""
    return template_service.get_builtin_templates() + store.load_custom_templates()


@router.get("", response_model=List[TripTemplate])
async def list_templates(
    search: Optional[str] = None,
    type: Optional[str] = None,
    store: PlannerStore = Depends(get_planner_store)
):
    """List templates matching an optional search term and trip type."""
    return template_service.filter_templates(all_templates(store), search, type)


@router.post("/{template_id}/apply", response_model=TemplateApplication)
async def apply_template(template_id: str, store: PlannerStore = Depends(get_planner_store)):
    """Trip form values for a template, starting today."""
    template = template_service.find_template(all_templates(store), template_id)
    if not template:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Template not found"
        )
    return template_service.apply_template(template, date.today())


@router.post("/generate", response_model=TripTemplate)
async def generate_template(request: TemplateGenerateRequest):
    """Generate a template from destination, duration, budget, type and interests."""
    return template_service.generate_template(request)


@router.post("/custom", response_model=TripTemplate, status_code=status.HTTP_201_CREATED)
async def save_custom_template(data: CustomTemplateCreate, store: PlannerStore = Depends(get_planner_store)):
    """Save a custom or generated template."""
    templates = store.load_custom_templates()
    template = template_service.build_custom_template(data)
    templates.append(template)
    store.save_custom_templates(templates)
    return template
