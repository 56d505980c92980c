"""
Packing list routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from travelplanner.schemas.packing import (
    PackingListCreate, PackingListUpdate, PackingListResponse,
    PackingItem, PackingItemCreate, PackingItemUpdate
)
from travelplanner.api.dependencies import get_planner_store
from travelplanner.services.storage import PlannerStore
from travelplanner.services import packing_service
from travelplanner.services.packing_service import PackingListNotFoundError, PackingItemNotFoundError

router = APIRouter(prefix="/packing-lists", tags=["packing"])


def _not_found(error: LookupError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))


def _bad_request(error: ValueError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


@router.get("", response_model=List[PackingListResponse])
async def list_packing_lists(store: PlannerStore = Depends(get_planner_store)):
    """List packing lists with their trip and packed progress."""
    trips = store.load_trips()
    return [packing_service.to_response(p, trips) for p in store.load_packing_lists()]


@router.post("", response_model=PackingListResponse, status_code=status.HTTP_201_CREATED)
async def create_packing_list(data: PackingListCreate, store: PlannerStore = Depends(get_planner_store)):
    """Create an empty packing list."""
    packing_lists = store.load_packing_lists()
    packing_list = packing_service.create_packing_list(packing_lists, data)
    store.save_packing_lists(packing_lists)
    return packing_service.to_response(packing_list, store.load_trips())


@router.put("/{list_id}", response_model=PackingListResponse)
async def update_packing_list(
    list_id: str,
    data: PackingListUpdate,
    store: PlannerStore = Depends(get_planner_store)
):
    """Rename a packing list or change its trip and categories."""
    packing_lists = store.load_packing_lists()
    try:
        packing_list = packing_service.update_packing_list(packing_lists, list_id, data)
    except PackingListNotFoundError as e:
        raise _not_found(e)
    except ValueError as e:
        raise _bad_request(e)
    store.save_packing_lists(packing_lists)
    return packing_service.to_response(packing_list, store.load_trips())


@router.delete("/{list_id}")
async def delete_packing_list(list_id: str, store: PlannerStore = Depends(get_planner_store)):
    """Delete a packing list."""
    remaining, removed = packing_service.delete_packing_list(store.load_packing_lists(), list_id)
    if not removed:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Packing list not found"
        )
    store.save_packing_lists(remaining)
    return {"message": "Packing list deleted successfully"}


@router.post("/{list_id}/items", response_model=PackingItem, status_code=status.HTTP_201_CREATED)
async def add_item(
    list_id: str,
    data: PackingItemCreate,
    store: PlannerStore = Depends(get_planner_store)
):
    """Add an unpacked item."""
    packing_lists = store.load_packing_lists()
    try:
        packing_list = packing_service.find_packing_list(packing_lists, list_id)
        item = packing_service.add_item(packing_list, data.name)
    except PackingListNotFoundError as e:
        raise _not_found(e)
    except ValueError as e:
        raise _bad_request(e)
    store.save_packing_lists(packing_lists)
    return item


@router.post("/{list_id}/items/{item_id}/toggle", response_model=PackingItem)
async def toggle_item(list_id: str, item_id: str, store: PlannerStore = Depends(get_planner_store)):
    """Flip an item between packed and unpacked."""
    packing_lists = store.load_packing_lists()
    try:
        packing_list = packing_service.find_packing_list(packing_lists, list_id)
        item = packing_service.toggle_item(packing_list, item_id)
    except (PackingListNotFoundError, PackingItemNotFoundError) as e:
        raise _not_found(e)
    store.save_packing_lists(packing_lists)
    return item


@router.put("/{list_id}/items/{item_id}", response_model=PackingItem)
async def update_item(
    list_id: str,
    item_id: str,
    data: PackingItemUpdate,
    store: PlannerStore = Depends(get_planner_store)
):
    """Rename an item or set its packed state."""
    packing_lists = store.load_packing_lists()
    try:
        packing_list = packing_service.find_packing_list(packing_lists, list_id)
        item = packing_service.update_item(packing_list, item_id, data.name, data.packed)
    except (PackingListNotFoundError, PackingItemNotFoundError) as e:
        raise _not_found(e)
    except ValueError as e:
        raise _bad_request(e)
    store.save_packing_lists(packing_lists)
    return item


@router.delete("/{list_id}/items/{item_id}")
async def remove_item(list_id: str, item_id: str, store: PlannerStore = Depends(get_planner_store)):
    """Remove an item from a packing list."""
    packing_lists = store.load_packing_lists()
    try:
        packing_list = packing_service.find_packing_list(packing_lists, list_id)
    except PackingListNotFoundError as e:
        raise _not_found(e)
    if not packing_service.remove_item(packing_list, item_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Item not found"
        )
    store.save_packing_lists(packing_lists)
    return {"message": "Item deleted successfully"}
