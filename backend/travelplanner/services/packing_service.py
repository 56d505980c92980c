"""
Packing list service.
"""
from typing import List, Optional, Tuple
from travelplanner.schemas.packing import (
    PackingList, PackingListCreate, PackingListUpdate, PackingItem
)
from travelplanner.schemas.trip import Trip
from travelplanner.core.utils import generate_id, sanitize_input
from travelplanner.services.aggregation import find_trip


class PackingListNotFoundError(LookupError):
    pass


class PackingItemNotFoundError(LookupError):
    pass


def find_packing_list(packing_lists: List[PackingList], list_id: str) -> PackingList:
    packing_list = next((p for p in packing_lists if p.id == list_id), None)
    if not packing_list:
        raise PackingListNotFoundError("Packing list not found")
    return packing_list


def _find_item(packing_list: PackingList, item_id: str) -> PackingItem:
    item = next((i for i in packing_list.items if i.id == item_id), None)
    if not item:
        raise PackingItemNotFoundError("Item not found")
    return item


def create_packing_list(packing_lists: List[PackingList], data: PackingListCreate) -> PackingList:
    packing_list = PackingList(
        id=generate_id(),
        name=data.name,
        trip_id=data.trip_id or None,
        categories=data.categories,
        items=[]
    )
    packing_lists.append(packing_list)
    return packing_list


def update_packing_list(packing_lists: List[PackingList], list_id: str, data: PackingListUpdate) -> PackingList:
    """Change the name, trip or categories; items are kept."""
    packing_list = find_packing_list(packing_lists, list_id)
    if data.name is not None:
        name = sanitize_input(data.name)
        if not name:
            raise ValueError("Please enter a packing list name")
        packing_list.name = name
    if "trip_id" in data.model_fields_set:
        packing_list.trip_id = data.trip_id or None
    if data.categories is not None:
        packing_list.categories = data.categories
    return packing_list


def delete_packing_list(packing_lists: List[PackingList], list_id: str) -> Tuple[List[PackingList], bool]:
    remaining = [p for p in packing_lists if p.id != list_id]
    return remaining, len(remaining) != len(packing_lists)


def add_item(packing_list: PackingList, name: str) -> PackingItem:
    """Append an unpacked item. Blank names are rejected."""
    name = sanitize_input(name)
    if not name:
        raise ValueError("Please enter an item name")
    item = PackingItem(id=generate_id(), name=name, packed=False)
    packing_list.items.append(item)
    return item


def toggle_item(packing_list: PackingList, item_id: str) -> PackingItem:
    item = _find_item(packing_list, item_id)
    item.packed = not item.packed
    return item


def update_item(
    packing_list: PackingList,
    item_id: str,
    name: Optional[str] = None,
    packed: Optional[bool] = None
) -> PackingItem:
    item = _find_item(packing_list, item_id)
    if name is not None:
        name = sanitize_input(name)
        if not name:
            raise ValueError("Please enter an item name")
        item.name = name
    if packed is not None:
        item.packed = packed
    return item


def remove_item(packing_list: PackingList, item_id: str) -> bool:
    remaining = [i for i in packing_list.items if i.id != item_id]
    removed = len(remaining) != len(packing_list.items)
    packing_list.items = remaining
    return removed


def progress(packing_list: PackingList) -> Tuple[int, int]:
    """(packed, total) item counts."""
    packed = sum(1 for item in packing_list.items if item.packed)
    return packed, len(packing_list.items)


def to_response(packing_list: PackingList, trips: List[Trip]) -> dict:
    packed, total = progress(packing_list)
    trip = find_trip(trips, packing_list.trip_id)
    return {
        **packing_list.model_dump(),
        "trip_name": trip.name if trip else None,
        "packed_count": packed,
        "total_count": total,
    }
