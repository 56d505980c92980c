"""
Global search across trips, packing lists, documents and photos.
"""
from typing import Dict, List, Optional
from travelplanner.schemas.trip import Trip
from travelplanner.schemas.packing import PackingList
from travelplanner.schemas.document import TravelDocument
from travelplanner.schemas.photo import Photo
from travelplanner.services.aggregation import find_trip

MIN_QUERY_LENGTH = 2
PREFIX_SCORE = 10
CONTAINS_SCORE = 5


def field_score(value: Optional[str], term: str) -> int:
    """10 when the field starts with the term, 5 when it only contains it."""
    text = (value or "").lower()
    if text.startswith(term):
        return PREFIX_SCORE
    if term in text:
        return CONTAINS_SCORE
    return 0


def _hit(id: str, kind: str, title: str, fields: Dict[str, str], term: str, trip_name: Optional[str]):
    matches = []
    relevance = 0
    for field, value in fields.items():
        score = field_score(value, term)
        if score:
            matches.append(field)
            relevance += score
    if not matches:
        return None
    return {
        "id": id,
        "kind": kind,
        "title": title,
        "trip_name": trip_name,
        "matches": matches,
        "relevance": relevance,
    }


def _ranked(hits: List[Optional[dict]]) -> List[dict]:
    found = [hit for hit in hits if hit]
    found.sort(key=lambda hit: hit["relevance"], reverse=True)
    return found


def search_all(
    query: str,
    trips: List[Trip],
    packing_lists: List[PackingList],
    documents: List[TravelDocument],
    photos: List[Photo]
) -> Dict:
    """
    Case-insensitive search over every section.

    Queries shorter than two characters (after trimming) return no hits.
    """
    term = (query or "").strip().lower()
    results = {"query": query, "total": 0, "trips": [], "packing_lists": [], "documents": [], "photos": []}
    if len(term) < MIN_QUERY_LENGTH:
        return results

    def trip_name(trip_id: Optional[str], missing: str) -> str:
        trip = find_trip(trips, trip_id)
        return trip.name if trip else missing

    results["trips"] = _ranked([
        _hit(trip.id, "trip", trip.name, {
            "name": trip.name,
            "destination": trip.destination,
            "type": trip.type,
            "notes": trip.notes,
        }, term, trip.name)
        for trip in trips
    ])
    results["packing_lists"] = _ranked([
        _hit(item.id, "packing_list", item.name, {
            "name": item.name,
            "categories": ",".join(item.categories),
        }, term, trip_name(item.trip_id, "Unknown Trip"))
        for item in packing_lists
    ])
    results["documents"] = _ranked([
        _hit(doc.id, "document", doc.name, {
            "name": doc.name,
            "type": doc.type,
            "notes": doc.notes,
        }, term, trip_name(doc.trip_id, "General"))
        for doc in documents
    ])
    results["photos"] = _ranked([
        _hit(photo.id, "photo", photo.caption or photo.file_name, {
            "caption": photo.caption,
            "file_name": photo.file_name,
        }, term, trip_name(photo.trip_id, "Unknown Trip"))
        for photo in photos
    ])
    results["total"] = sum(len(results[section]) for section in ("trips", "packing_lists", "documents", "photos"))
    return results
