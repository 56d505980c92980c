"""
Travel document service.
"""
from datetime import date, timedelta
from typing import List, Optional, Tuple
from travelplanner.schemas.document import TravelDocument, DocumentCreate, DocumentUpdate
from travelplanner.schemas.trip import Trip
from travelplanner.core.utils import generate_id, sanitize_input
from travelplanner.services.aggregation import find_trip

EXPIRY_WARNING_DAYS = 30

DOCUMENT_ICONS = {
    "passport": "passport",
    "visa": "stamp",
    "insurance": "shield-alt",
    "ticket": "ticket-alt",
    "reservation": "bed",
    "other": "file",
}


class DocumentNotFoundError(LookupError):
    pass


def document_icon(doc_type: str) -> str:
    return DOCUMENT_ICONS.get((doc_type or "").lower(), "file")


def expiry_status(document: TravelDocument, today: Optional[date] = None) -> Tuple[bool, bool]:
    """
    Return (expired, expiring_soon) for a document.

    A document with no expiry date is neither. Expiring soon means the expiry
    falls within the next 30 days and has not passed yet.
    """
    if not document.expiry_date:
        return False, False
    today = today or date.today()
    expired = document.expiry_date < today
    expiring_soon = not expired and document.expiry_date < today + timedelta(days=EXPIRY_WARNING_DAYS)
    return expired, expiring_soon


def trip_label(trips: List[Trip], trip_id: Optional[str]) -> str:
    """Name of the linked trip, or "General" when none or it no longer exists."""
    trip = find_trip(trips, trip_id)
    return trip.name if trip else "General"


def find_document(documents: List[TravelDocument], document_id: str) -> TravelDocument:
    document = next((d for d in documents if d.id == document_id), None)
    if not document:
        raise DocumentNotFoundError("Document not found")
    return document


def add_document(documents: List[TravelDocument], data: DocumentCreate) -> TravelDocument:
    document = TravelDocument(
        id=generate_id(),
        name=data.name,
        type=data.type or "other",
        trip_id=data.trip_id,
        expiry_date=data.expiry_date,
        notes=data.notes
    )
    documents.append(document)
    return document


def update_document(documents: List[TravelDocument], document_id: str, data: DocumentUpdate) -> TravelDocument:
    document = find_document(documents, document_id)
    changes = data.model_dump(exclude_unset=True)
    if "name" in changes:
        name = sanitize_input(changes["name"])
        if not name:
            raise ValueError("Please enter a document name")
        document.name = name
    if changes.get("type"):
        document.type = sanitize_input(changes["type"])
    if "notes" in changes:
        document.notes = sanitize_input(changes["notes"] or "")
    if "trip_id" in changes:
        document.trip_id = changes["trip_id"] or None
    if "expiry_date" in changes:
        document.expiry_date = changes["expiry_date"]
    return document


def delete_document(documents: List[TravelDocument], document_id: str) -> Tuple[List[TravelDocument], bool]:
    remaining = [d for d in documents if d.id != document_id]
    return remaining, len(remaining) != len(documents)


def to_response(document: TravelDocument, trips: List[Trip], today: Optional[date] = None) -> dict:
    expired, expiring_soon = expiry_status(document, today)
    return {
        **document.model_dump(),
        "trip_name": trip_label(trips, document.trip_id),
        "expired": expired,
        "expiring_soon": expiring_soon,
        "icon": document_icon(document.type),
    }
