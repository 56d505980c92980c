"""
Travel document routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from travelplanner.schemas.document import DocumentCreate, DocumentUpdate, DocumentResponse
from travelplanner.api.dependencies import get_planner_store
from travelplanner.services.storage import PlannerStore
from travelplanner.services import document_service
from travelplanner.services.document_service import DocumentNotFoundError

router = APIRouter(prefix="/documents", tags=["documents"])


@router.get("", response_model=List[DocumentResponse])
async def list_documents(store: PlannerStore = Depends(get_planner_store)):
    """List documents with expiry status, icon and trip name."""
    trips = store.load_trips()
    return [document_service.to_response(d, trips) for d in store.load_documents()]


@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def add_document(data: DocumentCreate, store: PlannerStore = Depends(get_planner_store)):
    """Add a document, optionally linked to a trip."""
    documents = store.load_documents()
    document = document_service.add_document(documents, data)
    store.save_documents(documents)
    return document_service.to_response(document, store.load_trips())


@router.put("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: str,
    data: DocumentUpdate,
    store: PlannerStore = Depends(get_planner_store)
):
    """Update a document."""
    documents = store.load_documents()
    try:
        document = document_service.update_document(documents, document_id, data)
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    store.save_documents(documents)
    return document_service.to_response(document, store.load_trips())


@router.delete("/{document_id}")
async def delete_document(document_id: str, store: PlannerStore = Depends(get_planner_store)):
    """Delete a document."""
    remaining, removed = document_service.delete_document(store.load_documents(), document_id)
    if not removed:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Document not found"
        )
    store.save_documents(remaining)
    return {"message": "Document deleted successfully"}
