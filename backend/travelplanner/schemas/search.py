"""
Pydantic schemas for global search.
"""
from pydantic import BaseModel
from typing import List, Optional


class SearchHit(BaseModel):
    """A record that matched the query."""
    id: str
    kind: str  # trip, packing_list, document, photo
    title: str
    trip_name: Optional[str] = None
    matches: List[str]
    relevance: int


class SearchResults(BaseModel):
    """Hits grouped by section, each sorted by relevance."""
    query: str
    total: int
    trips: List[SearchHit] = []
    packing_lists: List[SearchHit] = []
    documents: List[SearchHit] = []
    photos: List[SearchHit] = []
