"""
Document-database model: one row per record, grouped into named collections.
"""
from sqlalchemy import Column, String, ForeignKey, Integer, JSON, UniqueConstraint
from sqlalchemy.orm import relationship
from travelplanner.db.base import BaseModel


class DocumentRecord(BaseModel):
    """A single document inside a per-user collection (e.g. photo metadata)."""
    __tablename__ = "document_records"

    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    collection = Column(String(100), nullable=False, index=True)
    doc_id = Column(String(64), nullable=False)
    data = Column(JSON, nullable=False)

    # Relationships
    owner = relationship("User", back_populates="document_records")

    __table_args__ = (
        UniqueConstraint('owner_id', 'collection', 'doc_id', name='uq_owner_collection_doc'),
    )
