"""
Key-value blob model backing the planner's load-all/save-all collections.
"""
from sqlalchemy import Column, String, Text, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from travelplanner.db.base import BaseModel


class StoredBlob(BaseModel):
    """One JSON-serialized collection stored under a fixed key per user."""
    __tablename__ = "stored_blobs"

    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    key = Column(String(100), nullable=False)
    value = Column(Text, nullable=False)  # JSON text, replaced as a whole on every save

    # Relationships
    owner = relationship("User", back_populates="blobs")

    # Unique constraint: one value per key per user
    __table_args__ = (
        UniqueConstraint('owner_id', 'key', name='uq_owner_blob_key'),
    )
