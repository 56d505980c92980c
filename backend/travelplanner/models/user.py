"""
User model for authentication and user management.
"""
from sqlalchemy import Column, String, Boolean
from sqlalchemy.orm import relationship
from travelplanner.db.base import BaseModel


class User(BaseModel):
    """User model identified by a unique email address."""
    __tablename__ = "users"

    email = Column(String(100), unique=True, nullable=False, index=True)
    display_name = Column(String(120), nullable=False)
    hashed_password = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    # Relationships
    blobs = relationship("StoredBlob", back_populates="owner", cascade="all, delete-orphan")
    document_records = relationship("DocumentRecord", back_populates="owner", cascade="all, delete-orphan")
