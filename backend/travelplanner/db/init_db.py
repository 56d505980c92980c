"""
Database initialization script.
"""
from travelplanner.db.session import init_db

# Import all models so SQLAlchemy can register them
from travelplanner.models import User, StoredBlob, DocumentRecord  # noqa: F401

if __name__ == "__main__":
    print("Initializing database...")
    init_db()
    print("Database initialized successfully!")
