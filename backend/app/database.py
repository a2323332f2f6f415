"""
Database connections - MongoDB async (Motor).
"""

from motor.motor_asyncio import AsyncIOMotorClient

from app.config import MONGO_URL, DB_NAME, MONGO_TIMEOUT_MS, STUDENTS_COLLECTION


def create_client(mongo_url: str = MONGO_URL) -> AsyncIOMotorClient:
    """Create the async client. Connects lazily on first query."""
    return AsyncIOMotorClient(mongo_url, serverSelectionTimeoutMS=MONGO_TIMEOUT_MS)


def get_database(client: AsyncIOMotorClient, db_name: str = DB_NAME):
    return client[db_name]


def get_students_collection(db):
    return db[STUDENTS_COLLECTION]
