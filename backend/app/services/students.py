"""
Student data access - one Motor call per operation on the students collection.
"""

from contextlib import contextmanager
from typing import List, Optional

from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from app.config import logger
from app.errors import StoreUnavailableError
from app.models.student import Student, StudentPayload
from app.utils.serialization import id_filter, student_from_doc, student_to_doc


@contextmanager
def _store_call(operation: str):
    try:
        yield
    except PyMongoError as e:
        raise StoreUnavailableError(operation, e) from e


class StudentService:
    """CRUD over a single students collection.

    The collection is injected so the service can run against a live
    Motor collection or an in-memory fake with the same async methods.
    """

    def __init__(self, collection):
        self.collection = collection

    async def list_all(self) -> List[Student]:
        with _store_call("list"):
            docs = await self.collection.find({}).to_list(None)
        return [student_from_doc(doc) for doc in docs]

    async def create(self, payload: StudentPayload) -> Student:
        doc = student_to_doc(payload)
        with _store_call("create"):
            result = await self.collection.insert_one(doc)
        logger.info(f"Created student {result.inserted_id}")
        return Student(id=str(result.inserted_id), name=payload.name, email=payload.email)

    async def get(self, student_id: str) -> Optional[Student]:
        with _store_call("get"):
            doc = await self.collection.find_one(id_filter(student_id))
        return student_from_doc(doc)

    async def update(self, student_id: str, payload: StudentPayload) -> Optional[Student]:
        """Replace name and email. Returns None, inserting nothing, on a miss."""
        with _store_call("update"):
            doc = await self.collection.find_one_and_update(
                id_filter(student_id),
                {"$set": student_to_doc(payload)},
                return_document=ReturnDocument.AFTER
            )
        if doc is None:
            logger.info(f"Update skipped, no student {student_id}")
        return student_from_doc(doc)

    async def delete(self, student_id: str) -> bool:
        """Remove the student if present. Returns whether a document was deleted."""
        with _store_call("delete"):
            result = await self.collection.delete_one(id_filter(student_id))
        if result.deleted_count:
            logger.info(f"Deleted student {student_id}")
        return result.deleted_count > 0
