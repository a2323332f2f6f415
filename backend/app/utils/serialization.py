"""MongoDB document serialization utilities."""

from typing import Optional

from bson import ObjectId

from app.models.student import Student, StudentPayload


def id_filter(student_id: str) -> dict:
    """Build an _id filter; non-ObjectId strings are matched verbatim."""
    if ObjectId.is_valid(student_id):
        return {"_id": ObjectId(student_id)}
    return {"_id": student_id}


def student_to_doc(payload: StudentPayload) -> dict:
    """Fields written to the store. Never includes _id."""
    return {
        "name": payload.name,
        "email": payload.email,
    }


def student_from_doc(doc: Optional[dict]) -> Optional[Student]:
    """Convert a students document to a Student, mapping _id to id."""
    if doc is None:
        return None
    return Student(
        id=str(doc["_id"]),
        name=doc.get("name"),
        email=doc.get("email"),
    )
