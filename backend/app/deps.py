"""
FastAPI dependencies - database handle and student service.
"""

from fastapi import Request, Depends

from app.database import get_students_collection
from app.services.students import StudentService


def get_db(request: Request):
    """Database opened by the app lifespan."""
    return request.app.state.db


def get_student_service(db=Depends(get_db)) -> StudentService:
    return StudentService(get_students_collection(db))
