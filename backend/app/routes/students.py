"""Student CRUD routes."""

from fastapi import APIRouter, Depends, Response
from typing import List

from app.config import STAGE
from app.deps import get_student_service
from app.models.student import Student, StudentPayload
from app.services.students import StudentService

router = APIRouter(prefix="/students", tags=["students"])


def _empty():
    # Misses answer 200 with a zero-length body, not 404
    return Response(status_code=200)


@router.get("/health")
async def health_check():
    """Liveness plus the deployment stage"""
    return {"status": "UP", "stage": STAGE}


@router.get("", response_model=List[Student])
async def get_all_students(service: StudentService = Depends(get_student_service)):
    """Get all students"""
    return await service.list_all()


@router.post("", response_model=Student)
async def create_student(payload: StudentPayload, service: StudentService = Depends(get_student_service)):
    """Create a student; the store assigns the id"""
    return await service.create(payload)


@router.get("/{student_id}", response_model=Student)
async def get_student(student_id: str, service: StudentService = Depends(get_student_service)):
    """Get a student by id, empty body if missing"""
    student = await service.get(student_id)
    if student is None:
        return _empty()
    return student


@router.put("/{student_id}", response_model=Student)
async def update_student(student_id: str, payload: StudentPayload,
                         service: StudentService = Depends(get_student_service)):
    """Overwrite name and email, keeping the id"""
    student = await service.update(student_id, payload)
    if student is None:
        return _empty()
    return student


@router.delete("/{student_id}")
async def delete_student(student_id: str, service: StudentService = Depends(get_student_service)):
    """Delete a student. Succeeds whether or not it existed."""
    await service.delete(student_id)
    return _empty()
