"""Pydantic models for the student registry"""

from .student import Student, StudentPayload
