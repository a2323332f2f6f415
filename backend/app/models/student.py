"""Student-related Pydantic models"""

from pydantic import BaseModel, ConfigDict
from typing import Optional


class Student(BaseModel):
    model_config = ConfigDict(extra="ignore")
    id: Optional[str] = None  # store-assigned, None until inserted
    name: Optional[str] = None  # missing fields in stored documents come back as null
    email: Optional[str] = None


class StudentPayload(BaseModel):
    """Request body for create/update. A client-supplied id is dropped."""
    model_config = ConfigDict(extra="ignore")
    name: str
    email: str
