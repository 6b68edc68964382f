"""
Pydantic models for API requests and responses
"""
from pydantic import BaseModel
from typing import Optional

class AskRequest(BaseModel):
    question: Optional[str] = None

class AskResponse(BaseModel):
    answer: str

class UploadResponse(BaseModel):
    status: str
    chunks_count: int
    filename: Optional[str] = None

class ErrorResponse(BaseModel):
    error: str

class HealthResponse(BaseModel):
    status: str
    has_document: bool
    chunks_count: int
    filename: Optional[str] = None
