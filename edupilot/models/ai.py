"""
Request and Response models for the AI endpoints.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """
    Request model for /chat.

    Attributes:
        message: The question to answer.
        language: Natural language the answer should be written in.
    """
    message: str = Field(default="", examples=["What is photosynthesis?"])
    language: str = Field(default="", examples=["Spanish"])


class ChatResponse(BaseModel):
    response: str = Field(..., description="The model's generated reply")


class RoadmapRequest(BaseModel):
    """Request model for /roadmap-generator."""
    email: Optional[str] = None
    input_text: Optional[str] = Field(
        default=None,
        description="Field of interest the career roles should relate to",
        examples=["data science"]
    )


class CareerRole(BaseModel):
    """
    One career suggestion parsed from the model output.

    Derived per request; never stored.
    """
    title: str
    description: str
    time_to_complete: str
    URL: str = ""


class RoadmapResponse(BaseModel):
    career_roles: List[CareerRole] = Field(default_factory=list)


class AnalyzeImageRequest(BaseModel):
    """Request model for /analyze-image."""
    imageData: Optional[str] = Field(
        default=None,
        description="Image as a data URI (data:image/png;base64,...) or a remote URL"
    )


class AnalyzeImageResponse(BaseModel):
    analysis: str


class HealthResponse(BaseModel):
    """Response model for the /health endpoint."""
    status: str = Field(default="healthy")
    version: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)
