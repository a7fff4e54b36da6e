"""
Models module - Pydantic schemas for requests and responses.
"""
from edupilot.models.ai import (
    AnalyzeImageRequest,
    AnalyzeImageResponse,
    CareerRole,
    ChatRequest,
    ChatResponse,
    HealthResponse,
    RoadmapRequest,
    RoadmapResponse,
)
from edupilot.models.user import (
    AuthResponse,
    ErrorResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UpdateUserRequest,
)

__all__ = [
    "AnalyzeImageRequest",
    "AnalyzeImageResponse",
    "AuthResponse",
    "CareerRole",
    "ChatRequest",
    "ChatResponse",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
    "RoadmapRequest",
    "RoadmapResponse",
    "UpdateUserRequest",
]
