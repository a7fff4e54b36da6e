"""
Request and Response models for the user endpoints.

Every request field is optional at the schema level: presence is
checked by the service layer so that a missing field is answered
with the documented 400/401/404 body instead of a 422.
"""
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


Hobbies = Union[str, List[str]]


class LoginRequest(BaseModel):
    """Request model for /login."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    email: Optional[str] = Field(default=None, examples=["ana@x.com"])
    password: Optional[str] = Field(
        default=None,
        description="Plaintext password; hashed before comparison"
    )


class RegisterRequest(BaseModel):
    """
    Request model for /register.

    name, email, password and language are required (non-empty);
    the remaining profile attributes default to ''.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    language: Optional[str] = Field(
        default=None,
        description="Preferred language for AI responses",
        examples=["en"]
    )
    school: Optional[str] = None
    grade: Optional[str] = None
    performance: Optional[str] = None
    location: Optional[str] = None
    ambition: Optional[str] = None
    hobbies: Optional[Hobbies] = None


class UpdateUserRequest(BaseModel):
    """
    Request model for /update_user.

    The profile fields form a fixed set that is overwritten as a whole:
    a field left out of the request is stored as null.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    email: Optional[str] = None
    education: Optional[str] = None
    location: Optional[str] = None
    grade: Optional[str] = None
    ambition: Optional[str] = None
    hobbies: Optional[Hobbies] = None
    learning_capacities: Optional[str] = None
    interests: Optional[Union[List[str], str]] = None


class AuthResponse(BaseModel):
    """Response for /login and /register."""
    message: str
    userId: str


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Standard error response model."""
    error: str
    details: Optional[str] = None
