"""
User Routes - registration, login and profile updates.

Endpoints:
- POST /login: Match email and password
- POST /register: Create a user
- POST /update_user: Overwrite profile fields
"""
from fastapi import APIRouter, Depends, status

from edupilot.api.dependencies import get_user_service
from edupilot.core.logging_config import get_logger
from edupilot.models.user import (
    AuthResponse,
    ErrorResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UpdateUserRequest,
)
from edupilot.services.user_service import UserDirectoryService

logger = get_logger(__name__)

router = APIRouter(
    tags=["Users"],
    responses={500: {"model": ErrorResponse, "description": "User store failure"}},
)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Log in with email and password",
)
def login(
    request: LoginRequest,
    users: UserDirectoryService = Depends(get_user_service),
) -> AuthResponse:
    user_id = users.authenticate(request.email, request.password)
    return AuthResponse(message="Login successful", userId=user_id)


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Register a new user",
)
def register(
    request: RegisterRequest,
    users: UserDirectoryService = Depends(get_user_service),
) -> AuthResponse:
    """
    Create a user. name, email, password and language are required;
    the password is stored as its SHA-256 hex digest.
    """
    user_id = users.register(request)
    return AuthResponse(message="User registered successfully", userId=user_id)


@router.post(
    "/update_user",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Overwrite a user's profile fields",
)
def update_user(
    request: UpdateUserRequest,
    users: UserDirectoryService = Depends(get_user_service),
) -> MessageResponse:
    """
    Replace education, location, grade, ambition, hobbies,
    learning_capacities and interests. Fields left out are cleared.

    A 404 means no document was modified: the email is unknown or
    the values were already stored.
    """
    users.update_profile(request)
    return MessageResponse(message="User information updated successfully")
