"""
User Directory Service - login, registration and profile updates.

Routes stay thin: this service checks required fields, hashes
passwords and translates store failures into application errors.
"""
from typing import Any, Dict, Optional

from pymongo.errors import PyMongoError

from edupilot.core.exceptions import (
    InternalError,
    InvalidInput,
    NotFound,
    NotFoundOrUnchanged,
    Unauthorized,
)
from edupilot.core.logging_config import get_logger
from edupilot.core.security import hash_password
from edupilot.database.users import UserRepository
from edupilot.models.user import RegisterRequest, UpdateUserRequest

logger = get_logger(__name__)

REQUIRED_REGISTRATION_FIELDS = ("name", "email", "password", "language")
OPTIONAL_PROFILE_FIELDS = ("school", "grade", "performance", "location", "ambition", "hobbies")
UPDATABLE_PROFILE_FIELDS = (
    "education",
    "location",
    "grade",
    "ambition",
    "hobbies",
    "learning_capacities",
    "interests",
)


class UserDirectoryService:
    """
    CRUD-style operations on the user collection.

    Example:
        >>> service = UserDirectoryService(UserRepository(db.users))
        >>> user_id = service.register(RegisterRequest(
        ...     name="Ana", email="ana@x.com", password="secret", language="en"))
        >>> service.authenticate("ana@x.com", "secret") == user_id
        True
    """

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def authenticate(self, email: Optional[str], password: Optional[str]) -> str:
        """
        Match email and password against a stored user.

        The password is hashed exactly as at registration before
        the lookup, so the stored digest is compared with a digest.

        Returns:
            The user's id as a string.

        Raises:
            Unauthorized: No user has this email/password pair.
            InternalError: The store query failed.
        """
        if not email or not password:
            raise Unauthorized("Invalid username or password")

        try:
            user = self.repository.find_by_credentials(email, hash_password(password))
        except PyMongoError as e:
            logger.error(f"Login lookup failed: {e}")
            raise InternalError("An error occurred during login") from e

        if user is None:
            raise Unauthorized("Invalid username or password")

        return str(user["_id"])

    def register(self, request: RegisterRequest) -> str:
        """
        Create a new user.

        Duplicate emails are not checked; two registrations with the
        same email create two documents.

        Returns:
            The new user's id as a string.

        Raises:
            InvalidInput: A required field is missing or empty.
            InternalError: The insert failed.
        """
        if not all(getattr(request, field) for field in REQUIRED_REGISTRATION_FIELDS):
            raise InvalidInput("Invalid data. Required fields are missing.")

        document: Dict[str, Any] = {
            "name": request.name,
            "email": request.email,
            "password": hash_password(request.password),
            "language": request.language,
        }
        for field in OPTIONAL_PROFILE_FIELDS:
            value = getattr(request, field)
            # An empty list is a supplied value, not a missing one
            document[field] = "" if value is None or value == "" else value
        document["interests"] = []

        try:
            user_id = self.repository.insert(document)
        except PyMongoError as e:
            logger.error(f"Error registering user: {e}")
            raise InternalError("Failed to register user.") from e

        logger.info(f"User registered: id={user_id}")
        return user_id

    def update_profile(self, request: UpdateUserRequest) -> None:
        """
        Overwrite the updatable profile fields of the user with this email.

        Every field in UPDATABLE_PROFILE_FIELDS is written; the ones the
        request leaves out are stored as None. This is a replacement of
        the field set, not a merge.

        Raises:
            NotFoundOrUnchanged: Zero documents were modified, either
                because no user has this email or because the stored
                values already equal the new ones.
            InternalError: The update failed.
        """
        if not request.email:
            raise NotFoundOrUnchanged("User not found or no changes applied")

        fields = {field: getattr(request, field) for field in UPDATABLE_PROFILE_FIELDS}

        try:
            modified = self.repository.overwrite_profile(request.email, fields)
        except PyMongoError as e:
            logger.error(f"Profile update failed: {e}")
            raise InternalError("An error occurred during the update") from e

        if modified == 0:
            raise NotFoundOrUnchanged("User not found or no changes applied")

    def get_profile(self, email: str) -> Dict[str, Any]:
        """
        Load a stored user by email.

        Raises:
            NotFound: No user has this email.
            InternalError: The store query failed.
        """
        try:
            user = self.repository.find_by_email(email)
        except PyMongoError as e:
            logger.error(f"Profile lookup failed: {e}")
            raise InternalError("An error occurred while loading the user", details=str(e)) from e

        if user is None:
            raise NotFound("User not found")

        return user
