"""
User Repository - the credential store.

Thin wrapper around the users collection. It knows the document
shape and the queries, nothing about HTTP or validation. pymongo
errors are left to propagate to the service layer.
"""
from typing import Any, Dict, Optional

from edupilot.core.logging_config import LoggerMixin


class UserRepository(LoggerMixin):
    """
    Find, insert and overwrite user documents.

    Args:
        collection: A pymongo Collection, or anything exposing
                    find_one / insert_one / update_one.
    """

    def __init__(self, collection):
        self.collection = collection

    def find_by_credentials(self, email: str, password_hash: str) -> Optional[Dict[str, Any]]:
        return self.collection.find_one({"email": email, "password": password_hash})

    def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        return self.collection.find_one({"email": email})

    def insert(self, document: Dict[str, Any]) -> str:
        """Insert a new user and return its id as a string."""
        result = self.collection.insert_one(document)
        self.logger.debug(f"Inserted user id={result.inserted_id}")
        return str(result.inserted_id)

    def overwrite_profile(self, email: str, fields: Dict[str, Any]) -> int:
        """
        $set the given fields on the user with this email.

        Returns:
            Number of documents actually modified (0 when nothing matched
            or the stored values were already equal).
        """
        result = self.collection.update_one({"email": email}, {"$set": fields})
        self.logger.debug(
            f"Profile overwrite: matched={result.matched_count} "
            f"modified={result.modified_count}"
        )
        return result.modified_count
