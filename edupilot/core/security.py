"""Password hashing shared by registration and login."""
import hashlib


def hash_password(plaintext: str) -> str:
    """Return the hex SHA-256 digest of a plaintext password."""
    return hashlib.sha256(plaintext.encode("utf-8")).hexdigest()
