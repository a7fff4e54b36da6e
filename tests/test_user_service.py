import hashlib

import pytest

from edupilot.core.exceptions import InternalError, InvalidInput, NotFound, NotFoundOrUnchanged, Unauthorized
from edupilot.core.security import hash_password
from edupilot.models.user import RegisterRequest, UpdateUserRequest


def _ana(**overrides) -> RegisterRequest:
    fields = {"name": "Ana", "email": "ana@x.com", "password": "secret", "language": "en"}
    fields.update(overrides)
    return RegisterRequest(**fields)


def test_hash_password_is_sha256_hex() -> None:
    assert hash_password("secret") == hashlib.sha256(b"secret").hexdigest()
    assert len(hash_password("")) == 64


def test_authenticate_hashes_before_lookup(user_service) -> None:
    user_id = user_service.register(_ana())

    assert user_service.authenticate("ana@x.com", "secret") == user_id


def test_authenticate_requires_both_fields(user_service) -> None:
    user_service.register(_ana())

    with pytest.raises(Unauthorized):
        user_service.authenticate("ana@x.com", None)
    with pytest.raises(Unauthorized):
        user_service.authenticate(None, "secret")


def test_register_rejects_blank_language(user_service, collection) -> None:
    with pytest.raises(InvalidInput):
        user_service.register(_ana(language=""))

    assert collection.documents == []


def test_register_accepts_numeric_grade(user_service, collection) -> None:
    user_service.register(_ana(grade=9))

    assert collection.documents[0]["grade"] == "9"


def test_update_profile_writes_the_whole_field_set(user_service, collection) -> None:
    user_service.register(_ana())

    user_service.update_profile(UpdateUserRequest(email="ana@x.com", hobbies=["swimming"]))

    stored = collection.documents[0]
    assert stored["hobbies"] == ["swimming"]
    for field in ("education", "location", "grade", "ambition", "learning_capacities", "interests"):
        assert stored[field] is None


def test_update_profile_reports_zero_modifications(user_service) -> None:
    with pytest.raises(NotFoundOrUnchanged) as exception_info:
        user_service.update_profile(UpdateUserRequest(email="ghost@x.com"))

    assert isinstance(exception_info.value, NotFound)
    assert exception_info.value.status_code == 404


def test_get_profile_returns_stored_document(user_service) -> None:
    user_service.register(_ana(ambition="engineer"))

    assert user_service.get_profile("ana@x.com")["ambition"] == "engineer"


def test_get_profile_unknown_email(user_service) -> None:
    with pytest.raises(NotFound, match="User not found"):
        user_service.get_profile("ghost@x.com")


def test_store_errors_become_internal_errors(user_service, collection, store_failure) -> None:
    collection.fail_with = store_failure

    with pytest.raises(InternalError) as exception_info:
        user_service.register(_ana())

    assert exception_info.value.__cause__ is store_failure
