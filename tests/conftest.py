import os
from types import SimpleNamespace

import pytest
from bson import ObjectId
from pymongo.errors import PyMongoError

os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("GROQ_API_KEY", "test-key")
os.environ["LOG_TO_FILE"] = "false"

from edupilot.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from edupilot.api.dependencies import get_ai_gateway, get_user_service  # noqa: E402
from edupilot.api.main import app  # noqa: E402
from edupilot.database.users import UserRepository  # noqa: E402
from edupilot.llm.client import LLMError  # noqa: E402
from edupilot.services.ai_gateway import AIGateway  # noqa: E402
from edupilot.services.user_service import UserDirectoryService  # noqa: E402


class FakeCollection:
    """In-memory stand-in for the users collection (equality filters, $set only)."""

    def __init__(self):
        self.documents = []
        self.fail_with = None

    def _check_failure(self):
        if self.fail_with is not None:
            raise self.fail_with

    def _matches(self, document, query):
        return all(document.get(key) == value for key, value in query.items())

    def find_one(self, query):
        self._check_failure()
        for document in self.documents:
            if self._matches(document, query):
                return dict(document)
        return None

    def insert_one(self, document):
        self._check_failure()
        stored = dict(document)
        stored["_id"] = ObjectId()
        self.documents.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    def update_one(self, query, update):
        self._check_failure()
        for document in self.documents:
            if self._matches(document, query):
                changes = update["$set"]
                modified = any(document.get(key) != value for key, value in changes.items())
                document.update(changes)
                return SimpleNamespace(matched_count=1, modified_count=int(modified))
        return SimpleNamespace(matched_count=0, modified_count=0)


class FakeLLMClient:
    """Records every call and answers with a canned reply."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate(self, user_message, system_prompt=None, model=None, max_tokens=None):
        self.calls.append(
            {
                "kind": "text",
                "user_message": user_message,
                "system_prompt": system_prompt,
                "max_tokens": max_tokens,
            }
        )
        if self.error is not None:
            raise self.error
        return self.reply

    def generate_with_image(self, instruction, image_url, model=None, max_tokens=None):
        self.calls.append(
            {
                "kind": "image",
                "instruction": instruction,
                "image_url": image_url,
                "max_tokens": max_tokens,
            }
        )
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def llm():
    return FakeLLMClient()


@pytest.fixture
def user_service(collection):
    return UserDirectoryService(UserRepository(collection))


@pytest.fixture
def ai_gateway(llm, settings):
    return AIGateway(llm, settings)


@pytest.fixture
def client(user_service, ai_gateway):
    from fastapi.testclient import TestClient

    app.dependency_overrides[get_user_service] = lambda: user_service
    app.dependency_overrides[get_ai_gateway] = lambda: ai_gateway
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def store_failure():
    return PyMongoError("connection refused")


@pytest.fixture
def provider_failure():
    return LLMError("upstream returned 503")
