from types import SimpleNamespace

from fastapi.testclient import TestClient

import edupilot.api.main as api_main
import edupilot.database.connection as connection_module
from edupilot.database.connection import MongoConnection
from edupilot.services.ai_gateway import AIGateway
from edupilot.services.user_service import UserDirectoryService

from conftest import FakeCollection, FakeLLMClient


class FakeMongoClient:
    def __init__(self, uri):
        self.uri = uri
        self.databases = {}
        self.pings = 0
        self.closed = False
        self.admin = SimpleNamespace(command=self._command)

    def _command(self, name):
        assert name == "ping"
        self.pings += 1
        return {"ok": 1}

    def __getitem__(self, name):
        if name not in self.databases:
            self.databases[name] = FakeDatabase(name)
        return self.databases[name]

    def close(self):
        self.closed = True


class FakeDatabase:
    def __init__(self, name):
        self.name = name
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())


def test_mongo_connection_uses_configured_database_and_collection(monkeypatch) -> None:
    monkeypatch.setattr(connection_module, "MongoClient", FakeMongoClient)

    connection = MongoConnection("mongodb://db:27017", "school", "students")

    assert connection.client.uri == "mongodb://db:27017"
    assert connection.database.name == "school"
    assert connection.users is connection.database.collections["students"]
    assert connection.check_connection() is True

    connection.close()

    assert connection.client.closed is True


def test_lifespan_wires_shared_clients_into_services(monkeypatch) -> None:
    monkeypatch.setattr(connection_module, "MongoClient", FakeMongoClient)
    connections = []

    def build_connection():
        connection = MongoConnection("mongodb://db:27017", "database", "users")
        connections.append(connection)
        return connection

    llm = FakeLLMClient(reply="Hola")
    monkeypatch.setattr(api_main, "MongoConnection", build_connection)
    monkeypatch.setattr(api_main, "LLMClient", lambda: llm)
    api_main.app.dependency_overrides.clear()

    with TestClient(api_main.app) as client:
        assert isinstance(api_main.app.state.user_service, UserDirectoryService)
        assert isinstance(api_main.app.state.ai_gateway, AIGateway)

        registered = client.post(
            "/register",
            json={"name": "Ana", "email": "ana@x.com", "password": "secret", "language": "es"},
        )
        login = client.post("/login", json={"email": "ana@x.com", "password": "secret"})
        chat = client.post("/chat", json={"message": "Hello", "language": "Spanish"})

    assert registered.status_code == 201
    assert login.json()["userId"] == registered.json()["userId"]
    assert chat.json() == {"response": "Hola"}
    assert connections[0].client.pings == 1
    assert connections[0].client.closed is True
