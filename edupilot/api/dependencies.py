"""
Request-scoped access to the long-lived services.

The services are built once in the application lifespan and stored on
app.state. Tests replace these providers via app.dependency_overrides.
"""
from fastapi import Request

from edupilot.services.ai_gateway import AIGateway
from edupilot.services.user_service import UserDirectoryService


def get_user_service(request: Request) -> UserDirectoryService:
    return request.app.state.user_service


def get_ai_gateway(request: Request) -> AIGateway:
    return request.app.state.ai_gateway
