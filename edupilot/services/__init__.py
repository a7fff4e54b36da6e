"""
Services module - Business logic and orchestration.

Services contain the core application logic:
- No HTTP concerns (those belong in api/)
- No raw queries (those belong in database/)
- Orchestrate between the user store and the LLM
"""
from edupilot.services.ai_gateway import AIGateway
from edupilot.services.user_service import UserDirectoryService

__all__ = [
    "AIGateway",
    "UserDirectoryService",
]
