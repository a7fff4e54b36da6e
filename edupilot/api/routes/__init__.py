"""
API Routes module - Endpoint definitions.

Each file in this module defines routes for a specific domain:
- users.py  : Login, registration and profile updates
- ai.py     : Chat, career roadmap and image analysis
- health.py : Health check endpoints
"""
from edupilot.api.routes.ai import router as ai_router
from edupilot.api.routes.health import router as health_router
from edupilot.api.routes.users import router as users_router

__all__ = [
    "ai_router",
    "health_router",
    "users_router",
]
