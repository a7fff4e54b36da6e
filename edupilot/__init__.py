"""
EduPilot backend package.

This package contains all application source code organized by responsibility:
- api/       : FastAPI routes and HTTP handling
- core/      : Configuration, logging, errors and cross-cutting utilities
- services/  : User directory and AI gateway
- llm/       : LLM client, prompts and response parsing
- database/  : MongoDB access
- models/    : Pydantic models for request/response schemas
"""

__version__ = "1.0.0"
