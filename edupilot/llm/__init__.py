"""
LLM module - Language model integration.

This module handles all LLM interactions:
- Prompt construction
- API calls to Groq
- Response parsing
- Error handling for LLM failures
"""
from edupilot.llm.client import LLMClient, LLMError
from edupilot.llm.parsers import parse_career_roles

__all__ = [
    "LLMClient",
    "LLMError",
    "parse_career_roles",
]
