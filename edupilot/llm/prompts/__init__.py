"""
Prompts module - LLM prompt templates.

Prompts are stored as separate Python files for:
- Version control of prompt changes
- Clear documentation of prompt purpose
"""
from edupilot.llm.prompts.roadmap_prompts import (
    ROADMAP_SYSTEM_PROMPT,
    get_roadmap_user_prompt,
)
from edupilot.llm.prompts.tutor_prompts import (
    IMAGE_ANALYSIS_INSTRUCTION,
    get_chat_system_prompt,
)

__all__ = [
    "ROADMAP_SYSTEM_PROMPT",
    "get_roadmap_user_prompt",
    "IMAGE_ANALYSIS_INSTRUCTION",
    "get_chat_system_prompt",
]
