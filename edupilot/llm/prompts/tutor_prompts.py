"""
Tutor Prompts - Prompts for the chat and image analysis endpoints.
"""

IMAGE_ANALYSIS_INSTRUCTION = (
    "can you identify the math problem in the image."
    "No explanation."
    "ignore the grids from the image"
)


def get_chat_system_prompt(language: str) -> str:
    """System instruction pinning the answer language."""
    return f"Answer the following in {language} language:"
