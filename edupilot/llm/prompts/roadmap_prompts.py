"""
Career Roadmap Prompts - Prompts for career role suggestions.

The user prompt asks for a rigid four-line block per suggestion.
llm/parsers.py depends on these exact labels; change both together.
"""
from typing import Any, Dict


ROADMAP_SYSTEM_PROMPT = "You are an AI assistant that suggests career roles based on user details."

TITLE_LABEL = "Title: "
DESCRIPTION_LABEL = "Description: "
TIME_LABEL = "Time to Proficiency: "
LINK_LABEL = "Link to Study Materials: "


def _or_na(value: Any) -> str:
    return str(value) if value else "N/A"


def _format_hobbies(hobbies: Any) -> str:
    if isinstance(hobbies, list):
        return ", ".join(str(hobby) for hobby in hobbies)
    return _or_na(hobbies)


def get_roadmap_user_prompt(user: Dict[str, Any], input_text: str) -> str:
    """
    Build the roadmap request from a stored user profile.

    Args:
        user: User document (school, grade, performance, location,
              ambition, hobbies are read; missing values render as N/A)
        input_text: Field the suggested careers should relate to

    Returns:
        Complete user prompt for the LLM
    """
    return f"""Based on the following user details:
- School: {_or_na(user.get('school'))}
- Grade: {_or_na(user.get('grade'))}
- Performance: {_or_na(user.get('performance'))}
- Location: {_or_na(user.get('location'))}
- Ambition: {_or_na(user.get('ambition'))}
- Hobbies: {_format_hobbies(user.get('hobbies'))}

Please suggest 3 career roles related to: {input_text}.
For each role, provide:
1. Title
2. Brief description (1-2 sentences)
3. Estimated time to achieve proficiency (considering the user's background)
4. Link to study materials like online courses, books, etc. add some like top 1 link randomly good one which is free

Format each suggestion as:
{TITLE_LABEL}[Career Title]
{DESCRIPTION_LABEL}[Brief description]
{TIME_LABEL}[Estimated time]
{LINK_LABEL}[URL]"""
