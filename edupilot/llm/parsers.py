"""
Response parsers - turn free-form model output into structured data.

The model is asked for a fixed format but is free to deviate from it,
so parsing is best-effort: blocks that do not fit are dropped, never
reported as errors.
"""
from typing import List

from edupilot.core.logging_config import get_logger
from edupilot.llm.prompts.roadmap_prompts import (
    DESCRIPTION_LABEL,
    LINK_LABEL,
    TIME_LABEL,
    TITLE_LABEL,
)
from edupilot.models.ai import CareerRole

logger = get_logger(__name__)

# A block needs title, description and time; the link line may be missing
MIN_ROLE_LINES = 3


def _strip_label(line: str, label: str) -> str:
    # Only the first occurrence, wherever it appears in the line
    return line.replace(label, "", 1).strip()


def parse_career_roles(text: str) -> List[CareerRole]:
    """
    Parse the roadmap completion into career roles.

    The text is split into blocks on blank lines ("\\n\\n"), each block
    into lines. Blocks with fewer than three lines are skipped. Lines
    are read positionally (title, description, time, link) and their
    label prefix is removed.

    Args:
        text: Raw model output

    Returns:
        Zero to N career roles, in the order the model produced them

    Example:
        >>> parse_career_roles("Title: Analyst\\nDescription: Reads data.\\n"
        ...                    "Time to Proficiency: 1 year\\n"
        ...                    "Link to Study Materials: https://example.org")[0].title
        'Analyst'
    """
    roles: List[CareerRole] = []
    blocks = text.strip().split("\n\n")

    for block in blocks:
        lines = block.split("\n")
        if len(lines) < MIN_ROLE_LINES:
            continue

        roles.append(
            CareerRole(
                title=_strip_label(lines[0], TITLE_LABEL),
                description=_strip_label(lines[1], DESCRIPTION_LABEL),
                time_to_complete=_strip_label(lines[2], TIME_LABEL),
                URL=_strip_label(lines[3], LINK_LABEL) if len(lines) > 3 else "",
            )
        )

    if len(roles) < len(blocks):
        logger.debug(f"Dropped {len(blocks) - len(roles)} malformed roadmap block(s)")

    return roles
