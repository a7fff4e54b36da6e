"""
AI Gateway - the three LLM-backed operations.

Each operation is a single request/response round trip to the
provider. Provider failures become AIProviderError; the gateway
never retries.
"""
from typing import Any, Dict, List, Optional

from edupilot.core.config import Settings, get_settings
from edupilot.core.exceptions import AIProviderError, InvalidInput
from edupilot.core.logging_config import get_logger
from edupilot.llm.client import LLMClient, LLMError
from edupilot.llm.parsers import parse_career_roles
from edupilot.llm.prompts import (
    IMAGE_ANALYSIS_INSTRUCTION,
    ROADMAP_SYSTEM_PROMPT,
    get_chat_system_prompt,
    get_roadmap_user_prompt,
)
from edupilot.models.ai import CareerRole

logger = get_logger(__name__)


class AIGateway:
    """
    Stateless wrapper issuing chat/completion requests to the LLM provider.

    Args:
        llm_client: Shared LLMClient (or a test double with the same methods)
        settings: Optional settings; token limits are read from here
    """

    def __init__(self, llm_client: LLMClient, settings: Optional[Settings] = None):
        self.llm_client = llm_client
        self.settings = settings or get_settings()

    def converse(self, message: str, language: str) -> str:
        """
        Answer a single message in the requested language.

        Returns:
            The model's completion, stripped of surrounding whitespace.
        """
        logger.info(f"Chat request: language={language}, message_length={len(message)}")
        try:
            reply = self.llm_client.generate(
                user_message=message,
                system_prompt=get_chat_system_prompt(language),
                max_tokens=self.settings.chat_max_tokens,
            )
        except LLMError as e:
            raise AIProviderError("An error occurred while generating the chat response") from e

        return reply.strip()

    def generate_career_roadmap(self, user: Dict[str, Any], input_text: str) -> List[CareerRole]:
        """
        Suggest career roles for a user profile.

        The result may hold fewer than three roles (or none) when the
        model strays from the requested format.
        """
        try:
            completion = self.llm_client.generate(
                user_message=get_roadmap_user_prompt(user, input_text),
                system_prompt=ROADMAP_SYSTEM_PROMPT,
                max_tokens=self.settings.roadmap_max_tokens,
            )
        except LLMError as e:
            logger.error(f"Error generating roadmap: {e}")
            raise AIProviderError(
                "An error occurred while generating the roadmap", details=str(e)
            ) from e

        roles = parse_career_roles(completion)
        logger.info(f"Roadmap generated: {len(roles)} career role(s)")
        return roles

    def analyze_image(self, image_data: Optional[str]) -> str:
        """
        Identify the math problem shown in an image.

        Args:
            image_data: data URI or remote URL

        Returns:
            The model's raw analysis, unmodified.

        Raises:
            InvalidInput: No image was supplied; the provider is not called.
        """
        if not image_data:
            raise InvalidInput("No image data provided")

        try:
            return self.llm_client.generate_with_image(
                instruction=IMAGE_ANALYSIS_INSTRUCTION,
                image_url=image_data,
                max_tokens=self.settings.image_max_tokens,
            )
        except LLMError as e:
            logger.error(f"Error analyzing image: {e}")
            raise AIProviderError("An error occurred while analyzing the image") from e
