"""
LLM Client for Groq API integration.

This module provides a clean interface to the Groq chat-completions API.
It handles:
- API client initialization
- Text and image (multimodal) requests
- Wrapping provider errors into a single LLMError

There is no retry or fallback: one failed call surfaces immediately.
"""
from typing import Any, Dict, List, Optional

from groq import Groq, GroqError

from edupilot.core.config import get_settings
from edupilot.core.logging_config import get_logger

logger = get_logger(__name__)


class LLMClient:
    """
    Client for interacting with the Groq API.

    One instance is created at startup and shared by all requests.
    """

    def __init__(self, api_key: Optional[str] = None, groq_client: Optional[Groq] = None):
        """
        Initialize the provider client.

        Args:
            api_key: Optional API key. If not provided, uses settings.
            groq_client: Pre-built Groq client (mainly for tests).
        """
        self.settings = get_settings()
        self.groq_client = groq_client or Groq(api_key=api_key or self.settings.groq_api_key)

        self.chat_model = self.settings.llm_chat_model
        self.vision_model = self.settings.llm_vision_model

        logger.info(
            f"LLM Client initialized (chat={self.chat_model}, vision={self.vision_model})"
        )

    def generate(
        self,
        user_message: str,
        system_prompt: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        """
        Single-turn text completion.

        Returns:
            The generated text, unmodified.

        Raises:
            LLMError: If the provider call fails.
        """
        messages: List[Dict[str, Any]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_message})

        return self._complete(messages, model or self.chat_model, max_tokens)

    def generate_with_image(
        self,
        instruction: str,
        image_url: str,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        """
        Single-turn multimodal completion.

        Args:
            instruction: Text part of the user message.
            image_url: data URI or remote URL of the image.

        Raises:
            LLMError: If the provider call fails.
        """
        messages = [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": instruction},
                    {"type": "image_url", "image_url": {"url": image_url}},
                ],
            }
        ]
        return self._complete(messages, model or self.vision_model, max_tokens)

    def _complete(self, messages: List[Dict[str, Any]], model: str, max_tokens: Optional[int]) -> str:
        """Execute one chat-completions request."""
        logger.debug(f"LLM request: model={model}, max_tokens={max_tokens}")
        try:
            response = self.groq_client.chat.completions.create(
                model=model,
                messages=messages,
                max_tokens=max_tokens,
            )
        except GroqError as e:
            logger.error(f"Provider call failed ({model}): {e}")
            raise LLMError(str(e)) from e

        if not response.choices:
            logger.error(f"Provider returned no choices ({model})")
            raise LLMError("Provider returned no choices")

        content = response.choices[0].message.content
        return content or ""


class LLMError(Exception):
    """
    Custom exception for LLM-related errors.

    This exception wraps all provider errors into a single type
    for easier handling in the service layer.
    """
    pass
