"""OpenAI client wrapper for the chat completions API."""

import logging

from openai import OpenAI

from gitflow_common.config.qa_email_config import QAEmailConfig

logger = logging.getLogger(__name__)


class OpenAIClient:
    """Infrastructure layer: lazily authenticated OpenAI client."""

    def __init__(self, config: QAEmailConfig | None = None) -> None:
        """Initialize OpenAI client.

        Args:
            config: QA email configuration. If None, will load from environment.
        """
        if config is None:
            from gitflow_common.config.qa_email_config import get_qa_email_config

            config = get_qa_email_config()

        self.config = config
        self._client: OpenAI | None = None

        if not config.openai_api_key:
            raise ValueError("OPENAI_API_KEY is required")

    def get_client(self) -> OpenAI:
        """Get authenticated OpenAI client.

        Returns:
            OpenAI client instance
        """
        if self._client is None:
            self._client = OpenAI(api_key=self.config.openai_api_key)
            logger.info("OpenAI client initialized")

        return self._client

    def complete(self, system_prompt: str, user_prompt: str) -> str:
        """Send a chat completion request and return the assistant message.

        Args:
            system_prompt: System message
            user_prompt: User message

        Returns:
            Text content of the first choice
        """
        response = self.get_client().chat.completions.create(
            model=self.config.openai_model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            max_tokens=self.config.max_tokens,
            temperature=self.config.temperature,
        )
        content = response.choices[0].message.content
        if content is None:
            raise ValueError("OpenAI response contained no message content")
        return content
