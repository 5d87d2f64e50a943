"""Infrastructure layer for external communication."""

from gitflow_common.infra.openai.openai_client import OpenAIClient

__all__ = ["OpenAIClient"]
