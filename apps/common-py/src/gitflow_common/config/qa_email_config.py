"""Configuration for the QA notification email generator."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_env_file_path() -> str:
    """Get the path to the .env file.

    Checks for ENV_FILE environment variable first, then defaults to
    .env in the common-py project directory (apps/common-py/.env).

    Returns:
        Path to the .env file
    """
    env_file = os.getenv("ENV_FILE")
    if env_file:
        return env_file

    # This file is in apps/common-py/src/gitflow_common/config/qa_email_config.py
    # So we go up 4 levels to get to apps/common-py/
    current_file = Path(__file__)
    common_py_dir = current_file.parent.parent.parent.parent
    default_env_file = common_py_dir / ".env"
    return str(default_env_file)


class QAEmailConfig(BaseSettings):
    """QA email generator settings from environment variables."""

    # OpenAI
    openai_api_key: str | None = None
    openai_model: str = "gpt-4.1"
    max_tokens: int = 800
    temperature: float = 0.5

    # Raw JSON documents exported by the CI workflow
    issue_details: str | None = None
    pr_details: str | None = None

    # Output
    subject_path: Path = Path("/tmp/qa_email_subject.txt")
    body_path: Path = Path("/tmp/qa_email_body.html")

    model_config = SettingsConfigDict(
        env_file=_get_env_file_path(),
        case_sensitive=False,
        env_file_encoding="utf-8",
        env_prefix="",
        extra="ignore",
    )


def get_qa_email_config() -> QAEmailConfig:
    """Get QA email generator configuration.

    Returns:
        QAEmailConfig instance
    """
    return QAEmailConfig()
