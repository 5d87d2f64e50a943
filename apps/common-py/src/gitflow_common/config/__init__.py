"""Configuration package."""

from gitflow_common.config.qa_email_config import QAEmailConfig, get_qa_email_config

__all__ = ["QAEmailConfig", "get_qa_email_config"]
