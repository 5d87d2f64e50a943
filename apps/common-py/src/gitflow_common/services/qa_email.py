"""Generate a QA notification email for a ticket that is ready for testing.

Reads the issue and merged pull request JSON documents from the
``ISSUE_DETAILS`` and ``PR_DETAILS`` environment variables, asks the OpenAI
chat completions API for a draft and writes the subject and HTML body to the
configured paths. When the API call or the reply cannot be used, a fixed
fallback email built from the issue and PR details is written instead.
"""

import json
import logging
import re
import sys

from pydantic import ValidationError

from gitflow_common.config.qa_email_config import QAEmailConfig, get_qa_email_config
from gitflow_common.infra.openai.openai_client import OpenAIClient
from gitflow_common.models.qa_email import IssueDetails, PullRequestDetails, QAEmail

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful assistant that generates professional QA notification emails. "
    "Focus on providing clear context and actionable information for testing."
)

PROMPT_TEMPLATE = """Generate a professional QA notification email for a development ticket that's ready for testing.

Issue Details:
{issue}

Pull Request Details:
{pr}

Create an email that:
1. Has a clear, actionable subject line
2. Provides context about what was developed
3. Includes testing requirements if available in the issue body
4. Has links to both the issue and merged PR
5. Is professional and helpful for the QA team

Return in format:
SUBJECT: [subject line]
BODY: [email body in HTML format]"""

SUBJECT_PATTERN = re.compile(r"SUBJECT:\s*(.*?)(?:\n|$)")
BODY_PATTERN = re.compile(r"BODY:\s*(.*)$", re.DOTALL)


def build_prompt(issue: IssueDetails, pr: PullRequestDetails) -> str:
    """Build the user prompt sent to the model."""
    return PROMPT_TEMPLATE.format(
        issue=json.dumps(issue.model_dump(), indent=2),
        pr=json.dumps(pr.model_dump(), indent=2),
    )


def default_subject(issue: IssueDetails) -> str:
    return f"Ready for QA: Issue #{issue.number} - {issue.title}"


def _label_name(label: object) -> str:
    if isinstance(label, dict):
        return str(label.get("name", ""))
    return str(label)


def fallback_email(issue: IssueDetails, pr: PullRequestDetails) -> QAEmail:
    """Build the deterministic email used when generation fails."""
    priorities = [name for name in map(_label_name, issue.labels) if name.startswith("priority:")]
    developer = pr.user.get("login", "") if isinstance(pr.user, dict) else pr.user
    body = f"""
      <h2>Ready for QA Testing</h2>
      <p><strong>Issue #{issue.number}:</strong> <a href="{issue.html_url}">{issue.title}</a></p>
      <p><strong>Merged PR:</strong> <a href="{pr.html_url}">#{pr.number} - {pr.title}</a></p>
      <p><strong>Developer:</strong> {developer}</p>
      <p><strong>Priority:</strong> {", ".join(priorities) or "Normal"}</p>
      <p>This ticket has been completed and is ready for testing. Please review the issue description and acceptance criteria.</p>
      """
    return QAEmail(subject=default_subject(issue), body=body, is_fallback=True)


def parse_email_content(content: str, issue: IssueDetails) -> QAEmail:
    """Split a model reply into subject and body.

    A missing ``SUBJECT:`` line falls back to the default subject; a missing
    ``BODY:`` section uses the whole reply as the body.
    """
    subject_match = SUBJECT_PATTERN.search(content)
    body_match = BODY_PATTERN.search(content)

    subject = subject_match.group(1).strip() if subject_match else default_subject(issue)
    body = body_match.group(1).strip() if body_match else content
    return QAEmail(subject=subject, body=body)


class QAEmailGenerator:
    """Drafts QA notification emails with an OpenAI model."""

    def __init__(self, client: OpenAIClient) -> None:
        """Initialize the generator.

        Args:
            client: OpenAI client used for completions
        """
        self.client = client

    def generate(self, issue: IssueDetails, pr: PullRequestDetails) -> QAEmail:
        """Generate the email, falling back to a fixed template on failure."""
        try:
            content = self.client.complete(SYSTEM_PROMPT, build_prompt(issue, pr))
            email = parse_email_content(content, issue)
            logger.info("QA email content generated successfully")
            return email
        except Exception as e:
            logger.error("Error generating QA email: %s", e, exc_info=True)
            return fallback_email(issue, pr)


def load_details(config: QAEmailConfig) -> tuple[IssueDetails, PullRequestDetails]:
    """Parse the issue and PR documents from configuration.

    Raises:
        ValueError: If either document is missing or malformed
    """
    if not config.issue_details:
        raise ValueError("ISSUE_DETAILS is required")
    if not config.pr_details:
        raise ValueError("PR_DETAILS is required")

    try:
        issue = IssueDetails.model_validate_json(config.issue_details)
        pr = PullRequestDetails.model_validate_json(config.pr_details)
    except ValidationError as e:
        raise ValueError(f"Invalid issue or PR details: {e}") from e
    return issue, pr


def write_email(email: QAEmail, config: QAEmailConfig) -> None:
    """Write subject and body to the configured output files."""
    config.subject_path.write_text(email.subject, encoding="utf-8")
    config.body_path.write_text(email.body, encoding="utf-8")
    logger.info("Wrote QA email to %s and %s", config.subject_path, config.body_path)


def generate_qa_email(config: QAEmailConfig, client: OpenAIClient | None = None) -> QAEmail:
    """Load details, generate the email and write it out."""
    issue, pr = load_details(config)
    if client is None and config.openai_api_key:
        client = OpenAIClient(config=config)

    if client is None:
        logger.warning("OPENAI_API_KEY is not set, writing fallback QA email")
        email = fallback_email(issue, pr)
    else:
        email = QAEmailGenerator(client).generate(issue, pr)
    write_email(email, config)
    return email


def main() -> int:
    """Console entry point."""
    logging.basicConfig(level=logging.INFO)
    try:
        generate_qa_email(get_qa_email_config())
    except ValueError as e:
        logger.error("Cannot generate QA email: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
