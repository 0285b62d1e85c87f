"""Comment and contact form proxies.

Submissions are cleaned, screened against a keyword blocklist, and
forwarded to WordPress. The blocklist is a heuristic spam filter, not a
security boundary.
"""

import logging
import re

import httpx

from blogfront.config import Settings
from blogfront.models.forms import CommentSubmission, ContactSubmission
from blogfront.services.content import strip_tags
from blogfront.services.http_client import get_shared_client

logger = logging.getLogger(__name__)

SPAM_PATTERNS = [
    re.compile(r"<script", re.IGNORECASE),
    re.compile(r"</?iframe", re.IGNORECASE),
    re.compile(r"\bunion\b", re.IGNORECASE),
    re.compile(r"\bselect\b", re.IGNORECASE),
    re.compile(r"\bdrop table\b", re.IGNORECASE),
    re.compile(r"\binsert\b", re.IGNORECASE),
    re.compile(r"\bupdate\b", re.IGNORECASE),
    re.compile(r"\bdelete\b", re.IGNORECASE),
]

SPAM_MESSAGE = "Content rejected: looks like spam."


class FormRejected(Exception):
    """A submission that cannot be forwarded, with the status to answer."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def clean_text(value: str | None) -> str:
    """Remove tags and trim; whitespace inside the text is kept."""
    return strip_tags(str(value or "")).strip()


def looks_like_spam(*texts: str) -> bool:
    return any(p.search(text) for text in texts for p in SPAM_PATTERNS)


def _check_spam(raw_message: str, clean_message: str) -> None:
    # The raw text is screened too: stripping would erase a <script> tag.
    if looks_like_spam(raw_message, clean_message):
        raise FormRejected(SPAM_MESSAGE)


async def submit_comment(
    submission: CommentSubmission,
    settings: Settings,
    client: httpx.AsyncClient | None = None,
) -> None:
    """Forward a comment to WordPress.

    With caller credentials the comment goes to ``/comments`` as
    authenticated JSON; without, it is posted anonymously to the legacy
    ``wp-comments-post.php`` handler.
    """
    if (
        not submission.post_id
        or not submission.name
        or not submission.email
        or not submission.message
    ):
        raise FormRejected("Missing required fields")

    message = clean_text(submission.message)
    name = clean_text(submission.name)
    email = str(submission.email).strip()
    _check_spam(submission.message, message)

    if not settings.api_base:
        raise FormRejected("API base not configured")

    client = client or get_shared_client()
    use_auth = bool(submission.auth_user and submission.auth_pass)
    try:
        if use_auth:
            resp = await client.post(
                f"{settings.api_base}/comments",
                auth=httpx.BasicAuth(submission.auth_user, submission.auth_pass),
                json={
                    "post": submission.post_id,
                    "author_name": name,
                    "author_email": email,
                    "content": message,
                },
            )
        else:
            if not settings.site_base:
                raise FormRejected("Site base not configured for comment proxy")
            resp = await client.post(
                f"{settings.site_base}/wp-comments-post.php",
                data={
                    "comment": message,
                    "author": name,
                    "email": email,
                    "comment_post_ID": str(submission.post_id),
                    "comment_parent": "0",
                },
            )
    except httpx.HTTPError as e:
        logger.error(
            "Comment submission failed for post %s: %s", submission.post_id, e
        )
        raise FormRejected(str(e) or "Unexpected error submitting comment", 500)

    if not resp.is_success:
        logger.warning(
            "WordPress rejected comment for post %s: %d",
            submission.post_id,
            resp.status_code,
        )
        raise FormRejected(resp.text or "Failed to submit comment", 500)

    logger.info(
        "Forwarded comment for post %s (%s)",
        submission.post_id,
        "authenticated" if use_auth else "anonymous",
    )


async def submit_contact(
    submission: ContactSubmission,
    settings: Settings,
    client: httpx.AsyncClient | None = None,
) -> None:
    """Forward a contact message as a WPForms entry.

    Field numbers follow the form layout: 1 name, 2 email, 3 subject,
    4 message.
    """
    if not settings.api_base or not settings.wpform_id:
        raise FormRejected(
            "Contact API not configured. Set WORDPRESS_API_URL and WPFORM_ID."
        )
    user = settings.wordpress_basic_auth_user
    password = settings.wordpress_basic_auth_password
    if not user or not password:
        raise FormRejected(
            "Authentication missing. Set WORDPRESS_BASIC_AUTH_USER/PASSWORD."
        )
    if not submission.name or not submission.email or not submission.message:
        raise FormRejected("Name, email, and message are required.")

    message = clean_text(submission.message)
    name = clean_text(submission.name)
    subject = clean_text(submission.subject)
    email = str(submission.email).strip()
    _check_spam(submission.message, message)

    client = client or get_shared_client()
    try:
        resp = await client.post(
            f"{settings.api_base}/wpforms/v1/forms/{settings.wpform_id}/entries",
            auth=httpx.BasicAuth(user, password),
            json={"fields": {"1": name, "2": email, "3": subject, "4": message}},
        )
    except httpx.HTTPError as e:
        logger.error("Contact submission failed: %s", e)
        raise FormRejected(str(e) or "Unexpected error submitting contact form", 500)

    if not resp.is_success:
        logger.warning("WordPress rejected contact entry: %d", resp.status_code)
        status = resp.status_code if resp.status_code >= 400 else 502
        raise FormRejected(resp.text or "Failed to submit form", status)

    logger.info("Forwarded contact entry to form %s", settings.wpform_id)
