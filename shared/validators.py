"""
Contact-form input validators — framework-agnostic, pure functions.

validate_submission() is the single gate between loosely typed wire input
and a ValidatedSubmission. It never raises; a rejected submission is None
and the reason is logged.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Optional

from schemas.models.submission import ValidatedSubmission
from shared.logging import get_logger

log = get_logger(__name__)

REQUIRED_FIELDS = ("mail", "subject", "message", "token")

SUBJECT_MIN_LENGTH = 4
SUBJECT_MAX_LENGTH = 100
MESSAGE_MIN_LENGTH = 20
MESSAGE_MAX_LENGTH = 1000

# local-part (dot-atoms or a quoted string) @ bracketed IPv4 literal or
# dot-separated labels ending in a 2+ letter TLD
MAIL_REGEX = re.compile(
    r"^(([^<>()\[\]\\.,;:\s@\"]+(\.[^<>()\[\]\\.,;:\s@\"]+)*)|(\".+\"))"
    r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])"
    r"|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$"
)


def validate_mail(mail: str) -> bool:
    """Return True if *mail* looks like an email address."""
    return MAIL_REGEX.fullmatch(mail) is not None


def sanitize(value: str) -> str:
    """Trim *value* and escape ``<`` and ``>`` so it cannot carry markup.

    ``&`` is left alone, which keeps the function idempotent on text that
    contains no angle brackets.
    """
    return value.strip().replace("<", "&lt;").replace(">", "&gt;")


def _length_within(value: str, minimum: int, maximum: int) -> bool:
    return minimum <= len(value) <= maximum


def validate_submission(data: Any) -> Optional[ValidatedSubmission]:
    """Validate and sanitize a decoded contact-form body.

    Rules:
    - ``data`` must be a mapping
    - ``mail``, ``subject``, ``message`` and ``token`` must be non-empty strings
    - ``mail`` must match MAIL_REGEX
    - ``subject`` must be 4-100 characters, ``message`` 20-1000 characters
      (measured before trimming)

    Returns:
        The trimmed and escaped submission, or None when any rule fails.
    """
    if not isinstance(data, Mapping):
        log.info("submission_rejected", reason="not_an_object")
        return None

    for field in REQUIRED_FIELDS:
        value = data.get(field)
        if not value or not isinstance(value, str):
            log.info("submission_rejected", reason="missing_field", field=field)
            return None

    if not validate_mail(data["mail"]):
        log.info("submission_rejected", reason="invalid_email_format")
        return None

    if not _length_within(data["subject"], SUBJECT_MIN_LENGTH, SUBJECT_MAX_LENGTH):
        log.info(
            "submission_rejected",
            reason="invalid_subject_size",
            length=len(data["subject"]),
        )
        return None

    if not _length_within(data["message"], MESSAGE_MIN_LENGTH, MESSAGE_MAX_LENGTH):
        log.info(
            "submission_rejected",
            reason="invalid_message_size",
            length=len(data["message"]),
        )
        return None

    return ValidatedSubmission(
        mail=sanitize(data["mail"]),
        subject=sanitize(data["subject"]),
        message=sanitize(data["message"]),
        token=data["token"],
    )
