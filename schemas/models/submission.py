"""
Contact-form domain models.

ValidatedSubmission — a submission that passed shared.validators; immutable
PublishReceipt      — what the notification topic hands back on success
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ValidatedSubmission(BaseModel):
    """Trimmed, HTML-escaped contact-form fields plus the raw CAPTCHA token.

    Only shared.validators.validate_submission should construct these; the
    model itself does not re-check the rules.
    """

    model_config = ConfigDict(frozen=True)

    mail: str
    subject: str
    message: str
    token: str = Field(min_length=1)


class PublishReceipt(BaseModel):
    """Acknowledgement returned by a NotificationPublisher."""

    model_config = ConfigDict(frozen=True)

    message_id: str
    sequence_number: Optional[str] = None
