"""
Request DTO for the contact form.

ContactFormRequest — POST /contact (and the Lambda proxy body)

Every field is optional here: presence, format and size are judged by
shared.validators.validate_submission so that all input problems map to the
same response.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class ContactFormRequest(BaseModel):
    """Decoded JSON body of a contact-form submission."""

    model_config = ConfigDict(extra="ignore", strict=True)

    mail: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None
    token: Optional[str] = None
