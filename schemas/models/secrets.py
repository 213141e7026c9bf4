"""
Process-wide secrets fetched once from Secrets Manager.

Secrets.__repr__ hides the values so an accidental log line or traceback
never prints the reCAPTCHA private key.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Secrets(BaseModel):
    model_config = ConfigDict(frozen=True)

    captcha_key: str = Field(min_length=1, repr=False)
    topic_arn: str = Field(min_length=1)
