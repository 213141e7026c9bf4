"""AWS Secrets Manager implementation of SecretProvider.

The secret is a JSON object; the reCAPTCHA private key and the SNS topic ARN
are read from two configurable keys inside it.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from errors import SecretsUnavailableError
from schemas.models.secrets import Secrets
from shared.logging import get_logger

log = get_logger(__name__)


class SecretsManagerProvider:
    def __init__(
        self,
        client: Any,
        secret_id: str,
        captcha_key_field: str = "CAPTCHA_KEY",
        topic_arn_field: str = "SNS_ARN",
    ) -> None:
        self._client = client
        self._secret_id = secret_id
        self._captcha_key_field = captcha_key_field
        self._topic_arn_field = topic_arn_field

    async def get_secrets(self) -> Secrets:
        try:
            response = await asyncio.to_thread(
                self._client.get_secret_value, SecretId=self._secret_id
            )
        except (BotoCoreError, ClientError) as e:
            log.error(
                "secret_fetch_failed",
                secret_id=self._secret_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise SecretsUnavailableError(
                f"Could not read secret {self._secret_id}"
            ) from e

        try:
            values = json.loads(response["SecretString"])
        except (KeyError, TypeError, ValueError) as e:
            log.error("secret_not_json", secret_id=self._secret_id)
            raise SecretsUnavailableError(
                f"Secret {self._secret_id} is not a JSON SecretString"
            ) from e

        if not isinstance(values, dict):
            raise SecretsUnavailableError(
                f"Secret {self._secret_id} is not a JSON object"
            )

        try:
            return Secrets(
                captcha_key=values.get(self._captcha_key_field),
                topic_arn=values.get(self._topic_arn_field),
            )
        except ValidationError as e:
            log.error(
                "secret_fields_missing",
                secret_id=self._secret_id,
                fields=[self._captcha_key_field, self._topic_arn_field],
            )
            raise SecretsUnavailableError(
                f"Secret {self._secret_id} lacks the expected fields"
            ) from e
