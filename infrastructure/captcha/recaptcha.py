"""Google reCAPTCHA implementation of CaptchaVerifier.

Unlike a plain pass/fail check, a verdict of False and a failure to get a
verdict are kept apart: the former returns False, the latter raises
CaptchaConnectionError so the caller can answer with a different error code.
"""

from typing import Any

import httpx

from errors import CaptchaConnectionError, InvalidArgumentError
from infrastructure.http_client import HttpClient
from shared.logging import get_logger

log = get_logger(__name__)

RECAPTCHA_VERIFY_URL = "https://www.google.com/recaptcha/api/siteverify"


class RecaptchaVerifier:
    def __init__(
        self,
        secret: str,
        http_client: HttpClient,
        verify_url: str = RECAPTCHA_VERIFY_URL,
    ) -> None:
        self._secret = secret
        self._http = http_client
        self._verify_url = verify_url

    async def verify(self, token: str) -> bool:
        if not isinstance(token, str):
            log.warning("recaptcha_invalid_token_type", value_type=type(token).__name__)
            raise InvalidArgumentError("Invalid input, expected a string.")

        try:
            response = await self._http.post_form(
                self._verify_url,
                data={"secret": self._secret, "response": token},
            )
            data: Any = response.json()
        except (httpx.HTTPError, ValueError) as e:
            log.error(
                "recaptcha_request_failed", error=str(e), error_type=type(e).__name__
            )
            raise CaptchaConnectionError(
                f"Could not connect to reCAPTCHA server: {e}"
            ) from e

        if not isinstance(data, dict):
            log.error(
                "recaptcha_unexpected_response",
                status_code=response.status_code,
                response_text=response.text[:200],
            )
            raise CaptchaConnectionError("reCAPTCHA server returned an unexpected body")

        log.debug(
            "recaptcha_response",
            status_code=response.status_code,
            success=data.get("success"),
            hostname=data.get("hostname"),
        )

        success = data.get("success") is True
        if not success:
            log.warning(
                "recaptcha_verification_failed",
                error_codes=data.get("error-codes", []),
            )
        return success
