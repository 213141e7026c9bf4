"""
Contact-form request pipeline.

    preflight → secrets ready → parse JSON → validate → verify CAPTCHA → publish

Each stage either hands its result to the next or ends the request with one
fixed ResponseEnvelope. handle() never raises.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from errors import (
    AppError,
    CaptchaConnectionError,
    InvalidArgumentError,
    JsonParseError,
    RecaptchaConnectionError,
    RecaptchaVerifyError,
    SecretRetrievalError,
    SnsPublishError,
    VerifyInputError,
)
from infrastructure.captcha.protocol import CaptchaVerifier
from infrastructure.notification.protocol import NotificationPublisher
from schemas.dto.requests.contact import ContactFormRequest
from schemas.dto.responses.envelope import (
    FORM_SUBMITTED_SUCCESSFULLY,
    PREFLIGHT_OK,
    ResponseEnvelope,
)
from schemas.models.secrets import Secrets
from schemas.models.submission import ValidatedSubmission
from services.secrets_store import SecretsStore
from shared.logging import get_logger
from shared.validators import validate_submission

log = get_logger(__name__)

CaptchaFactory = Callable[[Secrets], CaptchaVerifier]
PublisherFactory = Callable[[Secrets], NotificationPublisher]


class ContactService:
    """Runs one contact-form submission through the pipeline.

    The verifier and publisher are built per request from the loaded
    Secrets, so the service itself holds no secret material.
    """

    def __init__(
        self,
        secrets_store: SecretsStore,
        captcha_factory: CaptchaFactory,
        publisher_factory: PublisherFactory,
    ) -> None:
        self._secrets_store = secrets_store
        self._captcha_factory = captcha_factory
        self._publisher_factory = publisher_factory

    async def handle(
        self, method: Optional[str], body: Union[str, bytes, None]
    ) -> ResponseEnvelope:
        if is_preflight(method):
            return PREFLIGHT_OK

        try:
            await self._process(body)
        except AppError as e:
            log.warning(
                "contact_form_rejected",
                error_code=e.error_code,
                status_code=e.status_code,
            )
            return e.to_envelope()

        log.info("contact_form_submitted")
        return FORM_SUBMITTED_SUCCESSFULLY

    async def _process(self, body: Union[str, bytes, None]) -> None:
        secrets = self._secrets_store.get()
        if secrets is None:
            raise SecretRetrievalError()

        submission = validate_body(parse_body(body))

        try:
            verifier = self._captcha_factory(secrets)
            verified = await verifier.verify(submission.token)
        except (CaptchaConnectionError, InvalidArgumentError) as e:
            log.error("recaptcha_unreachable", error=str(e))
            raise RecaptchaConnectionError() from e
        except Exception as e:
            log.exception("recaptcha_unexpected_error", error_type=type(e).__name__)
            raise RecaptchaConnectionError() from e
        if not verified:
            raise RecaptchaVerifyError()

        try:
            publisher = self._publisher_factory(secrets)
            receipt = await publisher.publish(
                submission.mail, submission.subject, submission.message
            )
        except Exception as e:
            log.error(
                "notification_publish_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise SnsPublishError() from e

        log.info(
            "notification_published",
            message_id=receipt.message_id,
            email_domain=submission.mail.rsplit("@", 1)[-1],
        )


def is_preflight(method: Optional[str]) -> bool:
    # Browsers send a CORS preflight before the POST
    return method is not None and method.upper() == "OPTIONS"


def parse_body(body: Union[str, bytes, None]) -> Any:
    """Decode a raw request body as JSON, raising JsonParseError on failure."""
    if body is None:
        raise JsonParseError()
    try:
        return json.loads(body)
    except (TypeError, ValueError, RecursionError) as e:
        log.info("request_body_not_json", error=str(e))
        raise JsonParseError() from e


def validate_body(data: Any) -> ValidatedSubmission:
    """Turn decoded JSON into a ValidatedSubmission, raising VerifyInputError."""
    if not isinstance(data, dict):
        log.info("submission_rejected", reason="not_an_object")
        raise VerifyInputError()
    try:
        request = ContactFormRequest.model_validate(data)
    except PydanticValidationError as e:
        log.info("submission_rejected", reason="wrong_field_type", errors=e.error_count())
        raise VerifyInputError() from e

    submission = validate_submission(request.model_dump())
    if submission is None:
        raise VerifyInputError()
    return submission
