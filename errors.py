"""
Application error hierarchy and FastAPI exception handlers.

AppError is the base for every response-level failure. Each subclass pins the
status code, error code and message of one fixed response envelope, so the
contact pipeline can only ever answer with one of a closed set of bodies.

ServiceError is the base for failures raised by external collaborators
(Secrets Manager, reCAPTCHA, SNS). The contact service catches these and
maps them onto an AppError; they never reach the caller directly.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from schemas.dto.responses.envelope import ResponseEnvelope


class AppError(Exception):
    """Base application error. All typed response errors inherit from this."""

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"
    default_message: str = "An internal server error occurred."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_envelope(self) -> ResponseEnvelope:
        return ResponseEnvelope(
            status_code=self.status_code,
            success=False,
            error_code=self.error_code,
            message=self.message,
        )

    def to_dict(self) -> dict:
        return {
            "success": False,
            "errorCode": self.error_code,
            "message": self.message,
        }


class SecretRetrievalError(AppError):
    status_code = 500
    error_code = "SECRET_RETRIEVAL_ERROR"
    default_message = "Error retrieving secrets from Secrets Manager"


class JsonParseError(AppError):
    status_code = 400
    error_code = "JSON_PARSE_ERROR"
    default_message = "Invalid HTTPS body"


class MissingInputError(AppError):
    # Defined for clients that switch on it; the pipeline reports every
    # input problem as VerifyInputError.
    status_code = 400
    error_code = "MISSING_INPUT_ERROR"
    default_message = "Not all fields required"


class VerifyInputError(AppError):
    status_code = 400
    error_code = "VERIFY_INPUT_ERROR"
    default_message = "Invalid inputs"


class RecaptchaConnectionError(AppError):
    status_code = 500
    error_code = "RECAPTCHA_CONNECTION_ERROR"
    default_message = "Could not connect to reCAPTCHA server"


class RecaptchaVerifyError(AppError):
    status_code = 500
    error_code = "RECAPTCHA_VERIFY_ERROR"
    default_message = "reCAPTCHA verify returned false"


class SnsPublishError(AppError):
    status_code = 500
    error_code = "SNS_PUBLISH_ERROR"
    default_message = "Could not send the message to SNS topic"


class ServiceError(Exception):
    """Base for failures reported by an external collaborator."""


class SecretsUnavailableError(ServiceError):
    """The secret could not be fetched or did not hold the expected fields."""


class CaptchaConnectionError(ServiceError):
    """The verification endpoint could not be reached or answered garbage."""


class InvalidArgumentError(ServiceError, TypeError):
    """A collaborator was called with an argument of the wrong type."""


class PublishError(ServiceError):
    """The notification topic rejected the message or could not be reached."""


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers on the FastAPI app."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        # Sentry integration: if sentry_sdk is initialized it will auto-capture
        # unhandled exceptions before this handler fires.
        return JSONResponse(status_code=500, content=AppError().to_dict())
