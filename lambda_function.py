"""
AWS Lambda entry point for the contact form (API Gateway proxy integration).

The container and the Secrets are set up once per execution environment, on
the first invocation, and reused by every later invocation. A single event
loop is kept for the process so the pooled httpx client stays bound to it.
"""

from __future__ import annotations

import asyncio
import base64
import binascii
from typing import Any, Mapping, Optional, Union

from config import AppSettings
from dependencies import Container, build_container
from errors import SecretRetrievalError
from schemas.dto.responses.envelope import PREFLIGHT_OK
from services.contact_service import is_preflight
from shared.logging import get_logger, setup_logging
from shared.monitoring import init_sentry

log = get_logger(__name__)

_container: Optional[Container] = None
_loop: Optional[asyncio.AbstractEventLoop] = None


def _event_loop() -> asyncio.AbstractEventLoop:
    global _loop
    if _loop is None or _loop.is_closed():
        _loop = asyncio.new_event_loop()
    return _loop


def init(container: Optional[Container] = None) -> Container:
    """Build the container and load the Secrets. Runs once per process."""
    global _container
    if container is None:
        settings = AppSettings()
        setup_logging(settings.logging)
        init_sentry(settings)
        container = build_container(settings)

    _event_loop().run_until_complete(container.secrets_store.load())
    _container = container
    log.info("lambda_initialized", secrets_loaded=container.secrets_store.loaded)
    return container


def get_method(event: Mapping[str, Any]) -> Optional[str]:
    """HTTP method from a REST API (v1) or HTTP API (v2) proxy event."""
    method = event.get("httpMethod")
    if method:
        return method
    http = (event.get("requestContext") or {}).get("http") or {}
    return http.get("method")


def get_body(event: Mapping[str, Any]) -> Union[str, bytes, None]:
    """Request body, base64-decoded when API Gateway flagged it as binary.

    A body that is not valid base64 is passed through as-is and fails JSON
    parsing downstream.
    """
    body = event.get("body")
    if body is None or not event.get("isBase64Encoded"):
        return body
    try:
        return base64.b64decode(body, validate=True)
    except binascii.Error as e:
        log.info("request_body_not_base64", error=str(e))
        return body


def handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    method = get_method(event)

    container = _container
    if container is None:
        try:
            container = init()
        except Exception as e:
            # Retried on the next invocation
            log.exception("lambda_init_failed", error_type=type(e).__name__)
            envelope = (
                PREFLIGHT_OK if is_preflight(method) else SecretRetrievalError().to_envelope()
            )
            return envelope.to_lambda_response()

    log.info(
        "contact_request_received",
        method=method,
        request_id=getattr(context, "aws_request_id", None),
    )
    envelope = _event_loop().run_until_complete(
        container.contact_service.handle(method, get_body(event))
    )
    return envelope.to_lambda_response(container.settings.allow_origin)
