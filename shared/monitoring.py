"""Sentry initialisation shared by the Lambda and FastAPI entry points."""

from __future__ import annotations

import logging

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from config import AppSettings


def init_sentry(settings: AppSettings) -> bool:
    """Initialise Sentry if a DSN is configured. Returns whether it was."""
    if not settings.sentry.sentry_dsn:
        return False

    sentry_sdk.init(
        dsn=settings.sentry.sentry_dsn,
        environment=settings.env,
        send_default_pii=settings.sentry.sentry_send_pii,
        traces_sample_rate=settings.sentry.sentry_traces_sample_rate,
        integrations=[
            # INFO+ logs become breadcrumbs, ERROR+ become events
            LoggingIntegration(level=logging.INFO, event_level=logging.ERROR),
        ],
    )
    return True
