"""
Dependency wiring.

build_container() assembles the contact pipeline from settings once per
process; both entry points call it. The FastAPI providers below read the
container off app.state for use with Depends().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from fastapi import Request

from config import AppSettings
from infrastructure.aws import create_secrets_client, create_sns_client
from infrastructure.captcha.recaptcha import RecaptchaVerifier
from infrastructure.http_client import HttpClient
from infrastructure.notification.sns import SnsPublisher
from infrastructure.secrets.protocol import SecretProvider
from infrastructure.secrets.secrets_manager import SecretsManagerProvider
from schemas.models.secrets import Secrets
from services.contact_service import ContactService
from services.secrets_store import SecretsStore


@dataclass
class Container:
    settings: AppSettings
    secrets_store: SecretsStore
    http_client: HttpClient
    contact_service: ContactService


def build_container(
    settings: AppSettings,
    *,
    secret_provider: Optional[SecretProvider] = None,
    sns_client: Any = None,
    http_client: Optional[HttpClient] = None,
) -> Container:
    """Build the long-lived objects. Nothing here touches the network."""
    if secret_provider is None:
        secret_provider = SecretsManagerProvider(
            create_secrets_client(settings.aws),
            settings.aws.secret_id,
            captcha_key_field=settings.aws.captcha_key_field,
            topic_arn_field=settings.aws.topic_arn_field,
        )
    if sns_client is None:
        sns_client = create_sns_client(settings.aws)
    if http_client is None:
        http_client = HttpClient(timeout=settings.captcha.recaptcha_timeout_seconds)

    secrets_store = SecretsStore(secret_provider)

    def captcha_factory(secrets: Secrets) -> RecaptchaVerifier:
        return RecaptchaVerifier(
            secrets.captcha_key,
            http_client,
            verify_url=settings.captcha.recaptcha_verify_url,
        )

    def publisher_factory(secrets: Secrets) -> SnsPublisher:
        return SnsPublisher(
            sns_client, secrets.topic_arn, subject=settings.notification.sns_subject
        )

    return Container(
        settings=settings,
        secrets_store=secrets_store,
        http_client=http_client,
        contact_service=ContactService(secrets_store, captcha_factory, publisher_factory),
    )


def get_settings(request: Request) -> AppSettings:
    """Return the AppSettings instance stored on app.state."""
    return request.app.state.settings


def get_contact_service(request: Request) -> ContactService:
    return request.app.state.contact_service


def get_secrets_store(request: Request) -> SecretsStore:
    return request.app.state.secrets_store
