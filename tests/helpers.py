"""Shared builders for contact-form tests."""

from unittest.mock import AsyncMock, MagicMock

from config import AppSettings
from dependencies import Container
from infrastructure.http_client import HttpClient
from schemas.models.secrets import Secrets
from schemas.models.submission import PublishReceipt
from services.contact_service import ContactService
from services.secrets_store import SecretsStore

SECRETS = Secrets(
    captcha_key="test-captcha-key",
    topic_arn="arn:aws:sns:eu-west-1:123456789012:contact-form",
)


def make_body(**overrides) -> dict:
    body = {
        "mail": "a@b.com",
        "subject": "Hello there",
        "message": "x" * 20,
        "token": "tok",
    }
    body.update(overrides)
    return body


class FakePipeline:
    """ContactService wired to mock collaborators."""

    def __init__(self, secrets=SECRETS):
        self.provider = MagicMock()
        self.provider.get_secrets = AsyncMock(return_value=secrets)
        self.verifier = MagicMock()
        self.verifier.verify = AsyncMock(return_value=True)
        self.publisher = MagicMock()
        self.publisher.publish = AsyncMock(
            return_value=PublishReceipt(message_id="msg-1")
        )
        self.store = SecretsStore(self.provider)
        self.service = ContactService(
            self.store,
            captcha_factory=lambda s: self.verifier,
            publisher_factory=lambda s: self.publisher,
        )

    def container(self, settings=None) -> Container:
        return Container(
            settings=settings or AppSettings(),
            secrets_store=self.store,
            http_client=HttpClient(),
            contact_service=self.service,
        )
