"""
Process-wide holder for the Secrets.

load() is called once at cold start (Lambda module import or FastAPI
lifespan). It never raises: a failed load is logged and leaves the store
empty, and every request then answers SECRET_RETRIEVAL_ERROR until the
process is recycled.

Overlapping first loads are allowed to race. Each one fetches, the last
successful write wins, and readers only ever see None or a complete Secrets.
"""

from __future__ import annotations

from typing import Optional

from errors import SecretsUnavailableError
from infrastructure.secrets.protocol import SecretProvider
from schemas.models.secrets import Secrets
from shared.logging import get_logger

log = get_logger(__name__)


class SecretsStore:
    def __init__(self, provider: SecretProvider) -> None:
        self._provider = provider
        self._secrets: Optional[Secrets] = None

    @property
    def loaded(self) -> bool:
        return self._secrets is not None

    def get(self) -> Optional[Secrets]:
        return self._secrets

    async def load(self) -> Optional[Secrets]:
        if self._secrets is not None:
            return self._secrets

        try:
            secrets = await self._provider.get_secrets()
        except SecretsUnavailableError as e:
            log.error("secrets_load_failed", error=str(e))
            return None
        except Exception as e:
            log.exception(
                "secrets_load_failed", error=str(e), error_type=type(e).__name__
            )
            return None

        self._secrets = secrets
        log.info("secrets_loaded", topic_arn=secrets.topic_arn)
        return secrets
