"""SecretProvider protocol — SecretsStore depends on this, not the concrete implementation."""

from typing import Protocol

from schemas.models.secrets import Secrets


class SecretProvider(Protocol):
    async def get_secrets(self) -> Secrets:
        """Fetch the secrets. Raises errors.SecretsUnavailableError on failure."""
        ...
