"""NotificationPublisher protocol — the contact service depends on this, not the concrete implementation."""

from typing import Protocol

from schemas.models.submission import PublishReceipt


class NotificationPublisher(Protocol):
    async def publish(self, mail: str, subject: str, message: str) -> PublishReceipt:
        """Publish one submission. Raises errors.PublishError on any failure."""
        ...
