"""Amazon SNS implementation of NotificationPublisher.

The submission is sent as a JSON document so subscribers (email, chat
webhooks, queues) can pick the fields they need.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from errors import PublishError
from schemas.models.submission import PublishReceipt
from shared.logging import get_logger

log = get_logger(__name__)

DEFAULT_SUBJECT = "[CONTACT_FORM]"


class SnsPublisher:
    def __init__(
        self, client: Any, topic_arn: str, subject: str = DEFAULT_SUBJECT
    ) -> None:
        self._client = client
        self._topic_arn = topic_arn
        self._subject = subject

    def build_message(self, mail: str, subject: str, message: str) -> str:
        return json.dumps({"mail": mail, "subject": subject, "message": message})

    async def publish(self, mail: str, subject: str, message: str) -> PublishReceipt:
        try:
            response = await asyncio.to_thread(
                self._client.publish,
                TopicArn=self._topic_arn,
                Subject=self._subject,
                Message=self.build_message(mail, subject, message),
            )
        except (BotoCoreError, ClientError) as e:
            log.error(
                "sns_publish_failed",
                topic_arn=self._topic_arn,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise PublishError(f"Error publishing message to SNS: {e}") from e

        message_id = response.get("MessageId") if isinstance(response, dict) else None
        if not message_id:
            log.error("sns_publish_no_message_id", topic_arn=self._topic_arn)
            raise PublishError("SNS did not return a MessageId")

        log.info("sns_message_published", message_id=message_id)
        return PublishReceipt(
            message_id=message_id,
            sequence_number=response.get("SequenceNumber"),
        )
