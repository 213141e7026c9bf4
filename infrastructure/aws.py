"""
boto3 client factories.

Clients are built once per process (Lambda cold start or FastAPI lifespan)
and shared by every invocation; boto3 clients are thread-safe, which matters
because calls run in asyncio.to_thread workers.
"""

from __future__ import annotations

import boto3
from botocore.config import Config

from config import AWSSettings

# boto3 owns retries for AWS calls; the contact pipeline never retries itself
_BOTO_CONFIG = Config(
    connect_timeout=5,
    read_timeout=10,
    retries={"max_attempts": 3, "mode": "standard"},
)


def create_secrets_client(settings: AWSSettings):
    """Return a Secrets Manager client for the configured region."""
    return boto3.client(
        "secretsmanager", region_name=settings.aws_region, config=_BOTO_CONFIG
    )


def create_sns_client(settings: AWSSettings):
    """Return an SNS client for the configured region."""
    return boto3.client("sns", region_name=settings.aws_region, config=_BOTO_CONFIG)
