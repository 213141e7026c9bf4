"""
Application configuration via pydantic-settings.

All settings are loaded from environment variables (and .env file).

The secret material itself (reCAPTCHA private key, SNS topic ARN) never lives
here: only the Secrets Manager secret id and the field names inside that
secret are configuration. The values are fetched once per process by
services.secrets_store.SecretsStore.
"""

from __future__ import annotations

from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AWSSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    aws_region: str = "eu-west-1"
    secret_id: str = "contact-form"

    # Keys inside the JSON SecretString
    captcha_key_field: str = "CAPTCHA_KEY"
    topic_arn_field: str = "SNS_ARN"


class CaptchaSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    recaptcha_verify_url: str = "https://www.google.com/recaptcha/api/siteverify"
    recaptcha_timeout_seconds: float = 5.0


class NotificationSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    sns_subject: str = "[CONTACT_FORM]"


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"
    log_format: str = "console"  # "json" in production


class SentrySettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    sentry_dsn: str = ""
    sentry_send_pii: bool = False
    sentry_traces_sample_rate: float = 0.1


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Core
    env: str = "development"
    app_name: str = "contact-form"

    # Browsers post straight from the static site
    cors_origins: list[str] = ["*"]

    # OpenAPI docs URL (None disables the docs UI in production)
    docs_url: Optional[str] = "/docs"

    # Sub-configs (composed via model_validator below)
    aws: Optional[AWSSettings] = None
    captcha: Optional[CaptchaSettings] = None
    notification: Optional[NotificationSettings] = None
    logging: Optional[LoggingSettings] = None
    sentry: Optional[SentrySettings] = None

    @model_validator(mode="after")
    def _populate_sub_configs(self) -> "AppSettings":
        # Populate sub-configs from the same env/dotenv source
        if self.aws is None:
            self.aws = AWSSettings()
        if self.captcha is None:
            self.captcha = CaptchaSettings()
        if self.notification is None:
            self.notification = NotificationSettings()
        if self.logging is None:
            self.logging = LoggingSettings()
        if self.sentry is None:
            self.sentry = SentrySettings()

        return self

    @property
    def is_production(self) -> bool:
        return self.env == "production"

    @property
    def allow_origin(self) -> str:
        """Value for the Access-Control-Allow-Origin header on Lambda responses."""
        return self.cors_origins[0] if self.cors_origins else "*"
