"""
Module: settings.py
Description: Producer configuration using pydantic and pydantic-settings.

ProducerConfig is the immutable, validated option set a Producer is
built from. ProducerSettings loads the same options (plus transport
settings such as the AWS region) from environment variables or a
.env file for process-level wiring.
"""

import re
from functools import lru_cache
from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sqs_producer.errors import ConfigurationError


class ProducerConfig(BaseModel):
    """
    Immutable producer configuration.

    Attributes:
        queue_url: URL of the target SQS queue
        batch_size: Messages per SendMessageBatch call (1-10)
        retries: Extra full-list passes after per-entry rejections
        retry_interval: Seconds to wait between passes
        debug: Emit diagnostic traces of failures and retries
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )

    queue_url: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("queue_url", "queueUrl"),
        description="URL of the SQS queue"
    )
    batch_size: int = Field(
        default=10,
        ge=1,
        le=10,
        validation_alias=AliasChoices("batch_size", "batchSize"),
        description="Number of messages sent per batch"
    )
    retries: int = Field(
        default=0,
        ge=0,
        description="Number of whole-list retries after per-entry failures"
    )
    retry_interval: float = Field(
        default=30,
        ge=0,
        validation_alias=AliasChoices("retry_interval", "retryInterval"),
        description="Delay in seconds between retry attempts"
    )
    debug: bool = Field(
        default=False,
        validation_alias=AliasChoices("debug", "debugToConsole", "debug_logging"),
        description="Log failure details and retry attempts"
    )

    @field_validator('queue_url')
    @classmethod
    def validate_queue_url(cls, v: str) -> str:
        """Reject blank queue URLs."""
        if not v.strip():
            raise ValueError("Missing SQS producer option [queue_url].")
        return v

    @classmethod
    def from_options(cls, options: Dict[str, Any]) -> "ProducerConfig":
        """
        Build a config from a plain options mapping.

        Args:
            options: Producer options, snake_case or camelCase keys

        Returns:
            Validated ProducerConfig

        Raises:
            ConfigurationError: If an option is missing or out of range
        """
        try:
            return cls.model_validate(options)
        except ValidationError as e:
            raise ConfigurationError(_describe_errors(e)) from e


_OPTION_ALIASES = {
    "queueUrl": "queue_url",
    "batchSize": "batch_size",
    "retryInterval": "retry_interval",
    "debugToConsole": "debug",
    "debug_logging": "debug",
}


def _describe_errors(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "options"
        location = _OPTION_ALIASES.get(location, location)
        if error["type"] == "missing":
            messages.append(f"Missing SQS producer option [{location}].")
        elif location == "batch_size":
            messages.append("SQS batch_size option must be between 1 and 10.")
        else:
            messages.append(f"Invalid SQS producer option [{location}]: {error['msg']}")
    return " ".join(messages)


class ProducerSettings(BaseSettings):
    """Producer settings loaded from SQS_PRODUCER_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SQS_PRODUCER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    queue_url: str = Field(..., description="URL of the SQS queue")
    batch_size: int = Field(default=10, description="Messages per batch")
    retries: int = Field(default=0, description="Whole-list retry count")
    retry_interval: float = Field(default=30, description="Seconds between retries")
    debug: bool = Field(default=False, description="Diagnostic logging")

    aws_region: str = Field(default="eu-west-1", description="AWS region")
    endpoint_url: Optional[str] = Field(
        default=None,
        description="Custom SQS endpoint (LocalStack, ElasticMQ)"
    )
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator('endpoint_url')
    @classmethod
    def validate_endpoint_url(cls, v: Optional[str]) -> Optional[str]:
        """Validate endpoint URL scheme when one is set."""
        if v is None or v == "":
            return None
        if not re.match(r'^https?://', v):
            raise ValueError("endpoint_url must be a valid HTTP/HTTPS URL")
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()

    def to_config(self) -> ProducerConfig:
        """Project the producer options onto a validated ProducerConfig."""
        return ProducerConfig.from_options({
            "queue_url": self.queue_url,
            "batch_size": self.batch_size,
            "retries": self.retries,
            "retry_interval": self.retry_interval,
            "debug": self.debug,
        })


@lru_cache
def get_settings() -> ProducerSettings:
    """Return the process-wide settings, loaded on first use."""
    return ProducerSettings()
