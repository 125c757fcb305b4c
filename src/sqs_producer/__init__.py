"""
Package: sqs_producer
Description: Batching SQS producer with whole-list retry.

Groups application messages into batches of up to ten entries, submits
them with SendMessageBatch and retries the full message list when the
queue rejects individual entries.

Example:
    >>> transport = SQSTransport(region_name="eu-west-1")
    >>> producer = Producer.create(transport, queue_url=url, retries=2)
    >>> result = await producer.send(["msg-1", {"id": "m2", "body": "hello"}])
    >>> result.raise_for_error()
"""

from sqs_producer.config.settings import ProducerConfig, ProducerSettings
from sqs_producer.errors import (
    ConfigurationError,
    MessageValidationError,
    MessagesFailedError,
    ProducerError,
    QueueAttributeError,
)
from sqs_producer.models.entry import WireEntry
from sqs_producer.models.result import BatchResponse, SendResult
from sqs_producer.producer.dispatcher import Producer
from sqs_producer.producer.normalizer import normalize_message
from sqs_producer.sqs_queue.sqs import SQSTransport, Transport

__version__ = "0.1.0"

__all__ = [
    "BatchResponse",
    "ConfigurationError",
    "MessageValidationError",
    "MessagesFailedError",
    "Producer",
    "ProducerConfig",
    "ProducerError",
    "ProducerSettings",
    "QueueAttributeError",
    "SQSTransport",
    "SendResult",
    "Transport",
    "WireEntry",
    "normalize_message",
]
