"""
Module: conftest.py
Description: Shared pytest fixtures for producer tests.

Provides a fake in-memory transport, a recording sleep so retry waits
take no real time, and sample messages used across test modules.
"""

import pytest
from botocore.exceptions import ClientError

from sqs_producer.config.settings import ProducerConfig
from sqs_producer.models.result import BatchResponse
from sqs_producer.producer.dispatcher import Producer

QUEUE_URL = "https://sqs.eu-west-1.amazonaws.com/123456789012/test-queue"


class FakeTransport:
    """
    In-memory transport recording every call.

    Attributes:
        batches: Entry lists submitted, one per send_batch call
        reject: Callable (call_index, entries) -> rejected ids
        raise_on_call: Zero-based call index that raises instead
        queue_size: Value returned by get_queue_size
    """

    def __init__(self, reject=None, raise_on_call=None, error=None, queue_size=0):
        self.batches = []
        self.queue_urls = []
        self.reject = reject or (lambda call_index, entries: [])
        self.raise_on_call = raise_on_call
        self.error = error or ClientError(
            error_response={'Error': {'Code': 'AccessDenied', 'Message': 'Test error'}},
            operation_name='SendMessageBatch'
        )
        self.queue_size = queue_size
        self.queue_size_error = None

    async def send_batch(self, queue_url, entries):
        call_index = len(self.batches)
        self.batches.append(list(entries))
        self.queue_urls.append(queue_url)
        if self.raise_on_call is not None and call_index == self.raise_on_call:
            raise self.error
        return BatchResponse.from_failed_ids(list(self.reject(call_index, entries)))

    async def get_queue_size(self, queue_url):
        self.queue_urls.append(queue_url)
        if self.queue_size_error is not None:
            raise self.queue_size_error
        return self.queue_size


class RecordingSleep:
    """Awaitable sleep replacement that records requested delays."""

    def __init__(self):
        self.delays = []

    async def __call__(self, seconds):
        self.delays.append(seconds)


@pytest.fixture
def queue_url():
    return QUEUE_URL


@pytest.fixture
def fake_transport():
    """Transport that accepts every entry."""
    return FakeTransport()


@pytest.fixture
def transport_factory():
    """The FakeTransport class, for tests that need custom rejections."""
    return FakeTransport


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def producer_config():
    """Default configuration: batches of 10, no retries."""
    return ProducerConfig(queue_url=QUEUE_URL)


@pytest.fixture
def make_producer(fake_transport, recording_sleep):
    """
    Factory for producers wired to the shared fake transport and sleep.

    Options are passed to Producer.create; a different transport can be
    supplied with the transport keyword.
    """
    def _make(transport=None, **options):
        options.setdefault("queue_url", QUEUE_URL)
        return Producer.create(
            transport if transport is not None else fake_transport,
            sleep=recording_sleep,
            **options
        )

    return _make


@pytest.fixture
def sample_messages():
    """Mixed plain-text and structured messages."""
    return [
        "order-1",
        {"id": "order-2", "body": "{\"order_id\": 2}"},
        {
            "id": "order-3",
            "body": "{\"order_id\": 3}",
            "delay_seconds": 10,
            "message_attributes": {
                "source": {"DataType": "String", "StringValue": "checkout"}
            }
        },
    ]
