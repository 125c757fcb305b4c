"""
Package: sqs_queue
Description: Queue transport for the producer.

Provides the Transport protocol and an async aioboto3 implementation
for submitting message batches to SQS and reading queue size.
"""

from .sqs import SQSTransport, Transport

__all__ = ["SQSTransport", "Transport"]
