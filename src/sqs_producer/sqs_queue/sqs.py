"""
Module: sqs.py
Description: SQS transport for batch submissions and queue size reads.

Defines the Transport protocol the producer depends on and the
aioboto3-backed SQSTransport that implements it. Transport errors
(ClientError, BotoCoreError) are logged and re-raised unchanged.
"""

from typing import List, Optional, Protocol, Sequence

from aioboto3 import Session
from botocore.exceptions import BotoCoreError, ClientError

from sqs_producer.errors import QueueAttributeError
from sqs_producer.models.entry import WireEntry
from sqs_producer.models.result import BatchResponse, EntryFailure
from sqs_producer.utils.batch_helpers import validate_batch_size
from sqs_producer.utils.logger import get_logger

logger = get_logger(__name__)

QUEUE_SIZE_ATTRIBUTE = "ApproximateNumberOfMessages"


class Transport(Protocol):
    """Queue transport the producer submits batches through."""

    async def send_batch(self, queue_url: str, entries: Sequence[WireEntry]) -> BatchResponse:
        ...

    async def get_queue_size(self, queue_url: str) -> int:
        ...


class SQSTransport:
    """
    aioboto3-backed transport for SQS.

    A client is opened per call from a shared Session, so one transport
    instance can serve concurrent send calls.
    """

    def __init__(
        self,
        region_name: str = "eu-west-1",
        endpoint_url: Optional[str] = None,
        session: Optional[Session] = None
    ):
        """
        Initialize SQS transport.

        Args:
            region_name: AWS region of the queue
            endpoint_url: Optional custom endpoint (LocalStack, ElasticMQ)
            session: Optional preconfigured aioboto3 Session
        """
        if not region_name or not isinstance(region_name, str):
            raise ValueError("region_name must be a non-empty string")

        self.region_name = region_name
        self.endpoint_url = endpoint_url
        self.session = session or Session()

        logger.info(
            "SQS transport initialized",
            region_name=region_name,
            endpoint_url=endpoint_url
        )

    @classmethod
    def from_settings(cls, settings) -> "SQSTransport":
        """Build a transport from ProducerSettings."""
        return cls(region_name=settings.aws_region, endpoint_url=settings.endpoint_url)

    def _client(self):
        return self.session.client(
            'sqs',
            region_name=self.region_name,
            endpoint_url=self.endpoint_url
        )

    async def send_batch(self, queue_url: str, entries: Sequence[WireEntry]) -> BatchResponse:
        """
        Submit one batch through SendMessageBatch.

        Args:
            queue_url: URL of the target queue
            entries: 1-10 wire entries

        Returns:
            BatchResponse listing entries the queue rejected

        Raises:
            ValueError: If the batch is empty or too large
            ClientError: If the SQS call itself fails
        """
        request_entries: List[dict] = [entry.to_sqs() for entry in entries]
        validate_batch_size(request_entries)

        try:
            async with self._client() as sqs:
                response = await sqs.send_message_batch(
                    QueueUrl=queue_url,
                    Entries=request_entries
                )

        except ClientError as e:
            logger.error(
                "Failed to send batch to SQS",
                queue_url=queue_url,
                entries=len(request_entries),
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise

        except BotoCoreError as e:
            logger.error(
                "Unexpected error sending batch to SQS",
                queue_url=queue_url,
                entries=len(request_entries),
                error=str(e)
            )
            raise

        failures = tuple(
            EntryFailure(
                id=failed['Id'],
                code=failed.get('Code'),
                message=failed.get('Message'),
                sender_fault=bool(failed.get('SenderFault', False))
            )
            for failed in response.get('Failed', [])
        )

        logger.debug(
            "Batch sent to SQS",
            queue_url=queue_url,
            entries=len(request_entries),
            successful=len(response.get('Successful', [])),
            failed=len(failures)
        )

        return BatchResponse(failures=failures)

    async def get_queue_size(self, queue_url: str) -> int:
        """
        Read the approximate number of visible messages.

        Raises:
            ClientError: If the SQS call fails
            BotoCoreError: If the request cannot be made
            QueueAttributeError: If the response lacks the attribute
        """
        try:
            async with self._client() as sqs:
                response = await sqs.get_queue_attributes(
                    QueueUrl=queue_url,
                    AttributeNames=[QUEUE_SIZE_ATTRIBUTE]
                )

        except ClientError as e:
            logger.error(
                "Failed to read SQS queue attributes",
                queue_url=queue_url,
                error_code=e.response['Error']['Code'],
                error_message=e.response['Error']['Message']
            )
            raise

        except BotoCoreError as e:
            logger.error(
                "Unexpected error reading SQS queue attributes",
                queue_url=queue_url,
                error=str(e)
            )
            raise

        size = response.get('Attributes', {}).get(QUEUE_SIZE_ATTRIBUTE)
        if size is None:
            logger.error(
                "SQS queue attributes missing queue size",
                queue_url=queue_url,
                attribute=QUEUE_SIZE_ATTRIBUTE
            )
            raise QueueAttributeError(queue_url, QUEUE_SIZE_ATTRIBUTE)

        return int(size)
