"""
Module: producer/dispatcher.py
Description: Batch dispatcher that sends message lists to SQS.

Walks a message list in batch_size slices, normalizing each slice just
before it is submitted, and tallies the entries the queue rejects.
After the whole list has been walked, any rejection triggers a retry of
the ENTIRE original list (not only the rejected entries) until the
retry budget is spent. Entries that already succeeded may therefore be
delivered again; FIFO queues can rely on deduplication_id to absorb
that.

Per-call flow: BATCHING -> AWAITING_TRANSPORT -> BATCH_DONE, repeated per
batch, then RETRYING (back to BATCHING) or COMPLETE.

Key Components:
- Producer: Entry point with send() and queue_size()
- DispatchState: Phases of a send call, reported in debug traces

Dependencies: asyncio, tenacity, structlog, pydantic
"""

import asyncio
from enum import Enum
from functools import partial
from typing import Any, List, Optional

from tenacity import RetryCallState

from sqs_producer.config.settings import ProducerConfig, ProducerSettings
from sqs_producer.errors import ConfigurationError, MessageValidationError, MessagesFailedError
from sqs_producer.models.result import FailureAccumulator, SendResult
from sqs_producer.producer.normalizer import coerce_message_list, normalize_batch
from sqs_producer.producer.retry import EntriesRejected, Sleep, whole_list_retrying
from sqs_producer.sqs_queue.sqs import Transport
from sqs_producer.utils.batch_helpers import iter_batches
from sqs_producer.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


class DispatchState(str, Enum):
    BATCHING = "batching"
    AWAITING_TRANSPORT = "awaiting_transport"
    BATCH_DONE = "batch_done"
    RETRYING = "retrying"
    COMPLETE = "complete"


class Producer:
    """
    Client-side producer for one SQS queue.

    Configuration is frozen at construction. Each send() call keeps its
    own accumulator and offset, so concurrent calls on one producer do
    not interfere.
    """

    def __init__(
        self,
        config: ProducerConfig,
        transport: Transport,
        sleep: Sleep = asyncio.sleep
    ):
        """
        Initialize producer.

        Args:
            config: Validated producer configuration
            transport: Queue transport used for every call
            sleep: Awaitable used to wait between retry attempts

        Raises:
            ConfigurationError: If config or transport is missing
        """
        if not isinstance(config, ProducerConfig):
            raise ConfigurationError("config must be a ProducerConfig instance")
        if transport is None:
            raise ConfigurationError("A transport must be provided")

        self.config = config
        self.transport = transport
        self._sleep = sleep

        logger.info(
            "Producer initialized",
            queue_url=config.queue_url,
            batch_size=config.batch_size,
            retries=config.retries,
            retry_interval=config.retry_interval
        )

    @classmethod
    def create(cls, transport: Transport, sleep: Sleep = asyncio.sleep, **options: Any) -> "Producer":
        """
        Build a producer from keyword options.

        Example:
            >>> producer = Producer.create(transport, queue_url=url, batch_size=5, retries=2)
        """
        return cls(ProducerConfig.from_options(options), transport, sleep=sleep)

    @classmethod
    def from_settings(
        cls,
        settings: ProducerSettings,
        transport: Transport,
        sleep: Sleep = asyncio.sleep
    ) -> "Producer":
        """Build a producer from environment settings, applying their log level."""
        configure_logging(settings.log_level)
        return cls(settings.to_config(), transport, sleep=sleep)

    def _debug(self, message: str, **kwargs: Any) -> None:
        if self.config.debug:
            logger.info(message, queue_url=self.config.queue_url, **kwargs)

    def _before_retry(self, retries: int, retry_state: RetryCallState) -> None:
        self._debug(
            "Retrying messages",
            state=DispatchState.RETRYING.value,
            attempt=retry_state.attempt_number,
            retries=retries,
            wait_seconds=self.config.retry_interval
        )

    async def _walk(self, messages: List[Any], accumulator: FailureAccumulator) -> FailureAccumulator:
        """
        Submit every batch of the list once, in order.

        Returns:
            The accumulator extended with every batch's rejections

        Raises:
            MessageValidationError: If a message in the next batch is malformed
            Exception: Whatever the transport raised, unchanged
        """
        for offset, batch in iter_batches(messages, self.config.batch_size):
            try:
                entries = normalize_batch(batch)
            except MessageValidationError as e:
                logger.warning(
                    "Message validation failed, aborting send",
                    queue_url=self.config.queue_url,
                    offset=offset,
                    field=e.field,
                    error=str(e)
                )
                raise

            self._debug(
                "Submitting batch",
                state=DispatchState.AWAITING_TRANSPORT.value,
                offset=offset,
                entries=len(entries)
            )

            try:
                response = await self.transport.send_batch(self.config.queue_url, entries)
            except Exception as e:
                logger.error(
                    "Batch submission failed, aborting send",
                    queue_url=self.config.queue_url,
                    offset=offset,
                    error=str(e),
                    error_type=type(e).__name__
                )
                raise

            accumulator = accumulator.extend(response)

            if response.failures:
                self._debug(
                    "Entries rejected by queue",
                    state=DispatchState.BATCH_DONE.value,
                    offset=offset,
                    failures=[failure.model_dump() for failure in response.failures]
                )

        return accumulator

    async def send(self, messages: Any, retries: Optional[int] = None) -> SendResult:
        """
        Send one message or a list of messages.

        Args:
            messages: A message (str or mapping) or a list of them
            retries: Retry budget for this call; defaults to config.retries

        Returns:
            SendResult; error is set when rejections survived every retry

        Raises:
            ConfigurationError: If retries is not a non-negative integer
            MessageValidationError: If a message cannot be normalized
            ClientError: If a transport call fails (not retried)
        """
        if retries is None:
            retries = self.config.retries
        elif isinstance(retries, bool) or not isinstance(retries, int) or retries < 0:
            raise ConfigurationError("retries must be a non-negative integer")

        message_list = coerce_message_list(messages)
        accumulator = FailureAccumulator()
        attempts = 0
        pass_start = 0

        retrying = whole_list_retrying(
            retries,
            self.config.retry_interval,
            sleep=self._sleep,
            before_sleep=partial(self._before_retry, retries)
        )

        self._debug(
            "Sending messages",
            state=DispatchState.BATCHING.value,
            messages=len(message_list),
            retries=retries
        )

        try:
            async for attempt in retrying:
                with attempt:
                    attempts += 1
                    pass_start = len(accumulator)
                    accumulator = await self._walk(message_list, accumulator)
                    if len(accumulator) > pass_start:
                        raise EntriesRejected(accumulator.failed_ids[pass_start:])

        except EntriesRejected:
            self._debug(
                "No retry has succeeded",
                state=DispatchState.COMPLETE.value,
                attempts=attempts,
                retries=retries,
                failed_ids=list(accumulator.failed_ids)
            )
            return SendResult(
                failed_ids=list(accumulator.failed_ids),
                retried_ids=list(accumulator.failed_ids[:pass_start]),
                attempts=attempts,
                batches_sent=accumulator.batches_sent,
                error=MessagesFailedError(accumulator.failed_ids)
            )

        self._debug("Messages sent", state=DispatchState.COMPLETE.value, attempts=attempts)
        return SendResult(
            retried_ids=list(accumulator.failed_ids),
            attempts=attempts,
            batches_sent=accumulator.batches_sent
        )

    async def queue_size(self) -> int:
        """
        Return the approximate number of messages in the queue.

        Raises:
            ClientError: If the transport call fails (not retried)
        """
        size = await self.transport.get_queue_size(self.config.queue_url)
        return int(size)

