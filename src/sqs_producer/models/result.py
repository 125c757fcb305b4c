"""
Module: result.py
Description: Outcome models for batch submissions and send calls.

BatchResponse describes what the queue reported for a single
SendMessageBatch call. FailureAccumulator is the value threaded through
every batch of a send call, and SendResult is what the caller gets
back once no retries remain.
"""

from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from sqs_producer.errors import MessagesFailedError


class EntryFailure(BaseModel):
    """Per-entry rejection reported by the queue."""

    model_config = ConfigDict(frozen=True)

    id: str
    code: Optional[str] = None
    message: Optional[str] = None
    sender_fault: bool = False


class BatchResponse(BaseModel):
    """
    Result of one successful transport call.

    The call itself succeeded; failures lists the entries the queue
    rejected individually.
    """

    model_config = ConfigDict(frozen=True)

    failures: Tuple[EntryFailure, ...] = ()

    @classmethod
    def from_failed_ids(cls, failed_ids: List[str]) -> "BatchResponse":
        return cls(failures=tuple(EntryFailure(id=i) for i in failed_ids))

    @property
    def failed_ids(self) -> List[str]:
        return [failure.id for failure in self.failures]


class FailureAccumulator(BaseModel):
    """
    Immutable tally of rejected entry ids for one send call.

    extend() returns a new accumulator so each batch step hands its
    result to the next one by value.
    """

    model_config = ConfigDict(frozen=True)

    failed_ids: Tuple[str, ...] = ()
    batches_sent: int = 0

    def extend(self, response: BatchResponse) -> "FailureAccumulator":
        return FailureAccumulator(
            failed_ids=self.failed_ids + tuple(response.failed_ids),
            batches_sent=self.batches_sent + 1
        )

    def __len__(self) -> int:
        return len(self.failed_ids)


class SendResult(BaseModel):
    """
    Final outcome of a send call.

    Attributes:
        failed_ids: Rejected entry ids across every attempt; empty when
            the last attempt was clean
        retried_ids: Ids rejected on attempts that were followed by a retry
        attempts: Number of full passes over the message list
        batches_sent: Number of SendMessageBatch calls made
        error: Summary error when the last attempt still had rejections
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    failed_ids: List[str] = Field(default_factory=list)
    retried_ids: List[str] = Field(default_factory=list)
    attempts: int = Field(default=0, ge=0)
    batches_sent: int = Field(default=0, ge=0)
    error: Optional[MessagesFailedError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise the summarizing error if entries failed after all retries."""
        if self.error is not None:
            raise self.error
