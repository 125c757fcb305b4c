"""
Module: entry.py
Description: Wire entry model for SQS batch submissions.

Defines the canonical, immutable form of one message as submitted to
SendMessageBatch. Entries are created by the message normalizer and
serialized with to_sqs() into the request entry shape SQS expects.

Key Components:
- WireEntry: Frozen entry model with SQS field aliases
- to_sqs(): Serialize to a SendMessageBatchRequestEntry dictionary

Dependencies: pydantic, typing
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class WireEntry(BaseModel):
    """
    One message in canonical wire-ready form.

    Attributes:
        id: Entry identifier, unique within a batch
        body: Message payload
        delay_seconds: Per-message delivery delay (0-900)
        message_attributes: SQS message attributes, passed through verbatim
        group_id: FIFO message group
        deduplication_id: FIFO deduplication token
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )

    id: Optional[str] = Field(default=None, alias="Id")
    body: str = Field(..., alias="MessageBody")
    delay_seconds: Optional[int] = Field(default=None, ge=0, le=900, alias="DelaySeconds")
    message_attributes: Optional[Dict[str, Dict[str, Any]]] = Field(
        default=None,
        alias="MessageAttributes"
    )
    group_id: Optional[str] = Field(default=None, alias="MessageGroupId")
    deduplication_id: Optional[str] = Field(default=None, alias="MessageDeduplicationId")

    def to_sqs(self) -> Dict[str, Any]:
        """Serialize to a SendMessageBatchRequestEntry, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
