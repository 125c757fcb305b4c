"""
Module: models
Description: Package initialization for Pydantic data models.

This package contains the data models used by the producer:
- WireEntry: Canonical SQS batch entry
- BatchResponse / EntryFailure: Outcome of one transport call
- FailureAccumulator: Per-send tally threaded through batches
- SendResult: Final outcome of a send call
"""

from .entry import WireEntry
from .result import BatchResponse, EntryFailure, FailureAccumulator, SendResult

__all__ = [
    "WireEntry",
    "BatchResponse",
    "EntryFailure",
    "FailureAccumulator",
    "SendResult",
]
