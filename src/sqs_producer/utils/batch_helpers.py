"""
Module: batch_helpers.py
Description: Utility functions for batch operations.

Splits message lists into bounded batches for submission and guards
the per-call entry ceiling imposed by SQS.

Key Components:
- iter_batches(): Walk a list in fixed-size slices with their offsets
- validate_batch_size(): Validate batch size constraints

Dependencies: typing
"""

from typing import Any, Iterator, List, Sequence, Tuple, TypeVar

T = TypeVar('T')

# SendMessageBatch accepts at most this many entries per call.
MAX_BATCH_ENTRIES = 10


def iter_batches(items: Sequence[T], batch_size: int) -> Iterator[Tuple[int, List[T]]]:
    """
    Yield consecutive slices of a sequence together with their start offset.

    Slices are produced lazily, so a caller that stops early never
    materializes the remaining batches.

    Args:
        items: Sequence to walk
        batch_size: Maximum size of each slice

    Yields:
        (offset, batch) tuples covering items in order, without overlap

    Raises:
        ValueError: If batch_size is not positive

    Example:
        >>> list(iter_batches([1, 2, 3, 4, 5], 2))
        [(0, [1, 2]), (2, [3, 4]), (4, [5])]
    """
    if batch_size <= 0:
        raise ValueError("batch_size must be positive")

    offset = 0
    while offset < len(items):
        yield offset, list(items[offset:offset + batch_size])
        offset += batch_size


def validate_batch_size(items: List[Any], max_size: int = MAX_BATCH_ENTRIES) -> None:
    """
    Validate that a batch is non-empty and doesn't exceed the maximum size.

    Args:
        items: List of items to validate
        max_size: Maximum allowed batch size

    Raises:
        ValueError: If the batch is empty or exceeds the maximum
    """
    if not isinstance(items, list):
        raise ValueError("items must be a list")
    if not items:
        raise ValueError("batch cannot be empty")
    if len(items) > max_size:
        raise ValueError(f"batch size cannot exceed {max_size} items")
