"""
Package: producer
Description: Message normalization, batch dispatch and retry policy.
"""

from .dispatcher import DispatchState, Producer
from .normalizer import normalize_message

__all__ = ["DispatchState", "Producer", "normalize_message"]
