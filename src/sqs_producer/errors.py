"""
Module: errors.py
Description: Exception hierarchy for the SQS producer.

Configuration and message validation errors are raised locally and are
never retried. Transport errors from botocore are not wrapped and
propagate unchanged. MessagesFailedError summarizes per-entry
rejections that survived every retry attempt.
"""

from typing import Iterable, List, Optional


class ProducerError(Exception):
    """Base class for all producer errors."""


class ConfigurationError(ProducerError, ValueError):
    """Invalid producer construction options."""


class MessageValidationError(ProducerError, ValueError):
    """
    A message could not be converted into a wire entry.

    Attributes:
        field: Name of the offending message field, if any
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class MissingBodyError(MessageValidationError):
    def __init__(self):
        super().__init__("Object messages must have 'body' prop", field="body")


class MissingIdentifierError(MessageValidationError):
    def __init__(self):
        super().__init__("Object messages must have 'id' prop", field="id")


class FifoGroupingError(MessageValidationError):
    def __init__(self):
        super().__init__("FIFO Queue messages must have 'groupId' prop", field="group_id")


class InvalidFieldTypeError(MessageValidationError):
    def __init__(self, field: str, expected: str = "a string"):
        super().__init__(f"Message.{field} value must be {expected}", field=field)


class DelayOutOfRangeError(MessageValidationError):
    def __init__(self):
        super().__init__(
            "Message.delay_seconds value must be a number contained within [0 - 900]",
            field="delay_seconds"
        )


class InvalidAttributeError(MessageValidationError):
    def __init__(self, message: str, attribute: Optional[str] = None):
        super().__init__(message, field="message_attributes")
        self.attribute = attribute


class UnsupportedMessageTypeError(MessageValidationError):
    def __init__(self, value: object):
        super().__init__(
            f"A message can either be a mapping or a string, got {type(value).__name__}"
        )


class MessagesFailedError(ProducerError):
    """
    Some entries were rejected by the queue after all retries.

    Attributes:
        failed_ids: Identifiers of every rejected entry, across all attempts
    """

    def __init__(self, failed_ids: Iterable[str]):
        self.failed_ids: List[str] = list(failed_ids)
        super().__init__(
            "Failed to send messages: " + ", ".join(str(i) for i in self.failed_ids)
        )


class QueueAttributeError(ProducerError):
    """A queue attribute read returned without the requested attribute."""

    def __init__(self, queue_url: str, attribute: str):
        self.queue_url = queue_url
        self.attribute = attribute
        super().__init__(f"Queue {queue_url} did not report attribute {attribute}")
