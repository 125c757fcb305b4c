"""
Module: normalizer.py
Description: Conversion of application messages into SQS wire entries.

A message is either a plain string, used as both id and body, or a
mapping with body/id/delay_seconds/message_attributes/group_id/
deduplication_id keys (camelCase spellings are accepted too). Checks
run in a fixed order and the first violation raises a
MessageValidationError subclass naming the field.
"""

from collections.abc import Mapping
from typing import Any, Dict, List, Sequence, Union

from sqs_producer.errors import (
    DelayOutOfRangeError,
    FifoGroupingError,
    InvalidAttributeError,
    InvalidFieldTypeError,
    MissingBodyError,
    MissingIdentifierError,
    UnsupportedMessageTypeError,
)
from sqs_producer.models.entry import WireEntry

InputMessage = Union[str, Mapping]

MAX_DELAY_SECONDS = 900

# Accepted spellings per field, snake_case first.
_FIELD_KEYS = {
    "body": ("body",),
    "id": ("id",),
    "delay_seconds": ("delay_seconds", "delaySeconds"),
    "message_attributes": ("message_attributes", "messageAttributes"),
    "group_id": ("group_id", "groupId"),
    "deduplication_id": ("deduplication_id", "deduplicationId"),
}


def _get(message: Mapping, field: str) -> Any:
    for key in _FIELD_KEYS[field]:
        value = message.get(key)
        if value is not None:
            return value
    return None


def _is_set(value: Any) -> bool:
    # Empty strings count as absent, like a missing key.
    return value is not None and value != ""


def _validate_attributes(attributes: Any) -> Dict[str, Dict[str, Any]]:
    if not isinstance(attributes, Mapping):
        raise InvalidAttributeError("Message.message_attributes must be a mapping")

    validated = {}
    for name, attribute in attributes.items():
        if not isinstance(attribute, Mapping) or not attribute.get("DataType"):
            raise InvalidAttributeError(
                "A MessageAttribute must have a DataType key",
                attribute=name
            )
        if not isinstance(attribute["DataType"], str):
            raise InvalidAttributeError(
                "The DataType key of a MessageAttribute must be a String",
                attribute=name
            )
        validated[name] = dict(attribute)
    return validated


def entry_from_string(message: str) -> WireEntry:
    """Build an entry whose id and body are both the given text."""
    return WireEntry(id=message, body=message)


def entry_from_mapping(message: Mapping) -> WireEntry:
    """
    Validate a structured message and project it onto a WireEntry.

    Args:
        message: Mapping with at least a body and one identifier

    Returns:
        Frozen WireEntry

    Raises:
        MessageValidationError: On the first violated field constraint
    """
    body = _get(message, "body")
    message_id = _get(message, "id")
    delay_seconds = _get(message, "delay_seconds")
    attributes = _get(message, "message_attributes")
    group_id = _get(message, "group_id")
    deduplication_id = _get(message, "deduplication_id")

    if not _is_set(body):
        raise MissingBodyError()
    if not isinstance(body, str):
        raise InvalidFieldTypeError("body")

    if not (_is_set(message_id) or _is_set(group_id) or _is_set(deduplication_id)):
        raise MissingIdentifierError()

    if _is_set(deduplication_id) and not _is_set(group_id):
        raise FifoGroupingError()

    fields: Dict[str, Any] = {"body": body}

    if _is_set(message_id):
        if not isinstance(message_id, str):
            raise InvalidFieldTypeError("id")
        fields["id"] = message_id

    if delay_seconds is not None:
        if isinstance(delay_seconds, float) and delay_seconds.is_integer():
            delay_seconds = int(delay_seconds)
        if (
            isinstance(delay_seconds, bool)
            or not isinstance(delay_seconds, int)
            or not 0 <= delay_seconds <= MAX_DELAY_SECONDS
        ):
            raise DelayOutOfRangeError()
        fields["delay_seconds"] = delay_seconds

    if attributes is not None:
        fields["message_attributes"] = _validate_attributes(attributes)

    if _is_set(group_id):
        if not isinstance(group_id, str):
            raise InvalidFieldTypeError("group_id")
        fields["group_id"] = group_id

    if _is_set(deduplication_id):
        if not isinstance(deduplication_id, str):
            raise InvalidFieldTypeError("deduplication_id")
        fields["deduplication_id"] = deduplication_id

    return WireEntry(**fields)


def normalize_message(message: InputMessage) -> WireEntry:
    """
    Convert one input message into a WireEntry.

    Args:
        message: A string or a mapping

    Returns:
        WireEntry ready for submission

    Raises:
        UnsupportedMessageTypeError: If message is neither str nor mapping
        MessageValidationError: If a structured message is malformed
    """
    if isinstance(message, str):
        return entry_from_string(message)
    if isinstance(message, Mapping):
        return entry_from_mapping(message)
    raise UnsupportedMessageTypeError(message)


def normalize_batch(messages: Sequence[InputMessage]) -> List[WireEntry]:
    """Normalize every message of a batch; the first failure aborts."""
    return [normalize_message(message) for message in messages]


def coerce_message_list(
    messages: Union[InputMessage, Sequence[InputMessage]]
) -> List[InputMessage]:
    """
    Wrap a single message into a list, copy list/tuple input.

    Returns:
        A new list the caller may hold on to across retries
    """
    if isinstance(messages, (list, tuple)):
        return list(messages)
    return [messages]


__all__ = [
    "InputMessage",
    "normalize_message",
    "normalize_batch",
    "coerce_message_list",
    "entry_from_string",
    "entry_from_mapping",
]
