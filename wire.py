"""
Payload helpers for the order & catalog contracts.

Turns incoming payloads (dicts or JSON documents) into contract records and
records back into camelCase payloads. Decode failures surface as ContractError.
"""

import logging
from typing import Any, Dict, List, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from schemas import ContractModel

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=ContractModel)


class ContractError(ValueError):
    """A payload could not be read as the requested contract record."""

    def __init__(self, record_type: str, errors: List[Dict[str, Any]]):
        self.record_type = record_type
        self.errors = errors
        super().__init__(f"Invalid {record_type} payload: {len(errors)} error(s)")


def _wrap(record_type: Type[BaseModel], exc: ValidationError) -> ContractError:
    errors = exc.errors(include_url=False)
    if any(e.get("type") == "json_invalid" for e in errors):
        logger.warning("Malformed JSON for %s", record_type.__name__)
    else:
        logger.warning("Rejected %s payload with %d error(s)", record_type.__name__, len(errors))
    return ContractError(record_type.__name__, errors)


# -----------------
# Decoding
# -----------------

def from_payload(record_type: Type[RecordT], data: Any) -> RecordT:
    """Validate a dict (camelCase or snake_case keys) into record_type."""
    try:
        record = record_type.model_validate(data)
    except ValidationError as exc:
        raise _wrap(record_type, exc) from exc
    logger.debug("Decoded %s", record_type.__name__)
    return record


def from_json(record_type: Type[RecordT], raw: Union[str, bytes]) -> RecordT:
    try:
        record = record_type.model_validate_json(raw)
    except ValidationError as exc:
        raise _wrap(record_type, exc) from exc
    logger.debug("Decoded %s from JSON", record_type.__name__)
    return record


# -----------------
# Encoding
# -----------------

def to_payload(record: ContractModel) -> Dict[str, Any]:
    """JSON-compatible dict keyed by wire names.

    Decimals come out as strings so no precision is lost; OrderStatus comes out
    as its ordinal.
    """
    logger.debug("Encoding %s", type(record).__name__)
    return record.model_dump(mode="json", by_alias=True)


def to_json(record: ContractModel) -> str:
    logger.debug("Encoding %s as JSON", type(record).__name__)
    return record.model_dump_json(by_alias=True)


def changed_fields(update: ContractModel) -> Dict[str, Any]:
    """Only the fields the producer explicitly supplied, keyed by wire name.

    An explicit null is kept, which tells "clear this" apart from "leave it".
    """
    return update.model_dump(mode="json", by_alias=True, exclude_unset=True)
