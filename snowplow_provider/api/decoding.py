"""Decoding of validated console bodies into records."""

from __future__ import annotations

import json
from typing import List, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..models import ConsoleRecord
from ..utils.http_client import MalformedResponseError

RecordT = TypeVar("RecordT", bound=ConsoleRecord)


def decode_record(model: Type[RecordT], body: bytes) -> RecordT:
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise MalformedResponseError(f"console returned an unexpected {model.__name__} payload: {exc}") from exc


def decode_records(model: Type[RecordT], body: bytes) -> List[RecordT]:
    """Decodes a JSON array; ``[]`` and ``null`` both give an empty list."""

    if json.loads(body) is None:
        return []
    try:
        return TypeAdapter(List[model]).validate_json(body)
    except ValidationError as exc:
        raise MalformedResponseError(f"console returned an unexpected {model.__name__} list: {exc}") from exc
