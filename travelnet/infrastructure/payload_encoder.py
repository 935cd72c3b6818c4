"""Payload Encoder — serializes request bodies to JSON bytes with snake_case keys.

Invariants:
    - Every key of every object in the output is snake_case, whatever the model's
      own naming (pydantic field names, aliases, dataclass fields or dict keys)
    - Output is strict JSON (allow_nan=False) encoded as UTF-8
    - Any serialization failure raises EncodingFailedError(cause), never a raw exception

Design Decisions:
    - pydantic models dumped in "json" mode so enums/dates/UUIDs become JSON-native
      before the key rewrite
    - Kept apart from the request builder so encoding failures are classified
      distinctly from transport failures
"""

import dataclasses
import json
from collections.abc import Mapping

from pydantic import BaseModel, TypeAdapter

from travelnet.core.case_conversion import convert_keys, to_snake
from travelnet.core.errors import EncodingFailedError


class JSONPayloadEncoder:
    """Encode a body model into snake_case JSON bytes."""

    def encode(self, model: object) -> bytes:
        try:
            plain = self._to_plain(model)
            snake = convert_keys(plain, to_snake)
            return json.dumps(snake, ensure_ascii=False, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodingFailedError(e) from e

    def _to_plain(self, model: object) -> object:
        if isinstance(model, BaseModel):
            return model.model_dump(mode="json")
        if dataclasses.is_dataclass(model) and not isinstance(model, type):
            return TypeAdapter(type(model)).dump_python(model, mode="json")
        if isinstance(model, Mapping):
            return TypeAdapter(dict).dump_python(dict(model), mode="json")
        return TypeAdapter(type(model)).dump_python(model, mode="json")
