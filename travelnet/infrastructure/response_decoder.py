"""Response Decoder — JSON bytes -> typed value, converting snake_case keys to camelCase.

Invariants:
    - Keys are rewritten snake -> camel before validation; camelCase keys pass unchanged
    - Invalid JSON or a shape mismatch raises DecodingFailedError(cause)
    - Works for any type pydantic can validate (models, lists of models, dicts)
"""

import json
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter

from travelnet.core.case_conversion import convert_keys, to_camel
from travelnet.core.errors import DecodingFailedError

T = TypeVar("T")


@lru_cache(maxsize=128)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


class JSONResponseDecoder:

    def decode(self, content: bytes, response_type: type[T]) -> T:
        try:
            payload = json.loads(content)
            return _adapter(response_type).validate_python(convert_keys(payload, to_camel))
        except ValueError as e:
            raise DecodingFailedError(e) from e

    def decode_raw(self, content: bytes) -> Any:
        """Parse without validation (keys still camelCased). None if not JSON."""
        try:
            return convert_keys(json.loads(content), to_camel)
        except ValueError:
            return None
