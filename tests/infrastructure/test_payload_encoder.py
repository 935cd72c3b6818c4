"""Payload Encoder — verifies the snake_case wire-key contract and failure mapping."""

import json
from dataclasses import dataclass

import pytest
from pydantic import BaseModel, ConfigDict

from travelnet.core.case_conversion import to_camel
from travelnet.core.domain_types import POICategory
from travelnet.core.errors import EncodingFailedError
from travelnet.infrastructure.payload_encoder import JSONPayloadEncoder
from travelnet.infrastructure.response_decoder import JSONResponseDecoder
from travelnet.schemas.auth import RegisterRequest, UserPayload


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str
    home_address: dict


@dataclass
class _Profile:
    firstName: str
    favouriteCategory: POICategory


def _decoded(data: bytes):
    return json.loads(data)


def test_pydantic_body_uses_snake_case_keys():
    body = JSONPayloadEncoder().encode(RegisterRequest(
        email="a@b.c", password="pw", first_name="Ana", last_name="Lima", phone="+351",
    ))
    assert _decoded(body) == {
        "email": "a@b.c", "password": "pw",
        "first_name": "Ana", "last_name": "Lima", "phone": "+351",
    }


def test_camel_named_dataclass_is_rewritten_to_snake_case():
    body = JSONPayloadEncoder().encode(_Profile("Ana", POICategory.BEACH_PARK))
    assert _decoded(body) == {"first_name": "Ana", "favourite_category": "BEACH_PARK"}


def test_nested_keys_are_rewritten():
    body = JSONPayloadEncoder().encode({"userInfo": {"lastName": "Lima", "tagList": [{"tagName": "x"}]}})
    assert _decoded(body) == {"user_info": {"last_name": "Lima", "tag_list": [{"tag_name": "x"}]}}


def test_model_with_camel_aliases_still_sends_snake_case():
    body = JSONPayloadEncoder().encode(_CamelModel(first_name="Ana", home_address={"zipCode": "1"}))
    assert _decoded(body) == {"first_name": "Ana", "home_address": {"zip_code": "1"}}


def test_output_is_utf8():
    body = JSONPayloadEncoder().encode({"name": "Batlló"})
    assert "Batlló".encode("utf-8") in body


def test_unserializable_value_fails_with_encoding_error():
    with pytest.raises(EncodingFailedError) as exc:
        JSONPayloadEncoder().encode({"handle": object()})
    assert exc.value.cause is not None


def test_round_trip_through_snake_wire_reconstructs_the_value():
    user = UserPayload(id="7", email="ana@example.com", first_name="Ana", last_name="Lima")
    wire = JSONPayloadEncoder().encode(user)
    assert b'"first_name"' in wire
    echoed = JSONResponseDecoder().decode(wire, UserPayload)
    assert echoed == user
