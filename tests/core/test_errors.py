"""Error Hierarchy — verifies taxonomy shape and the limited-payload equality contract.

Tests:
    - ServerError equal by status code only, message ignored
    - TransportError equal by reason, RequestBuildingFailedError by reason text
    - Every other error equal by class alone, causes ignored
    - Hash consistent with equality; to_dict renders the envelope
"""

from travelnet.core.errors import (
    DecodingFailedError,
    EmptyResponseError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InvalidURLError,
    NetworkingError,
    NoConnectionError,
    RequestBuildingFailedError,
    ServerError,
    TransportError,
    TransportFailure,
    UnknownNetworkingError,
)


def test_server_errors_equal_by_status_code_only():
    assert ServerError(400, "Bad request") == ServerError(400, "Something else")
    assert ServerError(400) != ServerError(404)


def test_transport_errors_equal_by_reason():
    assert TransportError(TransportFailure.NETWORK, ValueError("a")) == TransportError(
        TransportFailure.NETWORK, OSError("b"),
    )
    assert TransportError(TransportFailure.NETWORK) != TransportError(
        TransportFailure.BAD_SERVER_RESPONSE,
    )


def test_request_building_errors_equal_by_reason():
    assert RequestBuildingFailedError("x") == RequestBuildingFailedError("x")
    assert RequestBuildingFailedError("x") != RequestBuildingFailedError("y")


def test_other_errors_equal_by_class_ignoring_cause():
    assert DecodingFailedError(ValueError("a")) == DecodingFailedError(KeyError("b"))
    assert InvalidURLError("one") == InvalidURLError("two")
    assert EmptyResponseError() != DecodingFailedError()


def test_hash_consistent_with_equality():
    assert len({ServerError(500, "a"), ServerError(500, "b"), ServerError(502)}) == 2


def test_every_error_is_a_networking_error():
    for error in (InvalidURLError(), NoConnectionError(), UnknownNetworkingError()):
        assert isinstance(error, NetworkingError)


def test_server_error_severity_by_bracket():
    assert ServerError(503).severity == ErrorSeverity.CRITICAL
    assert ServerError(404).severity == ErrorSeverity.ERROR
    assert ServerError(404).category == ErrorCategory.RESPONSE_VALIDATION


def test_server_error_keeps_message():
    error = ServerError(400, "Bad request")
    assert error.status_code == 400
    assert error.server_message == "Bad request"
    assert "Bad request" in str(error)


def test_to_dict_renders_envelope():
    error = ServerError(
        404, "Not found", context=ErrorContext(method="GET", url="https://x/y", status_code=404),
    )
    body = error.to_dict()["error"]
    assert body["code"] == "SERVER_ERROR"
    assert body["category"] == "response_validation"
    assert body["context"] == {"method": "GET", "url": "https://x/y", "status_code": 404}
    assert body["cause"] is None
