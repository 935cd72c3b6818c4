"""Error Hierarchy — typed, categorized exceptions for every networking failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory = the layer it comes from),
      severity (ErrorSeverity) and an ErrorContext
    - Equality is class + discriminating payload only: ServerError by status code,
      TransportError by failure reason, RequestBuildingFailedError by reason text,
      everything else by class alone (wrapped causes never take part)
    - __hash__ is consistent with __eq__
    - Callers above the repository only ever see NetworkingError subclasses

Design Decisions:
    - Single hierarchy with NetworkingError base: one `except NetworkingError` covers
      the whole taxonomy (ADR: uniform error shape)
    - Limited-payload equality: tests assert on the case, not on the server's wording
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Layer that produced the error."""
    URL_BUILDING = "url_building"
    REQUEST_BUILDING = "request_building"
    TRANSPORT = "transport"
    RESPONSE_VALIDATION = "response_validation"
    DECODING = "decoding"
    UNKNOWN = "unknown"


class TransportFailure(str, Enum):
    """Why a transport-level exchange failed (discriminates TransportError)."""
    BAD_SERVER_RESPONSE = "bad_server_response"
    USER_AUTHENTICATION_REQUIRED = "user_authentication_required"
    NETWORK = "network"
    PROTOCOL = "protocol"
    OTHER = "other"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    method: str | None = None
    url: str | None = None
    status_code: int | None = None
    debug_info: dict[str, Any] | None = None


class NetworkingError(Exception):
    """Base exception for all networking failures."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.cause = cause

    def _identity(self) -> tuple:
        """Discriminating payload used by __eq__/__hash__. Class-only by default."""
        return ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NetworkingError):
            return NotImplemented
        return type(self) is type(other) and self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash((type(self), self._identity()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def to_dict(self) -> dict:
        """Convert to the uniform error envelope (used for structured logs)."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "method": self.context.method,
                    "url": self.context.url,
                    "status_code": self.context.status_code,
                },
                "cause": repr(self.cause) if self.cause is not None else None,
            }
        }


# ─── URL Building ───────────────────────────────────────────────

class InvalidURLError(NetworkingError):
    """Base URL lacks scheme/host, or the composed URL cannot be parsed."""
    def __init__(
        self,
        detail: str = "Malformed URL",
        cause: BaseException | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Invalid URL: {detail}", "INVALID_URL", ErrorCategory.URL_BUILDING,
            ErrorSeverity.ERROR, context, cause,
        )
        self.detail = detail


# ─── Request Building ───────────────────────────────────────────

class RequestBuildingFailedError(NetworkingError):
    """The request could not be assembled (e.g. body given without an encoder)."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Failed to build request: {reason}", "REQUEST_BUILDING_FAILED",
            ErrorCategory.REQUEST_BUILDING, ErrorSeverity.ERROR, context,
        )
        self.reason = reason

    def _identity(self) -> tuple:
        return (self.reason,)


class EncodingFailedError(NetworkingError):
    """The request body could not be serialized."""
    def __init__(self, cause: BaseException | None = None, context: ErrorContext | None = None):
        super().__init__(
            f"Failed to encode payload: {cause}", "ENCODING_FAILED",
            ErrorCategory.REQUEST_BUILDING, ErrorSeverity.ERROR, context, cause,
        )


# ─── Transport ──────────────────────────────────────────────────

class NoConnectionError(NetworkingError):
    """Host unreachable / no network."""
    def __init__(self, cause: BaseException | None = None, context: ErrorContext | None = None):
        super().__init__(
            "No internet connection available", "NO_CONNECTION",
            ErrorCategory.TRANSPORT, ErrorSeverity.WARNING, context, cause,
        )


class RequestTimeoutError(NetworkingError):
    """The attempt exceeded its timeout."""
    def __init__(self, cause: BaseException | None = None, context: ErrorContext | None = None):
        super().__init__(
            "Request timed out", "TIMEOUT",
            ErrorCategory.TRANSPORT, ErrorSeverity.WARNING, context, cause,
        )


class TransportError(NetworkingError):
    """Any other transport failure, discriminated by its reason."""
    def __init__(
        self,
        reason: TransportFailure = TransportFailure.OTHER,
        cause: BaseException | None = None,
        context: ErrorContext | None = None,
    ):
        detail = f": {cause}" if cause is not None else ""
        super().__init__(
            f"Transport error ({reason.value}){detail}", "TRANSPORT_ERROR",
            ErrorCategory.TRANSPORT, ErrorSeverity.ERROR, context, cause,
        )
        self.reason = reason

    def _identity(self) -> tuple:
        return (self.reason,)


# ─── Response Validation ────────────────────────────────────────

class InvalidContentTypeError(NetworkingError):
    """A 2xx response declared a non-JSON Content-Type."""
    def __init__(self, content_type: str | None = None, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid content type in response: {content_type}", "INVALID_CONTENT_TYPE",
            ErrorCategory.RESPONSE_VALIDATION, ErrorSeverity.ERROR, context,
        )
        self.content_type = content_type


class EmptyResponseError(NetworkingError):
    """A 2xx response carried no body."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Server returned empty response", "EMPTY_RESPONSE",
            ErrorCategory.RESPONSE_VALIDATION, ErrorSeverity.ERROR, context,
        )


class ServerError(NetworkingError):
    """4xx/5xx response. Equal by status code only."""
    def __init__(
        self, status_code: int, message: str | None = None, context: ErrorContext | None = None,
    ):
        text = (
            f"Server error ({status_code}): {message}" if message
            else f"Server error with code: {status_code}"
        )
        severity = ErrorSeverity.CRITICAL if status_code >= 500 else ErrorSeverity.ERROR
        super().__init__(
            text, "SERVER_ERROR", ErrorCategory.RESPONSE_VALIDATION, severity, context,
        )
        self.status_code = status_code
        self.server_message = message

    def _identity(self) -> tuple:
        return (self.status_code,)


# ─── Decoding ───────────────────────────────────────────────────

class DecodingFailedError(NetworkingError):
    """The body was not valid JSON or did not match the expected shape."""
    def __init__(self, cause: BaseException | None = None, context: ErrorContext | None = None):
        super().__init__(
            f"Failed to decode response: {cause}", "DECODING_FAILED",
            ErrorCategory.DECODING, ErrorSeverity.ERROR, context, cause,
        )


# ─── Catch-all ──────────────────────────────────────────────────

class UnknownNetworkingError(NetworkingError):
    """Anything the network service could not classify."""
    def __init__(self, cause: BaseException | None = None, context: ErrorContext | None = None):
        text = f"Unknown error: {cause}" if cause is not None else "Unknown error occurred"
        super().__init__(
            text, "UNKNOWN_ERROR", ErrorCategory.UNKNOWN,
            ErrorSeverity.CRITICAL, context, cause,
        )
