"""Error types raised by the SDK and the normalizer that produces them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import httpx

NO_RESPONSE = "NO_RESPONSE"
REQUEST_SETUP_ERROR = "REQUEST_SETUP_ERROR"
INVALID_INPUT = "INVALID_INPUT"
INVALID_RESPONSE = "INVALID_RESPONSE"


class RecallBricksError(Exception):
    """The one error type surfaced by the SDK.

    ``status_code`` is ``None`` when no HTTP response was involved (transport
    failures); locally detected problems use 400 like the server would.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, status_code={self.status_code!r}, code={self.code!r})"


class ConfigurationError(RecallBricksError, ValueError):
    def __init__(self, message: str, code: str = "INVALID_CONFIG") -> None:
        super().__init__(message, status_code=400, code=code)


class AuthConfigError(ConfigurationError):
    """Raised when credentials are missing (``reason="missing"``) or both are set (``"conflict"``)."""

    def __init__(self, message: str, *, reason: str, code: str) -> None:
        super().__init__(message, code=code)
        self.reason = reason


class InvalidInputError(RecallBricksError, ValueError):
    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message, status_code=400, code=INVALID_INPUT, details=details)


class MissingUserIdError(InvalidInputError):
    def __init__(self) -> None:
        super().__init__("user_id is required when using service token authentication")
        self.code = "MISSING_USER_ID"


class FailureKind(str, Enum):
    RESPONSE = "response"
    NO_RESPONSE = "no_response"
    SETUP = "setup"
    BAD_RESPONSE = "bad_response"


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str
    response: Optional[httpx.Response] = None

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response is not None else None


# raised before anything is put on the wire
_SETUP_ERRORS = (httpx.InvalidURL, httpx.UnsupportedProtocol, httpx.LocalProtocolError)


def classify_exception(exc: BaseException) -> Optional[Failure]:
    """Map an httpx exception onto a :class:`Failure`, or ``None`` if it is not one."""
    if isinstance(exc, httpx.HTTPStatusError):
        return Failure(FailureKind.RESPONSE, str(exc), response=exc.response)
    # the response arrived but its body could not be decoded
    if isinstance(exc, httpx.DecodingError):
        return Failure(FailureKind.BAD_RESPONSE, str(exc))
    if isinstance(exc, _SETUP_ERRORS):
        return Failure(FailureKind.SETUP, str(exc))
    if isinstance(exc, httpx.TransportError):
        return Failure(FailureKind.NO_RESPONSE, str(exc))
    if isinstance(exc, httpx.RequestError):
        return Failure(FailureKind.SETUP, str(exc))
    return None


def _error_body(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def normalize_failure(failure: Failure) -> RecallBricksError:
    if failure.kind is FailureKind.RESPONSE:
        assert failure.response is not None
        status = failure.response.status_code
        body = _error_body(failure.response)
        message = body.get("error")
        if not isinstance(message, str) or not message:
            message = f"Request failed with status code {status}"
        code = body.get("code")
        return RecallBricksError(
            message,
            status_code=status,
            code=code if isinstance(code, str) else None,
            details=body.get("details"),
        )
    if failure.kind is FailureKind.NO_RESPONSE:
        return RecallBricksError("No response received from server", code=NO_RESPONSE)
    if failure.kind is FailureKind.BAD_RESPONSE:
        return RecallBricksError("Response body could not be decoded", code=INVALID_RESPONSE)
    if failure.kind is FailureKind.SETUP:
        return RecallBricksError(failure.message or "Request could not be sent", code=REQUEST_SETUP_ERROR)
    raise AssertionError(f"unhandled failure kind: {failure.kind!r}")


__all__ = [
    "AuthConfigError",
    "ConfigurationError",
    "Failure",
    "FailureKind",
    "INVALID_INPUT",
    "INVALID_RESPONSE",
    "InvalidInputError",
    "MissingUserIdError",
    "NO_RESPONSE",
    "REQUEST_SETUP_ERROR",
    "RecallBricksError",
    "classify_exception",
    "normalize_failure",
]
