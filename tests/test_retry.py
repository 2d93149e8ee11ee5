from __future__ import annotations

import httpx
import pytest

from recallbricks import RecallBricksError, RetryPolicy
from recallbricks.errors import FailureKind, classify_exception
from recallbricks.retry import execute_with_retry

REQUEST = httpx.Request("GET", "https://api.example.com/api/v1/memories")


def status_error(status: int, **body) -> httpx.HTTPStatusError:
    response = httpx.Response(status, json=body, request=REQUEST)
    return httpx.HTTPStatusError(f"status {status}", request=REQUEST, response=response)


class FlakyOperation:
    def __init__(self, *outcomes) -> None:
        self.outcomes = list(outcomes)
        self.calls = 0

    async def __call__(self):
        outcome = self.outcomes[min(self.calls, len(self.outcomes) - 1)]
        self.calls += 1
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


def test_backoff_doubles_and_caps() -> None:
    policy = RetryPolicy(max_retries=5, retry_delay=1.0, max_retry_delay=10.0)
    assert [policy.backoff(i) for i in range(5)] == [1.0, 2.0, 4.0, 8.0, 10.0]


def test_backoff_respects_ceiling_on_first_attempt() -> None:
    policy = RetryPolicy(retry_delay=30.0, max_retry_delay=5.0)
    assert policy.backoff(0) == 5.0


def test_backoff_never_negative() -> None:
    assert RetryPolicy(retry_delay=0.0, max_retry_delay=0.0).backoff(3) == 0.0


@pytest.mark.parametrize(
    "exc, kind",
    [
        (status_error(503), FailureKind.RESPONSE),
        (httpx.ConnectError("refused", request=REQUEST), FailureKind.NO_RESPONSE),
        (httpx.ReadTimeout("timed out", request=REQUEST), FailureKind.NO_RESPONSE),
        (httpx.RemoteProtocolError("reset", request=REQUEST), FailureKind.NO_RESPONSE),
        (httpx.UnsupportedProtocol("ftp", request=REQUEST), FailureKind.SETUP),
        (httpx.InvalidURL("bad url"), FailureKind.SETUP),
        (httpx.DecodingError("incorrect header check", request=REQUEST), FailureKind.BAD_RESPONSE),
    ],
)
def test_classify_exception(exc, kind) -> None:
    failure = classify_exception(exc)
    assert failure is not None
    assert failure.kind is kind


def test_classify_ignores_foreign_exceptions() -> None:
    assert classify_exception(KeyError("x")) is None


@pytest.mark.parametrize("status", [429, 500, 501, 502, 503, 504])
def test_retryable_statuses(status: int) -> None:
    failure = classify_exception(status_error(status))
    assert RetryPolicy().is_retryable(failure)


@pytest.mark.parametrize("status", [400, 401, 403, 404, 409, 422, 505])
def test_terminal_statuses(status: int) -> None:
    failure = classify_exception(status_error(status))
    assert not RetryPolicy().is_retryable(failure)


def test_retryable_statuses_can_be_overridden() -> None:
    policy = RetryPolicy(retryable_statuses=frozenset({409}))
    assert policy.is_retryable(classify_exception(status_error(409)))
    assert not policy.is_retryable(classify_exception(status_error(503)))


@pytest.mark.asyncio
async def test_success_first_try_does_not_sleep(sleeps) -> None:
    operation = FlakyOperation({"ok": True})
    result = await execute_with_retry(operation, RetryPolicy(max_retries=3), sleep=sleeps)
    assert result == {"ok": True}
    assert operation.calls == 1
    assert sleeps.delays == []


@pytest.mark.asyncio
@pytest.mark.parametrize("max_retries", [0, 1, 3])
async def test_exhausts_budget_on_retryable_failures(sleeps, max_retries: int) -> None:
    operation = FlakyOperation(status_error(503, error="down"))
    policy = RetryPolicy(max_retries=max_retries, retry_delay=1.0, max_retry_delay=3.0)

    with pytest.raises(RecallBricksError) as excinfo:
        await execute_with_retry(operation, policy, sleep=sleeps)

    assert operation.calls == max_retries + 1
    assert sleeps.delays == [policy.backoff(i) for i in range(max_retries)]
    assert excinfo.value.status_code == 503
    assert excinfo.value.message == "down"


@pytest.mark.asyncio
async def test_surfaces_error_from_last_attempt(sleeps) -> None:
    operation = FlakyOperation(status_error(500, error="first"), status_error(502, error="last"))
    with pytest.raises(RecallBricksError) as excinfo:
        await execute_with_retry(operation, RetryPolicy(max_retries=1), sleep=sleeps)
    assert excinfo.value.status_code == 502
    assert excinfo.value.message == "last"


@pytest.mark.asyncio
async def test_terminal_failure_stops_immediately(sleeps) -> None:
    operation = FlakyOperation(status_error(503), status_error(404, error="missing"), {"ok": True})
    with pytest.raises(RecallBricksError) as excinfo:
        await execute_with_retry(operation, RetryPolicy(max_retries=5), sleep=sleeps)
    assert operation.calls == 2
    assert excinfo.value.status_code == 404
    assert len(sleeps.delays) == 1


@pytest.mark.asyncio
async def test_recovers_after_transient_failure(sleeps) -> None:
    operation = FlakyOperation(httpx.ConnectError("refused", request=REQUEST), {"id": "m1"})
    result = await execute_with_retry(operation, RetryPolicy(max_retries=2, retry_delay=0.25), sleep=sleeps)
    assert result == {"id": "m1"}
    assert sleeps.delays == [0.25]


@pytest.mark.asyncio
async def test_setup_errors_are_not_retried(sleeps) -> None:
    operation = FlakyOperation(httpx.UnsupportedProtocol("Request URL has an unsupported protocol", request=REQUEST))
    with pytest.raises(RecallBricksError) as excinfo:
        await execute_with_retry(operation, RetryPolicy(max_retries=3), sleep=sleeps)
    assert operation.calls == 1
    assert excinfo.value.code == "REQUEST_SETUP_ERROR"
    assert excinfo.value.status_code is None


@pytest.mark.asyncio
async def test_unclassified_errors_propagate_unchanged(sleeps) -> None:
    bug = TypeError("payload is not serialisable")
    operation = FlakyOperation(bug)
    with pytest.raises(TypeError) as excinfo:
        await execute_with_retry(operation, RetryPolicy(max_retries=3), sleep=sleeps)
    assert excinfo.value is bug
    assert operation.calls == 1


@pytest.mark.asyncio
async def test_normalized_error_keeps_httpx_cause(sleeps) -> None:
    original = status_error(400, error="bad")
    with pytest.raises(RecallBricksError) as excinfo:
        await execute_with_retry(FlakyOperation(original), RetryPolicy(), sleep=sleeps)
    assert excinfo.value.__cause__ is original
