"""Bounded retry with exponential backoff for single HTTP attempts."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, FrozenSet, TypeVar

import httpx

from .config import ClientConfig
from .errors import Failure, FailureKind, classify_exception, normalize_failure

logger = logging.getLogger("recallbricks.retry")

T = TypeVar("T")

RETRYABLE_STATUS_CODES: FrozenSet[int] = frozenset({429, 500, 501, 502, 503, 504})

Sleeper = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class RetryPolicy:
    max_retries: int = 3
    retry_delay: float = 1.0
    max_retry_delay: float = 10.0
    retryable_statuses: FrozenSet[int] = RETRYABLE_STATUS_CODES

    @classmethod
    def from_config(cls, config: ClientConfig) -> "RetryPolicy":
        return cls(
            max_retries=config.max_retries,
            retry_delay=config.retry_delay,
            max_retry_delay=config.max_retry_delay,
        )

    def backoff(self, attempt: int) -> float:
        """Delay before retry number ``attempt + 1``, capped at ``max_retry_delay``."""
        delay = self.retry_delay * (2 ** attempt)
        return max(0.0, min(delay, self.max_retry_delay))

    def is_retryable(self, failure: Failure) -> bool:
        if failure.kind in (FailureKind.NO_RESPONSE, FailureKind.BAD_RESPONSE):
            return True
        if failure.kind is FailureKind.RESPONSE:
            return failure.status_code in self.retryable_statuses
        return False


async def execute_with_retry(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy,
    *,
    sleep: Sleeper = asyncio.sleep,
) -> T:
    """Run ``operation`` until it succeeds, fails terminally, or the budget is spent.

    ``operation`` must perform exactly one network attempt. Exceptions that are
    not httpx request/status errors propagate unchanged and are never retried.
    """
    attempt = 0
    while True:
        try:
            return await operation()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            failure = classify_exception(exc)
            if failure is None:
                raise
            if not policy.is_retryable(failure):
                raise normalize_failure(failure) from exc
            if attempt >= policy.max_retries:
                logger.debug(
                    "Giving up after %s attempt(s) kind=%s status=%s",
                    attempt + 1,
                    failure.kind.value,
                    failure.status_code,
                )
                raise normalize_failure(failure) from exc
            delay = policy.backoff(attempt)
            logger.debug(
                "Retrying attempt=%s kind=%s status=%s delay=%.3fs",
                attempt + 1,
                failure.kind.value,
                failure.status_code,
                delay,
            )
        await sleep(delay)
        attempt += 1


__all__ = ["RETRYABLE_STATUS_CODES", "RetryPolicy", "execute_with_retry"]
