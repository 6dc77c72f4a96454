"""Shared async HTTP transport for the upstream clients.

Every outbound call goes through ``BaseHTTPClient.get``, which bounds the call
with a timeout and retries transient failures (transport errors, 408 and 5xx
responses) a fixed number of times with a fixed delay between attempts.
Clients built on top of it never retry themselves.
"""
import asyncio
import logging
from typing import Any

import httpx

_RETRYABLE_STATUS_CODES = {408}


def is_transient(response: httpx.Response) -> bool:
    return response.status_code in _RETRYABLE_STATUS_CODES or response.is_server_error


class BaseHTTPClient:
    """Base async HTTP client with a fixed-delay retry policy.

    Args:
        base_url: Base URL for relative request paths
        timeout: Per-request timeout in seconds
        retry_attempts: Total attempts per call (1 disables retries)
        retry_delay: Seconds to wait between attempts
        logger: Logger for request/retry messages (defaults to this module's logger)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        retry_attempts: int = 3,
        retry_delay: float = 0.6,
        logger: logging.Logger | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.retry_attempts = max(1, retry_attempts)
        self.retry_delay = retry_delay
        self.logger = logger or logging.getLogger(__name__)
        self.client = httpx.AsyncClient(base_url=self.base_url, timeout=timeout)

    async def get(self, url: str, params: dict[str, Any] | None = None) -> httpx.Response:
        """GET ``url`` (relative to base_url, or absolute), retrying transient failures.

        Returns the last response received, which may still be an error status
        once attempts are exhausted.

        Raises:
            httpx.TransportError: if the last attempt failed at the transport level
            httpx.DecodingError: if a response body cannot be decoded (not retried)
        """
        for attempt in range(1, self.retry_attempts + 1):
            last_attempt = attempt == self.retry_attempts
            try:
                response = await self.client.get(url, params=params)
            except httpx.TransportError as e:
                if last_attempt:
                    raise
                self.logger.warning(
                    "Transport error for %s: %s, retrying in %.1fs (attempt %d/%d)",
                    url, e, self.retry_delay, attempt, self.retry_attempts,
                )
            else:
                if last_attempt or not is_transient(response):
                    return response
                self.logger.warning(
                    "Retryable %d for %s, retrying in %.1fs (attempt %d/%d)",
                    response.status_code, url, self.retry_delay, attempt, self.retry_attempts,
                )
            await asyncio.sleep(self.retry_delay)

        # Unreachable: the last attempt always returns or raises
        raise RuntimeError("retry loop exited without a result")

    async def close(self):
        """Close the underlying HTTP connection pool (call on app shutdown)."""
        await self.client.aclose()
