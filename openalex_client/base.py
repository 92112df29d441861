"""Base HTTP client with retry logic."""

import asyncio

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

# Default settings
API_BASE_URL = "https://api.openalex.org"
API_TIMEOUT = 30
API_EMAIL: str | None = None


def set_api_config(base_url: str, timeout: int, email: str | None = None) -> None:
    """Set API configuration."""
    global API_BASE_URL, API_TIMEOUT, API_EMAIL
    API_BASE_URL = base_url
    API_TIMEOUT = timeout
    API_EMAIL = email


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


def _log_retry(state: RetryCallState) -> None:
    logger.warning("Retrying request (attempt {}): {}", state.attempt_number, state.outcome.exception())


class BaseClient:
    """Base async HTTP client with rate limiting and exponential backoff."""

    def __init__(self, max_concurrent: int = 2, transport: httpx.AsyncBaseTransport | None = None):
        self._client: httpx.AsyncClient | None = None
        self._transport = transport
        self._sem = asyncio.Semaphore(max_concurrent)
        self._request_count = 0
        logger.debug("{}: max_concurrent={}", self.__class__.__name__, max_concurrent)

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            base_url=API_BASE_URL,
            timeout=API_TIMEOUT,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        logger.debug("Total API requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()

    @property
    def request_count(self) -> int:
        return self._request_count

    def _params(self, **params) -> dict:
        """Query parameters, with mailto for the polite pool when configured."""
        if API_EMAIL:
            params["mailto"] = API_EMAIL
        return params

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception(_is_retryable_error),
        before_sleep=_log_retry,
        reraise=True,
    )
    async def _get(self, path: str, params: dict | None = None) -> dict | list:
        """GET request with retry logic."""
        async with self._sem:
            self._request_count += 1
            resp = await self._client.get(f"/{path}", params=params)
            resp.raise_for_status()
            return resp.json()
