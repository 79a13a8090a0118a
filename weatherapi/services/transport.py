"""
HTTP transport that fetches provider responses and parses them into XML documents.
"""

import xml.etree.ElementTree as ET
from typing import Any, Dict, Optional

import httpx
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from weatherapi.config import Settings, get_settings
from weatherapi.exceptions import ExternalAPIException
from weatherapi.utils.logger import setup_logger

logger = setup_logger(__name__)

RETRYABLE_ERRORS = (httpx.TimeoutException, httpx.NetworkError)


def parse_document(text: str) -> ET.Element:
    """
    Parse a provider response body into its root XML element.

    Raises:
        ExternalAPIException: If the body is not well-formed XML
    """
    try:
        return ET.fromstring(text)
    except ET.ParseError as e:
        logger.error(
            "Failed to parse provider response",
            extra={"event": "document_parse_failed", "error": str(e)},
        )
        raise ExternalAPIException(f"Invalid XML document: {e}") from e


class HTTPTransport:
    """
    Blocking HTTP client returning parsed XML documents.

    Timeouts and network errors are retried with exponential backoff; HTTP
    error statuses are not. Arguments left as None fall back to settings.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
        max_attempts: Optional[int] = None,
        wait: Optional[wait_base] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=timeout or settings.http_timeout)
        self.max_attempts = max_attempts or settings.retry_max_attempts
        self.wait = wait or wait_exponential(
            multiplier=1, min=settings.retry_wait_min, max=settings.retry_wait_max
        )

    def close(self):
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @staticmethod
    def _log_retry(retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning(
            "Provider request failed, retrying",
            extra={
                "event": "transport_retry_attempt",
                "attempt": retry_state.attempt_number,
                "error": str(error),
                "error_type": type(error).__name__,
            },
        )

    def _get(self, url: str, params: Optional[Dict[str, Any]]) -> httpx.Response:
        retrying = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=self.wait,
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
            before_sleep=self._log_retry,
            reraise=True,
        )
        return retrying(self.client.get, url, params=params)

    def fetch_document(
        self, url: str, params: Optional[Dict[str, Any]] = None
    ) -> ET.Element:
        """
        GET a provider URL and return the parsed response document.

        Raises:
            ExternalAPIException: On HTTP errors, exhausted retries or invalid XML
        """
        try:
            response = self._get(url, params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Provider returned an error status",
                extra={
                    "event": "transport_http_error",
                    "status_code": e.response.status_code,
                },
            )
            raise ExternalAPIException(
                f"HTTP {e.response.status_code} from provider"
            ) from e
        except httpx.HTTPError as e:
            logger.error(
                "Provider request failed after all attempts",
                extra={
                    "event": "transport_retry_exhausted",
                    "max_attempts": self.max_attempts,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
            )
            raise ExternalAPIException(f"Request to provider failed: {e}") from e

        return parse_document(response.text)
