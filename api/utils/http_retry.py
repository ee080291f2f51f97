"""
HTTP GET with retry for rate limits and transient errors.

Used by document sources that load translation files over HTTP(S).

Usage:
    from utils.http_retry import get_with_retry

    response = get_with_retry(
        url="https://example.org/osis/kjv.xml",
        timeout=30,
    )
    content = response.content
"""

import logging
import time
from typing import Optional

import requests

logger = logging.getLogger(__name__)


def _backoff(attempt: int, retry_after: Optional[str] = None) -> int:
    """Seconds to wait before the next attempt."""
    if retry_after:
        try:
            return int(retry_after)
        except ValueError:
            pass
    return min(2 ** attempt, 30)


def get_with_retry(
    url: str,
    headers: Optional[dict] = None,
    timeout: int = 30,
    max_retries: int = 3,
) -> requests.Response:
    """
    GET with automatic retry for rate limits and transient server errors.

    Retry behavior:
    - 429 (rate limit): Respects Retry-After header, falls back to exponential backoff
    - 5xx (server error): Exponential backoff
    - Connection errors: Exponential backoff
    - 4xx (client error): No retry
    - Timeout: No retry (raises immediately)

    Args:
        url: Resource URL
        headers: HTTP headers
        timeout: Request timeout in seconds
        max_retries: Maximum number of attempts

    Returns:
        requests.Response on success

    Raises:
        RuntimeError: On timeout, client errors, or exhausted retries
    """
    last_response = None

    for attempt in range(max_retries):
        try:
            response = requests.get(url, headers=headers, timeout=timeout)

            if response.status_code == 429 or response.status_code >= 500:
                last_response = response
                if attempt == max_retries - 1:
                    break
                wait = _backoff(attempt, response.headers.get("retry-after"))
                logger.warning(
                    f"HTTP {response.status_code} from {url}, retrying in {wait}s "
                    f"(attempt {attempt + 1}/{max_retries})"
                )
                time.sleep(wait)
                continue

            response.raise_for_status()
            return response

        except requests.ConnectionError as e:
            if attempt < max_retries - 1:
                wait = _backoff(attempt)
                logger.warning(f"Connection error to {url}, retrying in {wait}s: {e}")
                time.sleep(wait)
                continue
            raise RuntimeError(
                f"Connection to {url} failed after {max_retries} attempts: {e}"
            )

        except requests.Timeout:
            raise RuntimeError(f"Request to {url} timed out after {timeout}s")

        except requests.HTTPError as e:
            raise RuntimeError(f"HTTP error from {url}: {e}")

    status = last_response.status_code if last_response is not None else "unknown"
    raise RuntimeError(
        f"Request to {url} failed after {max_retries} attempts "
        f"(last status: {status})"
    )
