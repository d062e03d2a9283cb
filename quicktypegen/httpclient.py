"""HTTP client that retrieves JSON bodies for type generation."""

import json
import logging
import re
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import requests

from quicktypegen.constants import (ALLOWED_SCHEMES, DEFAULT_ACCEPT, DEFAULT_TIMEOUT,
                                    MAX_RESPONSE_SIZE, USER_AGENT)
from quicktypegen.errors import ApiError

# Configure module logger
logger = logging.getLogger(__name__)

LOCAL_ADDRESS_PATTERNS = [
    re.compile(r'^localhost$', re.IGNORECASE),
    re.compile(r'^127\.'),
    re.compile(r'^192\.168\.'),
    re.compile(r'^10\.'),
    re.compile(r'^172\.(1[6-9]|2[0-9]|3[0-1])\.'),
    re.compile(r'^::1$'),
    re.compile(r'^fe80:', re.IGNORECASE),
]

CHUNK_SIZE = 64 * 1024


def is_local_address(hostname: str) -> bool:
    """Checks whether a host name points at the local machine or a private network."""
    return any(pattern.search(hostname) for pattern in LOCAL_ADDRESS_PATTERNS)


def validate_url(url: str) -> None:
    """
    Checks that a URL may be fetched.

    Raises:
        ApiError: With code INVALID_URL, INVALID_PROTOCOL or LOCAL_ADDRESS_NOT_ALLOWED.
    """
    try:
        parsed_url = urlparse(url)
        hostname = parsed_url.hostname
    except (TypeError, ValueError, AttributeError) as e:
        raise ApiError('Invalid URL format', 'INVALID_URL', 400, cause=e) from e
    if not parsed_url.scheme or not hostname:
        raise ApiError('Invalid URL format', 'INVALID_URL', 400)
    if parsed_url.scheme not in ALLOWED_SCHEMES:
        raise ApiError('Only HTTP and HTTPS protocols are allowed', 'INVALID_PROTOCOL', 400)
    if is_local_address(hostname):
        raise ApiError('Local addresses are not allowed for security reasons', 'LOCAL_ADDRESS_NOT_ALLOWED', 400)


def _read_body(response: requests.Response, max_size: int) -> bytes:
    content_length = response.headers.get('content-length')
    if content_length and content_length.isdigit() and int(content_length) > max_size:
        raise ApiError('Response too large', 'RESPONSE_TOO_LARGE', 413)
    body = bytearray()
    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
        body.extend(chunk)
        if len(body) > max_size:
            raise ApiError('Response too large', 'RESPONSE_TOO_LARGE', 413)
    return bytes(body)


def _decode_body(body: bytes, content_type: str, encoding: Optional[str]) -> Any:
    try:
        text = body.decode(encoding or 'utf-8', errors='replace')
    except LookupError:
        logger.warning("Unknown response charset %s, decoding as utf-8", encoding)
        text = body.decode('utf-8', errors='replace')
    if 'application/json' in content_type:
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ApiError(f'Invalid JSON in response: {e}', 'UNKNOWN_ERROR', 500, cause=e) from e
    if 'text/' in content_type:
        return text
    # Other content types: try JSON first
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def fetch_json(url: str, method: str = 'GET', headers: Optional[Dict[str, str]] = None,
               body: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT,
               max_size: int = MAX_RESPONSE_SIZE) -> Any:
    """
    Fetches a response body from a URL.

    Args:
        url: The URL to fetch.
        method: HTTP method.
        headers: Extra request headers; they override the defaults.
        body: Request body for POST/PUT/PATCH requests.
        timeout: Request timeout in seconds.
        max_size: Largest accepted response body in bytes.

    Returns:
        The parsed JSON value, or the response text when it is not JSON.

    Raises:
        ApiError: If the URL is rejected or the request fails.
    """
    validate_url(url)
    request_headers = {
        'User-Agent': USER_AGENT,
        'Accept': DEFAULT_ACCEPT,
    }
    request_headers.update(headers or {})
    logger.info("%s %s", method, url)
    try:
        with requests.request(method, url, headers=request_headers, data=body,
                              timeout=timeout, stream=True) as response:
            if not 200 <= response.status_code < 300:
                raise ApiError(f'HTTP {response.status_code}: {response.reason}', 'HTTP_ERROR', response.status_code)
            content = _read_body(response, max_size)
            content_type = response.headers.get('content-type', '')
            return _decode_body(content, content_type, response.encoding)
    except ApiError as e:
        logger.error("HTTP request failed: %s", e)
        raise
    except requests.exceptions.Timeout as e:
        logger.error("HTTP request timed out: %s", e)
        raise ApiError('Request timeout', 'TIMEOUT', 408, cause=e) from e
    except requests.exceptions.ConnectionError as e:
        logger.error("HTTP connection failed: %s", e)
        raise ApiError('Network error: Unable to connect to the server', 'NETWORK_ERROR', 503, cause=e) from e
    except Exception as e:  # pylint: disable=broad-except
        logger.error("HTTP request failed: %s", e)
        raise ApiError(str(e) or 'Unknown error occurred', 'UNKNOWN_ERROR', 500, cause=e) from e
