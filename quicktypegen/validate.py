"""Validates type generation requests before any network access happens."""

from collections.abc import Mapping
from typing import Any, Optional
from urllib.parse import urlparse

from quicktypegen.constants import ALLOWED_METHODS


def validate_request(request_data: Any) -> Optional[str]:
    """Validates a type generation request.

    The request is a mapping with the keys 'url', 'headers', 'method', 'body',
    'rootTypeName', 'saveToFile', 'fileName' and 'savePath'.

    Args:
        request_data: The request to check

    Returns:
        An error message, or None if the request is valid
    """
    if not request_data:
        return 'Request data is required'
    if not isinstance(request_data, Mapping):
        return 'Request data must be an object'

    url = request_data.get('url')
    if not url or not isinstance(url, str):
        return 'URL is required and must be a string'
    try:
        parsed_url = urlparse(url)
    except ValueError:
        return 'Invalid URL format'
    if not parsed_url.scheme or not parsed_url.netloc:
        return 'Invalid URL format'

    headers = request_data.get('headers')
    if headers and not isinstance(headers, Mapping):
        return 'Headers must be an object'

    method = request_data.get('method')
    if method and method not in ALLOWED_METHODS:
        return 'Invalid HTTP method'

    if request_data.get('saveToFile'):
        file_name = request_data.get('fileName')
        if file_name and not isinstance(file_name, str):
            return 'File name must be a string'
        save_path = request_data.get('savePath')
        if save_path and not isinstance(save_path, str):
            return 'Save path must be a string'

    return None
