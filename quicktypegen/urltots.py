"""Generates TypeScript type definitions from the JSON response of a URL.

Ties the HTTP client, the JSON type generator and the file manager together
for one request.
"""

import json
import logging
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from quicktypegen.common import is_valid_json_data, suggest_file_name, suggest_root_name
from quicktypegen.constants import DEFAULT_TIMEOUT
from quicktypegen.errors import QuickTypeError
from quicktypegen.filemanager import save_type_file
from quicktypegen.httpclient import fetch_json
from quicktypegen.jsontots import generate
from quicktypegen.validate import validate_request

# Configure module logger
logger = logging.getLogger(__name__)


@dataclass
class GenerateTypesRequest:
    """A request to generate types for a URL."""
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    method: str = 'GET'
    body: Optional[str] = None
    root_type_name: Optional[str] = None
    save_to_file: bool = False
    file_name: Optional[str] = None
    save_path: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_dict(cls, request_data: Mapping[str, Any]) -> 'GenerateTypesRequest':
        """Builds a request from its JSON form (camelCase keys)."""
        return cls(
            url=request_data['url'],
            headers=dict(request_data.get('headers') or {}),
            method=request_data.get('method') or 'GET',
            body=request_data.get('body'),
            root_type_name=request_data.get('rootTypeName'),
            save_to_file=bool(request_data.get('saveToFile')),
            file_name=request_data.get('fileName'),
            save_path=request_data.get('savePath'),
            timeout=request_data.get('timeout') or DEFAULT_TIMEOUT,
        )


@dataclass
class FileInfo:
    """Where the generated definitions were saved."""
    saved: bool
    file_name: str
    file_path: Optional[str] = None


@dataclass
class GenerateTypesResponse:
    """Result of processing a GenerateTypesRequest."""
    success: bool
    types: Optional[str] = None
    error: Optional[str] = None
    requested_url: Optional[str] = None
    original_data: Any = None
    file_info: Optional[FileInfo] = None


def process_request(request_data: Mapping[str, Any]) -> GenerateTypesResponse:
    """
    Fetches a URL and generates TypeScript definitions for its JSON body.

    Args:
        request_data: Request in JSON form (see validate_request for the keys).

    Returns:
        GenerateTypesResponse: success with the generated text, or the error message.
    """
    error = validate_request(request_data)
    if error:
        requested_url = request_data.get('url') if isinstance(request_data, Mapping) else None
        return GenerateTypesResponse(success=False, error=error, requested_url=requested_url)

    request = GenerateTypesRequest.from_dict(request_data)
    try:
        response_data = fetch_json(request.url, method=request.method, headers=request.headers,
                                   body=request.body, timeout=request.timeout)
        if not is_valid_json_data(response_data):
            return GenerateTypesResponse(success=False, error='The API response is not valid JSON data',
                                         requested_url=request.url)
        if isinstance(response_data, str):
            response_data = json.loads(response_data)

        root_name = request.root_type_name or suggest_root_name(request.url)
        types = generate(response_data, root_name)
    except QuickTypeError as e:
        logger.error("Process request error: %s", e)
        return GenerateTypesResponse(success=False, error=str(e), requested_url=request.url)

    result = GenerateTypesResponse(success=True, types=types, requested_url=request.url,
                                   original_data=response_data)
    if request.save_to_file:
        file_name = request.file_name or suggest_file_name(request.url, root_name)
        save_result = save_type_file(types, file_name, request.save_path)
        result.file_info = FileInfo(saved=save_result.success, file_name=file_name,
                                    file_path=save_result.file_path)
        if save_result.error:
            logger.error("File save error: %s", save_result.error)
    return result


def parse_header_args(values: Optional[Iterable[str]]) -> Dict[str, str]:
    """Parses 'Name: value' strings into a header mapping."""
    headers: Dict[str, str] = {}
    for value in values or []:
        name, sep, header_value = value.partition(':')
        if not sep or not name.strip():
            raise ValueError(f"Invalid header '{value}', expected 'Name: value'")
        headers[name.strip()] = header_value.strip()
    return headers


def convert_url_to_typescript(
    url: str,
    ts_file: Optional[str] = None,
    method: str = 'GET',
    headers: Optional[Union[Dict[str, str], List[str]]] = None,
    body: Optional[str] = None,
    root_name: Optional[str] = None,
    timeout: float = DEFAULT_TIMEOUT,
    save_path: Optional[str] = None
) -> None:
    """Fetches a URL and writes TypeScript definitions for its JSON body.

    Args:
        url: URL returning JSON
        ts_file: Output file; stdout when neither this nor save_path is given
        method: HTTP method
        headers: Extra request headers, as a mapping or 'Name: value' strings
        body: Request body
        root_name: Name for the root type (defaults to one derived from the URL)
        timeout: Request timeout in seconds
        save_path: Directory to save into under the suggested file name
    """
    request_data = {
        'url': url,
        'method': method,
        'headers': headers if isinstance(headers, dict) else parse_header_args(headers),
        'body': body,
        'rootTypeName': root_name,
        'saveToFile': bool(save_path),
        'savePath': save_path,
        'timeout': timeout,
    }
    response = process_request(request_data)
    if not response.success:
        raise QuickTypeError(response.error or 'Unknown error occurred', context=url)

    if response.file_info is not None:
        if not response.file_info.saved:
            raise QuickTypeError('Could not save type definitions', context=save_path)
        print(f"Saved {response.file_info.file_path}")
    if ts_file:
        with open(ts_file, 'w', encoding='utf-8') as f:
            f.write(response.types)
    elif response.file_info is None:
        sys.stdout.write(response.types + '\n')
