"""Execute a prepared Zoho Desk request and classify its response."""
import http.client
import json
import logging
import urllib.error
import urllib.request
from typing import Any, Dict, List, Tuple

from zoho_desk_client.client.errors import build_error_message
from zoho_desk_client.client.headers import is_json_content_type, parse_headers, resolve_filename
from zoho_desk_client.client.response import Response
from zoho_desk_client.config import LOGGER_NAME, get_settings
from zoho_desk_client.exceptions import InvalidRequestException, RequestError, ZohoDeskError

logger = logging.getLogger(f"{LOGGER_NAME}.request")


def _status_of(handle: Any) -> int | None:
    status = getattr(handle, 'status', None)
    if status is None:
        status = getattr(handle, 'code', None)
    return status if isinstance(status, int) else None


def _header_block(handle: Any, status: int | None) -> str:
    """Rebuild the raw header block (status line included) of a response."""
    version = getattr(handle, 'version', 11)
    http_version = 'HTTP/2' if version == 20 else f"HTTP/{version // 10}.{version % 10}"
    reason = getattr(handle, 'reason', '') or ''
    lines = [f"{http_version} {status if status is not None else ''} {reason}".rstrip()]
    headers = getattr(handle, 'headers', None) or {}
    for key, value in headers.items():
        lines.append(f"{key}: {value}")
    return '\r\n'.join(lines) + '\r\n\r\n'


def _transport_error(error: OSError | http.client.HTTPException) -> RequestError:
    reason = getattr(error, 'reason', error)
    code = getattr(reason, 'errno', None) or getattr(error, 'errno', None) or 0
    return InvalidRequestException.create_request_error_exception(str(reason), code)


class Request:
    """Wrap one prepared ``urllib.request.Request`` and execute it once."""

    def __init__(self, prepared_request: urllib.request.Request, timeout: float | None = None):
        self._request = prepared_request
        self._timeout = timeout
        self._executed = False

    @property
    def timeout(self) -> float:
        if self._timeout is not None:
            return self._timeout
        return get_settings()["ZOHO_DESK_TIMEOUT"]

    def _open(self) -> Tuple[Any, int | None, str, bytes]:
        try:
            try:
                handle = urllib.request.urlopen(self._request, timeout=self.timeout)
            except urllib.error.HTTPError as e:
                # error statuses still carry headers and a body worth parsing
                handle = e
            with handle:
                status = _status_of(handle)
                header_text = _header_block(handle, status)
                raw = handle.read()
        except (OSError, http.client.HTTPException) as e:
            error = _transport_error(e)
            logger.error(f"Transport error for {self._request.get_method()} {self._request.full_url}: {error} (code {error.code})")
            raise error from e
        return handle, status, header_text, raw

    def execute(self) -> Response:
        """Run the request and return its parsed response.

        Raises:
            RequestError: the transport failed before a response was read
            InvalidRequestException: no status was obtainable, or it was >= 400
        """
        if self._executed:
            raise ZohoDeskError("Request has already been executed")
        self._executed = True

        method = self._request.get_method()
        url = self._request.full_url
        logger.debug(f"{method} {url}")

        handle, status, header_text, raw = self._open()
        headers = parse_headers(header_text)
        content_type = headers.get('content-type', '')

        body: Dict[str, Any] | List[Any]
        if is_json_content_type(content_type):
            try:
                body = json.loads(raw) or {}
            except ValueError:
                logger.debug(f"Unparseable JSON body from {method} {url}")
                body = {}
        else:
            disposition = headers.get('content-disposition')
            filename = resolve_filename(disposition)
            if not disposition:
                logger.debug(f"No Content-Disposition on {method} {url}; using {filename}")
            body = {'content': raw, 'filename': filename}

        info: Dict[str, Any] = {
            'url': handle.geturl() if hasattr(handle, 'geturl') else url,
            'method': method,
            'http_code': status,
            'content_type': content_type,
            'header_size': len(header_text.encode('latin-1', errors='replace')),
            'headers': headers,
        }

        if status is None or status >= 400:
            message = build_error_message(body)
            logger.warning(f"{method} {url} failed with HTTP {status}: {message}")
            raise InvalidRequestException(message, status_code=status, response_body=body)

        return Response(body, info)
