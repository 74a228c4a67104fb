"""Request execution and response parsing for the Zoho Desk API."""
from zoho_desk_client.client.errors import DEFAULT_ERROR_MESSAGE, build_error_message
from zoho_desk_client.client.headers import is_json_content_type, parse_headers, resolve_filename
from zoho_desk_client.client.request import Request
from zoho_desk_client.client.response import Response

__all__ = [
    'DEFAULT_ERROR_MESSAGE',
    'Request',
    'Response',
    'build_error_message',
    'is_json_content_type',
    'parse_headers',
    'resolve_filename',
]
