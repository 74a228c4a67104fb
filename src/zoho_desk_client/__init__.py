"""Zoho Desk API client: request execution, response parsing and error types."""
from zoho_desk_client.client import Request, Response
from zoho_desk_client.exceptions import InvalidRequestException, RequestError, ZohoDeskError
from zoho_desk_client.oauth import ZohoOAuthException

__all__ = [
    'InvalidRequestException',
    'Request',
    'RequestError',
    'Response',
    'ZohoDeskError',
    'ZohoOAuthException',
]
