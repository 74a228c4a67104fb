"""OAuth error types."""
from zoho_desk_client.oauth.exceptions import ZohoOAuthException

__all__ = ['ZohoOAuthException']
