"""OAuth exception base for Zoho clients."""
from zoho_desk_client.exceptions import ZohoDeskError


class ZohoOAuthException(ZohoDeskError):
    """Base exception for Zoho OAuth failures.

    A missing message is replaced by ``Unknown <ClassName>`` so subclasses
    still describe themselves.
    """

    def __init__(self, message: str | None = None, code: int = 0):
        if not message:
            message = f"Unknown {type(self).__name__}"
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return f"{type(self).__name__} Caused by:'{self.message}'"
