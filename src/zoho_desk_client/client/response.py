"""Response value returned by a successful Zoho Desk call."""
import os
from typing import Any, Dict, List

from zoho_desk_client.exceptions import ZohoDeskError


class Response:
    """Pairs the parsed body of a call with the metadata of its response."""

    def __init__(self, body: Dict[str, Any] | List[Any], info: Dict[str, Any]):
        self.body = body
        self.info = info

    def get_result(self) -> Dict[str, Any] | List[Any]:
        return self.body

    def get_info(self) -> Dict[str, Any]:
        return self.info

    @property
    def status_code(self) -> int | None:
        return self.info.get('http_code')

    @property
    def content_type(self) -> str | None:
        return self.info.get('content_type')

    @property
    def is_attachment(self) -> bool:
        return isinstance(self.body, dict) and 'content' in self.body and 'filename' in self.body

    def save(self, directory: str) -> str:
        """Write an attachment body to ``directory`` under its resolved filename.

        Returns the path written to.
        """
        if not self.is_attachment:
            raise ZohoDeskError("Response does not carry an attachment")

        os.makedirs(directory or '.', exist_ok=True)
        path = os.path.join(directory or '.', self.body['filename'])
        with open(path, 'wb') as f:
            f.write(self.body['content'])
        return path

    def __repr__(self) -> str:
        return f"Response(status_code={self.status_code!r}, content_type={self.content_type!r})"
