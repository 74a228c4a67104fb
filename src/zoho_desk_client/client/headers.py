"""Header parsing helpers for raw Zoho Desk responses."""
import posixpath
import re
import uuid
from email.message import Message
from email.utils import collapse_rfc2231_value
from typing import Dict

PLACEHOLDER_PREFIX = "document-"

# CRLF or LF only; str.splitlines() would also break on \x85 inside latin-1 decoded values
_LINE_BREAK = re.compile(r'\r?\n')
_BLANKS = ' \t'


def parse_headers(header_text: str) -> Dict[str, str]:
    """Split a raw header block into a name -> value mapping.

    The status line is kept under ``http_code``. Names are lower-cased; a
    repeated header keeps its last value.
    """
    headers: Dict[str, str] = {}
    for i, line in enumerate(_LINE_BREAK.split(header_text)):
        if i == 0:
            headers['http_code'] = line.strip(_BLANKS)
            continue
        if not line.strip(_BLANKS):
            continue
        if ': ' in line:
            key, _, value = line.partition(': ')
        elif ':' in line:
            key, _, value = line.partition(':')
        else:
            continue
        headers[key.strip(_BLANKS).lower()] = value.strip(_BLANKS)
    return headers


def is_json_content_type(content_type: str | None) -> bool:
    return bool(content_type) and 'application/json' in content_type.lower()


def _placeholder_filename() -> str:
    # 13 hex chars, same width as a PHP uniqid()
    return f"{PLACEHOLDER_PREFIX}{uuid.uuid4().hex[:13]}"


def _redecode_utf8(value: str) -> str:
    """Undo the latin-1 decoding http.client applies to raw UTF-8 header bytes."""
    try:
        return value.encode('latin-1').decode('utf-8')
    except (UnicodeEncodeError, UnicodeDecodeError):
        return value


def resolve_filename(content_disposition: str | None) -> str:
    """Return the suggested filename of an attachment, or a unique placeholder.

    ``filename*`` (RFC 5987 encoded) takes precedence over ``filename``.
    """
    if not content_disposition or not content_disposition.strip():
        return _placeholder_filename()

    msg = Message()
    msg['content-disposition'] = content_disposition
    # decoded filename* parameters are listed after plain ones
    candidates = [
        value for key, value in (msg.get_params(header='content-disposition') or [])[1:]
        if key.lower() == 'filename'
    ]
    if not candidates:
        return _placeholder_filename()

    value = candidates[-1]
    filename = collapse_rfc2231_value(value)
    if isinstance(value, str):
        filename = _redecode_utf8(filename)
    filename = posixpath.basename(filename.replace('\\', '/')).strip(_BLANKS)
    if filename in ('', '.', '..'):
        return _placeholder_filename()
    return filename
