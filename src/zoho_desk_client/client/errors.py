"""Assemble readable error messages from Zoho Desk error payloads."""
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_ERROR_MESSAGE = 'An error occurred on the API gateway.'


class FieldError(BaseModel):
    """One entry of the ``errors`` array returned on validation failures."""
    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    field_name: Any = Field(default=None, alias='fieldName')
    error_type: Any = Field(default=None, alias='errorType')

    def describe(self) -> str:
        field_name = '' if self.field_name is None else self.field_name
        error_type = '' if self.error_type is None else self.error_type
        return f"{field_name} is {error_type}"


class ErrorPayload(BaseModel):
    model_config = ConfigDict(extra='ignore')

    message: Any = None
    errors: Optional[List[Any]] = None

    @field_validator('errors', mode='before')
    @classmethod
    def _only_lists(cls, value: Any) -> Any:
        return value if isinstance(value, list) else None


def build_error_message(body: Any) -> str:
    """Build the exception message for a failed call.

    ``body["message"]`` replaces the gateway default; per-field ``errors``
    are appended as ``"<fieldName> is <errorType>"``, comma-joined and
    terminated with a period.
    """
    if not isinstance(body, dict):
        return DEFAULT_ERROR_MESSAGE

    try:
        payload = ErrorPayload.model_validate(body)
    except ValidationError:
        return DEFAULT_ERROR_MESSAGE

    if payload.message is None:
        return DEFAULT_ERROR_MESSAGE

    message = str(payload.message)
    if payload.errors is None:
        return message

    details = []
    for entry in payload.errors:
        if not isinstance(entry, dict):
            continue
        details.append(FieldError.model_validate(entry).describe())

    return f"{message}: {', '.join(details)}".rstrip(', ') + '.'
