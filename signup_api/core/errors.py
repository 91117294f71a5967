"""
Error taxonomy shared by the services and the HTTP layer.

Each ServiceError knows the workflow stage it belongs to and the status code
the API answers with, so routes never have to guess.
"""

from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

STAGE_VALIDATION = "validation"
STAGE_AUTH = "auth"
STAGE_PERSISTENCE = "persistence"


class ServiceError(Exception):
    stage: str = ""
    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        detail: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.detail = detail
        self.extra = extra or {}


class ValidationError(ServiceError):
    """Bad input. Raised before any external call is made."""
    stage = STAGE_VALIDATION
    status_code = 400


class AuthProviderError(ServiceError):
    """The auth provider rejected the request or could not be reached."""
    stage = STAGE_AUTH
    status_code = 400


class PersistenceError(ServiceError):
    """A datastore read or write failed."""
    stage = STAGE_PERSISTENCE
    status_code = 500


class CompensationFailure(Exception):
    """Rolling back an auth identity failed. Logged, never returned to callers."""

    def __init__(self, identity: str, cause: BaseException):
        super().__init__(f"Failed to delete auth user {identity}: {cause}")
        self.identity = identity
        self.cause = cause


def validation_error_from(
    exc: PydanticValidationError,
    payload: Any = None,
    messages: Optional[Dict[str, str]] = None,
) -> ValidationError:
    """
    Turn a pydantic ValidationError into a ValidationError for the first
    failing field. `messages` maps field names to caller-facing messages;
    other fields fall back to pydantic's own message.
    """
    error = exc.errors()[0]
    loc = error.get("loc") or ()
    if not loc:
        return ValidationError("Request body is missing")
    field = str(loc[0])
    message = (messages or {}).get(field) or error.get("msg", "Invalid value")
    extra: Dict[str, Any] = {"field": field}
    if isinstance(payload, Mapping) and payload.get(field) is not None:
        extra["received_value"] = payload.get(field)
    return ValidationError(message, extra=extra)
