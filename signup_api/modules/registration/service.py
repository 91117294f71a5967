import logging
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError as SchemaValidationError

from signup_api.config import Settings
from signup_api.core.errors import (
    AuthProviderError,
    CompensationFailure,
    PersistenceError,
    ServiceError,
    ValidationError,
    validation_error_from,
)
from signup_api.modules.registration.schemas import RegistrationRequest, RegistrationResult
from signup_api.modules.users.schemas import UserProfile

logger = logging.getLogger(__name__)


class RegistrationWorkflow:
    """
    Registers a user in two external systems:

    1. validate the payload (no side effects)
    2. create the auth user
    3. insert the profile row keyed by the auth user id
    4. if the insert step fails for any reason, delete the auth user again
       (best effort, once)

    Failures come back as a RegistrationResult naming the failed stage.
    Unexpected exceptions propagate to the global handler.
    """

    def __init__(self, auth, datastore, settings: Settings):
        self.auth = auth
        self.datastore = datastore
        self.settings = settings

    def register(self, payload: Optional[Mapping[str, Any]]) -> RegistrationResult:
        logger.info("Registration attempt: %s", _redacted(payload))
        try:
            request = self.validate(payload)
        except ValidationError as e:
            logger.info("Registration rejected: %s", e.message)
            return self._failure(e)

        try:
            identity = self.auth.sign_up(request.email, request.password, request.auth_metadata())
        except AuthProviderError as e:
            logger.error("Auth provider error: code=%s message=%s", e.code, e.message)
            return self._failure(e)

        try:
            self.datastore.insert(self.settings.users_table, self._profile_row(identity, request))
        except PersistenceError as e:
            logger.error("Database error: code=%s message=%s detail=%s", e.code, e.message, e.detail)
            failure = self._compensate(identity)
            result = self._failure(e, message="Failed to create user profile")
            if failure is not None:
                result.orphaned_identity = failure.identity
            return result
        except Exception:
            logger.exception("Profile insert for %s failed unexpectedly", identity)
            self._compensate(identity)
            raise

        logger.info("User %s registered", identity)
        return RegistrationResult(
            success=True,
            message=f"User {request.name} successfully registered!",
            user_id=identity,
        )

    def validate(self, payload: Optional[Mapping[str, Any]]) -> RegistrationRequest:
        if not payload:
            raise ValidationError("Request body is missing")
        min_length = self.settings.password_min_length
        try:
            return RegistrationRequest.model_validate(
                payload, context={"password_min_length": min_length}
            )
        except SchemaValidationError as e:
            raise validation_error_from(e, payload, messages={
                "email": "Invalid email format",
                "password": f"Password must be at least {min_length} characters",
                "name": "Name is required",
            }) from e

    def _compensate(self, identity: str) -> Optional[CompensationFailure]:
        try:
            self.auth.delete_user(identity)
        except Exception as e:
            failure = CompensationFailure(identity, e)
            logger.error("%s; auth user is orphaned without a profile", failure)
            return failure
        logger.info("Rolled back auth user %s after profile insert failure", identity)
        return None

    def _profile_row(self, identity: str, request: RegistrationRequest) -> Dict[str, Any]:
        return UserProfile(
            id=identity,
            name=request.name,
            email=request.email,
            industry=request.industry,
            country=request.country,
            phone=request.phone,
            created_at=datetime.now(timezone.utc).isoformat(),
        ).model_dump()

    def _failure(self, error: ServiceError, message: Optional[str] = None) -> RegistrationResult:
        detail = error.detail or (error.message if message else None)
        # Only the email is echoed back
        echoed = error.extra.get("received_value") if error.extra.get("field") == "email" else None
        return RegistrationResult(
            success=False,
            message=message or error.message,
            stage=error.stage,
            code=error.code,
            field=error.extra.get("field"),
            received_value=echoed,
            error=None if self.settings.is_production else detail,
        )


def status_code_for(result: RegistrationResult) -> int:
    if result.success:
        return 200
    return {
        ValidationError.stage: ValidationError.status_code,
        AuthProviderError.stage: AuthProviderError.status_code,
        PersistenceError.stage: PersistenceError.status_code,
    }.get(result.stage, 500)


def _redacted(payload: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    if not isinstance(payload, Mapping):
        return {}
    return {k: ("[REDACTED]" if k == "password" else v) for k, v in payload.items()}
