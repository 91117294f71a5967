from pydantic import BaseModel, ConfigDict, Field, StringConstraints, ValidationInfo, field_validator
from typing import Annotated, Any, Dict, Optional

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
DEFAULT_PASSWORD_MIN_LENGTH = 6


class RegistrationRequest(BaseModel):
    """
    Registration form. Fields are declared in the order they are reported:
    the first failing field is the one the caller sees.

    Pass `context={"password_min_length": n}` to model_validate to override
    the minimum password length.
    """
    model_config = ConfigDict(extra="ignore")

    email: Annotated[str, StringConstraints(strip_whitespace=True, to_lower=True, pattern=EMAIL_PATTERN)]
    password: str
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    industry: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None

    @field_validator("password")
    @classmethod
    def check_password_length(cls, value: str, info: ValidationInfo) -> str:
        min_length = (info.context or {}).get("password_min_length", DEFAULT_PASSWORD_MIN_LENGTH)
        if len(value) < min_length:
            raise ValueError(f"Password must be at least {min_length} characters")
        return value

    def auth_metadata(self) -> Dict[str, Any]:
        """Profile fields stored with the auth user; unset values are left out."""
        return self.model_dump(include={"name", "industry", "country", "phone"}, exclude_none=True)


class RegistrationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str
    user_id: Optional[str] = Field(default=None, serialization_alias="userId")
    stage: Optional[str] = None
    code: Optional[str] = None
    field: Optional[str] = None
    received_value: Optional[Any] = Field(default=None, serialization_alias="receivedValue")
    error: Optional[str] = None
    # Auth user left behind when the compensating delete failed; never serialized.
    orphaned_identity: Optional[str] = Field(default=None, exclude=True)

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
