# Standard library imports
from datetime import datetime

# External package imports
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

# Local application imports
from ...utils.datetime_utils import to_iso


class CreateUserRequest(BaseModel):
    """DTO for user creation request"""
    model_config = ConfigDict(extra="forbid")
    
    email: str
    name: str = Field(min_length=2, max_length=100)
    
    @field_validator("email")
    @classmethod
    def email_must_be_valid(cls, value: str) -> str:
        """Check the address syntax; the caller's spelling is kept as sent"""
        try:
            validate_email(
                value,
                check_deliverability=False,
                test_environment=True,
                globally_deliverable=False,
            )
        except EmailNotValidError as e:
            raise ValueError(f"Email must be a valid email address: {e}") from e
        return value
    
    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Name is required")
        return value


class UserResponse(BaseModel):
    """DTO for user response (camelCase on the wire)"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
    
    id: str
    email: str
    name: str
    created_at: datetime
    updated_at: datetime
    
    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> str:
        return to_iso(value)
