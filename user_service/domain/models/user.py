# Standard library imports
import re
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict, Optional

# Local application imports
from ..exceptions import ValidationError
from ...utils.datetime_utils import utc_now


EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or len(value.strip()) == 0


@dataclass(frozen=True)
class User:
    """
    Pure domain model for User entity - no external dependencies.
    
    Instances are immutable and always valid: every rule is checked in
    __post_init__ and the first broken rule raises ValidationError.
    Use with_name() / with_email() to derive an updated copy.
    """
    id: str
    email: str
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if _is_blank(self.id):
            raise ValidationError("User ID cannot be empty")
        if _is_blank(self.email):
            raise ValidationError("User email cannot be empty")
        if not EMAIL_PATTERN.fullmatch(self.email):
            raise ValidationError("User email must be a valid email address")
        if _is_blank(self.name):
            raise ValidationError("User name cannot be empty")
        if len(self.name) < NAME_MIN_LENGTH:
            raise ValidationError("User name must be at least 2 characters long")
        if len(self.name) > NAME_MAX_LENGTH:
            raise ValidationError("User name must not exceed 100 characters")

        now = utc_now()
        if self.created_at is None:
            object.__setattr__(self, "created_at", now)
        if self.updated_at is None:
            object.__setattr__(self, "updated_at", now)

    def with_name(self, new_name: str) -> "User":
        """Return a copy with a new name and a refreshed updated_at"""
        return replace(self, name=new_name, updated_at=utc_now())

    def with_email(self, new_email: str) -> "User":
        """Return a copy with a new email and a refreshed updated_at"""
        return replace(self, email=new_email, updated_at=utc_now())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
