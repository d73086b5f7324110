"""
Pydantic models for user data.

``User`` is the stored record as it appears on the wire.  ``UserData``
describes an incoming create/update payload and carries the validation
rules shared by both operations.

The rules are deliberately truthy: ``username`` must be a non‑empty
string and ``age`` a nonzero number, so zero‑like values are rejected
rather than treated as provided.  ``hobbies`` only has to be an array;
an empty one is accepted and its items are not inspected.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.errors import INVALID_FIELDS


logger = logging.getLogger(__name__)

USER_ID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


def is_valid_user_id(user_id: str) -> bool:
    """Return True if ``user_id`` has the 8-4-4-4-12 hex shape of a UUID."""
    return USER_ID_PATTERN.fullmatch(user_id) is not None


class User(BaseModel):
    """Schema for a stored user."""

    id: str = Field(..., examples=["0b7e7dee-87b7-4a0a-9b4a-e5a6c1f1ad4b"])
    username: str = Field(..., examples=["Alice"])
    age: Union[int, float] = Field(..., examples=[30])
    hobbies: List[Any] = Field(default_factory=list, examples=[["chess"]])


class UserData(BaseModel):
    """Schema for a create/update payload.

    Strict mode keeps JSON types as they are: a numeric string is not an
    age and ``true`` is not a number.  Unknown fields are dropped.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    username: str
    age: Union[int, float]
    hobbies: List[Any]

    @field_validator("username")
    @classmethod
    def username_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("username must not be empty")
        return v

    @field_validator("age")
    @classmethod
    def age_not_zero(cls, v: Union[int, float]) -> Union[int, float]:
        if not v:
            raise ValueError("age must be a nonzero number")
        return v


@dataclass
class ValidationResult:
    """Outcome of :func:`validate_user_data`: either ``data`` or ``error``."""

    data: Optional[UserData] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def validate_user_data(payload: Any) -> ValidationResult:
    """Check a decoded JSON payload against the user rules.

    Returns a :class:`ValidationResult` instead of raising so that
    handlers can map the failure to a response themselves.
    """
    if not isinstance(payload, dict):
        logger.debug("Rejected payload of type %s", type(payload).__name__)
        return ValidationResult(error=INVALID_FIELDS)
    try:
        data = UserData.model_validate(payload)
    except ValidationError as exc:
        logger.debug("Rejected payload: %s", exc.errors(include_url=False))
        return ValidationResult(error=INVALID_FIELDS)
    return ValidationResult(data=data)
