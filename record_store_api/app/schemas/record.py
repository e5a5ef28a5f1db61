"""
Pydantic models for record data.

``RecordBase`` holds the caller-supplied fields and their validation
rules; ``RecordCreate`` and ``RecordReplace`` are the full payloads for
creating and overwriting a record, ``RecordUpdate`` is the partial
payload for merges.  ``RecordRead`` adds the store-managed fields and
is immutable, so a record handed out by the store cannot be changed
behind its back.  ``RecordFilter`` and ``RecordPage`` describe list
queries and their results.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

NAME_MAX_LENGTH = 100
AGE_MIN = 0
AGE_MAX = 150


def normalise_email(value: Optional[str]) -> Optional[str]:
    """Strip and lower-case an email.  ``None`` passes through.

    Format checking is left to ``EmailStr``; this only makes stored
    addresses compare case-insensitively.
    """
    if value is None:
        return None
    return value.strip().lower()


class RecordBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, examples=["John"])
    email: Optional[EmailStr] = Field(None, examples=["j@x.com"])
    age: Optional[int] = Field(None, ge=AGE_MIN, le=AGE_MAX, examples=[30])

    model_config = {
        "extra": "forbid",
        "str_strip_whitespace": True,
    }

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email")
    @classmethod
    def lower_email(cls, v):
        return normalise_email(v)


class RecordCreate(RecordBase):
    """Schema for creating a record."""
    pass


class RecordReplace(RecordBase):
    """Schema for a full replacement.

    Every mutable field is overwritten; optional fields left out of the
    payload are cleared.
    """
    pass


class RecordUpdate(BaseModel):
    """Schema for a partial update.

    All fields are optional; only fields present in the payload are
    applied.  ``name`` may be omitted but not set to null.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    email: Optional[EmailStr] = None
    age: Optional[int] = Field(None, ge=AGE_MIN, le=AGE_MAX)

    model_config = {
        "extra": "forbid",
        "str_strip_whitespace": True,
    }

    @field_validator("name")
    @classmethod
    def reject_null_name(cls, v):
        if v is None:
            raise ValueError("Name cannot be null")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email")
    @classmethod
    def lower_email(cls, v):
        return normalise_email(v)


class RecordRead(RecordBase):
    """Schema for reading a record from the store or the API."""

    id: int
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
        "frozen": True,
    }


class RecordFilter(BaseModel):
    """Optional predicates for listing records.

    Age bounds are inclusive; a record without an age never satisfies
    an age bound.  ``name_contains`` is a case-insensitive substring
    match and ``email`` an exact, case-insensitive match.
    """

    min_age: Optional[int] = Field(None, ge=AGE_MIN)
    max_age: Optional[int] = Field(None, ge=AGE_MIN)
    name_contains: Optional[str] = None
    email: Optional[str] = None

    model_config = {
        "extra": "forbid",
    }

    def matches(self, record: RecordRead) -> bool:
        if self.min_age is not None and (record.age is None or record.age < self.min_age):
            return False
        if self.max_age is not None and (record.age is None or record.age > self.max_age):
            return False
        if self.name_contains and self.name_contains.lower() not in record.name.lower():
            return False
        if self.email is not None and record.email != self.email.strip().lower():
            return False
        return True


class RecordPage(BaseModel):
    """One page of a list query plus the number of matches overall."""

    items: List[RecordRead]
    total: int
    offset: int
    limit: int
