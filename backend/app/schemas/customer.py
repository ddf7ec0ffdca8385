"""Customer schemas."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator

CustomerStatus = Literal["active", "suspended", "terminated"]


def _strip_name(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("name must not be blank")
    return value


class CustomerBase(BaseModel):
    name: str
    contact: Optional[str] = None
    status: CustomerStatus = "active"

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return _strip_name(value)


class CustomerCreate(CustomerBase):
    pass


class CustomerUpdate(BaseModel):
    name: Optional[str] = None
    contact: Optional[str] = None
    status: Optional[CustomerStatus] = None

    @field_validator("name", "status")
    @classmethod
    def required_fields_not_null(cls, value):
        # Omit the field to leave it unchanged; an explicit null would violate NOT NULL.
        if value is None:
            raise ValueError("field cannot be null")
        return value

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: Optional[str]) -> str:
        if value is None:
            raise ValueError("field cannot be null")
        return _strip_name(value)


class CustomerRead(CustomerBase):
    id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
