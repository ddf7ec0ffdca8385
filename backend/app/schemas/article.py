"""Article schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ArticleBase(BaseModel):
    name: str
    price: Decimal = Field(ge=0, decimal_places=2)
    currency: str = Field(default="EUR", min_length=3, max_length=3)


class ArticleCreate(ArticleBase):
    pass


class ArticleUpdate(BaseModel):
    name: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0, decimal_places=2)
    currency: Optional[str] = Field(default=None, min_length=3, max_length=3)

    @field_validator("name", "price", "currency")
    @classmethod
    def required_fields_not_null(cls, value):
        # Omit the field to leave it unchanged; an explicit null would violate NOT NULL.
        if value is None:
            raise ValueError("field cannot be null")
        return value


class ArticleRead(ArticleBase):
    id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
