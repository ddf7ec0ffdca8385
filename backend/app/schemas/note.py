"""Note schemas for customer notes."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, computed_field

from backend.app.core.note_format import format_note


class NoteCreate(BaseModel):
    """Schema for creating a note from a raw ``"timestamp;; text"`` line or plain text."""

    raw: str


class NoteUpdate(BaseModel):
    text: str


class NoteRead(BaseModel):
    """Schema for reading a note."""

    id: int
    customer_id: Optional[int] = None
    timestamp: datetime
    text: str

    model_config = ConfigDict(from_attributes=True)

    @computed_field
    @property
    def externalized(self) -> str:
        return format_note(self.timestamp, self.text)
