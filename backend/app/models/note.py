"""Note model: a short timestamped text line attached to a customer.

A note externalizes to ``"yyyy-MM-dd HH:mm:ss.SSS;; text"`` and can be built
back from that string. Notes built from text without a timestamp prefix take
a unique timestamp from a TimestampClock.
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from backend.app.core.clock import TimestampClock, get_clock
from backend.app.core.note_format import format_note, parse_note_string
from backend.app.core.time import truncate_to_millis
from backend.app.db.base_class import Base

if TYPE_CHECKING:
    from backend.app.models.customer import Customer


class Note(Base):
    __tablename__ = "notes"

    id = Column(Integer, primary_key=True, index=True)
    timestamp = Column("time", DateTime, nullable=False)
    text = Column(String, nullable=False)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=True, index=True)

    customer = relationship("Customer", back_populates="notes")

    def __init__(self, **kwargs):
        # Rows loaded from the database skip __init__; this only covers direct construction.
        kwargs.setdefault("timestamp", truncate_to_millis(datetime.now(UTC).replace(tzinfo=None)))
        kwargs.setdefault("text", "")
        super().__init__(**kwargs)

    @classmethod
    def from_string(
        cls,
        raw: str,
        clock: Optional[TimestampClock] = None,
        customer_id: Optional[int] = None,
        customer: Optional["Customer"] = None,
    ) -> "Note":
        """Build a note from ``"timestamp;; text"`` or from plain text.

        Plain text, or a prefix that is not a valid timestamp, keeps the whole
        input as the text and takes the next unique timestamp from ``clock``.
        """
        timestamp, text = parse_note_string(raw)
        if timestamp is None:
            timestamp = (clock or get_clock()).next_unique_timestamp()
        note = cls(timestamp=timestamp, text=text, customer_id=customer_id)
        if customer is not None:
            note.customer = customer
        return note

    def set_text(self, text: str) -> None:
        self.text = text

    def externalize(self) -> str:
        return format_note(self.timestamp, self.text)

    def __repr__(self) -> str:
        return f"<Note id={self.id} {self.externalize()!r}>"
