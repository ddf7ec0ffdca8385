"""Customer model for the Customer Notes back end."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from backend.app.db.base_class import Base
from backend.app.core.time import utc_now


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    contact = Column(String, nullable=True)
    status = Column(String, nullable=False, default="active")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    notes = relationship(
        "Note",
        back_populates="customer",
        cascade="all, delete-orphan",
        order_by="[Note.timestamp, Note.id]",
    )
