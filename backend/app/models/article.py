"""Article model for the Customer Notes back end."""

from sqlalchemy import Column, DateTime, Integer, Numeric, String

from backend.app.db.base_class import Base
from backend.app.core.time import utc_now


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(3), nullable=False, default="EUR")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
