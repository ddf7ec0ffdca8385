import logging

from backend.app.db.base import Base
from backend.app.db.session import engine

logger = logging.getLogger(__name__)


def init_db(bind=None) -> None:
    """Create all tables that do not exist yet."""
    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    logger.info("Database schema ready on %s", bind.url)
