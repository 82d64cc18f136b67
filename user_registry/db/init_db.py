"""
Database initialization helpers.

Tables are declared on the shared metadata; importing the model modules is what
registers them.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine

from user_registry.db.session import get_engine
from user_registry.models.base import metadata
from user_registry.models import user  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Create the users table if it does not exist yet.
    """
    if engine is None:
        engine = get_engine()
    metadata.create_all(bind=engine)
    logger.info("Tables ensured: %s", ", ".join(metadata.tables))


if __name__ == "__main__":
    from user_registry.core.config import settings
    from user_registry.core.logging_config import configure_logging

    configure_logging(settings.log_level)
    init_db()
