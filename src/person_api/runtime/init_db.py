"""Database initialization script."""

from src.person_api.core.services.database.db_session import DbSessionService
from src.person_api.runtime.context import get_config


def init_db() -> str:
    """Create all database tables and return the (password-masked) database URL."""
    database_service = DbSessionService(get_config())
    try:
        database_service.create_all()
        return str(database_service.engine.url)
    finally:
        database_service.dispose()


if __name__ == "__main__":
    init_db()
