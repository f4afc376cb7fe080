"""Core services exports."""

from .database.db_session import DbSessionService
from .person_service import PersonService

__all__ = [
    "DbSessionService",
    "PersonService",
]
