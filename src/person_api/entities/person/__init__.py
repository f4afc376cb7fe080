"""Person entity module.

This module contains all Person-related classes organized by responsibility:
- Person: Domain entity returned by the API
- PersonPayload: Client-supplied fields for create and update
- PersonTable: Database persistence model
- PersonRepository: Data access layer
"""

from .entity import Person, PersonPayload
from .repository import PersonRepository
from .table import PersonTable

__all__ = ["Person", "PersonPayload", "PersonRepository", "PersonTable"]
