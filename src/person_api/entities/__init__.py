"""Entities organised by business concept.

Each entity package colocates its domain model (entity.py), database model
(table.py) and data access layer (repository.py).
"""

from .person import Person, PersonPayload, PersonRepository, PersonTable

__all__ = ["Person", "PersonPayload", "PersonRepository", "PersonTable"]
