"""Infrastructure layer: concrete implementations of application ports."""

from phonebook.infrastructure.memory_repository import InMemoryPersonRepository
from phonebook.infrastructure.persistence.neo4j_repository import (
    Neo4jPersonRepository,
    ensure_person_constraints,
)
from phonebook.infrastructure.storage import get_driver, open_repository

__all__ = [
    "InMemoryPersonRepository",
    "Neo4jPersonRepository",
    "ensure_person_constraints",
    "get_driver",
    "open_repository",
]
