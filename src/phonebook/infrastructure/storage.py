"""Open the repository selected by the storage connection string."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from neo4j import GraphDatabase

from phonebook.config import Settings
from phonebook.infrastructure.memory_repository import InMemoryPersonRepository
from phonebook.infrastructure.persistence.neo4j_repository import (
    Neo4jPersonRepository,
    ensure_person_constraints,
)

logger = logging.getLogger(__name__)


def get_driver(settings: Settings):
    return GraphDatabase.driver(
        settings.database_uri,
        auth=(settings.database_user, settings.database_password),
    )


@contextmanager
def open_repository(settings: Settings) -> Iterator[InMemoryPersonRepository | Neo4jPersonRepository]:
    """Yield a ready repository; the Neo4j driver is closed on exit."""
    if settings.uses_memory_store:
        logger.info("Using in-memory person store")
        yield InMemoryPersonRepository()
        return
    driver = get_driver(settings)
    try:
        ensure_person_constraints(driver)
        logger.info("Connected to Neo4j at %s", settings.database_uri)
        yield Neo4jPersonRepository(driver)
    finally:
        driver.close()
