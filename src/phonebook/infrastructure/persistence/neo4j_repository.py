"""Neo4j implementation of PersonRepository.
Graph: one (:Person {id, name, number}) node per entry. Ids come from a
(:Sequence {name: "person"}) counter node that is incremented in the same
query that creates the Person, so a failed create does not consume an id.
"""

import logging
import re

from neo4j.exceptions import ConstraintError

from phonebook.application.errors import DuplicateKeyError, MalformedIdError
from phonebook.domain import Person, is_valid_person_id

logger = logging.getLogger(__name__)

PERSON_SEQUENCE = "person"

_CONSTRAINT_QUERIES = (
    """
    CREATE CONSTRAINT person_id_unique IF NOT EXISTS
    FOR (p:Person) REQUIRE p.id IS UNIQUE
    """,
    """
    CREATE CONSTRAINT person_name_unique IF NOT EXISTS
    FOR (p:Person) REQUIRE p.name IS UNIQUE
    """,
    """
    CREATE CONSTRAINT person_number_unique IF NOT EXISTS
    FOR (p:Person) REQUIRE p.number IS UNIQUE
    """,
    """
    CREATE CONSTRAINT sequence_name_unique IF NOT EXISTS
    FOR (s:Sequence) REQUIRE s.name IS UNIQUE
    """,
)

_LIST_QUERY = """
MATCH (p:Person)
RETURN p
ORDER BY toInteger(p.id)
"""

_GET_QUERY = """
MATCH (p:Person {id: $id})
RETURN p
"""

_FIND_BY_NAME_QUERY = """
MATCH (p:Person {name: $name})
WHERE $excluding_id IS NULL OR p.id <> $excluding_id
RETURN p
LIMIT 1
"""

_FIND_BY_NUMBER_QUERY = """
MATCH (p:Person {number: $number})
WHERE $excluding_id IS NULL OR p.id <> $excluding_id
RETURN p
LIMIT 1
"""

_CREATE_QUERY = """
MERGE (s:Sequence {name: $sequence})
ON CREATE SET s.value = 0
SET s.value = s.value + 1
WITH s.value AS next_id
CREATE (p:Person {id: toString(next_id), name: $name, number: $number})
RETURN p
"""

_UPDATE_QUERY = """
MATCH (p:Person {id: $id})
SET p.name = $name, p.number = $number
RETURN p
"""

_DELETE_QUERY = """
MATCH (p:Person {id: $id})
DETACH DELETE p
"""

_COUNT_QUERY = """
MATCH (p:Person)
RETURN count(p) AS total
"""

# e.g. "Node(12) already exists with label `Person` and property `name` = 'Ada'"
_CONSTRAINT_PROPERTY = re.compile(r"property `(?P<prop>[^`]+)`")


def ensure_person_constraints(driver) -> None:
    """Create the uniqueness constraints on Person and Sequence if missing."""
    with driver.session() as session:
        for query in _CONSTRAINT_QUERIES:
            session.run(query).consume()


def _duplicate_from_constraint_error(exc: ConstraintError, name: str, number: str) -> DuplicateKeyError:
    match = _CONSTRAINT_PROPERTY.search(exc.message or str(exc))
    prop = match.group("prop") if match else "unknown"
    value = {"name": name, "number": number}.get(prop)
    return DuplicateKeyError(prop, value)


def _record_to_person(record) -> Person:
    p = record["p"]
    return Person(id=p["id"], name=p["name"], number=p["number"])


class Neo4jPersonRepository:
    """Stores persons as Neo4j nodes. Uniqueness is backed by database constraints;
    call ensure_person_constraints at startup."""

    def __init__(self, driver: object) -> None:
        self._driver = driver

    @staticmethod
    def _check_id(person_id: str) -> None:
        if not is_valid_person_id(person_id):
            raise MalformedIdError(person_id)

    def _single_person(self, query: str, **params) -> Person | None:
        with self._driver.session() as session:
            record = session.run(query, **params).single()
        if not record:
            return None
        return _record_to_person(record)

    def list_all(self) -> list[Person]:
        with self._driver.session() as session:
            result = session.run(_LIST_QUERY)
            return [_record_to_person(rec) for rec in result]

    def get_by_id(self, person_id: str) -> Person | None:
        self._check_id(person_id)
        return self._single_person(_GET_QUERY, id=person_id)

    def find_by_name(self, name: str, excluding_id: str | None = None) -> Person | None:
        return self._single_person(_FIND_BY_NAME_QUERY, name=name, excluding_id=excluding_id)

    def find_by_number(self, number: str, excluding_id: str | None = None) -> Person | None:
        return self._single_person(_FIND_BY_NUMBER_QUERY, number=number, excluding_id=excluding_id)

    def add(self, name: str, number: str) -> Person:
        # Validate before touching the counter; the id here is a placeholder.
        Person(id="1", name=name, number=number)
        try:
            person = self._single_person(
                _CREATE_QUERY, sequence=PERSON_SEQUENCE, name=name, number=number
            )
        except ConstraintError as exc:
            raise _duplicate_from_constraint_error(exc, name, number) from exc
        if person is None:
            raise RuntimeError("Neo4jPersonRepository.add: expected one result")
        return person

    def update(self, person_id: str, name: str, number: str) -> Person | None:
        self._check_id(person_id)
        Person(id=person_id, name=name, number=number)
        try:
            return self._single_person(_UPDATE_QUERY, id=person_id, name=name, number=number)
        except ConstraintError as exc:
            raise _duplicate_from_constraint_error(exc, name, number) from exc

    def delete(self, person_id: str) -> bool:
        self._check_id(person_id)
        with self._driver.session() as session:
            summary = session.run(_DELETE_QUERY, id=person_id).consume()
        return summary.counters.nodes_deleted > 0

    def count(self) -> int:
        with self._driver.session() as session:
            record = session.run(_COUNT_QUERY).single()
        return record["total"] if record else 0
