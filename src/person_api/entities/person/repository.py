"""Person repository for data access operations."""

from sqlmodel import Session, col, select

from src.person_api.core.exceptions import PersonNotFoundError

from .entity import Person
from .table import PersonTable


class PersonRepository:
    """Data-access layer for persons.

    Every query is an explicit ``select()``; lookups return ``None`` or an
    empty list on a miss and never raise for absence. Database errors are not
    caught here.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, row: PersonTable) -> Person:
        return Person.model_validate(row, from_attributes=True)

    def save(self, person: Person) -> Person:
        """Insert ``person`` when it has no identifier, otherwise update that row.

        An identifier with no row raises ``PersonNotFoundError``; the store
        alone assigns identifiers.

        The session is flushed so constraint violations surface here rather
        than at commit time.
        """
        fields = person.model_dump(
            include={"first_name", "last_name", "email", "age", "phone_number"}
        )

        if person.id is None:
            row = PersonTable(**fields)
            self._session.add(row)
        else:
            row = self._session.get(PersonTable, person.id)
            if row is None:
                raise PersonNotFoundError(person.id)
            for key, value in fields.items():
                setattr(row, key, value)

        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def find_by_id(self, person_id: int) -> Person | None:
        row = self._session.get(PersonTable, person_id)
        if row is None:
            return None
        return self._to_entity(row)

    def find_by_email(self, email: str) -> Person | None:
        statement = select(PersonTable).where(PersonTable.email == email)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)

    def find_by_last_name(self, last_name: str) -> list[Person]:
        statement = (
            select(PersonTable)
            .where(PersonTable.last_name == last_name)
            .order_by(col(PersonTable.id))
        )
        return [self._to_entity(row) for row in self._session.exec(statement)]

    def find_by_age_greater_than(self, age: int) -> list[Person]:
        # NULL ages never compare greater, so they drop out naturally
        statement = (
            select(PersonTable)
            .where(col(PersonTable.age) > age)
            .order_by(col(PersonTable.id))
        )
        return [self._to_entity(row) for row in self._session.exec(statement)]

    def find_all(self) -> list[Person]:
        statement = select(PersonTable).order_by(col(PersonTable.id))
        return [self._to_entity(row) for row in self._session.exec(statement)]

    def exists_by_email(self, email: str) -> bool:
        statement = select(PersonTable.id).where(PersonTable.email == email).limit(1)
        return self._session.exec(statement).first() is not None

    def exists_by_id(self, person_id: int) -> bool:
        statement = select(PersonTable.id).where(PersonTable.id == person_id).limit(1)
        return self._session.exec(statement).first() is not None

    def delete_by_id(self, person_id: int) -> None:
        """Remove the row with ``person_id``; a missing row is not an error."""
        row = self._session.get(PersonTable, person_id)
        if row is None:
            return
        self._session.delete(row)
        self._session.flush()
