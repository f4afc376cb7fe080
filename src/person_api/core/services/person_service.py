from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from src.person_api.core.exceptions import DuplicateEmailError, PersonNotFoundError
from src.person_api.entities.person import Person, PersonRepository


class PersonService:
    """Business rules for persons: email uniqueness and record existence.

    The ``exists_by_email`` checks give a friendly error on the common path.
    Concurrent writers can still slip past them, so a unique-constraint
    violation from the store is converted into the same ``DuplicateEmailError``.
    """

    def __init__(self, db_session: Session):
        self._db_session = db_session
        self._person_repo = PersonRepository(db_session)

    def create_person(self, person: Person) -> Person:
        if self._person_repo.exists_by_email(person.email):
            logger.warning("Rejected create: email {} already in use", person.email)
            raise DuplicateEmailError(person.email)

        # The store assigns the identifier
        created = self._save(person.model_copy(update={"id": None}))
        logger.info("Created person {}", created.id)
        return created

    def get_person_by_id(self, person_id: int) -> Person | None:
        return self._person_repo.find_by_id(person_id)

    def get_person_by_email(self, email: str) -> Person | None:
        return self._person_repo.find_by_email(email)

    def get_all_persons(self) -> list[Person]:
        return self._person_repo.find_all()

    def search_by_last_name(self, last_name: str) -> list[Person]:
        return self._person_repo.find_by_last_name(last_name)

    def get_persons_older_than(self, age: int) -> list[Person]:
        return self._person_repo.find_by_age_greater_than(age)

    def update_person(self, person_id: int, person_details: Person) -> Person:
        """Overwrite every mutable field of person ``person_id``.

        Raises:
            PersonNotFoundError: No person has ``person_id``.
            DuplicateEmailError: The new email belongs to another person.
        """
        existing = self._person_repo.find_by_id(person_id)
        if existing is None:
            raise PersonNotFoundError(person_id)

        if existing.email != person_details.email and self._person_repo.exists_by_email(
            person_details.email
        ):
            logger.warning(
                "Rejected update of person {}: email {} already in use",
                person_id,
                person_details.email,
            )
            raise DuplicateEmailError(
                person_details.email,
                f"Email {person_details.email} is already in use",
            )

        updated = existing.model_copy(
            update={
                "first_name": person_details.first_name,
                "last_name": person_details.last_name,
                "email": person_details.email,
                "age": person_details.age,
                "phone_number": person_details.phone_number,
            }
        )
        saved = self._save(
            updated, duplicate_message=f"Email {updated.email} is already in use"
        )
        logger.info("Updated person {}", person_id)
        return saved

    def delete_person(self, person_id: int) -> None:
        if not self._person_repo.exists_by_id(person_id):
            raise PersonNotFoundError(person_id)

        self._person_repo.delete_by_id(person_id)
        self._db_session.commit()
        logger.info("Deleted person {}", person_id)

    def _save(self, person: Person, duplicate_message: str | None = None) -> Person:
        try:
            saved = self._person_repo.save(person)
            self._db_session.commit()
        except IntegrityError as e:
            self._db_session.rollback()
            # email is the only unique column besides the primary key
            logger.warning("Store rejected write for email {}: {}", person.email, e.orig)
            raise DuplicateEmailError(person.email, duplicate_message) from e
        except Exception:
            self._db_session.rollback()
            raise
        return saved
