"""Domain errors raised by the person service and the request validators."""

from enum import Enum


class PersonErrorKind(str, Enum):
    VALIDATION = "validation"
    DUPLICATE_EMAIL = "duplicate_email"
    NOT_FOUND = "not_found"


class PersonServiceError(Exception):
    """Base class for person domain errors.

    ``kind`` tags the failure so callers can dispatch on it instead of
    inspecting the message.
    """

    kind: PersonErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PersonValidationError(PersonServiceError):
    kind = PersonErrorKind.VALIDATION


class DuplicateEmailError(PersonServiceError):
    kind = PersonErrorKind.DUPLICATE_EMAIL

    def __init__(self, email: str, message: str | None = None):
        super().__init__(message or f"Person with email {email} already exists")
        self.email = email


class PersonNotFoundError(PersonServiceError):
    kind = PersonErrorKind.NOT_FOUND

    def __init__(self, person_id: int):
        super().__init__(f"Person not found with id {person_id}")
        self.person_id = person_id
