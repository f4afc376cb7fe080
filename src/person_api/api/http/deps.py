"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from pydantic import EmailStr, TypeAdapter, ValidationError
from sqlmodel import Session

from src.person_api.api.http.app_data import ApplicationDependencies
from src.person_api.core.exceptions import PersonValidationError
from src.person_api.core.services import DbSessionService, PersonService
from src.person_api.entities.person import PersonPayload
from src.person_api.runtime.context import get_config

_email_adapter = TypeAdapter(EmailStr)


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a session for the duration of one request."""
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_person_service(db: Session = Depends(get_db_session)) -> PersonService:
    return PersonService(db)


def validated_person_payload(payload: PersonPayload) -> PersonPayload:
    """Apply the configurable validation rules to a create/update body.

    Shape checks (required, non-empty, integer age) have already run when
    FastAPI parsed ``payload``; this adds the rules from the ``validation``
    config section.
    """
    rules = get_config().validation

    if rules.require_age and payload.age is None:
        raise PersonValidationError("age is required")

    if (
        rules.max_age is not None
        and payload.age is not None
        and payload.age > rules.max_age
    ):
        raise PersonValidationError(f"age must not exceed {rules.max_age}")

    if rules.check_email_format:
        try:
            _email_adapter.validate_python(payload.email)
        except ValidationError as e:
            raise PersonValidationError(
                f"email {payload.email!r} is not a valid email address"
            ) from e

    return payload
