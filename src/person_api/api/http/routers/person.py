"""Person API router with CRUD and search operations."""

from fastapi import APIRouter, Depends, Path, Query, Response, status

from src.person_api.api.http.deps import get_person_service, validated_person_payload
from src.person_api.core.services import PersonService
from src.person_api.entities.person import Person, PersonPayload

router = APIRouter(prefix="/api/persons", tags=["persons"])

# Identifiers and ages are stored as signed 64-bit integers
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_NOT_FOUND = {404: {"description": "Person not found (empty body)"}}
_DUPLICATE = {400: {"description": "Email already in use"}}


@router.post(
    "",
    response_model=Person,
    status_code=status.HTTP_201_CREATED,
    responses=_DUPLICATE,
)
def create_person(
    payload: PersonPayload = Depends(validated_person_payload),
    service: PersonService = Depends(get_person_service),
) -> Person:
    """Create a new person."""
    return service.create_person(Person.from_payload(payload))


@router.get("", response_model=list[Person])
def list_persons(
    service: PersonService = Depends(get_person_service),
) -> list[Person]:
    """List all persons."""
    return service.get_all_persons()


@router.get("/email/{email}", response_model=Person, responses=_NOT_FOUND)
def get_person_by_email(
    email: str,
    service: PersonService = Depends(get_person_service),
) -> Person | Response:
    """Get a person by email address."""
    person = service.get_person_by_email(email)
    if person is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return person


@router.get("/search/lastname", response_model=list[Person])
def search_persons_by_last_name(
    lastname: str = Query(description="Exact last name to match"),
    service: PersonService = Depends(get_person_service),
) -> list[Person]:
    """Find every person with the given last name."""
    return service.search_by_last_name(lastname)


@router.get("/filter/age", response_model=list[Person])
def get_persons_older_than(
    min_age: int = Query(
        alias="minAge",
        ge=_INT64_MIN,
        le=_INT64_MAX,
        description="Exclusive lower bound",
    ),
    service: PersonService = Depends(get_person_service),
) -> list[Person]:
    """Find every person strictly older than ``minAge``."""
    return service.get_persons_older_than(min_age)


@router.get("/{person_id}", response_model=Person, responses=_NOT_FOUND)
def get_person(
    person_id: int = Path(ge=_INT64_MIN, le=_INT64_MAX),
    service: PersonService = Depends(get_person_service),
) -> Person | Response:
    """Get a person by ID."""
    person = service.get_person_by_id(person_id)
    if person is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return person


@router.put(
    "/{person_id}",
    response_model=Person,
    responses={**_NOT_FOUND, **_DUPLICATE},
)
def update_person(
    person_id: int = Path(ge=_INT64_MIN, le=_INT64_MAX),
    payload: PersonPayload = Depends(validated_person_payload),
    service: PersonService = Depends(get_person_service),
) -> Person:
    """Replace every mutable field of a person."""
    return service.update_person(person_id, Person.from_payload(payload))


@router.delete(
    "/{person_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
)
def delete_person(
    person_id: int = Path(ge=_INT64_MIN, le=_INT64_MAX),
    service: PersonService = Depends(get_person_service),
) -> Response:
    """Delete a person."""
    service.delete_person(person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
