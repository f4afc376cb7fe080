"""Entity: Person."""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class _CamelModel(BaseModel):
    """Serialises to camelCase; accepts camelCase or snake_case on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PersonPayload(_CamelModel):
    """Client-supplied person fields for create and update requests.

    The identifier and timestamps are owned by the store, so any values sent
    for them are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    first_name: NonEmptyStr = Field(description="Person's first name")
    last_name: NonEmptyStr = Field(description="Person's last name")
    email: NonEmptyStr = Field(description="Person's email address, unique")
    age: int | None = Field(
        default=None, ge=0, le=2**63 - 1, description="Age in years"
    )
    phone_number: str | None = Field(default=None, description="Phone number")


class Person(_CamelModel):
    """Person entity as stored and returned by the API.

    ``id`` is ``None`` until the store has persisted the record.
    """

    id: int | None = Field(default=None, description="Store-assigned identifier")
    first_name: str = Field(description="Person's first name")
    last_name: str = Field(description="Person's last name")
    email: str = Field(description="Person's email address, unique")
    age: int | None = Field(default=None, description="Age in years")
    phone_number: str | None = Field(default=None, description="Phone number")
    created_at: datetime | None = Field(default=None, description="Creation time")
    updated_at: datetime | None = Field(default=None, description="Last update time")

    @classmethod
    def from_payload(cls, payload: PersonPayload) -> "Person":
        return cls(**payload.model_dump())

    def __eq__(self, other: Any) -> bool:
        """Compare persons by business attributes, ignoring timestamps."""
        if not isinstance(other, Person):
            return False

        return (
            self.id == other.id
            and self.first_name == other.first_name
            and self.last_name == other.last_name
            and self.email == other.email
            and self.age == other.age
            and self.phone_number == other.phone_number
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.first_name,
            self.last_name,
            self.email,
            self.age,
            self.phone_number,
        ))
