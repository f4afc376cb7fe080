"""Person database table model."""

from datetime import UTC, datetime

import sqlalchemy as sa
from sqlmodel import Field, SQLModel


class PersonTable(SQLModel, table=True):
    """Database persistence model for persons.

    This represents how the Person entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "person"

    id: int | None = Field(default=None, primary_key=True)
    first_name: str = Field(nullable=False)
    last_name: str = Field(nullable=False, index=True)
    # The unique index is what makes email uniqueness hold under concurrent writes
    email: str = Field(nullable=False, unique=True, index=True)
    age: int | None = Field(default=None, index=True)
    phone_number: str | None = None

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )
