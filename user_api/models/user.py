from sqlmodel import Field, SQLModel


class User(SQLModel):
    """In-memory user record. Not a table: the store keeps these in a list."""

    id: int = Field(gt=0)
    name: str
    email: str
