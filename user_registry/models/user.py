"""User record model."""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """A user record held by the UserManager.

    Email is the unique identifier within a collection. Fields are
    mutable in place; assignments are still type-checked.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(description="Display name")
    email: str = Field(description="Email - unique identifier")
    role: str = Field(description="Role label, e.g. Admin or User")

    def __str__(self) -> str:
        return f"User{{name='{self.name}', email='{self.email}', role='{self.role}'}}"
