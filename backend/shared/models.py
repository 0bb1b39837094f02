"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Populated from verified token claims and made available to route
    handlers via dependency injection. Nothing here is re-read from the
    database; routes needing fresh profile data look the user up by id.
    """

    id: int = Field(..., description="User ID")
    email: str = Field(..., description="User's email address, as encoded in the token")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


class CamelModel(BaseModel):
    """Base for models exchanged with the frontend (camelCase JSON keys)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
