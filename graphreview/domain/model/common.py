"""Base model for comment subsystem entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for comments, votes and user identities.

    Entities are immutable; changes produce copies via ``model_copy``.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        # Entities are rebuilt from API payloads that may carry extra fields
        extra="ignore",
    )
