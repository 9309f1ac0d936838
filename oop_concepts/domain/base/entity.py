"""Base domain entities - foundation for all domain objects."""
from typing import Any, Optional
from abc import ABC
from pydantic import BaseModel, ConfigDict


class Entity(BaseModel, ABC):
    """Base class for all domain entities."""
    model_config = ConfigDict(
        frozen=False,  # Entities are mutable
        validate_assignment=True,
        arbitrary_types_allowed=True
    )
    
    id: Optional[Any] = None  # Entity identifier (can be any type)
    
    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same ID and type.

        Entities without an ID are only equal to themselves.
        """
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id
    
    def __hash__(self) -> int:
        """Hash based on entity ID."""
        if self.id is None:
            return id(self)
        return hash((self.__class__, self.id))
