"""Counter aggregate - a single piece of mutable instance state."""
from pydantic import Field

from oop_concepts.domain.base.entity import Entity


class Counter(Entity):
    """Counts upwards by one from zero."""

    count: int = Field(0, ge=0)

    def increment(self) -> int:
        """Add one to the count and return the new value."""
        self.count += 1
        return self.count

    def reset(self) -> None:
        self.count = 0
