"""Person aggregate - construction with initialization."""
from typing import Any

from pydantic import ConfigDict, Field

from oop_concepts.domain.base.entity import Entity


class Person(Entity):
    """A person with a name and an age, both fixed at construction."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Person's name")
    age: int = Field(..., ge=0, description="Age in years")

    def __init__(self, name: str, age: int, **data: Any) -> None:
        super().__init__(name=name, age=age, **data)

    def greet(self) -> str:
        """Return the person's greeting."""
        return f"Hello, my name is {self.name}."

    def to_dict(self) -> dict:
        return {"name": self.name, "age": self.age}
