"""Employee aggregate - immutable identity and shared class-level state."""
from typing import Any, ClassVar

from pydantic import Field

from oop_concepts.domain.base.entity import Entity

DEFAULT_COMPANY = "Acme Corp"


class Employee(Entity):
    """Employee with an id fixed at construction.

    ``company`` belongs to the class rather than to any instance, so a change
    made through ``set_company`` is seen by every employee.
    """

    company: ClassVar[str] = DEFAULT_COMPANY

    id: int = Field(..., frozen=True, description="Employee number")
    name: str = Field(..., min_length=1)

    def __init__(self, id: int, name: str, **data: Any) -> None:
        super().__init__(id=id, name=name, **data)

    @classmethod
    def set_company(cls, name: str) -> None:
        """Change the company shared by all employees."""
        cls.company = name

    @classmethod
    def get_company(cls) -> str:
        return cls.company

    def describe(self) -> str:
        return f"{self.name} (#{self.id}) works at {self.company}"

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "company": self.company}
