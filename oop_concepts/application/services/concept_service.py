"""Application service exposing the concept demos and the catalog."""
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from oop_concepts.config.schemas import DemoDefaults
from oop_concepts.domain.account import BankAccount
from oop_concepts.domain.base.exceptions import ValidationError
from oop_concepts.domain.concept import ConceptCategory
from oop_concepts.domain.counter import Counter
from oop_concepts.domain.employee import Employee
from oop_concepts.domain.person import Person
from oop_concepts.domain.shape import create_shape
from oop_concepts.domain.utilities import MathUtils, Number
from oop_concepts.infrastructure.error import handle_exceptions
from oop_concepts.infrastructure.logging.logger import get_logger
from oop_concepts.infrastructure.registry import ConceptRegistry, get_concept_registry


class ConceptApplicationService:
    """Use cases for running demos and browsing the catalog.

    Every method returns a plain dictionary carrying a ``message`` key so the
    results can be rendered by any output format. Domain errors propagate.
    """

    def __init__(self, registry: Optional[ConceptRegistry] = None,
                 defaults: Optional[DemoDefaults] = None):
        self._registry = registry
        self._defaults = defaults or DemoDefaults()
        self._logger = get_logger(__name__)

    @property
    def registry(self) -> ConceptRegistry:
        if self._registry is None:
            self._registry = get_concept_registry()
        return self._registry

    @property
    def defaults(self) -> DemoDefaults:
        return self._defaults

    @handle_exceptions("greet_person")
    def greet_person(self, name: Optional[str] = None,
                     age: Optional[int] = None) -> Dict[str, Any]:
        person = Person(
            name if name is not None else self._defaults.person_name,
            age if age is not None else self._defaults.person_age,
        )
        greeting = person.greet()
        self._logger.debug("Greeted person", name=person.name)
        return {
            "person": person.to_dict(),
            "greeting": greeting,
            "message": "Greet person success.",
        }

    @handle_exceptions("count")
    def count(self, times: Optional[int] = None) -> Dict[str, Any]:
        times = self._defaults.counter_increments if times is None else times
        if times < 0:
            raise ValidationError(
                f"Number of increments must not be negative: {times}",
                "INVALID_INCREMENTS",
                {"times": times},
            )
        counter = Counter()
        values = [counter.increment() for _ in range(times)]
        return {
            "values": values,
            "count": counter.count,
            "message": "Count success.",
        }

    @handle_exceptions("calculate_areas")
    def calculate_areas(self, shapes: Iterable[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Compute the area of every shape.

        Args:
            shapes: Mappings with a ``kind`` key plus that kind's dimensions,
                e.g. ``{"kind": "circle", "radius": 5}``
        """
        results = []
        for spec in shapes:
            spec = dict(spec)
            kind = spec.pop("kind", "")
            shape = create_shape(kind, **spec)
            results.append(shape.to_dict())

        total = sum(r["area"] for r in results)
        self._logger.debug("Calculated areas", shape_count=len(results))
        return {
            "shapes": results,
            "total_area": total,
            "message": "Calculate areas success.",
        }

    @handle_exceptions("deposit")
    def deposit(self, amounts: Iterable[Number], owner: str = "") -> Dict[str, Any]:
        account = BankAccount(owner=owner)
        deposits = 0
        for amount in amounts:
            account.deposit(amount)
            deposits += 1
        return {
            "owner": account.owner,
            "balance": account.get_balance(),
            "deposits": deposits,
            "message": "Deposit success.",
        }

    @handle_exceptions("add")
    def add(self, a: Number, b: Number) -> Dict[str, Any]:
        return {"result": MathUtils.add(a, b), "message": "Add success."}

    @handle_exceptions("describe_employees")
    def describe_employees(
        self,
        employees: Iterable[Union[Tuple[int, str], Mapping[str, Any]]],
        company: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Describe employees under a shared company name.

        The company is a class-level setting; it is applied for the duration
        of this call and restored afterwards.
        """
        original = Employee.get_company()
        Employee.set_company(company or self._defaults.company)
        try:
            staff: List[Employee] = []
            for entry in employees:
                staff.append(self._build_employee(entry))
            return {
                "company": Employee.get_company(),
                "employees": [
                    {**e.to_dict(), "description": e.describe()} for e in staff
                ],
                "message": "Describe employees success.",
            }
        finally:
            Employee.set_company(original)

    @staticmethod
    def _build_employee(entry: Union[Tuple[int, str], Mapping[str, Any]]) -> Employee:
        if isinstance(entry, Mapping):
            missing = [key for key in ("id", "name") if key not in entry]
            if missing:
                raise ValidationError(
                    f"Employee entry is missing {', '.join(missing)}",
                    "INVALID_EMPLOYEE",
                    {"entry": dict(entry), "missing": missing},
                )
            return Employee(entry["id"], entry["name"])

        if len(entry) != 2:
            raise ValidationError(
                f"Employee entry must be an (id, name) pair: {entry!r}",
                "INVALID_EMPLOYEE",
                {"entry": list(entry)},
            )
        return Employee(*entry)

    @handle_exceptions("list_concepts")
    def list_concepts(self, category: Optional[Union[str, ConceptCategory]] = None) -> Dict[str, Any]:
        if isinstance(category, str):
            category = ConceptCategory.from_str(category)
        concepts = self.registry.list(category)
        return {
            "concepts": [
                {**c.to_dict(), "runnable": self.registry.is_runnable(c.name)}
                for c in concepts
            ],
            "message": "Get concepts success.",
        }

    @handle_exceptions("get_concept")
    def get_concept(self, name: str) -> Dict[str, Any]:
        concept = self.registry.get(name)
        return {
            "concept": {**concept.to_dict(), "runnable": self.registry.is_runnable(name)},
            "message": "Get concept success.",
        }

    @handle_exceptions("run_concept")
    def run_concept(self, name: str) -> Dict[str, Any]:
        result = self.registry.run(name)
        return {
            "concept": name,
            "result": result,
            "message": f"Run concept {name} success.",
        }
