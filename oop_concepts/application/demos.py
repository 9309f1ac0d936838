"""Runnable demos, one per object-oriented concept in the catalog.

Each demo builds the toy objects it needs, exercises one language feature,
and returns a plain dictionary describing what happened.
"""
from typing import Any, Dict

from oop_concepts.domain.account import BankAccount
from oop_concepts.domain.base.exceptions import RestrictedFieldError
from oop_concepts.domain.counter import Counter
from oop_concepts.domain.employee import Employee
from oop_concepts.domain.person import Person
from oop_concepts.domain.shape import Circle, Rectangle, Shape
from oop_concepts.domain.utilities import MathUtils


def class_demo() -> Dict[str, Any]:
    person = Person("John", 30)
    counter = Counter()
    return {
        "class": type(person).__name__,
        "greeting": person.greet(),
        "counter_values": [counter.increment(), counter.increment()],
    }


def constructor_demo() -> Dict[str, Any]:
    person = Person("Alice", 25)
    counter = Counter()
    return {
        "person": person.to_dict(),
        "counter_initial_count": counter.count,
    }


def encapsulation_demo() -> Dict[str, Any]:
    account = BankAccount(owner="Alice")
    account.deposit(1000)
    try:
        account.balance = 0
        write_rejected = False
    except RestrictedFieldError:
        write_rejected = True
    return {
        "balance": account.get_balance(),
        "public_balance_attribute": hasattr(account, "balance"),
        "direct_write_rejected": write_rejected,
    }


def inheritance_demo() -> Dict[str, Any]:
    variants = [Circle, Rectangle]
    return {
        "base": Shape.__name__,
        "variants": [v.__name__ for v in variants],
        "is_subclass": {v.__name__: issubclass(v, Shape) for v in variants},
    }


def polymorphism_demo() -> Dict[str, Any]:
    shapes = [Circle(5), Rectangle(4, 5)]
    return {"areas": [shape.describe() for shape in shapes]}


def abstract_class_demo() -> Dict[str, Any]:
    try:
        Shape()
        error = None
    except TypeError as e:
        error = str(e)
    circle = Circle(5)
    return {
        "base_instantiable": error is None,
        "error": error,
        "concrete_area": circle.area(),
    }


def static_method_demo() -> Dict[str, Any]:
    return {
        "add(10, 20)": MathUtils.add(10, 20),
        "add(20, 10)": MathUtils.add(20, 10),
    }


def class_attribute_demo() -> Dict[str, Any]:
    original = Employee.get_company()
    first = Employee(1, "Alice")
    second = Employee(2, "Bob")
    before = [first.company, second.company]
    Employee.set_company("Globex")
    try:
        after = [first.company, second.company]
    finally:
        Employee.set_company(original)
    return {"before": before, "after": after}
