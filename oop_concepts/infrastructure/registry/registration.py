"""Built-in catalog entries and their demos."""
from typing import Any, Callable, Dict, List, Optional, Tuple

from oop_concepts.application import demos
from oop_concepts.domain.concept import Concept, ConceptCategory
from oop_concepts.infrastructure.registry.concept_registry import ConceptRegistry

_OOP = ConceptCategory.OOP
_TESTING = ConceptCategory.TESTING

BUILTIN_CONCEPTS: List[Tuple[Concept, Optional[Callable[[], Dict[str, Any]]]]] = [
    (
        Concept(
            name="class",
            category=_OOP,
            title="Class",
            summary="A blueprint bundling data with the methods that act on it.",
        ),
        demos.class_demo,
    ),
    (
        Concept(
            name="constructor",
            category=_OOP,
            title="Constructor",
            summary="Runs when an object is created and sets its initial fields.",
        ),
        demos.constructor_demo,
    ),
    (
        Concept(
            name="encapsulation",
            category=_OOP,
            title="Encapsulation and access modifiers",
            summary=(
                "Restricted fields are reachable only from inside their class. "
                "In Python a leading underscore marks them by convention."
            ),
        ),
        demos.encapsulation_demo,
    ),
    (
        Concept(
            name="inheritance",
            category=_OOP,
            title="Inheritance",
            summary="A subclass is-a specialization of its base and reuses its interface.",
        ),
        demos.inheritance_demo,
    ),
    (
        Concept(
            name="polymorphism",
            category=_OOP,
            title="Polymorphism",
            summary="One method name, behaviour chosen by the concrete type of the receiver.",
        ),
        demos.polymorphism_demo,
    ),
    (
        Concept(
            name="abstract-class",
            category=_OOP,
            title="Abstract class",
            summary="Declares methods without implementing them and cannot be instantiated.",
        ),
        demos.abstract_class_demo,
    ),
    (
        Concept(
            name="static-method",
            category=_OOP,
            title="Static method",
            summary="Called on the class itself and uses only its arguments.",
        ),
        demos.static_method_demo,
    ),
    (
        Concept(
            name="class-attribute",
            category=_OOP,
            title="Class attribute",
            summary="State stored on the class and shared by every instance.",
        ),
        demos.class_attribute_demo,
    ),
    (
        Concept(
            name="unit-testing",
            category=_TESTING,
            title="Unit testing",
            summary="Checks one function or class in isolation from its collaborators.",
        ),
        None,
    ),
    (
        Concept(
            name="integration-testing",
            category=_TESTING,
            title="Integration testing",
            summary="Checks that several real components work together.",
        ),
        None,
    ),
    (
        Concept(
            name="regression-testing",
            category=_TESTING,
            title="Regression testing",
            summary="Pins previously verified behaviour so later changes cannot break it silently.",
        ),
        None,
    ),
    (
        Concept(
            name="mocking",
            category=_TESTING,
            title="Mocking",
            summary="Replaces a dependency with a stand-in whose calls can be scripted and asserted.",
        ),
        None,
    ),
    (
        Concept(
            name="end-to-end-testing",
            category=_TESTING,
            title="End-to-end testing",
            summary="Drives the application through its outermost interface as a user would.",
        ),
        None,
    ),
    (
        Concept(
            name="performance-testing",
            category=_TESTING,
            title="Performance testing",
            summary="Measures how long an operation takes and guards against slowdowns.",
        ),
        None,
    ),
]


def register_builtin_concepts(registry: ConceptRegistry) -> None:
    """Register every built-in concept that is not already present."""
    for concept, demo in BUILTIN_CONCEPTS:
        if not registry.is_registered(concept.name):
            registry.register(concept, demo)
