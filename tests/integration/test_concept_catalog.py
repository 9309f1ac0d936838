"""Integration tests: application service with the real registry and demos."""
import pytest

from oop_concepts.application.services import ConceptApplicationService
from oop_concepts.domain.concept import ConceptNotRunnableError, UnsupportedConceptError
from oop_concepts.domain.employee import DEFAULT_COMPANY, Employee
from oop_concepts.infrastructure.registry.registration import BUILTIN_CONCEPTS

OOP_CONCEPTS = [
    "class",
    "constructor",
    "encapsulation",
    "inheritance",
    "polymorphism",
    "abstract-class",
    "static-method",
    "class-attribute",
]
TESTING_CONCEPTS = [
    "unit-testing",
    "integration-testing",
    "regression-testing",
    "mocking",
    "end-to-end-testing",
    "performance-testing",
]

pytestmark = pytest.mark.integration


@pytest.fixture
def service():
    # Uses the global registry, populated on first access
    return ConceptApplicationService()


def test_catalog_lists_every_builtin(service):
    names = [c["name"] for c in service.list_concepts()["concepts"]]
    assert names == OOP_CONCEPTS + TESTING_CONCEPTS
    assert len(names) == len(BUILTIN_CONCEPTS)


def test_catalog_filters_by_category(service):
    oop = service.list_concepts("oop")["concepts"]
    testing = service.list_concepts("testing")["concepts"]

    assert [c["name"] for c in oop] == OOP_CONCEPTS
    assert all(c["runnable"] for c in oop)
    assert [c["name"] for c in testing] == TESTING_CONCEPTS
    assert not any(c["runnable"] for c in testing)


@pytest.mark.parametrize("name", OOP_CONCEPTS)
def test_every_oop_demo_runs(service, name):
    result = service.run_concept(name)

    assert result["concept"] == name
    assert isinstance(result["result"], dict)
    assert result["result"]


@pytest.mark.parametrize("name", TESTING_CONCEPTS)
def test_testing_concepts_are_descriptive_only(service, name):
    assert service.get_concept(name)["concept"]["summary"]
    with pytest.raises(ConceptNotRunnableError):
        service.run_concept(name)


def test_unknown_concept(service):
    with pytest.raises(UnsupportedConceptError):
        service.run_concept("metaclass")


def test_class_demo(service):
    result = service.run_concept("class")["result"]

    assert result["greeting"] == "Hello, my name is John."
    assert result["counter_values"] == [1, 2]


def test_encapsulation_demo(service):
    result = service.run_concept("encapsulation")["result"]

    assert result == {
        "balance": 1000,
        "public_balance_attribute": False,
        "direct_write_rejected": True,
    }


def test_abstract_class_demo(service):
    result = service.run_concept("abstract-class")["result"]

    assert result["base_instantiable"] is False
    assert "Shape" in result["error"]
    assert result["concrete_area"] == pytest.approx(78.5398, abs=1e-4)


def test_polymorphism_demo(service):
    result = service.run_concept("polymorphism")["result"]
    assert result["areas"] == ["Circle area: 78.54", "Rectangle area: 20.00"]


def test_static_method_demo(service):
    result = service.run_concept("static-method")["result"]
    assert result == {"add(10, 20)": 30, "add(20, 10)": 30}


def test_class_attribute_demo_restores_shared_state(service):
    result = service.run_concept("class-attribute")["result"]

    assert result["before"] == [DEFAULT_COMPANY, DEFAULT_COMPANY]
    assert result["after"] == ["Globex", "Globex"]
    assert Employee.get_company() == DEFAULT_COMPANY
