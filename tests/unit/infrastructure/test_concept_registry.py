"""Tests for the concept registry."""
import threading

import pytest

from oop_concepts.domain.concept import (
    Concept,
    ConceptCategory,
    ConceptNotRunnableError,
    DuplicateConceptError,
    UnsupportedConceptError,
)
from oop_concepts.infrastructure.registry import ConceptRegistry, get_concept_registry


@pytest.fixture
def oop_concept():
    return Concept(name="class", category=ConceptCategory.OOP, title="Class")


@pytest.fixture
def testing_concept():
    return Concept(name="mocking", category=ConceptCategory.TESTING, title="Mocking")


class TestConceptRegistry:
    """Test registration, lookup and demo execution."""

    def test_register_and_get(self, empty_registry, oop_concept):
        empty_registry.register(oop_concept)

        assert empty_registry.is_registered("class")
        assert empty_registry.get("class") == oop_concept
        assert len(empty_registry) == 1

    def test_duplicate_registration(self, empty_registry, oop_concept):
        empty_registry.register(oop_concept)

        with pytest.raises(DuplicateConceptError):
            empty_registry.register(oop_concept)

    def test_get_unknown(self, empty_registry):
        with pytest.raises(UnsupportedConceptError) as exc_info:
            empty_registry.get("missing")

        assert exc_info.value.error_code == "ENTITY_NOT_FOUND"

    def test_list_preserves_order_and_filters(self, empty_registry, oop_concept, testing_concept):
        empty_registry.register(testing_concept)
        empty_registry.register(oop_concept)

        assert [c.name for c in empty_registry.list()] == ["mocking", "class"]
        assert empty_registry.list(ConceptCategory.OOP) == [oop_concept]
        assert empty_registry.list(ConceptCategory.TESTING) == [testing_concept]

    def test_run_demo(self, empty_registry, oop_concept):
        empty_registry.register(oop_concept, lambda: {"ran": True})

        assert empty_registry.is_runnable("class")
        assert empty_registry.run("class") == {"ran": True}

    def test_run_without_demo(self, empty_registry, testing_concept):
        empty_registry.register(testing_concept)

        assert not empty_registry.is_runnable("mocking")
        with pytest.raises(ConceptNotRunnableError):
            empty_registry.run("mocking")

    def test_run_unknown(self, empty_registry):
        with pytest.raises(UnsupportedConceptError):
            empty_registry.run("missing")

    def test_unregister(self, empty_registry, oop_concept):
        empty_registry.register(oop_concept)

        assert empty_registry.unregister("class") is True
        assert empty_registry.unregister("class") is False
        assert not empty_registry.is_registered("class")

    def test_clear(self, registry):
        registry.clear()
        assert len(registry) == 0


class TestConceptRegistrySingleton:
    def test_get_instance_returns_same_object(self):
        assert ConceptRegistry.get_instance() is ConceptRegistry.get_instance()

    def test_get_instance_is_thread_safe(self):
        instances = []

        def grab():
            instances.append(ConceptRegistry.get_instance())

        threads = [threading.Thread(target=grab) for _ in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len({id(instance) for instance in instances}) == 1

    def test_reset_instance(self):
        first = ConceptRegistry.get_instance()
        ConceptRegistry.reset_instance()
        assert ConceptRegistry.get_instance() is not first

    def test_get_concept_registry_registers_builtins(self):
        registry = get_concept_registry()

        assert registry is ConceptRegistry.get_instance()
        assert registry.is_registered("polymorphism")
        assert registry.is_registered("performance-testing")

    def test_get_concept_registry_registers_once(self):
        first_count = len(get_concept_registry())
        assert len(get_concept_registry()) == first_count
