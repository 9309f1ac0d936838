"""Concept Registry - registry pattern for the concept catalog.

Concepts are looked up by name instead of through hard-coded conditionals,
so new entries can be added by registering them without touching callers.
"""

import threading
from typing import Any, Callable, Dict, List, Optional

from oop_concepts.domain.concept import (
    Concept,
    ConceptCategory,
    ConceptNotRunnableError,
    DuplicateConceptError,
    UnsupportedConceptError,
)
from oop_concepts.infrastructure.logging.logger import get_logger

DemoFunc = Callable[[], Dict[str, Any]]


class ConceptRegistration:
    """Container for concept registration information."""

    def __init__(self, concept: Concept, demo: Optional[DemoFunc] = None):
        """
        Initialize concept registration.

        Args:
            concept: The catalog entry
            demo: Optional zero-argument callable illustrating the concept
        """
        self.concept = concept
        self.demo = demo

    @property
    def runnable(self) -> bool:
        return self.demo is not None


class ConceptRegistry:
    """
    Registry of catalog concepts and their demos.

    Thread-safe singleton implementation.
    """

    _instance: Optional['ConceptRegistry'] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize concept registry."""
        self._registrations: Dict[str, ConceptRegistration] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> 'ConceptRegistry':
        """Get singleton instance of concept registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the singleton so the next ``get_instance`` starts empty."""
        with cls._lock:
            cls._instance = None

    def register(self, concept: Concept, demo: Optional[DemoFunc] = None) -> None:
        """
        Register a concept.

        Raises:
            DuplicateConceptError: If the name is already registered
        """
        with self._registration_lock:
            if concept.name in self._registrations:
                raise DuplicateConceptError(concept.name)
            self._registrations[concept.name] = ConceptRegistration(concept, demo)
            self._logger.debug(
                "Registered concept", concept=concept.name, runnable=demo is not None
            )

    def unregister(self, name: str) -> bool:
        """Remove a concept. Returns False if it was not registered."""
        with self._registration_lock:
            removed = self._registrations.pop(name, None) is not None
            if removed:
                self._logger.debug("Unregistered concept", concept=name)
            return removed

    def is_registered(self, name: str) -> bool:
        with self._registration_lock:
            return name in self._registrations

    def _get_registration(self, name: str) -> ConceptRegistration:
        with self._registration_lock:
            registration = self._registrations.get(name)
        if registration is None:
            raise UnsupportedConceptError(name)
        return registration

    def get(self, name: str) -> Concept:
        """Get a concept by name."""
        return self._get_registration(name).concept

    def is_runnable(self, name: str) -> bool:
        return self._get_registration(name).runnable

    def list(self, category: Optional[ConceptCategory] = None) -> List[Concept]:
        """List concepts in registration order, optionally filtered by category."""
        with self._registration_lock:
            concepts = [r.concept for r in self._registrations.values()]
        if category is not None:
            concepts = [c for c in concepts if c.category == category]
        return concepts

    def run(self, name: str) -> Dict[str, Any]:
        """
        Run a concept's demo.

        Raises:
            UnsupportedConceptError: If the concept is not registered
            ConceptNotRunnableError: If the concept has no demo
        """
        registration = self._get_registration(name)
        if not registration.runnable:
            raise ConceptNotRunnableError(name)
        self._logger.info("Running concept demo", concept=name)
        return registration.demo()

    def clear(self) -> None:
        with self._registration_lock:
            self._registrations.clear()

    def __len__(self) -> int:
        with self._registration_lock:
            return len(self._registrations)


def get_concept_registry() -> ConceptRegistry:
    """Get the global concept registry with built-in concepts registered."""
    registry = ConceptRegistry.get_instance()
    with ConceptRegistry._lock:
        if len(registry) == 0:
            from oop_concepts.infrastructure.registry.registration import register_builtin_concepts

            register_builtin_concepts(registry)
    return registry
