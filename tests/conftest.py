import logging

import pytest

from oop_concepts.application.services import ConceptApplicationService
from oop_concepts.config import manager as config_manager_module
from oop_concepts.domain.employee import DEFAULT_COMPANY, Employee
from oop_concepts.infrastructure.registry import ConceptRegistry
from oop_concepts.infrastructure.registry.registration import register_builtin_concepts


@pytest.fixture(autouse=True)
def reset_shared_state():
    """Class-level and singleton state must not leak between tests."""
    Employee.set_company(DEFAULT_COMPANY)
    ConceptRegistry.reset_instance()
    config_manager_module._config_manager = None
    yield
    Employee.set_company(DEFAULT_COMPANY)
    ConceptRegistry.reset_instance()
    config_manager_module._config_manager = None


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Code under test may replace the root logger's handlers."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def registry():
    registry = ConceptRegistry()
    register_builtin_concepts(registry)
    return registry


@pytest.fixture
def empty_registry():
    return ConceptRegistry()


@pytest.fixture
def concept_service(registry):
    return ConceptApplicationService(registry=registry)


# Test layer -> marker, so ``-m unit`` etc. selects by directory
_LAYER_MARKERS = {
    "domain": "unit",
    "application": "unit",
    "unit": "unit",
    "integration": "integration",
    "e2e": "e2e",
    "regression": "regression",
    "performance": "performance",
}


def pytest_collection_modifyitems(config, items):
    for item in items:
        parts = item.path.relative_to(config.rootpath).parts
        if len(parts) > 1 and parts[0] == "tests" and parts[1] in _LAYER_MARKERS:
            item.add_marker(getattr(pytest.mark, _LAYER_MARKERS[parts[1]]))
