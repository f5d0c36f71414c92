# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from propertypath.api.http import app  # ensures imports resolve; run tests from repo root
from propertypath.domain.projection import PropertySpec


@pytest.fixture(scope="session")
def client():
    return TestClient(app)


@pytest.fixture
def three_property_plan():
    """The default three-property plan from the portfolio screen."""
    return [
        PropertySpec(id="p1", property_value=500_000.0, growth_tier="medium"),
        PropertySpec(id="p2", property_value=600_000.0, growth_tier="medium"),
        PropertySpec(id="p3", property_value=750_000.0, growth_tier="medium"),
    ]
