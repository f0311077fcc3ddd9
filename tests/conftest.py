"""Shared fixtures for the vecswizzle tests."""
import pytest

from vecswizzle import FixedVector, reset_settings, vec2, vec3


@pytest.fixture(autouse=True)
def default_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def v123():
    return vec3(1, 2, 3)


@pytest.fixture
def v10_20():
    return vec2(10, 20)


@pytest.fixture
def raw3():
    return FixedVector.construct("xyz", [1, 2, 3])
