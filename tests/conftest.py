"""Root conftest: shared test configuration."""

import os

import pytest

# Ensure tests don't pick up a developer's outline settings
os.environ.setdefault("OUTLINE_DEFAULT_CONVENTION", "camel")
os.environ.setdefault("OUTLINE_LOG_FORMAT", "text")

from tests.beans import INVOCATIONS  # noqa: E402


@pytest.fixture(autouse=True)
def invocations():
    """Fresh accessor-invocation counter for every test."""
    INVOCATIONS.reset()
    yield INVOCATIONS
    INVOCATIONS.reset()
