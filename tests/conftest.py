# tests/conftest.py
"""Shared test fixtures.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

import logging
import os
from collections.abc import Iterator

import pytest
import structlog
from hypothesis import HealthCheck, Phase, Verbosity, settings

from ensure.logging import LOGGER_NAMESPACE
from ensure.singleton import SingletonRegistry

# =============================================================================
# Hypothesis Profiles
# =============================================================================

settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
    # _reset_logging is autouse and stateless across examples
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Leave structlog, the root logger and the ensure logger as each test found them."""
    root = logging.getLogger()
    package = logging.getLogger(LOGGER_NAMESPACE)
    root_state = (list(root.handlers), root.level)
    package_state = (list(package.handlers), package.level, package.propagate)
    yield
    structlog.reset_defaults()
    root.handlers = root_state[0]
    root.setLevel(root_state[1])
    package.handlers = package_state[0]
    package.setLevel(package_state[1])
    package.propagate = package_state[2]


@pytest.fixture
def registry() -> SingletonRegistry:
    """Isolated singleton registry so tests never touch the process default."""
    return SingletonRegistry()
