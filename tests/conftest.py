import pytest
from hypothesis import HealthCheck, settings

from arbor.interpreter import Interpreter, global_environment
from arbor.runtime_context import get_strict_identifiers, set_strict_identifiers

# The identifier-policy fixture below is autouse and function scoped;
# property tests never change the policy.
settings.register_profile(
    "arbor", suppress_health_check=[HealthCheck.function_scoped_fixture], deadline=None
)
settings.load_profile("arbor")


@pytest.fixture
def env():
    """Fresh top-level environment with builtins and the initial bindings."""
    return global_environment()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture(autouse=True)
def _restore_identifier_policy():
    saved = get_strict_identifiers()
    yield
    set_strict_identifiers(saved)


@pytest.fixture
def strict():
    set_strict_identifiers(True)
    yield
