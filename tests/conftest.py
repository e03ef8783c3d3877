import pytest

from etoile.builtin.env_builtin import build_standard_environment
from etoile.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh standard environment per test."""
    return build_standard_environment()


@pytest.fixture
def interp():
    """Interpreter without the prelude, so tests see only the core forms."""
    return Interpreter(prelude=None)
