import pytest

from mlsp.interpreter import Interpreter
from mlsp.runtime_context import set_output
from mlsp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh, empty variable mapping."""
    return Environment()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture(autouse=True)
def _default_output():
    # Tests that redirect the print channel must not leak into others.
    set_output(None)
    yield
    set_output(None)
