import pytest

from sprig.interpreter import Interpreter
from sprig.types.environment import Environment

from ast_builders import program


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate top-level statements and return the result descriptor."""

    def _run(*statements):
        return interp.eval(program(*statements))

    return _run


@pytest.fixture
def env():
    """Fresh top-level environment."""
    return Environment()
