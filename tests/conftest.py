import pytest

from zset import Engine
from zset.prelude import initial_bindings
from zset.runtime.types import Env


@pytest.fixture
def engine():
    return Engine()


@pytest.fixture
def env():
    return Env.initial(initial_bindings)
