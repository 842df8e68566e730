import pytest

from tests.fakes import FakeDisplay, FakeLogger
from tests.settings import get_test_settings


@pytest.fixture
def logger():
    return FakeLogger()


@pytest.fixture
def display():
    return FakeDisplay()


@pytest.fixture
def test_settings():
    return get_test_settings()
