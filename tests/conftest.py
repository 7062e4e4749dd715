import pytest

from tests.helpers import FakeRoom


@pytest.fixture
def room():
    return FakeRoom()
