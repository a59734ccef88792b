import pytest

from fan_fuzzy import FuzzyController


@pytest.fixture
def controller():
    return FuzzyController()
