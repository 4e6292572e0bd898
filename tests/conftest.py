import pytest

from colorful_logger import registry


@pytest.fixture(autouse=True)
def clear_shared_logger():
    """Start and finish every test with no shared logger."""
    registry._clear_instance()
    yield
    registry._clear_instance()
