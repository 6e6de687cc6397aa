import pytest

from sequence_tour.commons import set_config


@pytest.fixture(autouse=True)
def quiet_config():
    """Every test starts with debug tracing off."""
    set_config(False)
    yield
    set_config(False)
