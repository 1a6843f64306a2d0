import pytest

from bmi_series import generate_series


@pytest.fixture
def height_cm() -> float:
    """Reference height whose squared metre value is exactly 3.0625."""
    return 175


@pytest.fixture
def default_series(height_cm):
    return generate_series(height_cm, 40, 140, 0.5)
