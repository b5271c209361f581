import pytest

from key_overlay.config import resolve_settings


@pytest.fixture
def ab_settings():
    return resolve_settings(["A", "B"])
