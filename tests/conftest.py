import pytest

from elevation_shadows.config import get_settings
from elevation_shadows.elevation import get_elevation_table


@pytest.fixture(autouse=True)
def configure_settings(monkeypatch):
    monkeypatch.delenv("ELEVATION_ANCHOR", raising=False)
    monkeypatch.delenv("ELEVATION_PRESERVE_OPACITY", raising=False)
    get_settings.cache_clear()
    get_elevation_table.cache_clear()
    yield
    get_settings.cache_clear()
    get_elevation_table.cache_clear()
