"""
Shared test fixtures and configuration.
"""

import pytest

from navstack import config as navstack_config
from navstack.models import Manufacturer, VehicleEntry
from navstack.sample_data import MANUFACTURERS


# ========== Configuration Fixtures ==========

@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config loader at an empty temp location and clear its cache."""
    config_path = tmp_path / "config.toml"
    monkeypatch.setenv(navstack_config.CONFIG_PATH_ENV_VAR, str(config_path))
    navstack_config.clear_config_cache()
    yield config_path
    navstack_config.clear_config_cache()


# ========== Record Fixtures ==========

@pytest.fixture
def gm():
    return next(brand for brand in MANUFACTURERS if brand.name == "GM")



@pytest.fixture
def make_records():
    """Factory for a list of distinct records, alternating variants."""
    def _make(count: int):
        records = []
        for index in range(count):
            if index % 2:
                records.append(VehicleEntry(make="Test", model=f"Model {index}", year=2000 + index))
            else:
                records.append(Manufacturer(name=f"Brand {index}"))
        return records
    return _make
