"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from zutool.config.schema import ZutoolConfig
from zutool.models.forecast import HourlySample

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def load_fixture():
    """Return a loader for raw fixture bodies."""

    def _load(name: str) -> bytes:
        return (FIXTURE_DIR / name).read_bytes()

    return _load


@pytest.fixture
def default_config() -> ZutoolConfig:
    return ZutoolConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"timeout_seconds": 5.0, "max_retries": 1},
        "display": {"output_format": "table"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def make_samples():
    """Build hourly samples from a list of pressures."""

    def _make(pressures: list[float | None], weather: str = "100") -> list[HourlySample]:
        return [
            HourlySample(
                hour_label=str(i),
                weather_code=weather,
                temperature=15.0,
                pressure=p,
                pressure_level="0",
            )
            for i, p in enumerate(pressures)
        ]

    return _make
