"""
Test Configuration - Shared test fixtures and setup

This module provides common test fixtures and configuration for the test suite.
"""

import pytest
from typing import List, Dict, Any

# Import test modules
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from data_toolkit.config import reset_config

# Environment variables read by ConfigManager
CONFIG_ENV_VARS = [
    "ENVIRONMENT",
    "DATA_TOOLKIT_CONFIG",
    "RANDOM_LENGTH",
    "RANDOM_SETS",
    "RANDOM_ALLOW_DUPLICATES",
    "GEO_SECONDS_PRECISION",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FILE",
]


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Give every test a fresh configuration built from defaults."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_records() -> List[Dict[str, Any]]:
    """Records to search through."""
    return [
        {"_id": "a1", "name": "Alice", "tags": ["admin", "dev"], "active": True},
        {"_id": "b2", "name": "Bob", "tags": ["dev"], "active": False},
        {"_id": "c3", "name": "Carol", "tags": [], "active": True},
    ]


@pytest.fixture
def nested_mapping() -> Dict[str, Any]:
    """Nested dictionary with lists and falsy values."""
    return {
        "name": "widget",
        "price": 0,
        "enabled": False,
        "notes": None,
        "dimensions": {"width": 10, "height": 20, "units": {"length": "cm"}},
        "colours": ["red", "green", {"custom": "#ff00ff"}],
    }


@pytest.fixture
def config_file(tmp_path) -> Path:
    """YAML configuration file overriding a few defaults."""
    path = tmp_path / "toolkit.yml"
    path.write_text(
        "random:\n"
        "  length: 12\n"
        "  sets: ['10', 'AZ*']\n"
        "geo:\n"
        "  latitude_labels: ['North', 'South']\n"
        "  seconds_precision: 1\n"
        "tree:\n"
        "  value_rewrites: {}\n",
        encoding="utf-8",
    )
    return path


# Test markers
pytest.mark.unit = pytest.mark.unit
