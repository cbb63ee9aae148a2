"""
Root conftest.py: sys.path, env vars, shared fixtures.

Sets up the test environment so all production code can be imported
without Azure credentials, and points tests at the fixture catalogs.
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so 'ogc_styles', 'config', etc. are importable
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True, scope="session")
def set_minimal_env_vars():
    """
    Set minimal environment variables for deterministic logging.
    """
    defaults = {
        "LOG_LEVEL": "INFO",
        "DEBUG_LOGGING": "false",
    }
    for key, value in defaults.items():
        os.environ.setdefault(key, value)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def asset_dir() -> Path:
    """Asset directory with mapbox.json, sld.xml, custom.txt, thumbnail.png and fonts/."""
    return FIXTURES_DIR / "assets"


@pytest.fixture
def config_path() -> Path:
    """Full catalog: one style with three encodings, a preview and additional assets."""
    return FIXTURES_DIR / "config.yaml"


@pytest.fixture
def minimal_config_path() -> Path:
    """One style, one stylesheet, no links."""
    return FIXTURES_DIR / "minimal_config.yaml"


@pytest.fixture
def catalog(config_path):
    from ogc_styles.repository import load_catalog
    return load_catalog(config_path)


@pytest.fixture
def minimal_catalog(minimal_config_path):
    from ogc_styles.repository import load_catalog
    return load_catalog(minimal_config_path)
