"""Test configuration and fixtures.

Provides:
- Python path setup for imports
- Settings cache isolation between tests
"""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from outcomes.shared.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Drop cached settings so environment changes in one test never leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
