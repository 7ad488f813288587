"""Test configuration and fixtures.

Provides:
- Python path setup for imports
- Recording callbacks for side-effect hooks
- Sample containers of every variant
"""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from fpcontainers import ABSENT, Failure, Present, Success  # noqa: E402


@pytest.fixture
def recorder() -> Mock:
    """Create a callable that records every call made to it."""
    return Mock(return_value=None)


@pytest.fixture
def producer() -> Mock:
    """Create a zero-argument default producer returning 17."""
    return Mock(return_value=17)


@pytest.fixture(params=[Present(42), ABSENT], ids=["present", "absent"])
def any_maybe(request: pytest.FixtureRequest):
    """Yield one Maybe of each variant."""
    return request.param


@pytest.fixture(params=[Success(42), Failure("boom")], ids=["success", "failure"])
def any_result(request: pytest.FixtureRequest):
    """Yield one Result of each variant."""
    return request.param
