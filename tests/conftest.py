from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

here = Path(__file__).parent
root_path = here.parent


@pytest.fixture
def timestamp() -> datetime:
    """A timestamp with sub-millisecond precision."""
    return datetime(2009, 11, 17, 20, 34, 58, 651387, tzinfo=timezone.utc)
