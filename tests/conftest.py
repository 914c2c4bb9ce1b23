from __future__ import annotations

import pytest

from ._helpers import CallCounter


@pytest.fixture
def counter() -> CallCounter:
    return CallCounter()
