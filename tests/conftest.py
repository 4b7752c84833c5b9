from __future__ import annotations

from typing import List

import pytest

from helpers import RECTANGLE


@pytest.fixture
def rectangle() -> List[tuple[float, float]]:
    return list(RECTANGLE)
