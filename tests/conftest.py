from __future__ import annotations

from typing import List

import pytest

from precise_number.core import PreciseNumber


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def sample_values() -> List[PreciseNumber]:
    """Mixed-sign, mixed-exponent values including the anchors."""
    return [
        PreciseNumber.ZERO,
        PreciseNumber.ONE,
        PreciseNumber.NEGATIVE_ONE,
        PreciseNumber(-2, 12345),
        PreciseNumber(-3, -678),
        PreciseNumber(3, 7),
        PreciseNumber(0, 42),
        PreciseNumber(-40, 27182818284590452353602874713526624977572),
    ]
