import sys
from pathlib import Path

import numpy as np
import pytest

# Ensure the repository root is on sys.path so tests can import the package
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class ListSource:
    """Replays fixed white-noise draws in order."""

    def __init__(self, draws):
        self.draws = np.asarray(draws, dtype=np.float64)
        self.pos = 0

    def standard_normal(self, size):
        out = self.draws[self.pos:self.pos + size]
        self.pos += size
        return out


@pytest.fixture
def list_source():
    return ListSource
