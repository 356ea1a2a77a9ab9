import sys
from pathlib import Path

import pytest

# This file lives at <project_root>/tests/conftest.py
PROJECT_ROOT = Path(__file__).resolve().parents[1]
DATA_DIR = PROJECT_ROOT / "tests" / "data"

proj = str(PROJECT_ROOT)
if proj not in sys.path:
    sys.path.insert(0, proj)


@pytest.fixture
def sample_path() -> Path:
    return DATA_DIR / "sample.cfg"
