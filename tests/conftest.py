from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

BASE_DIR = Path(__file__).resolve().parent.parent
SRC_DIR = (BASE_DIR / "src").resolve()

if str(BASE_DIR) not in sys.path:
    sys.path.append(str(BASE_DIR))
if str(SRC_DIR) not in sys.path:
    sys.path.append(str(SRC_DIR))


@pytest.fixture
def out() -> io.StringIO:
    """Buffer standing in for the script's output stream."""
    return io.StringIO()


@pytest.fixture
def global_env(out: io.StringIO):
    """Bootstrapped global environment whose `print` writes to `out`."""
    from smalljs.evaluator import make_global_env

    return make_global_env(out)
