import sys
from pathlib import Path

import pytest

# Allow running the suite from a checkout without installing the package
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))


@pytest.fixture
def origin():
    from lnglatalt import LngLatAlt

    return LngLatAlt(0.0, 0.0)
