"""Shared fixtures for the oral hygiene assessment tests."""
import os
import sys

import pytest
from PIL import Image

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from scoring.assessment import Assessment  # noqa: E402


@pytest.fixture
def empty_assessment():
    return Assessment()


@pytest.fixture
def full_assessment():
    """Every category at its nominal maximum."""
    return Assessment(
        name="홍길동",
        chart_number="A-001",
        date="2026-10-17",
        plaque=(3,) * 6,
        perio=("6",) * 24,
        interdental=(3,) * 4,
        sensitivity=3,
        arch=2,
        motor=1,
    )


@pytest.fixture
def watermark_file(tmp_path):
    """A 40x20 opaque blue watermark image."""
    path = tmp_path / "watermark.png"
    Image.new("RGBA", (40, 20), (0, 0, 255, 255)).save(path)
    return path
