"""Test configuration for PropGallery tests."""

import os
import sys
from pathlib import Path

import pytest

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

# Add tests directory to path for shared_fixtures
tests_path = Path(__file__).parent
sys.path.insert(0, str(tests_path))

# Import shared fixtures to make them available to all tests
from shared_fixtures import (  # noqa: E402
    ManualClock,
    SignalCollector,
    create_test_image,
    make_records,
)


@pytest.fixture
def clock():
    """Manual clock whose ``factory`` can be passed as a timer_factory."""
    return ManualClock()


@pytest.fixture
def records():
    """Six valid in-memory image records."""
    return make_records(6)


@pytest.fixture
def signal_collector():
    """Collects the arguments of every emission it is connected to."""
    return SignalCollector()


@pytest.fixture
def test_image_dir(tmp_path):
    """A folder of real image files plus files the loader must skip."""
    image_dir = tmp_path / "listing"
    image_dir.mkdir()
    create_test_image(image_dir / "front_elevation.jpg", color="blue")
    create_test_image(image_dir / "kitchen-island.png", color="green")
    create_test_image(image_dir / "rear_garden.gif", color="red")
    (image_dir / "notes.txt").write_text("not an image")
    (image_dir / ".hidden.jpg").write_bytes(b"")
    return image_dir
