"""
pytest configuration and fixtures.
"""

from pathlib import Path
from typing import Generator
import pytest

# Add src to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from httphelpers import HelperConfig, Responder
from httphelpers.core.words import WORD_COUNT
from httphelpers.http import ResponseCapture, set_default_config

PREFIX = "scheme://authority"


@pytest.fixture
def config() -> HelperConfig:
    """Test configuration with a component name and an internal prefix."""
    return HelperConfig(
        component_name="orders",
        internal_url_prefix=PREFIX,
    )


@pytest.fixture
def responder(config: HelperConfig) -> Responder:
    """Responder bound to the test configuration."""
    return Responder(config)


@pytest.fixture
def capture() -> ResponseCapture:
    """Fresh in-memory sink."""
    return ResponseCapture()


@pytest.fixture
def words_file(tmp_path: Path) -> Path:
    """
    Synthetic word dictionary: line i is "w" + i as four hex digits,
    so the word for bytes 0x01 0x02 is "w0102".
    """
    path = tmp_path / "65536words"
    path.write_text("\n".join(f"w{i:04x}" for i in range(WORD_COUNT)) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def default_config(config: HelperConfig) -> Generator[HelperConfig, None, None]:
    """Install the test configuration for the module-level helpers."""
    set_default_config(config)
    yield config
    set_default_config(None)
