"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root and src to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from transliteration_engine import DEVANAGARI, ITRANS, Direction
from transliterator.core import Transliterator
from transliterator.settings import ApplyMode, ConversionSettings

from tests.fixtures import SAMPLE_NOTE_ITRANS, SAMPLE_NOTE_DEVANAGARI


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")
    config.addinivalue_line("markers", "docx: mark as requiring python-docx")


# ============================================================================
# Scheme Fixtures
# ============================================================================


@pytest.fixture
def itrans():
    """The ITRANS scheme."""
    return ITRANS


@pytest.fixture
def devanagari():
    """The Devanagari scheme."""
    return DEVANAGARI


# ============================================================================
# Front End Fixtures
# ============================================================================


@pytest.fixture
def output_dir(tmp_path):
    """Directory for converted files."""
    return tmp_path / "out"


@pytest.fixture
def append_settings():
    """Default settings: ITRANS to Devanagari, appending."""
    return ConversionSettings()


@pytest.fixture
def replace_settings():
    """ITRANS to Devanagari, replacing the original."""
    return ConversionSettings(apply_mode=ApplyMode.REPLACE)


@pytest.fixture
def reverse_settings():
    """Devanagari to ITRANS, replacing the original."""
    return ConversionSettings(direction=Direction.DEV_TO_ITRANS, apply_mode=ApplyMode.REPLACE)


@pytest.fixture
def transliterator(append_settings, output_dir):
    """Transliterator with default settings."""
    return Transliterator(settings=append_settings, output_dir=str(output_dir))


@pytest.fixture
def replacing_transliterator(replace_settings, output_dir):
    """Transliterator that replaces the original text."""
    return Transliterator(settings=replace_settings, output_dir=str(output_dir))


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def itrans_note(tmp_path):
    """A Markdown note written in ITRANS."""
    file_path = tmp_path / "gita.md"
    file_path.write_text(SAMPLE_NOTE_ITRANS, encoding="utf-8")
    return file_path


@pytest.fixture
def devanagari_note(tmp_path):
    """A Markdown note written in Devanagari."""
    file_path = tmp_path / "gita_dev.md"
    file_path.write_text(SAMPLE_NOTE_DEVANAGARI, encoding="utf-8")
    return file_path


@pytest.fixture
def notes_dir(tmp_path):
    """A directory with supported, unsupported and empty files."""
    notes = tmp_path / "notes"
    notes.mkdir()
    (notes / "a_rama.md").write_text("rAma", encoding="utf-8")
    (notes / "b_namaste.txt").write_text("namaste", encoding="utf-8")
    (notes / "c_empty.txt").write_text("", encoding="utf-8")
    (notes / "script.py").write_text("print('rAma')", encoding="utf-8")
    (notes / "subdir").mkdir()
    return notes
