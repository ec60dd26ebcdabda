"""
Pytest configuration and fixtures.
"""
import pytest
import tempfile
import shutil
from pathlib import Path

from hyperglossary.core.models import Glossary


@pytest.fixture
def temp_dir():
    """Create temporary directory."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path)


@pytest.fixture
def sample_text():
    """Glossary input with a multi-line definition and no trailing blank line."""
    return (
        "cat\n"
        "a small animal\n"
        "\n"
        "cats\n"
        "plural of cat\n"
        "\n"
        "dog\n"
        "a loyal animal,\n"
        "often a pet\n"
        "\n"
        "pet\n"
        "an animal kept for companionship"
    )


@pytest.fixture
def sample_file(temp_dir, sample_text):
    """Sample input written to disk."""
    path = temp_dir / "terms.txt"
    path.write_text(sample_text, encoding="utf-8")
    return path


@pytest.fixture
def animals():
    """Small glossary from the documented scenarios."""
    return Glossary.from_mapping({
        "cat": "a small animal",
        "cats": "plural of cat",
        "dog": "a loyal animal, often a pet",
        "pet": "an animal kept for companionship",
    })


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Setup test environment variables."""
    monkeypatch.setenv("TESTING", "true")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("GLOSSARY_OUTPUT_DIR", raising=False)
    monkeypatch.delenv("GLOSSARY_INPUT_ENCODING", raising=False)
