"""
Packaging Unit Tests
Tests for pyproject.toml metadata
"""
import re
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class TestProjectMetadata:
    """Tests for the published package description."""

    def test_readme_is_long_description(self):
        """The long description is README.md, not the design notes."""
        pyproject = (PROJECT_ROOT / "pyproject.toml").read_text()

        match = re.search(r'^readme\s*=\s*"([^"]+)"', pyproject, re.MULTILINE)

        assert match is not None
        assert match.group(1) == "README.md"
        assert (PROJECT_ROOT / "README.md").is_file()
