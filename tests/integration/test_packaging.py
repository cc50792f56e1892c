"""Tests for project metadata."""

import re
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]


class TestProjectMetadata:
    """Tests for pyproject.toml."""

    def test_readme_describes_package(self):
        """Test the declared readme exists and documents the package."""
        pyproject = (ROOT / "pyproject.toml").read_text(encoding="utf-8")
        match = re.search(r'^readme = "([^"]+)"$', pyproject, re.MULTILINE)
        assert match is not None
        assert match.group(1) == "README.md"

        readme = (ROOT / match.group(1)).read_text(encoding="utf-8")
        assert readme.startswith("# galvopath")
        assert "galvopath preview" in readme
