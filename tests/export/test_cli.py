"""Tests for the export CLI."""

import json

import pytest

from common.constants import EXPORT_DIRECTORY_NAME
from export.cli import main


@pytest.fixture
def contributions_file(tmp_path):
    path = tmp_path / "contributions.json"
    path.write_text(
        json.dumps(
            [
                {
                    "type": "commit",
                    "timestamp": "2026-01-01T10:00:00Z",
                    "text": "feat: add feature",
                    "repository": "owner/repo",
                    "url": "https://example.com/c/1",
                }
            ]
        )
    )
    return path


class TestCli:
    """Tests for main."""

    def test_console_format(self, contributions_file, capsys):
        """Test the default console report."""
        assert main(["--input", str(contributions_file), "--with-links"]) == 0

        out = capsys.readouterr().out
        assert "## 2026-01-01" in out
        assert "commit: 10:00:00: [owner/repo]: feat: add feature: (https://example.com/c/1)" in out

    def test_git_format(self, contributions_file, tmp_path, monkeypatch, capsys):
        """Test the git export end to end."""
        monkeypatch.chdir(tmp_path)

        assert main(["--input", str(contributions_file), "--format", "git", "--anonymize"]) == 0

        out = capsys.readouterr().out
        assert "Contributions exported: 1" in out
        assert "Anonymization: enabled" in out
        assert (tmp_path / EXPORT_DIRECTORY_NAME / ".git").is_dir()

    def test_missing_input(self, tmp_path, capsys):
        """Test that a missing file exits non-zero."""
        assert main(["--input", str(tmp_path / "missing.json")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_non_string_field(self, tmp_path, capsys):
        """Test that a badly typed record exits non-zero instead of crashing."""
        path = tmp_path / "contributions.json"
        path.write_text(json.dumps([{"type": "commit", "timestamp": "2026-01-01", "text": 123}]))

        assert main(["--input", str(path)]) == 1
        assert "must be a string" in capsys.readouterr().err
