"""Tests for the jiradoc command line."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from jiradoc.cli import main
from jiradoc.schemas import Document


class TestToMarkdown:
    """Tests for the to-markdown command."""

    def test_renders_adf_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "description.json"
        path.write_text(
            json.dumps(
                {
                    "version": 1,
                    "type": "doc",
                    "content": [
                        {"type": "heading", "attrs": {"level": 2}, "content": [{"type": "text", "text": "Steps"}]},
                        {"type": "paragraph", "content": [{"type": "text", "text": "Run it", "marks": [{"type": "em"}]}]},
                    ],
                }
            )
        )

        assert main(["to-markdown", str(path)]) == 0
        assert capsys.readouterr().out == "## Steps\n*Run it*\n"

    def test_reads_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(Document.from_text("piped").to_json()))

        assert main(["to-markdown"]) == 0
        assert capsys.readouterr().out == "piped\n"

    def test_invalid_json_fails(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        assert main(["to-markdown", str(path)]) == 1
        assert capsys.readouterr().err.startswith("jiradoc: ")

    def test_missing_file_fails(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["to-markdown", str(tmp_path / "missing.json")]) == 1
        assert "Input file not found" in capsys.readouterr().err


class TestFromMarkdown:
    """Tests for the from-markdown command."""

    def test_prints_adf_json(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "description.md"
        path.write_text("**Hello**, world!\n")

        assert main(["from-markdown", str(path), "--indent", "0"]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload == {
            "version": 1,
            "type": "doc",
            "content": [
                {
                    "type": "paragraph",
                    "content": [
                        {"type": "text", "text": "Hello", "marks": [{"type": "strong"}]},
                        {"type": "text", "text": ", world!"},
                    ],
                }
            ],
        }

    def test_strict_rejects_images(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "description.md"
        path.write_text("![diagram](diagram.png)\n")

        assert main(["from-markdown", str(path), "--strict"]) == 1
        assert "image" in capsys.readouterr().err

    def test_requires_a_command(self) -> None:
        with pytest.raises(SystemExit):
            main([])

    def test_undecodable_input_fails(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "description.md"
        path.write_bytes(b"caf\xe9\n")

        assert main(["from-markdown", str(path)]) == 1
        assert capsys.readouterr().err.startswith("jiradoc: ")
