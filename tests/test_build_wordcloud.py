from __future__ import annotations

import json
from pathlib import Path

import pytest

from scripts.build_wordcloud import main


@pytest.fixture
def index_file(tmp_path: Path) -> Path:
    path = tmp_path / "index.json"
    path.write_text(
        json.dumps([
            {"link": "/a/", "text": "cat dog cat bird"},
            {"link": "/b/", "text": "dog bird bird fish"},
        ]),
        encoding="utf-8",
    )
    return path


def test_prints_words(index_file: Path, capsys: pytest.CaptureFixture[str]):
    assert main([str(index_file), "--top-k", "3"]) == 0
    words = json.loads(capsys.readouterr().out)
    assert [w["text"] for w in words] == ["cat", "bird", "dog"]
    assert words[0]["size"] == 60.0
    assert words[-1]["size"] == 14.0


def test_writes_output_file(index_file: Path, tmp_path: Path):
    out = tmp_path / "out" / "words.json"
    assert main([str(index_file), "--output", str(out), "--min-size", "8", "--max-size", "32"]) == 0
    words = json.loads(out.read_text(encoding="utf-8"))
    assert len(words) == 4
    assert words[0]["size"] == 32.0
    assert words[-1]["size"] == 8.0


def test_missing_index_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main([str(tmp_path / "nope.json")]) == 1
    assert "not found" in capsys.readouterr().err


def test_malformed_document_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    path = tmp_path / "index.json"
    path.write_text(json.dumps([{"link": "/a/"}]), encoding="utf-8")
    assert main([str(path)]) == 1
    assert "has no 'text'" in capsys.readouterr().err


def test_invalid_config_fails(index_file: Path, capsys: pytest.CaptureFixture[str]):
    assert main([str(index_file), "--top-k", "0"]) == 1
    assert "top_k" in capsys.readouterr().err


def test_non_finite_size_fails(index_file: Path, capsys: pytest.CaptureFixture[str]):
    assert main([str(index_file), "--min-size", "nan"]) == 1
    assert "finite" in capsys.readouterr().err
