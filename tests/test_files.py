"""Unit tests for the plain-text persistence helpers in atbash_engine."""
from __future__ import annotations

from pathlib import Path

import pytest

from atbash_engine import load_text, save_text, transform, with_text_suffix


# ---------------------------------------------------------------------------
# Suffix normalization
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("name, expected", [
    ("secret", "secret.txt"),
    ("secret.txt", "secret.txt"),
    ("SECRET.TXT", "SECRET.TXT"),
    ("notes.md", "notes.md.txt"),
    ("archive.txt.bak", "archive.txt.bak.txt"),
])
def test_with_text_suffix(name: str, expected: str) -> None:
    assert with_text_suffix(Path("out") / name) == Path("out") / expected


def test_with_text_suffix_accepts_str() -> None:
    assert with_text_suffix("a/b") == Path("a/b.txt")


# ---------------------------------------------------------------------------
# Save / load
# ---------------------------------------------------------------------------


class TestSaveLoad:
    def test_save_appends_suffix(self, tmp_path: Path) -> None:
        written = save_text(tmp_path / "cipher", "zyx")
        assert written == tmp_path / "cipher.txt"
        assert written.read_text(encoding="utf-8") == "zyx"

    def test_save_keeps_path_without_suffix_rewrite(self, tmp_path: Path) -> None:
        written = save_text(tmp_path / "cipher.out", "zyx", ensure_suffix=False)
        assert written == tmp_path / "cipher.out"
        assert written.exists()

    def test_hangul_survives_save_and_load(self, tmp_path: Path, sample_text: str) -> None:
        written = save_text(tmp_path / "hangul.txt", transform(sample_text))
        assert transform(load_text(written)) == sample_text

    def test_load_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_text(tmp_path / "missing.txt")

    def test_save_into_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            save_text(tmp_path / "no" / "such" / "dir" / "out", "abc")

    def test_unencodable_text_raises_before_writing(self, tmp_path: Path) -> None:
        target = tmp_path / "out.txt"
        target.write_text("previous", encoding="utf-8")
        with pytest.raises(UnicodeEncodeError):
            save_text(target, "abc\udcff")
        assert target.read_text(encoding="utf-8") == "previous"

    def test_load_non_utf8_raises(self, tmp_path: Path) -> None:
        source = tmp_path / "euc-kr.txt"
        source.write_bytes("가나다".encode("euc-kr"))
        with pytest.raises(UnicodeDecodeError):
            load_text(source)

    def test_verbose_save_logs_to_stderr(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        import atbash_engine

        monkeypatch.setattr(atbash_engine, "VERBOSE", True)
        save_text(tmp_path / "log", "abc")
        assert "[INFO] Saved 3 character(s)" in capsys.readouterr().err
