"""
Unit tests for folio.persistence.json_file module.

Tests atomic JSON reads and writes on real temporary files.
"""

from pathlib import Path

import pytest

from folio.helpers.exceptions import DocumentWriteError
from folio.persistence.json_file import dump_json, ensure_dir, load_json, save_json_atomic


class TestLoadJson:
    """Tests for load_json."""

    @pytest.mark.unit
    def test_missing_file_returns_fallback(self, tmp_path: Path) -> None:
        """A missing file should return the fallback."""
        assert load_json(tmp_path / "nope.json", {"empty": True}) == {"empty": True}

    @pytest.mark.unit
    def test_invalid_syntax_returns_fallback(self, tmp_path: Path) -> None:
        """Unparseable contents should return the fallback."""
        path = tmp_path / "broken.json"
        path.write_text('{"meta": ', encoding="utf-8")
        assert load_json(path, []) == []

    @pytest.mark.unit
    def test_undecodable_bytes_return_fallback(self, tmp_path: Path) -> None:
        """Bytes that are not UTF-8 count as unparseable."""
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        assert load_json(path, None) is None

    @pytest.mark.unit
    def test_other_io_errors_propagate(self, tmp_path: Path) -> None:
        """Reading a directory is an I/O failure, not a fallback."""
        with pytest.raises(IsADirectoryError):
            load_json(tmp_path, {})

    @pytest.mark.unit
    def test_parses_valid_json(self, tmp_path: Path) -> None:
        """Valid JSON should parse to the stored value."""
        path = tmp_path / "ok.json"
        path.write_text('{"a": [1, 2]}', encoding="utf-8")
        assert load_json(path, None) == {"a": [1, 2]}


class TestSaveJsonAtomic:
    """Tests for save_json_atomic."""

    @pytest.mark.unit
    def test_write_then_read_round_trips(self, tmp_path: Path) -> None:
        """A written value should read back deep-equal."""
        path = tmp_path / "site.json"
        value = {"hero": {"firstName": "Zoë", "titles": ["a", "b"]}, "n": 1.5, "flag": None}
        save_json_atomic(path, value)
        assert load_json(path, None) == value

    @pytest.mark.unit
    def test_output_format(self, tmp_path: Path) -> None:
        """Files are indented by two spaces, keep non-ASCII and end with a newline."""
        path = tmp_path / "site.json"
        save_json_atomic(path, {"name": "Zoë"})
        text = path.read_text(encoding="utf-8")
        assert text == '{\n  "name": "Zoë"\n}\n'
        assert text == dump_json({"name": "Zoë"})

    @pytest.mark.unit
    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        """Missing parent directories should be created."""
        path = tmp_path / "a" / "b" / "site.json"
        save_json_atomic(path, [])
        assert path.read_text(encoding="utf-8") == "[]\n"

    @pytest.mark.unit
    def test_overwrite_leaves_no_temp_files(self, tmp_path: Path) -> None:
        """After a successful write only the target file remains."""
        path = tmp_path / "site.json"
        save_json_atomic(path, {"v": 1})
        save_json_atomic(path, {"v": 2})
        assert [p.name for p in tmp_path.iterdir()] == ["site.json"]
        assert load_json(path, None) == {"v": 2}

    @pytest.mark.unit
    def test_unserializable_value_keeps_previous_contents(self, tmp_path: Path) -> None:
        """A value that cannot be serialized fails before the target is touched."""
        path = tmp_path / "site.json"
        save_json_atomic(path, {"v": 1})

        with pytest.raises(DocumentWriteError) as exc_info:
            save_json_atomic(path, {"v": object()})

        assert exc_info.value.path == str(path)
        assert load_json(path, None) == {"v": 1}
        assert [p.name for p in tmp_path.iterdir()] == ["site.json"]

    @pytest.mark.unit
    def test_failed_replace_removes_temp_file(self, tmp_path: Path) -> None:
        """When the final replace fails the temp sibling is cleaned up."""
        target = tmp_path / "site.json"
        target.mkdir()

        with pytest.raises(DocumentWriteError):
            save_json_atomic(target, {"v": 1})

        assert [p.name for p in tmp_path.iterdir()] == ["site.json"]
        assert target.is_dir()


class TestEnsureDir:
    """Tests for ensure_dir."""

    @pytest.mark.unit
    def test_is_idempotent(self, tmp_path: Path) -> None:
        """Calling twice should not fail."""
        target = tmp_path / "x" / "y"
        assert ensure_dir(target) == target
        assert ensure_dir(target) == target
        assert target.is_dir()
