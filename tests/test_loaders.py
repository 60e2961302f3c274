"""Tests for document reading, writing and folder scanning."""

import logging
import os
from pathlib import Path

import pytest

from nexo2ce.conversion.loaders import DocumentLoader, find_documents


@pytest.fixture
def loader() -> DocumentLoader:
    return DocumentLoader()


class TestDocumentLoader:
    """Test the read and write contract."""

    def test_read_yaml(self, tmp_path: Path, loader: DocumentLoader) -> None:
        path = tmp_path / "items.yml"
        path.write_text("ruby:\n  material: emerald\n  Pack:\n    texture: pack:item/ruby\n", encoding="utf-8")

        assert loader.read(path) == {
            "ruby": {"material": "emerald", "Pack": {"texture": "pack:item/ruby"}}
        }

    def test_read_json(self, tmp_path: Path, loader: DocumentLoader) -> None:
        path = tmp_path / "items.json"
        path.write_bytes(b'{"ruby": {"material": "emerald"}}')

        assert loader.read(path) == {"ruby": {"material": "emerald"}}

    @pytest.mark.parametrize(
        "name, content",
        [
            ("broken.yml", "ruby: [unclosed\n"),
            ("empty.yml", ""),
            ("list.yml", "- a\n- b\n"),
            ("broken.json", "{not json"),
        ],
    )
    def test_failures_return_none_with_warning(
        self,
        tmp_path: Path,
        loader: DocumentLoader,
        caplog: pytest.LogCaptureFixture,
        name: str,
        content: str,
    ) -> None:
        caplog.set_level(logging.WARNING)
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")

        assert loader.read(path) is None
        assert any(r.levelno == logging.WARNING for r in caplog.records)

    def test_missing_file(self, tmp_path: Path, loader: DocumentLoader) -> None:
        assert loader.read(tmp_path / "nope.yml") is None

    def test_write_keeps_key_order(self, tmp_path: Path, loader: DocumentLoader) -> None:
        path = tmp_path / "out" / "nested" / "doc.yml"
        assert loader.write(path, {"zeta": 1, "alpha": {"b": 2, "a": 1}})

        assert path.read_text(encoding="utf-8") == "zeta: 1\nalpha:\n  b: 2\n  a: 1\n"

    def test_write_failure_returns_false(
        self, tmp_path: Path, loader: DocumentLoader, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.ERROR)
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")

        assert loader.write(blocker / "doc.yml", {"a": 1}) is False
        assert any(r.levelno == logging.ERROR for r in caplog.records)


class TestFindDocuments:
    """Test recursive scanning."""

    def test_order_blacklist_and_suffixes(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING)
        (tmp_path / "b_dir").mkdir()
        (tmp_path / "nexo_defaults").mkdir()
        for name in ["b_dir/inner.yaml", "nexo_defaults/skip.yml", "c.yml", "a.yml", "notes.txt", "d.json"]:
            (tmp_path / name).write_text("x: 1\n", encoding="utf-8")

        found = find_documents(tmp_path, ["nexo_defaults"])

        assert [p.relative_to(tmp_path).as_posix() for p in found] == [
            "a.yml",
            "b_dir/inner.yaml",
            "c.yml",
        ]
        assert any("nexo_defaults" in r.getMessage() for r in caplog.records)

    def test_custom_suffixes(self, tmp_path: Path) -> None:
        (tmp_path / "a.yml").write_text("x: 1\n", encoding="utf-8")
        (tmp_path / "b.JSON").write_text("{}", encoding="utf-8")

        found = find_documents(tmp_path, suffixes=[".json"])
        assert [p.name for p in found] == ["b.JSON"]

    def test_symlinked_folder_is_not_followed(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Test a link back to a parent folder does not recurse forever."""
        caplog.set_level(logging.WARNING)
        (tmp_path / "a.yml").write_text("x: 1\n", encoding="utf-8")
        try:
            os.symlink(tmp_path, tmp_path / "loop", target_is_directory=True)
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not supported on this platform")

        found = find_documents(tmp_path)

        assert [p.name for p in found] == ["a.yml"]
        assert any("symlinked" in r.getMessage() for r in caplog.records)

    def test_unreadable_folder_is_skipped(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING)

        assert find_documents(tmp_path / "missing") == []
        assert any("Cannot read folder" in r.getMessage() for r in caplog.records)
