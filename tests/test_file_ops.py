"""Tests for file discovery, normalization and report writing."""

import pytest

from quality_metrics.exceptions import FileAccessError, InvalidPathError
from quality_metrics.file_ops import (
    iter_source_files,
    normalize_lines,
    read_source_file,
    write_text_file,
)


class TestNormalizeLines:
    def test_strips_lowercases_and_drops_blanks(self):
        text = "  Def Foo():\n\n   RETURN 1  \n\t\n"
        assert normalize_lines(text) == ("def foo():", "return 1")

    def test_empty_text(self):
        assert normalize_lines("") == ()


class TestReadSourceFile:
    def test_reads_and_normalizes(self, tmp_path):
        path = tmp_path / "Script.PY"
        path.write_text("DEF Main():\n\n    Pass\n")

        source = read_source_file(path)

        assert source.filename == "script.py"
        assert source.file_extension == ".py"
        assert source.filepath == str(tmp_path)
        assert source.lines == ("def main():", "pass")

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileAccessError) as exc_info:
            read_source_file(tmp_path / "missing.py")
        assert exc_info.value.filepath == tmp_path / "missing.py"

    def test_undecodable_bytes_replaced(self, tmp_path):
        path = tmp_path / "latin.sql"
        path.write_bytes(b"select '\xff' from t\n")
        source = read_source_file(path)
        assert len(source.lines) == 1


class TestIterSourceFiles:
    def test_filters_and_prunes(self, source_tree):
        found = {p.name for p in iter_source_files(source_tree, [".py", ".r", ".sql"], ["venv"])}
        assert found == {"calc.py", "report.sql", "Model.R"}

    def test_no_skip_dirs(self, source_tree):
        found = {p.name for p in iter_source_files(source_tree, [".py"])}
        assert found == {"calc.py", "vendored.py"}

    def test_deterministic_order(self, source_tree):
        first = list(iter_source_files(source_tree, [".py", ".r", ".sql"]))
        second = list(iter_source_files(source_tree, [".py", ".r", ".sql"]))
        assert first == second

    def test_bare_dotfiles_have_no_extension(self, tmp_path):
        (tmp_path / "calc.py").write_text("x = 1\n")
        (tmp_path / ".sql").write_text("select 1\n")
        (tmp_path / ".py").write_text("x = 2\n")
        (tmp_path / ".hidden.r").write_text("x <- 1\n")

        found = {p.name for p in iter_source_files(tmp_path, [".py", ".r", ".sql"])}

        assert found == {"calc.py", ".hidden.r"}

    def test_missing_root(self, tmp_path):
        with pytest.raises(InvalidPathError):
            list(iter_source_files(tmp_path / "absent", [".py"]))

    def test_root_is_file(self, tmp_path):
        target = tmp_path / "file.py"
        target.write_text("x = 1\n")
        with pytest.raises(InvalidPathError):
            list(iter_source_files(target, [".py"]))


class TestWriteTextFile:
    def test_creates_parent_directories(self, tmp_path):
        target = tmp_path / "out" / "nested" / "report.csv"
        write_text_file(target, "a,b\n1,2\n")
        assert target.read_text() == "a,b\n1,2\n"

    def test_write_into_file_path_fails(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        with pytest.raises(FileAccessError):
            write_text_file(blocker / "report.csv", "x")
