"""Tests for infrastructure/adapters/ast_parser.py."""

from pathlib import Path

import pytest

from memberorder.domain.exceptions.parsing import ParsingError
from memberorder.infrastructure.adapters.ast_parser import ASTSourceParser, find_python_files


class TestParseSource:
    """Tests for ASTSourceParser.parse_source()."""

    def test_collects_classes_with_members(self) -> None:
        source = """
class A:
    x = 1
    def run(self): ...

class B:
    pass
"""
        parsed = ASTSourceParser().parse_source(source, Path("models.py"))

        assert parsed.module_name == "models"
        assert [c.qualified_name for c in parsed.classes] == ["models.A", "models.B"]
        assert [m.name for m in parsed.classes[0].members] == ["x", "run"]
        assert parsed.classes[1].members == ()

    def test_nested_classes_are_separate(self) -> None:
        source = """
class Outer:
    x = 1
    class Inner:
        y = 2
    def run(self):
        class Local:
            z = 3
"""
        parsed = ASTSourceParser().parse_source(source, Path("m.py"))

        assert [c.qualified_name for c in parsed.classes] == [
            "m.Outer",
            "m.Outer.Inner",
            "m.Outer.run.Local",
        ]
        assert [m.name for m in parsed.classes[0].members] == ["x", "run"]
        assert [m.name for m in parsed.classes[1].members] == ["y"]

    def test_classes_in_conditional_blocks(self) -> None:
        source = """
if TYPE_CHECKING:
    class Stub:
        x: int
"""
        parsed = ASTSourceParser().parse_source(source, Path("m.py"))

        assert [c.name for c in parsed.classes] == ["Stub"]

    def test_syntax_error_raises(self) -> None:
        with pytest.raises(ParsingError, match="syntax error"):
            ASTSourceParser().parse_source("class A(:\n", Path("bad.py"))

    def test_module_name_from_root(self, tmp_path: Path) -> None:
        parser = ASTSourceParser(root_path=tmp_path)

        parsed = parser.parse_source("class A: pass", tmp_path / "pkg" / "mod.py")

        assert parsed.classes[0].qualified_name == "pkg.mod.A"


class TestParseFile:
    """Tests for ASTSourceParser.parse_file() and parse_directory()."""

    def test_parse_file(self, tmp_path: Path) -> None:
        path = tmp_path / "shapes.py"
        path.write_text("class Circle:\n    radius = 1\n", encoding="utf-8")

        parsed = ASTSourceParser().parse_file(path)

        assert parsed.path == path
        assert parsed.classes[0].members[0].location.line == 2

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ParsingError, match="file not found"):
            ASTSourceParser().parse_file(tmp_path / "missing.py")

    def test_encoding_error_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.py"
        path.write_bytes(b"x = '\xff'\n")

        with pytest.raises(ParsingError, match="encoding error"):
            ASTSourceParser().parse_file(path)

    def test_directory_is_read_error(self, tmp_path: Path) -> None:
        with pytest.raises(ParsingError, match="cannot read file"):
            ASTSourceParser().parse_file(tmp_path)

    def test_parse_directory(self, tmp_path: Path) -> None:
        (tmp_path / "b.py").write_text("class B: pass\n", encoding="utf-8")
        (tmp_path / "a.py").write_text("class A: pass\n", encoding="utf-8")
        (tmp_path / "notes.txt").write_text("class N: pass\n", encoding="utf-8")
        cache = tmp_path / "__pycache__"
        cache.mkdir()
        (cache / "c.py").write_text("class C: pass\n", encoding="utf-8")

        parsed = ASTSourceParser().parse_directory(tmp_path)

        assert [p.path.name for p in parsed] == ["a.py", "b.py"]

    def test_directory_module_names_relative_to_directory(self, tmp_path: Path) -> None:
        package = tmp_path / "app" / "models"
        package.mkdir(parents=True)
        (package / "__init__.py").write_text("class Base: pass\n", encoding="utf-8")
        (package / "user.py").write_text("class User: pass\n", encoding="utf-8")

        parsed = ASTSourceParser().parse_directory(tmp_path)

        assert [c.qualified_name for p in parsed for c in p.classes] == [
            "app.models.Base",
            "app.models.user.User",
        ]

    def test_parser_root_overrides_directory(self, tmp_path: Path) -> None:
        package = tmp_path / "app"
        package.mkdir()
        (package / "user.py").write_text("class User: pass\n", encoding="utf-8")

        parsed = ASTSourceParser(root_path=tmp_path).parse_directory(package)

        assert parsed[0].module_name == "app.user"


class TestFindPythonFiles:
    """Tests for find_python_files()."""

    def test_recursive_sorted_with_excludes(self, tmp_path: Path) -> None:
        (tmp_path / "pkg").mkdir()
        (tmp_path / "pkg" / "z.py").touch()
        (tmp_path / "pkg" / "a.py").touch()
        (tmp_path / ".venv").mkdir()
        (tmp_path / ".venv" / "lib.py").touch()
        (tmp_path / "main.py").touch()

        files = find_python_files(tmp_path)

        assert [f.relative_to(tmp_path).as_posix() for f in files] == [
            "main.py",
            "pkg/a.py",
            "pkg/z.py",
        ]
