"""Tests for presentation/cli.py."""

import json
from pathlib import Path

import pytest

from memberorder.presentation.cli import EXIT_ERROR, EXIT_OK, EXIT_VIOLATIONS, main

GOOD = "class A:\n    x = 1\n    def __init__(self): ...\n    def run(self): ...\n"
BAD = "class A:\n    def run(self): ...\n    x = 1\n"
UNSORTED = "class A:\n    b = 1\n    a = 2\n"


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory without a pyproject.toml above the sources."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


class TestMain:
    """Tests for main()."""

    def test_clean_file(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (workdir / "good.py").write_text(GOOD)

        assert main(["good.py"]) == EXIT_OK
        assert "Result: PASSED" in capsys.readouterr().out

    def test_violations(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (workdir / "bad.py").write_text(BAD)

        assert main(["bad.py"]) == EXIT_VIOLATIONS
        out = capsys.readouterr().out
        assert "bad.py:3:4: [STYLE] member-ordering: " in out
        assert "public_fields should be before public_methods" in out

    def test_default_path_is_current_directory(self, workdir: Path) -> None:
        (workdir / "bad.py").write_text(BAD)

        assert main([]) == EXIT_VIOLATIONS

    def test_alphabetize_flag(self, workdir: Path) -> None:
        (workdir / "unsorted.py").write_text(UNSORTED)

        assert main(["unsorted.py"]) == EXIT_OK
        assert main(["unsorted.py", "--alphabetize"]) == EXIT_VIOLATIONS

    def test_order_flag(self, workdir: Path) -> None:
        (workdir / "bad.py").write_text(BAD)

        assert main(["bad.py", "--order", "public_methods", "public_fields"]) == EXIT_OK

    def test_unknown_group_is_error(
        self, workdir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (workdir / "good.py").write_text(GOOD)

        assert main(["good.py", "--order", "fields"]) == EXIT_ERROR
        assert "unknown member group" in capsys.readouterr().err

    def test_syntax_error_is_error(
        self, workdir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (workdir / "broken.py").write_text("class (:\n")

        assert main(["broken.py"]) == EXIT_ERROR
        assert "Failed to parse" in capsys.readouterr().err

    def test_reads_pyproject(self, workdir: Path) -> None:
        (workdir / "pyproject.toml").write_text("[tool.memberorder]\nalphabetize = true\n")
        (workdir / "unsorted.py").write_text(UNSORTED)

        assert main(["unsorted.py"]) == EXIT_VIOLATIONS

    def test_explicit_config(self, workdir: Path) -> None:
        config = workdir / "custom.toml"
        config.write_text('[tool.memberorder]\norder = ["public_methods", "public_fields"]\n')
        (workdir / "bad.py").write_text(BAD)

        assert main(["bad.py", "--config", str(config)]) == EXIT_OK

    def test_config_directory_is_error(
        self, workdir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (workdir / "good.py").write_text(GOOD)

        assert main(["good.py", "--config", str(workdir)]) == EXIT_ERROR
        assert "cannot read file" in capsys.readouterr().err

    def test_json_format(self, workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (workdir / "bad.py").write_text(BAD)

        main(["bad.py", "--format", "json"])

        data = json.loads(capsys.readouterr().out)
        assert data["summary"]["violation_count"] == 1
