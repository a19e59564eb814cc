"""CLI behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from deadexports.cli import _build_parser, main
from tests._fixtures.repo_builder import RepoBuilder


def _sample(repo_builder: RepoBuilder) -> Path:
    repo_builder.write(
        {
            "a.ts": "export function foo() {}\nexport const bar = 1;\n",
            "b.ts": "import { bar } from './a';\n",
        }
    )
    return repo_builder.path()


def test_cli_accepts_equals_style_options() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--path=src", "--ext=ts,tsx", "--ignore=dist", "--verbose"])

    assert args.path == "src"
    assert args.ext == "ts,tsx"
    assert args.ignore == "dist"
    assert args.verbose is True
    assert args.format == "text"


def test_cli_prints_text_report(repo_builder: RepoBuilder, capsys) -> None:
    root = _sample(repo_builder)

    exit_code = main([f"--path={root}"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Path: a.ts" in out
    assert "Dead exports: ['foo']" in out
    assert "Total: 1" in out
    assert out.rstrip().endswith("Total files with dead exports: 1")


def test_cli_prints_json_report(repo_builder: RepoBuilder, capsys) -> None:
    root = _sample(repo_builder)

    main([f"--path={root}", "--format=json"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["total_files"] == 1
    assert payload["files"][0]["dead_exports"] == ["foo"]


def test_cli_fail_on_dead_sets_exit_code(repo_builder: RepoBuilder) -> None:
    root = _sample(repo_builder)

    assert main([f"--path={root}", "--fail-on-dead"]) == 1


def test_cli_fail_on_dead_passes_clean_tree(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"a.ts": "export const a = 1;\n"})

    assert main([f"--path={repo_builder.path()}", "--ext=js", "--fail-on-dead"]) == 0


def test_cli_exits_when_path_is_not_a_directory(tmp_path: Path, capsys) -> None:
    target = tmp_path / "file.ts"
    target.write_text("", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main([f"--path={target}"])

    assert excinfo.value.code == 1
    assert "not a directory" in capsys.readouterr().err


def test_cli_exits_on_missing_path(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([f"--path={tmp_path / 'missing'}"])

    assert excinfo.value.code == 1


def test_cli_exits_on_unknown_import_mode(repo_builder: RepoBuilder, capsys) -> None:
    root = _sample(repo_builder)

    with pytest.raises(SystemExit) as excinfo:
        main([f"--path={root}", "--import-mode=ast"])

    assert excinfo.value.code == 1
    assert "Unknown import mode" in capsys.readouterr().err


def test_cli_scans_files_that_are_not_utf8(tmp_path: Path, capsys) -> None:
    (tmp_path / "a.js").write_bytes(b"// caf\xe9\nexport const foo = 1;\n")

    exit_code = main([f"--path={tmp_path}"])

    assert exit_code == 0
    assert "Dead exports: ['foo']" in capsys.readouterr().out


def test_cli_missing_path_exits_with_status_one(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([])

    assert excinfo.value.code == 1
    assert "--path is required" in capsys.readouterr().err
