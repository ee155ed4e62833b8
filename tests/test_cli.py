"""Tests for the click command line interface."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path

from click.testing import CliRunner

from react_state_patterns import __version__
from react_state_patterns.cli import main

LOADER = """
    export function Loader() {
      const [isLoading, setIsLoading] = useState(false);
      const [hasError, setHasError] = useState(false);
      return <div>{isLoading}{hasError}</div>;
    }
"""

CLEAN = """
    export function Counter() {
      const [count, setCount] = useState(0);
      return <button onClick={() => setCount(count + 1)}>{count}</button>;
    }
"""


def _project(tmp_path: Path, code: str) -> Path:
    src = tmp_path / "src"
    src.mkdir()
    (src / "App.tsx").write_text(textwrap.dedent(code))
    return tmp_path


def _runner() -> CliRunner:
    return CliRunner()


def test_text_report(tmp_path):
    root = _project(tmp_path, LOADER)
    result = _runner().invoke(main, [str(root)])
    assert result.exit_code == 0
    assert "avoid-state-contradictions" in result.stdout
    assert "Summary:" in result.stdout


def test_clean_project(tmp_path):
    root = _project(tmp_path, CLEAN)
    result = _runner().invoke(main, [str(root)])
    assert result.exit_code == 0
    assert "No state management issues found!" in result.stdout
    assert "Analyzed 1 React component in 1 file" in result.stdout


def test_json_report(tmp_path):
    root = _project(tmp_path, LOADER)
    result = _runner().invoke(main, [str(root), "--format", "json"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["files_analyzed"] == 1
    assert data["components_found"] == 1
    assert data["stats"]["errors"] >= 1
    assert any(i["rule"] == "avoid-state-contradictions" for i in data["issues"])
    assert all(i["file"] == "src/App.tsx" for i in data["issues"])


def test_markdown_to_file(tmp_path):
    root = _project(tmp_path, LOADER)
    out = tmp_path / "report.md"
    result = _runner().invoke(main, [str(root), "-f", "markdown", "-o", str(out)])
    assert result.exit_code == 0
    assert out.read_text().startswith("# React State Analysis Report")
    assert "Report written to" in result.stderr


def test_strict_exits_nonzero(tmp_path):
    root = _project(tmp_path, LOADER)
    result = _runner().invoke(main, [str(root), "--strict"])
    assert result.exit_code == 1


def test_strict_clean_project(tmp_path):
    root = _project(tmp_path, CLEAN)
    result = _runner().invoke(main, [str(root), "--strict"])
    assert result.exit_code == 0


def test_disable_rule(tmp_path):
    root = _project(tmp_path, LOADER)
    result = _runner().invoke(
        main, [str(root), "-f", "json", "--disable-rule", "avoid-state-contradictions"],
    )
    assert result.exit_code == 0
    rules = {i["rule"] for i in json.loads(result.stdout)["issues"]}
    assert "avoid-state-contradictions" not in rules


def test_unknown_rule_is_usage_error(tmp_path):
    root = _project(tmp_path, LOADER)
    result = _runner().invoke(main, [str(root), "--disable-rule", "nope"])
    assert result.exit_code == 2
    assert "unknown rule" in result.stderr


def test_config_file_applies(tmp_path):
    root = _project(tmp_path, LOADER)
    (root / ".react-state-patterns.yml").write_text("strict: true\n")
    result = _runner().invoke(main, [str(root)])
    assert result.exit_code == 1


def test_bad_config_is_usage_error(tmp_path):
    root = _project(tmp_path, LOADER)
    (root / ".react-state-patterns.yml").write_text("disable: [nope]\n")
    result = _runner().invoke(main, [str(root)])
    assert result.exit_code == 2


def test_no_files_message(tmp_path):
    result = _runner().invoke(main, [str(tmp_path)])
    assert result.exit_code == 0
    assert "No files found matching pattern" in result.stderr
    assert "Files found: 0" in result.stderr


def test_version():
    result = _runner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout
