"""Tests for the project scanner."""

from __future__ import annotations

import json
import logging
import tempfile
import textwrap
from pathlib import Path

from react_state_patterns.analyzer.models import ProjectContext
from react_state_patterns.rules import default_rules
from react_state_patterns.scanner import analyze

LOADER = """
    import { useState } from 'react';

    export function Loader() {
      const [isLoading, setIsLoading] = useState(false);
      const [hasError, setHasError] = useState(false);
      return <div>{isLoading}{hasError}</div>;
    }
"""


def _write(root: Path, rel: str, code: str) -> Path:
    p = root / rel
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(textwrap.dedent(code))
    return p


def test_scan_counts_files_and_components():
    with tempfile.TemporaryDirectory() as d:
        root = Path(d)
        _write(root, "src/Loader.tsx", LOADER)
        _write(root, "src/Empty.jsx", "export const VERSION = 1;\n")
        result = analyze(root)
        assert result.files_found == 2
        assert result.files_analyzed == 2
        assert result.components_found == 1
        assert result.files_skipped == []
        assert {i.file for i in result.issues} == {"src/Loader.tsx"}
        assert "avoid-state-contradictions" in result.stats.by_rule


def test_unparsable_file_is_skipped(caplog):
    with tempfile.TemporaryDirectory() as d:
        root = Path(d)
        _write(root, "src/Loader.tsx", LOADER)
        _write(root, "src/Broken.tsx", "export function Broken() { return <div>{</div>; }\n")
        with caplog.at_level(logging.WARNING):
            result = analyze(root)
        assert result.files_found == 2
        assert result.files_analyzed == 1
        assert result.files_skipped == ["src/Broken.tsx"]
        assert "Skipping src/Broken.tsx" in caplog.text
        assert all(i.file == "src/Loader.tsx" for i in result.issues)


def test_single_file_path():
    with tempfile.TemporaryDirectory() as d:
        root = Path(d)
        target = _write(root, "Loader.tsx", LOADER)
        _write(root, "Other.tsx", LOADER)
        result = analyze(target)
        assert result.files_found == 1
        assert {i.file for i in result.issues} == {"Loader.tsx"}


def test_context_detected_from_package_json():
    with tempfile.TemporaryDirectory() as d:
        root = Path(d)
        (root / "package.json").write_text(json.dumps({"dependencies": {"xstate": "5.0.0"}}))
        _write(root, "src/Loader.tsx", LOADER)
        result = analyze(root)
        assert result.project_context == ProjectContext(has_xstate=True, xstate_version="5.0.0")


def test_rule_selection():
    with tempfile.TemporaryDirectory() as d:
        root = Path(d)
        _write(root, "src/Loader.tsx", LOADER)
        result = analyze(root, rules=default_rules({"avoid-state-contradictions"}))
        assert "avoid-state-contradictions" not in {i.rule for i in result.issues}


def test_no_matching_files():
    with tempfile.TemporaryDirectory() as d:
        result = analyze(Path(d))
        assert result.files_found == 0
        assert result.issues == []
