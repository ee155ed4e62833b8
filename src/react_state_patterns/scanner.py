"""Project scanner: discover files, parse, run the rules, collect one result."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from react_state_patterns.analyzer.components import SourceModule
from react_state_patterns.analyzer.models import AnalysisResult, Issue, ProjectContext
from react_state_patterns.analyzer.project_context import detect_project_context
from react_state_patterns.analyzer.service import run_all_rules
from react_state_patterns.rules import Rule, default_rules
from react_state_patterns.tree import ParseError, parse_source
from react_state_patterns.utils import DEFAULT_IGNORE, DEFAULT_PATTERN, discover_files

log = logging.getLogger(__name__)


def analyze(
    project_path: Path,
    *,
    pattern: str = DEFAULT_PATTERN,
    ignore: Sequence[str] = DEFAULT_IGNORE,
    rules: Sequence[Rule] | None = None,
    context: ProjectContext | None = None,
) -> AnalysisResult:
    """Analyze every matching file under project_path.

    Args:
        project_path: Directory to scan (a single file is analysed on its own).
        pattern: Glob, brace-expanded, relative to project_path.
        ignore: Directory names or globs to leave out.
        rules: Rules to run. Defaults to default_rules().
        context: Project context. Detected from package.json when omitted.

    Returns:
        AnalysisResult. Files that cannot be read or parsed are listed in
        files_skipped and never reach the rules.
    """
    project_path = project_path.resolve()
    if rules is None:
        rules = default_rules()

    if project_path.is_file():
        root = project_path.parent
        files = [project_path]
    else:
        root = project_path
        files = discover_files(root, pattern, tuple(ignore))
    if context is None:
        context = detect_project_context(root)

    log.info("Scanning %s: %d file(s) match %s", project_path, len(files), pattern)

    result = AnalysisResult(files_found=len(files), project_context=context)
    issues: list[Issue] = []

    for fpath in files:
        rel = _display_path(fpath, root)
        try:
            source = fpath.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            log.warning("Skipping %s: %s", rel, exc)
            result.files_skipped.append(rel)
            continue
        try:
            tree = parse_source(source, rel)
        except ParseError as exc:
            log.warning("Skipping %s: %s", rel, exc)
            result.files_skipped.append(rel)
            continue

        module = SourceModule(path=rel, tree=tree)
        result.components_found += len(module.components)
        file_issues = run_all_rules(module, context=context, rules=rules)
        log.debug("%s: %d component(s), %d issue(s)", rel, len(module.components), len(file_issues))
        issues.extend(file_issues)
        result.files_analyzed += 1

    result.issues = issues
    log.info(
        "Analysis complete: %d analysed, %d skipped, %d issue(s)",
        result.files_analyzed, len(result.files_skipped), len(issues),
    )
    return result


def _display_path(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)
