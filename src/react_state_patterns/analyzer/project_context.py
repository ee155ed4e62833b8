"""Detect state-machine libraries declared in the project's package.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from react_state_patterns.analyzer.models import ProjectContext

log = logging.getLogger(__name__)

_DEPENDENCY_SECTIONS = ("dependencies", "devDependencies", "peerDependencies")


def detect_project_context(project_path: Path) -> ProjectContext:
    """Read package.json at project_path; a missing or broken manifest means no libraries."""
    manifest = project_path / "package.json"
    if not manifest.is_file():
        log.debug("No package.json in %s", project_path)
        return ProjectContext()

    try:
        data = json.loads(manifest.read_text(errors="replace"))
    except (OSError, json.JSONDecodeError) as exc:
        log.debug("Could not read %s: %s", manifest, exc)
        return ProjectContext()
    if not isinstance(data, dict):
        return ProjectContext()

    deps: dict[str, str] = {}
    for section in _DEPENDENCY_SECTIONS:
        entries = data.get(section)
        if isinstance(entries, dict):
            for name, spec in entries.items():
                deps.setdefault(name, str(spec))

    context = ProjectContext(
        has_xstate="xstate" in deps,
        has_xstate_store="@xstate/store" in deps,
        xstate_version=deps.get("xstate"),
    )
    log.debug("Project context for %s: %s", project_path, context)
    return context
