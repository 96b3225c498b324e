"""Detect the project language and framework from marker files."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

# Checked in order; the first framework with a marker present wins
_FRAMEWORK_MARKERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("nextjs", ("next.config.js", "next.config.mjs")),
    ("vite", ("vite.config.js", "vite.config.ts")),
    ("angular", ("angular.json",)),
)


class ProjectInfo(BaseModel):
    project_type: str = "javascript"
    framework: str = "unknown"


def detect_project_type(root: Path | None = None) -> ProjectInfo:
    """Inspect *root* (default: cwd) for tsconfig and framework configs."""
    root = root or Path.cwd()
    if not root.is_dir():
        return ProjectInfo(project_type="unknown")

    project_type = (
        "typescript" if (root / "tsconfig.json").exists() else "javascript"
    )

    framework = "unknown"
    for name, markers in _FRAMEWORK_MARKERS:
        if any((root / marker).exists() for marker in markers):
            framework = name
            break
    else:
        if (root / "app.json").exists() and (
            root / "metro.config.js"
        ).exists():
            framework = "react-native"

    return ProjectInfo(project_type=project_type, framework=framework)
