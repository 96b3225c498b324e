"""Find JavaScript/TypeScript files under a target path."""

from __future__ import annotations

import logging
from pathlib import Path

import pathspec

from namer_suggester.constants import MAX_SCAN_DEPTH, SOURCE_EXTENSIONS

logger = logging.getLogger(__name__)


def find_source_files(
    target: Path,
    skip_dirs: set[str] | None = None,
    max_depth: int = MAX_SCAN_DEPTH,
) -> list[Path]:
    """Return analyzable source files for *target*, sorted by path.

    * A file target is returned as-is when it has a source extension.
    * Hidden directories, ``skip_dirs`` and ``.gitignore`` matches
      are skipped.
    * Directories deeper than *max_depth* below the target are not
      entered.
    * Symlinks that resolve outside the target are ignored.
    """
    if target.is_file():
        return [target] if _is_source(target) else []
    if not target.is_dir():
        msg = f"Path does not exist: {target}"
        raise FileNotFoundError(msg)

    gitignore_spec = _load_gitignore(target)
    return _walk(
        target,
        target,
        skip_dirs or set(),
        gitignore_spec,
        target.resolve(),
        depth=0,
        max_depth=max_depth,
    )


def _is_source(path: Path) -> bool:
    return path.suffix.lower() in SOURCE_EXTENSIONS


def _walk(
    current: Path,
    root: Path,
    skip_dirs: set[str],
    gitignore_spec: pathspec.PathSpec,
    resolved_root: Path,
    *,
    depth: int,
    max_depth: int,
) -> list[Path]:
    """Recursive walk helper with symlink protection."""
    if depth > max_depth:
        logger.warning("event=max_depth_reached path=%s", current)
        return []

    files: list[Path] = []
    try:
        entries = sorted(current.iterdir())
    except OSError:
        logger.warning("event=dir_read_failed path=%s", current)
        return files

    for item in entries:
        if item.is_symlink():
            resolved = item.resolve()
            if not resolved.is_relative_to(resolved_root):
                continue
        rel = str(item.relative_to(root))
        if item.is_dir():
            if item.name.startswith(".") or item.name in skip_dirs:
                continue
            if gitignore_spec.match_file(rel + "/"):
                continue
            files.extend(
                _walk(
                    item, root, skip_dirs, gitignore_spec, resolved_root,
                    depth=depth + 1, max_depth=max_depth,
                )
            )
        elif item.is_file() and _is_source(item):
            if not gitignore_spec.match_file(rel):
                files.append(item)
    return files


def _load_gitignore(root: Path) -> pathspec.PathSpec:
    """Load .gitignore patterns using pathspec."""
    gitignore = root / ".gitignore"
    if not gitignore.exists():
        return pathspec.PathSpec.from_lines("gitignore", [])
    try:
        with open(gitignore, encoding="utf-8") as f:
            return pathspec.PathSpec.from_lines("gitignore", f)
    except OSError:
        return pathspec.PathSpec.from_lines("gitignore", [])
