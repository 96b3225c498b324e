"""Locate source files and describe the surrounding project."""

from namer_suggester.ingestion.file_walker import find_source_files
from namer_suggester.ingestion.project_detector import (
    ProjectInfo,
    detect_project_type,
)

__all__ = ["ProjectInfo", "detect_project_type", "find_source_files"]
