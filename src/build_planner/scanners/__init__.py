"""Project scanners for various manifest formats.

This module provides scanners that describe a project as a software
environment from its manifest file.
"""

from pathlib import Path

from build_planner.scanners.base import BaseScanner
from build_planner.scanners.description import DescriptionScanner
from build_planner.scanners.jsonld import JsonLdScanner

__all__ = [
    "BaseScanner",
    "DescriptionScanner",
    "JsonLdScanner",
    "get_scanner",
    "find_scanner",
]

# Registry of available scanners in priority order
_SCANNERS: list[type[BaseScanner]] = [
    JsonLdScanner,
    DescriptionScanner,
]

# Manifest file names looked up in a project folder, in priority order
MANIFEST_NAMES = ("environ.jsonld", "environ.json", "DESCRIPTION")


def get_scanner(path: Path) -> BaseScanner:
    """Get the appropriate scanner for a manifest file.

    Args:
        path: Path to the manifest.

    Returns:
        Scanner instance configured for the given file.

    Raises:
        ValueError: If no scanner can handle the given file.
    """
    for scanner_cls in _SCANNERS:
        if scanner_cls.can_handle(path):
            return scanner_cls(path)

    raise ValueError(
        f"No scanner available for '{path.name}'. "
        f"Supported files: {', '.join(MANIFEST_NAMES)}"
    )


def find_scanner(folder: Path) -> BaseScanner | None:
    """Get a scanner for the first manifest present in a project folder.

    Args:
        folder: Root of the project.

    Returns:
        Scanner instance, or None if the folder has no known manifest.
    """
    for name in MANIFEST_NAMES:
        path = folder / name
        if path.is_file():
            return get_scanner(path)
    return None
