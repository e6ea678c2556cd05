"""Access to the files of the project a build plan is generated for.

Generators and builders inherit from ``ProjectFolder`` so that every path
they check, read, write or glob is relative to the project root.
"""

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

# Ubuntu release versions and their codenames
UBUNTU_CODENAMES: dict[str, str] = {
    "14.04": "trusty",
    "16.04": "xenial",
    "18.04": "bionic",
    "20.04": "focal",
    "22.04": "jammy",
    "24.04": "noble",
}


class ProjectFolder:
    """Filesystem operations rooted at a project folder.

    Attributes:
        folder: Root of the project.
    """

    def __init__(self, folder: Union[str, Path]) -> None:
        self.folder = Path(folder)

    def exists(self, path: str) -> bool:
        """Check whether a project-relative path exists."""
        return (self.folder / path).exists()

    def read(self, path: str) -> str:
        """Read a project-relative file as UTF-8 text."""
        return (self.folder / path).read_text(encoding="utf-8")

    def write(self, path: str, content: str) -> None:
        """Write UTF-8 text to a project-relative file."""
        target = self.folder / path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        logger.debug(f"Wrote {target}")

    def glob(self, pattern: str) -> list[str]:
        """Find project files matching a glob pattern.

        Args:
            pattern: Pattern relative to the project root, e.g. "**/*.R".

        Returns:
            Matching file paths, relative to the root in POSIX form and
            sorted lexicographically. Paths with a hidden component are skipped.
        """
        matches = []
        for path in self.folder.glob(pattern):
            relative = path.relative_to(self.folder)
            # Hidden files and directories, e.g. .Rproj.user, are not project files
            if any(part.startswith(".") for part in relative.parts):
                continue
            if path.is_file():
                matches.append(relative.as_posix())
        return sorted(matches)

    @staticmethod
    def sys_version_name(sys_version: Union[str, float]) -> str:
        """Return the Ubuntu codename for a release version.

        Args:
            sys_version: Release version, e.g. "16.04".

        Returns:
            Codename, e.g. "xenial".

        Raises:
            ValueError: If the version is not a known Ubuntu release.
        """
        key = sys_version if isinstance(sys_version, str) else f"{sys_version:.2f}"
        try:
            return UBUNTU_CODENAMES[key]
        except KeyError:
            raise ValueError(f"Unknown Ubuntu version: {sys_version}") from None
