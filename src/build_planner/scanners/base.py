"""Base interface for project scanners.

Scanners read a project's manifest and describe the project as a
``SoftwareEnvironment`` without installing anything.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from build_planner.models import SoftwareEnvironment


class BaseScanner(ABC):
    """Abstract base class for project scanners.

    Attributes:
        source_path: Optional path to the manifest being scanned.
    """

    def __init__(self, source_path: Optional[Path] = None) -> None:
        """Initialize the scanner.

        Args:
            source_path: Optional path to the manifest file.
        """
        self.source_path = source_path

    @abstractmethod
    def scan(self) -> SoftwareEnvironment:
        """Scan the manifest and describe the project.

        Returns:
            The project's software environment.

        Raises:
            FileNotFoundError: If the manifest does not exist.
            ValueError: If the manifest is invalid.
        """
        ...

    @classmethod
    @abstractmethod
    def can_handle(cls, path: Path) -> bool:
        """Check if this scanner can handle the given file.

        Args:
            path: Path to check.

        Returns:
            True if this scanner can process the file, False otherwise.
        """
        ...

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return a human-readable name for this scanner's manifest type."""
        ...

    def _check_source(self) -> Path:
        if self.source_path is None:
            raise ValueError("source_path must be provided")
        if not self.source_path.exists():
            raise FileNotFoundError(f"File not found: {self.source_path}")
        return self.source_path

    def _project_name(self) -> str:
        """Default project name: the folder holding the manifest."""
        return self._check_source().resolve().parent.name
