"""Base interface for legacy build plan builders.

Builders are a narrower protocol than generators: they are matched by the
presence of marker files in a project rather than by the project's declared
runtime, and they have no environment variables.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from build_planner.dates import Clock, utc_now
from build_planner.models import BuildPlan, InstallStep
from build_planner.project import ProjectFolder

logger = logging.getLogger(__name__)


class BaseBuilder(ProjectFolder, ABC):
    """Abstract base class for builders.

    Attributes:
        folder: Root of the project.
        clock: Source of the current time.
    """

    def __init__(self, folder: Union[str, Path], clock: Clock = utc_now) -> None:
        super().__init__(folder)
        self.clock = clock

    @property
    @abstractmethod
    def runtime(self) -> str:
        """Return the runtime tag of this builder, e.g. "R"."""
        ...

    @abstractmethod
    def match_paths(self) -> list[str]:
        """Return marker files whose presence means this builder applies."""
        ...

    def applies(self) -> bool:
        """Check whether any marker file exists in the project."""
        return any(self.exists(path) for path in self.match_paths())

    def sys_version(self) -> str:
        """Return the version of the OS base image."""
        return "18.04"

    def apt_repos(self, sys_version: str) -> list[tuple[str, str]]:
        """Return (repository line, signing key id) pairs to add."""
        return []

    def apt_packages(self, sys_version: str) -> list[str]:
        """Return OS packages to install."""
        return []

    def install_packages(self, sys_version: str) -> Optional[InstallStep]:
        """Return the files and command that install dependencies."""
        return None

    def copy_files(self, sys_version: str) -> list[str]:
        """Return project files to copy into the image."""
        return []

    def command(self, sys_version: str) -> Optional[str]:
        """Return the default command of the container."""
        return None

    def stage_install_files(self, step: InstallStep) -> list[tuple[str, str]]:
        """Make install files available in the project for copying.

        Files the project already has are copied as they are. Other files are
        written under a dot-prefixed name so that no user file is overwritten.

        Args:
            step: Install step returned by ``install_packages``.

        Returns:
            (source, destination) pairs for the install files.
        """
        pairs = []
        for name, content in step.files.items():
            if self.exists(name):
                pairs.append((name, name))
                continue
            staged = f".{name}"
            self.write(staged, content)
            logger.debug(f"Staged generated {name} as {staged}")
            pairs.append((staged, name))
        return pairs

    def generate(self) -> BuildPlan:
        """Resolve a build plan with the same shape a generator produces.

        Returns:
            The resolved build plan.
        """
        logger.debug(f"Generating build plan with {type(self).__name__}")
        sys_version = self.sys_version()
        apt_repos = self.apt_repos(sys_version)
        apt_packages = self.apt_packages(sys_version)

        install_files: list[tuple[str, str]] = []
        install_command = None
        step = self.install_packages(sys_version)
        if step is not None:
            install_files = self.stage_install_files(step)
            install_command = " ".join(step.command) or None

        return BuildPlan(
            runtime=self.runtime,
            base_version=sys_version,
            apt_repos=apt_repos,
            apt_packages=apt_packages,
            install_files=install_files,
            install_command=install_command,
            project_files=[(path, path) for path in self.copy_files(sys_version)],
            run_command=self.command(sys_version),
        )
