"""Base interface for build plan generators.

A generator turns a project's software environment into a ``BuildPlan`` for
one language runtime. Each resolution method may be overridden by a runtime
plugin; the defaults return empty or absent results.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from build_planner.dates import Clock, utc_now
from build_planner.models import BuildPlan, SoftwareEnvironment, SoftwarePackage
from build_planner.project import ProjectFolder

logger = logging.getLogger(__name__)


class BaseGenerator(ProjectFolder, ABC):
    """Abstract base class for build plan generators.

    Attributes:
        environ: The project's software environment.
        folder: Root of the project.
        clock: Source of the current time.
    """

    def __init__(
        self,
        environ: SoftwareEnvironment,
        folder: Union[str, Path],
        clock: Clock = utc_now,
    ) -> None:
        """Initialize the generator.

        Args:
            environ: Software environment of the project.
            folder: Root of the project.
            clock: Source of the current time. Inject a fixed clock to make
                time-dependent output deterministic.
        """
        super().__init__(folder)
        self.environ = environ
        self.clock = clock

    @abstractmethod
    def applies_runtime(self) -> str:
        """Return the runtime tag handled by this generator.

        Returns:
            Tag like "R" or "Python".
        """
        ...

    def applies(self) -> bool:
        """Check whether any top-level requirement is on this runtime."""
        runtime = self.applies_runtime()
        return bool(self.filter_packages(runtime))

    def filter_packages(self, runtime: str) -> list[SoftwarePackage]:
        """Return the top-level requirements on the given runtime."""
        return [
            pkg
            for pkg in self.environ.software_requirements
            if pkg.runtime_platform == runtime
        ]

    def base_name(self) -> str:
        """Return the name of the OS base image."""
        return "ubuntu"

    def base_version(self) -> str:
        """Return the version of the OS base image."""
        return "18.04"

    def env_vars(self, sys_version: str) -> list[tuple[str, str]]:
        """Return environment variables to set in the image."""
        return []

    def apt_repos(self, sys_version: str) -> list[tuple[str, str]]:
        """Return (repository line, signing key id) pairs to add."""
        return []

    def apt_packages(self, sys_version: str) -> list[str]:
        """Return OS packages to install."""
        return []

    def install_files(self, sys_version: str) -> list[tuple[str, str]]:
        """Return (source, destination) pairs needed by the install command."""
        return []

    def install_command(self, sys_version: str) -> Optional[str]:
        """Return the shell command installing the project's dependencies."""
        return None

    def project_files(self) -> list[tuple[str, str]]:
        """Return (source, destination) pairs of project files to copy."""
        return []

    def run_command(self) -> Optional[str]:
        """Return the default command of the container."""
        return None

    def generate(self) -> BuildPlan:
        """Resolve a build plan.

        Resolution methods are called in a fixed order because later steps
        depend on earlier ones (the install command checks for files staged
        by ``install_files``).

        Returns:
            The resolved build plan.

        Raises:
            BuildPlannerError: If a resolution step fails fatally.
        """
        logger.debug(f"Generating build plan with {type(self).__name__}")
        sys_version = self.base_version()
        env_vars = self.env_vars(sys_version)
        apt_repos = self.apt_repos(sys_version)
        apt_packages = self.apt_packages(sys_version)
        install_files = self.install_files(sys_version)
        install_command = self.install_command(sys_version)
        project_files = self.project_files()
        run_command = self.run_command()

        return BuildPlan(
            runtime=self.applies_runtime(),
            base_name=self.base_name(),
            base_version=sys_version,
            env_vars=env_vars,
            apt_repos=apt_repos,
            apt_packages=apt_packages,
            install_files=install_files,
            install_command=install_command,
            project_files=project_files,
            run_command=run_command,
        )
