"""Core data models for build_planner.

This module defines the project description consumed by runtime plugins
(software environments and their package trees) and the build plan they
produce.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass
class SoftwarePackage:
    """A node in a project's requirement tree.

    Attributes:
        name: Package name (e.g., "xml2" or "libxml2-dev"). May be missing.
        runtime_platform: Ecosystem tag (e.g., "R" or "deb").
        software_requirements: Ordered requirements of this package.
        version: Optional version string from the manifest.
    """

    name: Optional[str] = None
    runtime_platform: Optional[str] = None
    software_requirements: list["SoftwarePackage"] = field(default_factory=list)
    version: Optional[str] = None


@dataclass
class SoftwareEnvironment:
    """The root description of a project.

    Attributes:
        name: Project name.
        date_published: Optional publication date used for snapshot pinning.
        software_requirements: Ordered top-level requirements.
    """

    name: str
    date_published: Optional[date] = None
    software_requirements: list[SoftwarePackage] = field(default_factory=list)


@dataclass
class InstallStep:
    """Files and command produced by a builder's install step.

    Attributes:
        files: Mapping of file name to file content.
        command: Command to run inside the image, as an argument list.
    """

    files: dict[str, str] = field(default_factory=dict)
    command: list[str] = field(default_factory=list)


@dataclass
class BuildPlan:
    """Everything needed to describe a container image.

    Attributes:
        runtime: Runtime tag of the plugin that produced the plan.
        base_version: OS base image version (e.g., "16.04").
        base_name: OS base image name.
        env_vars: Ordered (name, value) pairs.
        apt_repos: Ordered (repository line, signing key id) pairs.
        apt_packages: Ordered OS package names.
        install_files: Ordered (source, destination) pairs copied before install.
        install_command: Optional shell command installing dependencies.
        project_files: Ordered (source, destination) pairs for project files.
        run_command: Optional default container command.
    """

    runtime: str
    base_version: str
    base_name: str = "ubuntu"
    env_vars: list[tuple[str, str]] = field(default_factory=list)
    apt_repos: list[tuple[str, str]] = field(default_factory=list)
    apt_packages: list[str] = field(default_factory=list)
    install_files: list[tuple[str, str]] = field(default_factory=list)
    install_command: Optional[str] = None
    project_files: list[tuple[str, str]] = field(default_factory=list)
    run_command: Optional[str] = None

    @property
    def base_image(self) -> str:
        """Return the full base image reference.

        Returns:
            Image reference like "ubuntu:16.04".
        """
        return f"{self.base_name}:{self.base_version}"
