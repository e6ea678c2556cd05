"""Build plan generator for R projects.

Pins R packages to an MRAN snapshot of CRAN so that images built from the
same project resolve the same package versions.
"""

import logging
from functools import cached_property
from typing import Optional

from build_planner.dates import description_date, resolve_date
from build_planner.generators.base import BaseGenerator
from build_planner.graph import find_os_packages

logger = logging.getLogger(__name__)

SNAPSHOT_HOST = "mran.microsoft.com"
SNAPSHOT_SIGNING_KEY = "51716619E084DAB9"


def snapshot_repo(date: str, codename: str) -> tuple[str, str]:
    """Return the apt repository of a dated R snapshot.

    Args:
        date: Snapshot date as "YYYY-MM-DD".
        codename: Ubuntu codename, e.g. "xenial".

    Returns:
        Tuple of (repository line, signing key id).
    """
    line = f"deb https://{SNAPSHOT_HOST}/snapshot/{date}/bin/linux/ubuntu {codename}/"
    return line, SNAPSHOT_SIGNING_KEY


class RGenerator(BaseGenerator):
    """Generator for R environments.

    The packages listed in the environment are installed from a snapshot
    dated by the environment's publication date (or the project's
    DESCRIPTION ``Date:`` field, or yesterday).
    """

    # Installs the packages listed in a DESCRIPTION file
    INSTALL_SCRIPT_URL = "https://unpkg.com/@stencila/dockter/src/install.R"

    # MRAN had no bionic repository supporting R 3.4 (only bionic_3.5), so the
    # base image stays on xenial.
    # See https://cran.microsoft.com/snapshot/2018-10-05/bin/linux/ubuntu/
    BASE_VERSION = "16.04"

    def applies_runtime(self) -> str:
        return "R"

    @cached_property
    def snapshot_date(self) -> str:
        """The resolved "YYYY-MM-DD" snapshot date.

        Raises:
            DateParseError: If a declared date cannot be parsed.
        """
        if self.environ.date_published is not None:
            return resolve_date(self.environ.date_published, self.clock)
        declared = None
        if self.exists("DESCRIPTION"):
            declared = description_date(self.read("DESCRIPTION"))
        return resolve_date(declared, self.clock)

    def base_version(self) -> str:
        return self.BASE_VERSION

    def env_vars(self, sys_version: str) -> list[tuple[str, str]]:
        return [
            # Avoids a warning from Sys.timezone()
            # See https://github.com/rocker-org/rocker-versioned/issues/89
            ("TZ", "Etc/UTC"),
            # Packages are installed by a non-root user
            ("R_LIBS_USER", "~/R"),
        ]

    def apt_repos(self, sys_version: str) -> list[tuple[str, str]]:
        return [snapshot_repo(self.snapshot_date, self.sys_version_name(sys_version))]

    def apt_packages(self, sys_version: str) -> list[str]:
        # Deb packages found in the R dependency tree, e.g. libxml2-dev for xml2
        return ["r-base"] + find_os_packages(
            self.environ.software_requirements, self.applies_runtime()
        )

    def install_files(self, sys_version: str) -> list[tuple[str, str]]:
        # User supplied files take precedence
        if self.exists("install.R"):
            return [("install.R", "install.R")]
        if self.exists("DESCRIPTION"):
            return [("DESCRIPTION", "DESCRIPTION")]

        # Staged under a name that cannot collide with a user DESCRIPTION
        self.write(".DESCRIPTION", self.description())
        logger.debug("Generated .DESCRIPTION from environment requirements")
        return [(".DESCRIPTION", "DESCRIPTION")]

    def description(self) -> str:
        """Render a DESCRIPTION file listing the environment's R packages.

        Returns:
            DESCRIPTION text including a generation timestamp.
        """
        names = [pkg.name for pkg in self.filter_packages("R") if pkg.name]
        imports = ",\n  ".join(names)
        generated_at = self.clock().isoformat()
        return (
            f"Package: {self.environ.name}\n"
            f"Version: 1.0.0\n"
            f"Date: {self.snapshot_date}\n"
            f"Imports:\n  {imports}\n"
            f"Description: Generated by build-planner {generated_at}.\n"
            f"  To stop build-planner generating this file and start editing it yourself, "
            f'rename it to "DESCRIPTION".\n'
        )

    def install_command(self, sys_version: str) -> Optional[str]:
        cmd = "mkdir ~/R"
        if self.exists("install.R"):
            cmd += " \\\n && Rscript install.R"
        elif self.exists("DESCRIPTION") or self.exists(".DESCRIPTION"):
            # Fetched and run at image build time
            cmd += f' \\\n && bash -c "Rscript <(curl -sL {self.INSTALL_SCRIPT_URL})"'
        return cmd

    def project_files(self) -> list[tuple[str, str]]:
        """Copy every ``*.R`` file, keeping its relative path."""
        return [(path, path) for path in self.glob("**/*.R")]

    def run_command(self) -> Optional[str]:
        """Run a top-level ``main.R`` or ``cmd.R``, else the first ``*.R`` file.

        Returns:
            A command like "Rscript main.R", or None if there are no R files.
        """
        rfiles = self.glob("**/*.R")
        if not rfiles:
            return None
        if "main.R" in rfiles:
            script = "main.R"
        elif "cmd.R" in rfiles:
            script = "cmd.R"
        else:
            script = rfiles[0]
        return f"Rscript {script}"
