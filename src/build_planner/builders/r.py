"""Legacy builder for R projects.

Matches projects with a ``DESCRIPTION`` or ``cmd.R`` file. The snapshot date
is resolved once, when the builder is created.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from build_planner.builders.base import BaseBuilder
from build_planner.dates import Clock, description_date, resolve_date, utc_now
from build_planner.generators.r import snapshot_repo
from build_planner.models import InstallStep

logger = logging.getLogger(__name__)

# Installs the packages a DESCRIPTION file depends on into the user library
INSTALL_SCRIPT = """\
lib <- Sys.getenv("R_LIBS_USER", "~/R")
dir.create(lib, showWarnings = FALSE, recursive = TRUE)
.libPaths(c(lib, .libPaths()))
desc <- read.dcf("DESCRIPTION")
fields <- intersect(c("Depends", "Imports", "LinkingTo"), colnames(desc))
pkgs <- trimws(gsub("\\\\(.*\\\\)", "", unlist(strsplit(desc[1, fields], ","))))
pkgs <- setdiff(pkgs[nzchar(pkgs)], c("R", rownames(installed.packages(priority = "base"))))
if (length(pkgs)) install.packages(pkgs, lib = lib)
"""


class RBuilder(BaseBuilder):
    """Builder for R projects.

    Attributes:
        date: Snapshot date as "YYYY-MM-DD", fixed at construction.
    """

    def __init__(self, folder: Union[str, Path], clock: Clock = utc_now) -> None:
        """Initialize the builder and resolve the snapshot date.

        Raises:
            DateParseError: If DESCRIPTION declares an unparsable date.
        """
        super().__init__(folder, clock)
        declared = None
        if self.exists("DESCRIPTION"):
            declared = description_date(self.read("DESCRIPTION"))
        self.date = resolve_date(declared, clock)

    @property
    def runtime(self) -> str:
        return "R"

    def match_paths(self) -> list[str]:
        return ["DESCRIPTION", "cmd.R"]

    def sys_version(self) -> str:
        # MRAN had no bionic repository supporting R 3.4, so require xenial
        return "16.04"

    def apt_repos(self, sys_version: str) -> list[tuple[str, str]]:
        return [snapshot_repo(self.date, self.sys_version_name(sys_version))]

    def apt_packages(self, sys_version: str) -> list[str]:
        return ["r-base"]

    def install_packages(self, sys_version: str) -> Optional[InstallStep]:
        """Install with the project's ``install.R``, or from its DESCRIPTION."""
        if self.exists("install.R"):
            script = self.read("install.R")
        else:
            script = INSTALL_SCRIPT

        if self.exists("DESCRIPTION"):
            description = self.read("DESCRIPTION")
        else:
            description = f"Package: {self.folder.resolve().name}\nVersion: 1.0.0\nDate: {self.date}\n"

        return InstallStep(
            files={"install.R": script, "DESCRIPTION": description},
            command=["Rscript", "install.R"],
        )

    def copy_files(self, sys_version: str) -> list[str]:
        return ["cmd.R"] if self.exists("cmd.R") else []

    def command(self, sys_version: str) -> Optional[str]:
        if self.exists("cmd.R"):
            return "Rscript cmd.R"
        return None
