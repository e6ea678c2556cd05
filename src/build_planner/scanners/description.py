"""Scanner for R package DESCRIPTION files.

DESCRIPTION files use the Debian control file (DCF) format: ``Field: value``
lines, with continuation lines indented by whitespace.
"""

import logging
import re
from pathlib import Path

from build_planner.dates import parse_date
from build_planner.models import SoftwareEnvironment, SoftwarePackage
from build_planner.scanners.base import BaseScanner

logger = logging.getLogger(__name__)


class DescriptionScanner(BaseScanner):
    """Scanner for R DESCRIPTION files.

    Packages listed under ``Depends`` and ``Imports`` become R requirements.
    Version constraints are kept as the requirement's version, e.g.::

        Imports:
            dplyr (>= 1.0.0),
            xml2

    gives ``dplyr`` with version ">= 1.0.0" and ``xml2`` without a version.
    """

    REQUIREMENT_FIELDS = ("Depends", "Imports")

    # Package name with an optional parenthesized version constraint
    REQUIREMENT_PATTERN = re.compile(r"^([A-Za-z][A-Za-z0-9.]*)\s*(?:\(\s*([^)]*?)\s*\))?$")

    @classmethod
    def can_handle(cls, path: Path) -> bool:
        return path.name == "DESCRIPTION"

    @property
    def source_name(self) -> str:
        return "DESCRIPTION"

    def scan(self) -> SoftwareEnvironment:
        """Scan the DESCRIPTION file.

        Returns:
            Environment named after the ``Package`` field (or the project
            folder), dated by the ``Date`` field.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If source_path is not provided.
            DateParseError: If the ``Date`` field cannot be parsed.
        """
        path = self._check_source()
        fields = self.parse_fields(path.read_text(encoding="utf-8"))

        date_published = None
        if fields.get("Date"):
            date_published = parse_date(fields["Date"], "DESCRIPTION file")

        requirements = []
        for field_name in self.REQUIREMENT_FIELDS:
            requirements.extend(self._requirements(fields.get(field_name, "")))

        return SoftwareEnvironment(
            name=fields.get("Package") or self._project_name(),
            date_published=date_published,
            software_requirements=requirements,
        )

    @staticmethod
    def parse_fields(text: str) -> dict[str, str]:
        """Parse DCF text into a field mapping.

        Continuation lines are joined to their field with a single space.

        Args:
            text: DCF formatted text.

        Returns:
            Mapping of field name to value.
        """
        fields: dict[str, str] = {}
        current = None
        for line in text.splitlines():
            if not line.strip():
                continue
            if line[0] in " \t":
                if current is not None:
                    fields[current] = f"{fields[current]} {line.strip()}".strip()
                continue
            name, sep, value = line.partition(":")
            if not sep:
                logger.debug(f"Skipping malformed DESCRIPTION line: {line}")
                current = None
                continue
            current = name.strip()
            fields[current] = value.strip()
        return fields

    def _requirements(self, value: str) -> list[SoftwarePackage]:
        packages = []
        for entry in value.split(","):
            entry = entry.strip()
            if not entry:
                continue
            match = self.REQUIREMENT_PATTERN.match(entry)
            if not match:
                logger.warning(f"Could not parse DESCRIPTION requirement: {entry}")
                continue
            name, version = match.group(1), match.group(2)
            # "R (>= 3.5)" constrains the interpreter, not a package
            if name == "R":
                continue
            packages.append(
                SoftwarePackage(name=name, runtime_platform="R", version=version or None)
            )
        return packages
