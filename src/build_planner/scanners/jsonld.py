"""Scanner for JSON-LD software environment files.

The file describes a schema.org ``SoftwareEnvironment``::

    {
        "name": "analysis",
        "datePublished": "2018-10-05",
        "softwareRequirements": [
            {
                "name": "xml2",
                "runtimePlatform": "R",
                "softwareRequirements": [
                    {"@id": "libxml2", "name": "libxml2-dev", "runtimePlatform": "deb"}
                ]
            }
        ]
    }

A requirement of the form ``{"@id": "libxml2"}`` refers to a node declared
earlier with the same ``@id``.
"""

import json
import logging
from pathlib import Path
from typing import Any

from build_planner.dates import parse_date
from build_planner.errors import ManifestError
from build_planner.models import SoftwareEnvironment, SoftwarePackage
from build_planner.scanners.base import BaseScanner

logger = logging.getLogger(__name__)


class JsonLdScanner(BaseScanner):
    """Scanner for ``environ.jsonld`` and ``environ.json`` files."""

    FILENAMES = ("environ.jsonld", "environ.json")

    @classmethod
    def can_handle(cls, path: Path) -> bool:
        return path.name in cls.FILENAMES

    @property
    def source_name(self) -> str:
        return self.source_path.name if self.source_path else self.FILENAMES[0]

    def scan(self) -> SoftwareEnvironment:
        """Scan the environment file.

        Returns:
            The declared software environment.

        Raises:
            FileNotFoundError: If the file does not exist.
            ManifestError: If the JSON is invalid or a node is malformed.
            DateParseError: If ``datePublished`` cannot be parsed.
        """
        path = self._check_source()
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ManifestError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ManifestError(f"Expected a JSON object in {path}")

        date_published = None
        if data.get("datePublished"):
            date_published = parse_date(str(data["datePublished"]), self.source_name)

        seen: dict[str, SoftwarePackage] = {}
        requirements = [
            self._package(item, seen) for item in data.get("softwareRequirements") or []
        ]
        logger.debug(f"Read {len(seen)} identified packages from {path}")

        return SoftwareEnvironment(
            name=data.get("name") or self._project_name(),
            date_published=date_published,
            software_requirements=requirements,
        )

    def _package(self, data: Any, seen: dict[str, SoftwarePackage]) -> SoftwarePackage:
        if not isinstance(data, dict):
            raise ManifestError(f"Expected a package object, got: {data!r}")

        node_id = data.get("@id")
        if node_id is not None and set(data) == {"@id"}:
            if node_id not in seen:
                raise ManifestError(f"Reference to undeclared package '{node_id}'")
            return seen[node_id]

        pkg = SoftwarePackage(
            name=data.get("name"),
            runtime_platform=data.get("runtimePlatform"),
            version=data.get("version"),
        )
        # Registered before its children, which may refer back to it
        if node_id is not None:
            seen[node_id] = pkg
        pkg.software_requirements = [
            self._package(item, seen) for item in data.get("softwareRequirements") or []
        ]
        return pkg
