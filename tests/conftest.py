"""Pytest configuration and fixtures."""

from datetime import UTC, datetime
from pathlib import Path
from typing import Callable

import pytest

from build_planner.models import SoftwareEnvironment, SoftwarePackage

FIXED_NOW = datetime(2018, 10, 6, 9, 30, 0, tzinfo=UTC)


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """A clock frozen at 2018-10-06 09:30 UTC."""
    return lambda: FIXED_NOW


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Create a project folder from a mapping of relative path to content."""

    def _make(files: dict[str, str]) -> Path:
        for name, content in files.items():
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path

    return _make


@pytest.fixture
def r_environ() -> SoftwareEnvironment:
    """An R environment whose xml2 package needs a Debian package."""
    return SoftwareEnvironment(
        name="analysis",
        software_requirements=[
            SoftwarePackage(
                name="xml2",
                runtime_platform="R",
                software_requirements=[
                    SoftwarePackage(name="libxml2-dev", runtime_platform="deb"),
                ],
            ),
            SoftwarePackage(name="ggplot2", runtime_platform="R"),
        ],
    )
