"""Tests for project planning."""

import json
from pathlib import Path

import pytest

from build_planner.errors import DateParseError, UnsupportedProjectError
from build_planner.models import SoftwareEnvironment
from build_planner.planner import load_environment, plan_project


class TestLoadEnvironment:
    """Test suite for load_environment."""

    def test_reads_description(self, make_project) -> None:
        """Test that a DESCRIPTION manifest is scanned."""
        folder = make_project({"DESCRIPTION": "Package: analysis\nImports: xml2\n"})
        environ = load_environment(folder)

        assert environ.name == "analysis"
        assert [p.name for p in environ.software_requirements] == ["xml2"]

    def test_empty_without_manifest(self, tmp_path: Path) -> None:
        """Test that a folder without a manifest gives an empty environment."""
        environ = load_environment(tmp_path)
        assert environ.software_requirements == []


class TestPlanProject:
    """Test suite for plan_project."""

    def test_uses_generator_for_r_environment(self, make_project, clock) -> None:
        """Test that an environment with R packages is planned by the generator."""
        environ = {
            "name": "analysis",
            "softwareRequirements": [
                {
                    "name": "xml2",
                    "runtimePlatform": "R",
                    "softwareRequirements": [{"name": "libxml2-dev", "runtimePlatform": "deb"}],
                }
            ],
        }
        folder = make_project({"environ.jsonld": json.dumps(environ), "main.R": ""})

        plan = plan_project(folder, clock=clock)

        assert plan.env_vars  # only generators set environment variables
        assert plan.apt_packages == ["r-base", "libxml2-dev"]
        assert plan.install_files == [(".DESCRIPTION", "DESCRIPTION")]
        assert plan.run_command == "Rscript main.R"

    def test_falls_back_to_builder(self, make_project, clock) -> None:
        """Test that a marker file alone selects the legacy builder."""
        folder = make_project({"cmd.R": "print('hi')\n"})

        plan = plan_project(folder, clock=clock)

        assert plan.env_vars == []
        assert plan.run_command == "Rscript cmd.R"

    def test_explicit_environment(self, r_environ, tmp_path: Path, clock) -> None:
        """Test that a given environment is used instead of scanning."""
        plan = plan_project(tmp_path, environ=r_environ, clock=clock)
        assert "libxml2-dev" in plan.apt_packages

    def test_unsupported_project(self, tmp_path: Path) -> None:
        """Test that a project no plugin applies to is an error."""
        with pytest.raises(UnsupportedProjectError):
            plan_project(tmp_path)

    def test_invalid_date_aborts(self, make_project) -> None:
        """Test that an unparsable date aborts planning."""
        folder = make_project({"DESCRIPTION": "Package: x\nDate: 31st of Smarch\nImports: xml2\n"})
        with pytest.raises(DateParseError, match="31st of Smarch"):
            plan_project(folder)

    def test_idempotent(self, make_project, clock) -> None:
        """Test that planning twice gives the same plan."""
        folder = make_project({"DESCRIPTION": "Package: x\nDate: 2018-10-05\nImports: xml2\n"})
        assert plan_project(folder, clock=clock) == plan_project(folder, clock=clock)

    def test_runtime_override(self, tmp_path: Path, clock) -> None:
        """Test that a runtime tag forces the generator."""
        plan = plan_project(tmp_path, environ=SoftwareEnvironment(name="x"), runtime="R", clock=clock)
        assert plan.runtime == "R"
        assert plan.apt_packages == ["r-base"]
