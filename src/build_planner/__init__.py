"""Build Planner - Reproducible container build plans from project metadata.

This package inspects a project's declared runtime and dependencies and
infers the base image, package repositories, system packages, install steps
and run command needed to containerize it.
"""

__version__ = "0.1.0"

from build_planner.models import (
    BuildPlan,
    InstallStep,
    SoftwareEnvironment,
    SoftwarePackage,
)
from build_planner.planner import plan_project

__all__ = [
    "__version__",
    "BuildPlan",
    "InstallStep",
    "SoftwareEnvironment",
    "SoftwarePackage",
    "plan_project",
]
