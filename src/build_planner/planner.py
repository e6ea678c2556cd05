"""Plugin selection and build plan generation for a project folder.

Generators are tried first, using the project's software environment. When
none applies, builders are tried by the marker files present in the folder.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from build_planner.builders import get_builder
from build_planner.dates import Clock, utc_now
from build_planner.errors import UnsupportedProjectError
from build_planner.generators import get_generator
from build_planner.models import BuildPlan, SoftwareEnvironment
from build_planner.scanners import find_scanner

logger = logging.getLogger(__name__)


def load_environment(folder: Path) -> SoftwareEnvironment:
    """Describe a project folder as a software environment.

    Args:
        folder: Root of the project.

    Returns:
        Environment read from the project's manifest, or an empty environment
        named after the folder when there is no manifest.

    Raises:
        BuildPlannerError: If the manifest is malformed.
    """
    scanner = find_scanner(folder)
    if scanner is None:
        logger.debug(f"No manifest found in {folder}")
        return SoftwareEnvironment(name=folder.resolve().name)

    logger.debug(f"Using scanner: {scanner.source_name}")
    return scanner.scan()


def plan_project(
    folder: Union[str, Path],
    environ: Optional[SoftwareEnvironment] = None,
    runtime: Optional[str] = None,
    clock: Clock = utc_now,
) -> BuildPlan:
    """Generate the build plan for a project.

    Args:
        folder: Root of the project.
        environ: Pre-parsed software environment. Read from the project's
            manifest when omitted.
        runtime: Runtime tag to use instead of detecting one.
        clock: Source of the current time.

    Returns:
        The resolved build plan.

    Raises:
        UnsupportedProjectError: If no generator or builder applies.
        BuildPlannerError: If resolution fails, e.g. on an unparsable date.
    """
    folder = Path(folder)
    if environ is None:
        environ = load_environment(folder)

    generator = get_generator(environ, folder, runtime=runtime, clock=clock)
    if generator is not None:
        logger.info(f"Using generator {type(generator).__name__}")
        return generator.generate()

    builder = get_builder(folder, runtime=runtime, clock=clock)
    if builder is not None:
        logger.info(f"Using builder {type(builder).__name__}")
        return builder.generate()

    raise UnsupportedProjectError(f"No runtime plugin applies to project '{folder}'")
