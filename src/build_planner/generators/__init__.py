"""Build plan generators for language runtimes.

Generators are registered by the runtime tag they handle. Registration order
is the order in which applicability is tested.
"""

from pathlib import Path
from typing import Optional, Union

from build_planner.dates import Clock, utc_now
from build_planner.errors import UnsupportedProjectError
from build_planner.generators.base import BaseGenerator
from build_planner.generators.r import RGenerator
from build_planner.models import SoftwareEnvironment

__all__ = [
    "BaseGenerator",
    "RGenerator",
    "GENERATORS",
    "get_generator",
]

# Registry of available generators keyed by runtime tag
GENERATORS: dict[str, type[BaseGenerator]] = {
    "R": RGenerator,
}


def get_generator(
    environ: SoftwareEnvironment,
    folder: Union[str, Path],
    runtime: Optional[str] = None,
    clock: Clock = utc_now,
) -> Optional[BaseGenerator]:
    """Get the generator for a project's software environment.

    Args:
        environ: Software environment of the project.
        folder: Root of the project.
        runtime: Runtime tag to dispatch on directly. When omitted, the
            first registered generator that applies is used.
        clock: Source of the current time.

    Returns:
        Generator instance, or None if no generator applies.

    Raises:
        UnsupportedProjectError: If ``runtime`` names no registered generator.
    """
    if runtime is not None:
        try:
            generator_cls = GENERATORS[runtime]
        except KeyError:
            raise UnsupportedProjectError(
                f"No generator available for runtime '{runtime}'. "
                f"Supported runtimes: {', '.join(GENERATORS)}"
            ) from None
        return generator_cls(environ, folder, clock=clock)

    for generator_cls in GENERATORS.values():
        generator = generator_cls(environ, folder, clock=clock)
        if generator.applies():
            return generator
    return None
