"""Legacy builders matched by marker files.

Builders are tried in registration order after no generator applies.
"""

from pathlib import Path
from typing import Optional, Union

from build_planner.builders.base import BaseBuilder
from build_planner.builders.r import RBuilder
from build_planner.dates import Clock, utc_now

__all__ = [
    "BaseBuilder",
    "RBuilder",
    "BUILDERS",
    "get_builder",
]

# Registry of available builders keyed by runtime tag
BUILDERS: dict[str, type[BaseBuilder]] = {
    "R": RBuilder,
}


def get_builder(
    folder: Union[str, Path],
    runtime: Optional[str] = None,
    clock: Clock = utc_now,
) -> Optional[BaseBuilder]:
    """Get the first builder whose marker files exist in a project.

    Args:
        folder: Root of the project.
        runtime: Only consider the builder registered for this runtime tag.
        clock: Source of the current time.

    Returns:
        Builder instance, or None if no builder applies.
    """
    for tag, builder_cls in BUILDERS.items():
        if runtime is not None and tag != runtime:
            continue
        builder = builder_cls(folder, clock=clock)
        if builder.applies():
            return builder
    return None
