"""Dependency graph walking.

Runtime plugins use this module to find the OS-level packages buried in a
project's requirement tree. For example, an R package may require a Debian
package providing a C library it links against.

The tree is first indexed into an arena where each distinct package node has
an integer index and children are lists of indices. Walking the arena with an
explicit stack keeps termination explicit: a node that reappears on its own
ancestor path is reported as a ``CyclicRequirementError``.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from build_planner.errors import CyclicRequirementError
from build_planner.models import SoftwarePackage

logger = logging.getLogger(__name__)

# Runtime platform of packages installable with the OS package manager
OS_PLATFORM = "deb"


@dataclass
class RequirementArena:
    """Package nodes addressed by index.

    Attributes:
        nodes: Distinct package nodes, in first-seen order.
        children: For each node, the indices of its requirements.
        roots: Indices of the top-level requirements.
    """

    nodes: list[SoftwarePackage] = field(default_factory=list)
    children: list[list[int]] = field(default_factory=list)
    roots: list[int] = field(default_factory=list)

    @classmethod
    def from_requirements(cls, requirements: Iterable[SoftwarePackage]) -> "RequirementArena":
        """Index a requirement tree.

        A node object reachable through several parents gets a single index,
        so shared and cyclic structures are represented faithfully.

        Args:
            requirements: Top-level requirements of a project.

        Returns:
            The populated arena.
        """
        arena = cls()
        index_of: dict[int, int] = {}
        pending: list[SoftwarePackage] = []

        def intern(pkg: SoftwarePackage) -> int:
            key = id(pkg)
            if key not in index_of:
                index_of[key] = len(arena.nodes)
                arena.nodes.append(pkg)
                arena.children.append([])
                pending.append(pkg)
            return index_of[key]

        arena.roots = [intern(pkg) for pkg in requirements]
        while pending:
            pkg = pending.pop()
            index = index_of[id(pkg)]
            arena.children[index] = [
                intern(sub) for sub in pkg.software_requirements or []
            ]
        return arena

    def label(self, index: int) -> str:
        """Return a printable name for a node."""
        return self.nodes[index].name or f"<unnamed #{index}>"


def _expandable(arena: RequirementArena, index: int, runtime: str) -> bool:
    return arena.nodes[index].runtime_platform == runtime and bool(arena.children[index])


def walk_os_packages(
    arena: RequirementArena,
    runtime: str,
    os_platform: str = OS_PLATFORM,
) -> Iterator[str]:
    """Yield OS package names reachable through nodes of ``runtime``.

    Pre-order: a node is expanded only if its platform is ``runtime`` and it
    has requirements. Each requirement on ``os_platform`` yields its name (an
    empty string when unnamed); any other requirement is expanded in turn.
    Nodes reachable along several paths are visited once per path.

    Args:
        arena: Indexed requirement tree.
        runtime: Platform tag of the plugin walking the tree, e.g. "R".
        os_platform: Platform tag marking OS-level packages.

    Yields:
        OS package names in traversal order.

    Raises:
        CyclicRequirementError: If a node requires itself transitively.
    """
    for root in arena.roots:
        if not _expandable(arena, root, runtime):
            continue

        stack: list[tuple[int, Iterator[int]]] = [(root, iter(arena.children[root]))]
        on_path = {root}
        while stack:
            index, remaining = stack[-1]
            child = next(remaining, None)
            if child is None:
                stack.pop()
                on_path.discard(index)
                continue

            node = arena.nodes[child]
            if node.runtime_platform == os_platform:
                yield node.name or ""
            elif _expandable(arena, child, runtime):
                if child in on_path:
                    raise CyclicRequirementError(arena.label(child))
                on_path.add(child)
                stack.append((child, iter(arena.children[child])))


def find_os_packages(
    requirements: Iterable[SoftwarePackage],
    runtime: str,
    os_platform: str = OS_PLATFORM,
) -> list[str]:
    """Collect the OS packages required transitively by a project.

    Args:
        requirements: Top-level requirements of a project.
        runtime: Platform tag of the calling plugin, e.g. "R".
        os_platform: Platform tag marking OS-level packages.

    Returns:
        Package names in traversal order, duplicates included.

    Raises:
        CyclicRequirementError: If a node requires itself transitively.
    """
    arena = RequirementArena.from_requirements(requirements)
    packages = list(walk_os_packages(arena, runtime, os_platform))
    logger.debug(f"Found {len(packages)} {os_platform} packages under {runtime} requirements")
    return packages
