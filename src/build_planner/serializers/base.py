"""Base interface for build plan serializers.

Serializers render a resolved ``BuildPlan`` as the text a container tool
consumes, such as a Dockerfile.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from build_planner.models import BuildPlan


class BaseSerializer(ABC):
    """Abstract base class for build plan serializers."""

    @abstractmethod
    def render(self, plan: BuildPlan) -> str:
        """Render a build plan.

        Args:
            plan: Resolved build plan.

        Returns:
            Rendered output as a string.
        """
        ...

    def write(self, plan: BuildPlan, output_path: Path) -> None:
        """Render and write output to a file.

        Args:
            plan: Resolved build plan.
            output_path: Path to write the output file.
        """
        content = self.render(plan)
        output_path.write_text(content, encoding="utf-8")

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the output format name, e.g. "dockerfile"."""
        ...
