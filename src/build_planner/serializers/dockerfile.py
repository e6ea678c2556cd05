"""Dockerfile serializer.

Renders build plans with a Jinja2 template. The default template is bundled
with the package; a custom one may be supplied.
"""

from importlib.resources import files
from pathlib import Path
from typing import Iterable, Optional

from jinja2 import Environment, FileSystemLoader, Template

from build_planner.dates import Clock, utc_now
from build_planner.models import BuildPlan
from build_planner.serializers.base import BaseSerializer


def continued(items: Iterable[str], indent: int = 4) -> str:
    """Join items with shell line continuations, indenting each new line."""
    return (" \\\n" + " " * indent).join(items)


class DockerfileSerializer(BaseSerializer):
    """Serializer that renders build plans as Dockerfiles.

    Attributes:
        template: The Jinja2 template to use for rendering.
        comments: Whether to start the Dockerfile with a header comment.
        user: Non-root user that installs dependencies and runs the container.
    """

    DEFAULT_USER = "plannerUser"

    def __init__(
        self,
        template_path: Optional[Path] = None,
        comments: bool = True,
        user: str = DEFAULT_USER,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize the Dockerfile serializer.

        Args:
            template_path: Optional path to a custom Jinja2 template.
                If not provided, uses the default bundled template.
            comments: Whether to include a header comment with a timestamp.
            user: Name of the non-root user created in the image.
            clock: Source of the header timestamp.
        """
        if template_path:
            env = self._environment(FileSystemLoader(template_path.parent))
            self.template = env.get_template(template_path.name)
        else:
            self.template = self._load_default_template()
        self.comments = comments
        self.user = user
        self.clock = clock

    @staticmethod
    def _environment(loader=None) -> Environment:
        env = Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        env.filters["continued"] = continued
        return env

    def _load_default_template(self) -> Template:
        template_content = (
            files("build_planner.templates")
            .joinpath("Dockerfile.j2")
            .read_text(encoding="utf-8")
        )
        return self._environment().from_string(template_content)

    def render(self, plan: BuildPlan) -> str:
        """Render a build plan as a Dockerfile.

        Args:
            plan: Resolved build plan.

        Returns:
            Dockerfile text.
        """
        return self.template.render(
            plan=plan,
            env_vars=[f'{name}="{value}"' for name, value in plan.env_vars],
            comments=self.comments,
            user=self.user,
            generated_at=self.clock().isoformat(),
        )

    @property
    def format_name(self) -> str:
        return "dockerfile"
