"""Command-line interface for build_planner.

Provides the main entry point and subcommands for generating Dockerfiles and
inspecting the build plans behind them.
"""

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from build_planner.errors import BuildPlannerError
from build_planner.models import BuildPlan
from build_planner.planner import plan_project
from build_planner.serializers import DockerfileSerializer

app = typer.Typer(
    name="build-planner",
    help="Infer reproducible container build plans from project metadata.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger("build_planner")

FolderArgument = Annotated[
    Path,
    typer.Argument(
        help="Project folder to inspect",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
]

RuntimeOption = Annotated[
    Optional[str],
    typer.Option(
        "--runtime",
        "-r",
        envvar="BUILD_PLANNER_RUNTIME",
        help="Runtime to plan for (e.g. R) instead of detecting it",
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
]


def _setup_logging(verbose: bool) -> None:
    """Configure logging level based on verbosity flag."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger("build_planner").setLevel(level)


def _plan_or_exit(folder: Path, runtime: Optional[str]) -> BuildPlan:
    try:
        return plan_project(folder, runtime=runtime)
    except BuildPlannerError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)


@app.command()
def gen(
    folder: FolderArgument = Path("."),
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output file path (default: FOLDER/.Dockerfile)",
        ),
    ] = None,
    template: Annotated[
        Optional[Path],
        typer.Option(
            "--template",
            "-t",
            help="Custom Jinja2 template file",
            exists=True,
            readable=True,
        ),
    ] = None,
    comments: Annotated[
        bool,
        typer.Option(
            "--comments/--no-comments",
            help="Start the Dockerfile with a header comment",
        ),
    ] = True,
    runtime: RuntimeOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Generate a Dockerfile for a project.

    Inspects the project's metadata, resolves a build plan and writes it as
    a Dockerfile.
    """
    _setup_logging(verbose)

    build_plan = _plan_or_exit(folder, runtime)
    serializer = DockerfileSerializer(template_path=template, comments=comments)

    if output is None:
        output = folder / ".Dockerfile"
    try:
        serializer.write(build_plan, output)
    except OSError as e:
        err_console.print(f"[red]Error writing output:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(f"[green]Generated:[/green] {output}")


@app.command()
def plan(
    folder: FolderArgument = Path("."),
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the plan as JSON",
        ),
    ] = False,
    runtime: RuntimeOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Show the build plan for a project without writing a Dockerfile."""
    _setup_logging(verbose)

    build_plan = _plan_or_exit(folder, runtime)

    if as_json:
        typer.echo(json.dumps(asdict(build_plan), indent=2))
        return

    table = Table(title=f"Build plan ({build_plan.runtime})", show_lines=True)
    table.add_column("Step", style="bold")
    table.add_column("Value")

    table.add_row("Base image", build_plan.base_image)
    table.add_row("Environment", "\n".join(f"{n}={v}" for n, v in build_plan.env_vars))
    table.add_row("Repositories", "\n".join(f"{r} ({k})" for r, k in build_plan.apt_repos))
    table.add_row("Packages", "\n".join(build_plan.apt_packages))
    table.add_row("Install files", "\n".join(f"{s} -> {d}" for s, d in build_plan.install_files))
    table.add_row("Install command", build_plan.install_command or "")
    table.add_row("Project files", "\n".join(f"{s} -> {d}" for s, d in build_plan.project_files))
    table.add_row("Run command", build_plan.run_command or "")
    console.print(table)


if __name__ == "__main__":
    app()
