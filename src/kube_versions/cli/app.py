"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from kube_versions.config.settings import settings

app = typer.Typer(
    name="kver",
    help="kube-versions - Find outdated workloads and Helm releases.",
    no_args_is_help=True,
)


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr so stdout stays clean for data and MCP."""
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # the kubernetes client logs every request at DEBUG
    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose)


def _register_commands() -> None:
    from kube_versions.cli.commands.analyze_cmd import app as analyze_app
    from kube_versions.cli.commands.cluster_cmd import app as cluster_app
    from kube_versions.cli.commands.outdated_cmd import app as outdated_app
    from kube_versions.cli.commands.compare_cmd import app as compare_app
    from kube_versions.cli.commands.pods_cmd import app as pods_app
    from kube_versions.cli.commands.releases_cmd import app as releases_app
    from kube_versions.cli.commands.serve_cmd import app as serve_app

    app.add_typer(analyze_app, name="analyze", help="Analyze component versions")
    app.add_typer(outdated_app, name="outdated", help="List outdated components")
    app.add_typer(compare_app, name="compare", help="Compare two versions")
    app.add_typer(cluster_app, name="cluster", help="Show cluster and node versions")
    app.add_typer(pods_app, name="pods", help="List pods and their images")
    app.add_typer(releases_app, name="releases", help="List Helm releases")
    app.add_typer(serve_app, name="serve", help="Run the MCP stdio server")


_register_commands()


def main() -> None:
    app()
