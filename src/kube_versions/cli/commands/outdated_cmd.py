"""kver outdated - List outdated components."""

from __future__ import annotations

from typing import Optional

import typer

from kube_versions.cli.options import ContextOption, NamespaceOption, OutputOption
from kube_versions.cli.wiring import build_services
from kube_versions.core.errors import CollectionError
from kube_versions.output.formatters import error_console, output_components, print_error

app = typer.Typer()


@app.callback(invoke_without_command=True)
def outdated(
    output: str = OutputOption,
    namespace: Optional[str] = NamespaceOption,
    context: Optional[str] = ContextOption,
    fail_on_outdated: bool = typer.Option(
        False, "--fail", help="Exit with code 2 when outdated components are found",
    ),
) -> None:
    """List components running an older version than the latest known one."""
    services = build_services(context)
    try:
        with error_console.status("[bold cyan]Checking for outdated components…"):
            components = services.analyzer.get_outdated_components(namespace=namespace)
    except CollectionError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    output_components(components, output)
    if fail_on_outdated and components:
        raise typer.Exit(code=2)
