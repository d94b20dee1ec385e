"""kver releases - List Helm releases."""

from __future__ import annotations

from typing import Optional

import typer

from kube_versions.cli.options import ContextOption, NamespaceOption, OutputOption
from kube_versions.cli.wiring import build_services
from kube_versions.core.errors import CollectionError
from kube_versions.output.formatters import output_releases, print_error

app = typer.Typer()


@app.callback(invoke_without_command=True)
def releases(
    output: str = OutputOption,
    namespace: Optional[str] = NamespaceOption,
    context: Optional[str] = ContextOption,
    status: Optional[str] = typer.Option(None, "--status", help="Only releases in this status, e.g. deployed"),
) -> None:
    """List the latest revision of each Helm release."""
    try:
        found = build_services(context).releases.list_package_releases(namespace=namespace, status=status)
    except CollectionError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    output_releases(found, output)
