"""kver cluster - Show Kubernetes and node versions."""

from __future__ import annotations

from typing import Optional

import typer

from kube_versions.cli.options import ContextOption, OutputOption
from kube_versions.cli.wiring import build_services
from kube_versions.core.errors import CollectionError
from kube_versions.output.formatters import error_console, output_cluster_info, print_error

app = typer.Typer()


@app.callback(invoke_without_command=True)
def cluster(
    output: str = OutputOption,
    context: Optional[str] = ContextOption,
) -> None:
    """Show the API server version, node kubelet/OS/runtime versions and object totals."""
    try:
        with error_console.status("[bold cyan]Reading cluster info…"):
            info = build_services(context).cluster.cluster_info()
    except CollectionError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    output_cluster_info(info, output)
