"""kver pods - List pods and their images."""

from __future__ import annotations

from typing import Optional

import typer

from kube_versions.cli.options import ContextOption, NamespaceOption, OutputOption, SelectorOption
from kube_versions.cli.wiring import build_services
from kube_versions.core.errors import CollectionError
from kube_versions.output.formatters import output_workloads, print_error

app = typer.Typer()


@app.callback(invoke_without_command=True)
def pods(
    output: str = OutputOption,
    namespace: Optional[str] = NamespaceOption,
    context: Optional[str] = ContextOption,
    selector: Optional[str] = SelectorOption,
) -> None:
    """List pods with their container images."""
    try:
        workloads = build_services(context).workloads.list_workloads(namespace=namespace, selector=selector)
    except CollectionError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    output_workloads(workloads, output)
