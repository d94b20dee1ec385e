"""kver analyze - Analyze component versions."""

from __future__ import annotations

from typing import Optional

import typer

from kube_versions.cli.options import ComponentOption, ContextOption, NamespaceOption, OutputOption
from kube_versions.cli.wiring import build_services
from kube_versions.core.errors import CollectionError
from kube_versions.output.formatters import error_console, output_analysis, print_error

app = typer.Typer()


@app.callback(invoke_without_command=True)
def analyze(
    output: str = OutputOption,
    namespace: Optional[str] = NamespaceOption,
    context: Optional[str] = ContextOption,
    component: Optional[str] = ComponentOption,
) -> None:
    """Classify pods, container images and Helm releases as up-to-date, outdated or unknown."""
    services = build_services(context)
    try:
        with error_console.status("[bold cyan]Analyzing versions…"):
            analysis = services.analyzer.analyze_versions(namespace=namespace, component=component)
    except CollectionError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    output_analysis(analysis, output)
