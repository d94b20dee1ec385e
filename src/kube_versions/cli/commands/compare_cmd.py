"""kver compare - Compare two versions of a component."""

from __future__ import annotations

import typer

from kube_versions.cli.options import OutputOption
from kube_versions.core.comparator import compare_versions
from kube_versions.output.formatters import output_comparison

app = typer.Typer()


@app.callback(invoke_without_command=True)
def compare(
    component: str = typer.Argument(help="Component name"),
    current: str = typer.Argument(help="Current version"),
    target: str = typer.Argument(help="Target version"),
    output: str = OutputOption,
) -> None:
    """Compare a current version with a target version. No cluster access needed."""
    output_comparison(compare_versions(component, current, target), output)
