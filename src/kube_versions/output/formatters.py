"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape

from kube_versions.models.analysis import ComponentVersion, VersionAnalysis, VersionComparison
from kube_versions.models.cluster import ClusterInfo
from kube_versions.models.release import PackageRelease
from kube_versions.models.workload import WorkloadInstance

console = Console()
error_console = Console(stderr=True)


def print_error(message: str) -> None:
    error_console.print(f"[red bold]Error:[/red bold] {escape(message)}")


def _print_data(data: Any, fmt: str) -> bool:
    """Print ``data`` as JSON or YAML; False means the caller renders a table."""
    if fmt == "json":
        console.print_json(json.dumps(data, indent=2))
        return True
    if fmt == "yaml":
        console.print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), markup=False, soft_wrap=True)
        return True
    return False


def output_analysis(analysis: VersionAnalysis, fmt: str) -> None:
    if _print_data(analysis.to_dict(), fmt):
        return
    from kube_versions.output.tables import component_table, summary_panel
    console.print(component_table(analysis.components))
    console.print(summary_panel(analysis.namespace, analysis.summary, analysis.recommendations))


def output_components(components: list[ComponentVersion], fmt: str) -> None:
    if _print_data([c.to_dict() for c in components], fmt):
        return
    if not components:
        console.print("[green]No outdated components found.[/green]")
        return
    from kube_versions.output.tables import component_table
    console.print(component_table(components, title="Outdated Components"))


def output_comparison(result: VersionComparison, fmt: str) -> None:
    if _print_data(result.to_dict(), fmt):
        return
    from kube_versions.output.tables import comparison_panel
    console.print(comparison_panel(result))


def output_workloads(workloads: list[WorkloadInstance], fmt: str) -> None:
    if _print_data([w.to_dict() for w in workloads], fmt):
        return
    from kube_versions.output.tables import workload_table
    console.print(workload_table(workloads))


def output_releases(releases: list[PackageRelease], fmt: str) -> None:
    if _print_data([r.to_dict() for r in releases], fmt):
        return
    from kube_versions.output.tables import release_table
    console.print(release_table(releases))


def output_cluster_info(info: ClusterInfo, fmt: str) -> None:
    if _print_data(info.to_dict(), fmt):
        return
    from kube_versions.output.tables import cluster_panel, node_table
    console.print(cluster_panel(info))
    console.print(node_table(info.nodes))
