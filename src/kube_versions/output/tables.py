"""Rich table builders for each command."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table

from kube_versions.models.analysis import ComponentVersion, VersionComparison, VersionSummary
from kube_versions.models.cluster import ClusterInfo, NodeInfo
from kube_versions.models.release import PackageRelease
from kube_versions.models.workload import WorkloadInstance
from kube_versions.output.themes import styled_comparison, styled_severity, styled_status


def component_table(components: list[ComponentVersion], title: str = "Component Versions") -> Table:
    table = Table(title=title, expand=True)
    table.add_column("Namespace", style="blue", no_wrap=True)
    table.add_column("Component", style="bold white")
    table.add_column("Type", style="magenta", no_wrap=True)
    table.add_column("Current", style="cyan")
    table.add_column("Latest", style="bold")
    table.add_column("Status", no_wrap=True)
    table.add_column("Severity", no_wrap=True)

    for c in components:
        table.add_row(
            c.namespace,
            c.name,
            c.kind.value,
            c.current_version,
            c.latest_version or "-",
            styled_status(c.status),
            styled_severity(c.severity),
        )
    return table


def summary_panel(namespace: str, summary: VersionSummary, recommendations: list[str]) -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("Namespace", namespace)
    table.add_row("Total", str(summary.total))
    table.add_row("Outdated", f"[yellow]{summary.outdated}[/yellow]")
    table.add_row("Up to date", f"[green]{summary.up_to_date}[/green]")
    table.add_row("Unknown", f"[dim]{summary.unknown}[/dim]")
    for i, rec in enumerate(recommendations):
        table.add_row("Recommendations" if i == 0 else "", rec)

    return Panel(table, title="[bold]Version Summary[/bold]", border_style="blue")


def comparison_panel(result: VersionComparison) -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("Component", result.component)
    table.add_row("Current", result.current_version)
    table.add_row("Target", result.target_version)
    table.add_row("Comparison", styled_comparison(result.comparison))
    table.add_row("Recommendation", result.recommendation)
    if result.breaking_changes:
        table.add_row("Breaking Changes", "\n".join(result.breaking_changes))
    if result.migration_steps:
        table.add_row("Migration Steps", "\n".join(result.migration_steps))

    return Panel(table, title=f"[bold]Compare: {result.component}[/bold]", border_style="blue")


def workload_table(workloads: list[WorkloadInstance]) -> Table:
    table = Table(title="Pods", expand=True)
    table.add_column("Namespace", style="blue", no_wrap=True)
    table.add_column("Pod", style="bold white", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Ready", justify="right", no_wrap=True)
    table.add_column("Restarts", justify="right", style="dim")
    table.add_column("Age", justify="right", style="dim")
    table.add_column("Node", style="dim")
    table.add_column("Images", style="cyan")

    for w in workloads:
        table.add_row(
            w.namespace, w.name, w.phase, w.ready, str(w.restarts), w.age, w.node, "\n".join(w.images),
        )
    return table


def release_table(releases: list[PackageRelease]) -> Table:
    table = Table(title="Helm Releases", expand=True)
    table.add_column("Namespace", style="blue", no_wrap=True)
    table.add_column("Release", style="bold white", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Rev", justify="right", style="dim")
    table.add_column("Chart", style="magenta")
    table.add_column("App Ver", style="cyan")
    table.add_column("Updated", style="dim", no_wrap=True)

    for r in releases:
        table.add_row(r.namespace, r.name, r.status, str(r.revision), r.chart, r.app_version, r.updated)
    return table


def cluster_panel(info: ClusterInfo) -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("Server Version", info.version)
    table.add_row("Nodes", str(len(info.nodes)))
    table.add_row("Namespaces", str(len(info.namespaces)))
    table.add_row("Pods", str(info.total_pods))
    table.add_row("Services", str(info.total_services))

    return Panel(table, title="[bold]Cluster[/bold]", border_style="blue")


def node_table(nodes: list[NodeInfo]) -> Table:
    table = Table(title="Nodes", expand=True)
    table.add_column("Node", style="bold white", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Roles", style="magenta")
    table.add_column("Age", justify="right", style="dim")
    table.add_column("Kubelet", style="cyan", no_wrap=True)
    table.add_column("OS")
    table.add_column("Kernel", style="dim")
    table.add_column("Runtime", style="dim")

    for n in nodes:
        status = f"[green]{n.status}[/green]" if n.status == "Ready" else f"[red]{n.status}[/red]"
        table.add_row(
            n.name, status, ",".join(n.roles), n.age, n.kubelet_version, n.os, n.kernel, n.container_runtime,
        )
    return table
