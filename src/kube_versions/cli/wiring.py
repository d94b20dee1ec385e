"""Build the cluster collaborators and analyzer for a CLI invocation."""

from __future__ import annotations

from dataclasses import dataclass

from kube_versions.core.analyzer import VersionAnalyzer
from kube_versions.core.chart_registry import ChartRegistry
from kube_versions.core.cluster_store import ClusterStore
from kube_versions.core.k8s_client import K8sClient
from kube_versions.core.release_store import ReleaseStore
from kube_versions.core.workload_store import WorkloadStore


@dataclass
class Services:
    workloads: WorkloadStore
    releases: ReleaseStore
    analyzer: VersionAnalyzer
    cluster: ClusterStore


def build_services(context: str | None = None) -> Services:
    k8s = K8sClient(context=context)
    workloads = WorkloadStore(k8s)
    releases = ReleaseStore(k8s)
    analyzer = VersionAnalyzer(workloads=workloads, releases=releases, registry=ChartRegistry())
    return Services(workloads=workloads, releases=releases, analyzer=analyzer, cluster=ClusterStore(k8s))
