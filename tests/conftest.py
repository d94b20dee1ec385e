"""Shared fakes for the cluster collaborators."""

from __future__ import annotations

import pytest

from kube_versions.core.analyzer import VersionAnalyzer
from kube_versions.core.errors import CollectionError
from kube_versions.models.chart import ChartVersion
from kube_versions.models.cluster import ClusterInfo, NodeInfo
from kube_versions.models.release import PackageRelease
from kube_versions.models.workload import WorkloadInstance


class FakeWorkloads:
    def __init__(self, workloads: list[WorkloadInstance] | None = None, fail: bool = False):
        self.workloads = workloads or []
        self.fail = fail
        self.calls: list[tuple[str | None, str | None]] = []

    def list_workloads(self, namespace: str | None = None, selector: str | None = None) -> list[WorkloadInstance]:
        self.calls.append((namespace, selector))
        if self.fail:
            raise CollectionError("pods", "connection refused")
        return [w for w in self.workloads if namespace is None or w.namespace == namespace]


class FakeReleases:
    def __init__(self, releases: list[PackageRelease] | None = None, fail: bool = False):
        self.releases = releases or []
        self.fail = fail

    def list_package_releases(self, namespace: str | None = None, status: str | None = None) -> list[PackageRelease]:
        if self.fail:
            raise CollectionError("helm releases", "forbidden")
        return [
            r for r in self.releases
            if (namespace is None or r.namespace == namespace) and (status is None or r.status == status)
        ]


class FakeRegistry:
    """Maps chart base names to version lists; names in ``broken`` raise."""

    def __init__(self, charts: dict[str, list[str]] | None = None, broken: set[str] | None = None):
        self.charts = charts or {}
        self.broken = broken or set()
        self.lookups: list[str] = []

    def lookup_chart_versions(self, chart_name: str) -> list[ChartVersion]:
        self.lookups.append(chart_name)
        if chart_name in self.broken:
            raise RuntimeError(f"index for {chart_name} is corrupt")
        return [ChartVersion(version=v, repo_name="stable") for v in self.charts.get(chart_name, [])]


class FakeCluster:
    def __init__(self, info: ClusterInfo | None = None, fail: bool = False):
        self.info = info or ClusterInfo(
            version="v1.29.2",
            nodes=[NodeInfo(name="node-1", status="Ready", roles=("control-plane",), kubelet_version="v1.29.2")],
            namespaces=["default", "kube-system"],
            total_pods=12,
            total_services=4,
        )
        self.fail = fail

    def cluster_info(self) -> ClusterInfo:
        if self.fail:
            raise CollectionError("cluster info", "connection refused")
        return self.info


@pytest.fixture
def nginx_workload() -> WorkloadInstance:
    return WorkloadInstance(
        name="web-7d9f",
        namespace="default",
        images=("nginx:1.21.0",),
        labels={"app": "web"},
    )


@pytest.fixture
def nginx_release() -> PackageRelease:
    return PackageRelease(name="web", namespace="default", chart="nginx-15.4.4", status="deployed")


@pytest.fixture
def analyzer(nginx_workload: WorkloadInstance, nginx_release: PackageRelease) -> VersionAnalyzer:
    return VersionAnalyzer(
        workloads=FakeWorkloads([nginx_workload]),
        releases=FakeReleases([nginx_release]),
        registry=FakeRegistry({"nginx": ["15.5.1", "15.4.4"]}),
        max_workers=4,
    )
