"""Aggregate workload and release versions into a classified analysis."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Protocol

from kube_versions.config.settings import settings
from kube_versions.core.classifier import classify_severity, classify_status
from kube_versions.core.comparator import compare_versions
from kube_versions.core.recommendations import build_recommendations
from kube_versions.models import ComponentKind, ComponentStatus
from kube_versions.models.analysis import ComponentVersion, VersionAnalysis, VersionComparison, VersionSummary
from kube_versions.models.chart import ChartVersion
from kube_versions.models.release import PackageRelease
from kube_versions.models.workload import WorkloadInstance
from kube_versions.utils.version_compare import split_image

logger = logging.getLogger(__name__)

# Checked in order; the first label present wins
VERSION_LABELS = ("version", "app.kubernetes.io/version", "chart-version")


class WorkloadSource(Protocol):
    def list_workloads(self, namespace: str | None = None) -> list[WorkloadInstance]: ...


class ReleaseSource(Protocol):
    def list_package_releases(self, namespace: str | None = None) -> list[PackageRelease]: ...


class ChartVersionSource(Protocol):
    def lookup_chart_versions(self, chart_name: str) -> list[ChartVersion]: ...


@dataclass
class LookupResult:
    """Outcome of one chart registry lookup."""

    release: PackageRelease
    versions: list[ChartVersion] = field(default_factory=list)
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def split_chart(chart: str) -> tuple[str, str]:
    """Split ``<name>-<version>`` on the first hyphen.

    Hyphenated chart names split too early (``cert-manager-1.2.0`` gives
    ``cert`` and ``manager-1.2.0``).
    """
    base, _, version = chart.partition("-")
    return base or chart, version


def pod_version(workload: WorkloadInstance) -> str:
    """Best-effort version of a pod: version labels, then first image tag."""
    for label in VERSION_LABELS:
        if workload.labels.get(label):
            return workload.labels[label]
    if workload.images:
        return split_image(workload.images[0]).version
    return "unknown"


class VersionAnalyzer:
    """Builds version analyses from injected cluster collaborators."""

    def __init__(
        self,
        workloads: WorkloadSource,
        releases: ReleaseSource,
        registry: ChartVersionSource,
        max_workers: int | None = None,
    ):
        self.workloads = workloads
        self.releases = releases
        self.registry = registry
        self.max_workers = max_workers or settings.lookup_workers

    def analyze_versions(
        self,
        namespace: str | None = None,
        component: str | None = None,
    ) -> VersionAnalysis:
        """Classify every pod, container image and Helm release.

        Workload records come first, then releases, each in collaborator
        order.  A CollectionError from either store aborts the analysis;
        a failed chart lookup only marks that release ``unknown``.
        """
        pods = self.workloads.list_workloads(namespace=namespace)
        releases = self.releases.list_package_releases(namespace=namespace)

        components = self.analyze_workloads(pods, component)
        components.extend(self.analyze_releases(releases, component))

        return VersionAnalysis(
            namespace=namespace or "all",
            components=components,
            summary=VersionSummary.from_components(components),
            recommendations=build_recommendations(components),
        )

    def get_outdated_components(self, namespace: str | None = None) -> list[ComponentVersion]:
        analysis = self.analyze_versions(namespace=namespace)
        return [c for c in analysis.components if c.status == ComponentStatus.OUTDATED]

    def compare_versions(self, component: str, current_version: str, target_version: str) -> VersionComparison:
        return compare_versions(component, current_version, target_version)

    def analyze_workloads(
        self,
        workloads: list[WorkloadInstance],
        component: str | None = None,
    ) -> list[ComponentVersion]:
        """One record per container image, then one for the pod itself."""
        components: list[ComponentVersion] = []
        for w in workloads:
            if component and component not in w.name:
                continue

            # No image registry is queried, so image status stays unknown
            for image in w.images:
                ref = split_image(image)
                components.append(ComponentVersion(
                    name=f"{w.name}/{ref.name}",
                    kind=ComponentKind.CONTAINER,
                    current_version=ref.version,
                    status=ComponentStatus.UNKNOWN,
                    namespace=w.namespace,
                    images=[image],
                ))

            components.append(ComponentVersion(
                name=w.name,
                kind=ComponentKind.POD,
                current_version=pod_version(w),
                status=ComponentStatus.UNKNOWN,
                namespace=w.namespace,
                images=list(w.images),
            ))
        return components

    def analyze_releases(
        self,
        releases: list[PackageRelease],
        component: str | None = None,
    ) -> list[ComponentVersion]:
        selected = [r for r in releases if not component or component in r.name]
        return [self._release_component(result) for result in self._lookup_all(selected)]

    def _lookup_all(self, releases: list[PackageRelease]) -> list[LookupResult]:
        """Fan the registry lookups out; results come back in release order."""
        if not releases:
            return []
        workers = min(self.max_workers, len(releases))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="chart-lookup") as executor:
            return list(executor.map(self._lookup, releases))

    def _lookup(self, release: PackageRelease) -> LookupResult:
        chart_name, _ = split_chart(release.chart)
        try:
            return LookupResult(release=release, versions=self.registry.lookup_chart_versions(chart_name))
        except Exception as e:
            # A single chart's lookup must never fail the whole analysis
            return LookupResult(release=release, error=e)

    def _release_component(self, result: LookupResult) -> ComponentVersion:
        release = result.release
        if not result.ok:
            logger.warning(
                "Could not look up chart versions for release %s/%s: %s",
                release.namespace, release.name, result.error,
            )
            return ComponentVersion(
                name=release.name,
                kind=ComponentKind.HELM_RELEASE,
                current_version=release.chart,
                status=ComponentStatus.UNKNOWN,
                namespace=release.namespace,
                chart=release.chart,
            )

        _, current = split_chart(release.chart)
        latest = result.versions[0].version if result.versions else None
        status = classify_status(current, latest)
        return ComponentVersion(
            name=release.name,
            kind=ComponentKind.HELM_RELEASE,
            current_version=current,
            latest_version=latest,
            status=status,
            namespace=release.namespace,
            chart=release.chart,
            update_available=status == ComponentStatus.OUTDATED,
            severity=classify_severity(current, latest),
        )
