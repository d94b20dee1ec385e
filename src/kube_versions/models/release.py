"""Helm release models."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from kube_versions.models.chart import ChartMetadata
from kube_versions.utils.age import short_timestamp


class ReleaseStatus(enum.Enum):
    DEPLOYED = "deployed"
    FAILED = "failed"
    SUPERSEDED = "superseded"
    PENDING_INSTALL = "pending-install"
    PENDING_UPGRADE = "pending-upgrade"
    PENDING_ROLLBACK = "pending-rollback"
    UNINSTALLING = "uninstalling"
    UNINSTALLED = "uninstalled"
    UNKNOWN = "unknown"

    @classmethod
    def from_str(cls, s: str) -> ReleaseStatus:
        for member in cls:
            if member.value == s:
                return member
        return cls.UNKNOWN


@dataclass
class HelmRelease:
    """A decoded Helm storage object (one revision of one release)."""

    name: str = ""
    namespace: str = ""
    revision: int = 0
    status: ReleaseStatus = ReleaseStatus.UNKNOWN
    last_deployed: str = ""
    chart: ChartMetadata = field(default_factory=ChartMetadata)

    @property
    def chart_name(self) -> str:
        return self.chart.name

    @property
    def chart_version(self) -> str:
        return self.chart.version

    @property
    def app_version(self) -> str:
        return self.chart.app_version

    @classmethod
    def from_dict(cls, d: dict) -> HelmRelease:
        chart_raw = d.get("chart") or {}
        info = d.get("info") or {}
        return cls(
            name=d.get("name", ""),
            namespace=d.get("namespace", ""),
            revision=d.get("version", 0),
            status=ReleaseStatus.from_str(info.get("status", "unknown")),
            last_deployed=info.get("last_deployed", ""),
            chart=ChartMetadata.from_dict(chart_raw.get("metadata", {})),
        )


@dataclass(frozen=True)
class PackageRelease:
    """Installed release as seen by the version analyzer.

    ``chart`` joins name and version the way ``helm list`` prints them,
    e.g. ``nginx-15.4.4``.
    """

    name: str
    namespace: str
    chart: str
    status: str
    app_version: str = ""
    revision: int = 0
    updated: str = ""

    @classmethod
    def from_helm_release(cls, release: HelmRelease) -> PackageRelease:
        chart = release.chart_name
        if release.chart_version:
            chart = f"{chart}-{release.chart_version}"
        return cls(
            name=release.name,
            namespace=release.namespace,
            chart=chart,
            status=release.status.value,
            app_version=release.app_version,
            revision=release.revision,
            updated=short_timestamp(release.last_deployed),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "namespace": self.namespace,
            "revision": self.revision,
            "status": self.status,
            "chart": self.chart,
            "appVersion": self.app_version,
            "updated": self.updated,
        }
