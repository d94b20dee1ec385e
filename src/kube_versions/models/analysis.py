"""Version analysis result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from kube_versions.models import Comparison, ComponentKind, ComponentStatus, SeverityTier


@dataclass
class ComponentVersion:
    name: str
    kind: ComponentKind
    current_version: str
    status: ComponentStatus
    namespace: str
    latest_version: str | None = None
    images: list[str] | None = None
    chart: str | None = None
    severity: SeverityTier | None = None
    update_available: bool | None = None
    security_issues: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "name": self.name,
            "type": self.kind.value,
            "currentVersion": self.current_version,
        }
        if self.latest_version is not None:
            d["latestVersion"] = self.latest_version
        d["status"] = self.status.value
        d["namespace"] = self.namespace
        if self.images is not None:
            d["images"] = list(self.images)
        if self.chart is not None:
            d["chart"] = self.chart
        if self.update_available is not None:
            d["updateAvailable"] = self.update_available
        if self.severity is not None:
            d["severity"] = self.severity.value
        if self.security_issues is not None:
            d["securityIssues"] = list(self.security_issues)
        return d


@dataclass
class VersionSummary:
    total: int = 0
    outdated: int = 0
    up_to_date: int = 0
    unknown: int = 0

    @classmethod
    def from_components(cls, components: list[ComponentVersion]) -> VersionSummary:
        summary = cls(total=len(components))
        for c in components:
            if c.status == ComponentStatus.OUTDATED:
                summary.outdated += 1
            elif c.status == ComponentStatus.UP_TO_DATE:
                summary.up_to_date += 1
            else:
                summary.unknown += 1
        return summary

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "outdated": self.outdated,
            "upToDate": self.up_to_date,
            "unknown": self.unknown,
        }


@dataclass
class VersionAnalysis:
    namespace: str
    components: list[ComponentVersion] = field(default_factory=list)
    summary: VersionSummary = field(default_factory=VersionSummary)
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "namespace": self.namespace,
            "components": [c.to_dict() for c in self.components],
            "summary": self.summary.to_dict(),
            "recommendations": list(self.recommendations),
        }


@dataclass
class VersionComparison:
    component: str
    current_version: str
    target_version: str
    comparison: Comparison
    recommendation: str
    breaking_changes: list[str] | None = None
    migration_steps: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "component": self.component,
            "currentVersion": self.current_version,
            "targetVersion": self.target_version,
            "comparison": self.comparison.value,
            "recommendation": self.recommendation,
        }
        if self.breaking_changes is not None:
            d["breakingChanges"] = list(self.breaking_changes)
        if self.migration_steps is not None:
            d["migrationSteps"] = list(self.migration_steps)
        return d
