"""Human-readable guidance derived from an analysis."""

from __future__ import annotations

from kube_versions.models import ComponentKind, ComponentStatus, SeverityTier
from kube_versions.models.analysis import ComponentVersion


def build_recommendations(components: list[ComponentVersion]) -> list[str]:
    """Return advisory messages, most urgent first."""
    recommendations: list[str] = []

    critical = [c for c in components if c.severity == SeverityTier.CRITICAL]
    outdated = [c for c in components if c.status == ComponentStatus.OUTDATED]

    if critical:
        recommendations.append(
            f"CRITICAL: {len(critical)} component(s) are several major versions behind "
            "and require immediate upgrade"
        )

    if outdated:
        recommendations.append(
            f"{len(outdated)} component(s) are outdated and should be upgraded"
        )

    if any(c.kind == ComponentKind.HELM_RELEASE for c in outdated):
        recommendations.append(
            "Consider upgrading Helm releases with 'helm upgrade' to pick up the latest "
            "features and security fixes"
        )

    if any(c.status == ComponentStatus.UNKNOWN for c in components):
        recommendations.append(
            "Some components have unknown versions. Consider adding version labels "
            "(e.g. app.kubernetes.io/version) for better tracking"
        )

    return recommendations
