"""Tests for the recommendation synthesizer."""

from kube_versions.core.recommendations import build_recommendations
from kube_versions.models import ComponentKind, ComponentStatus, SeverityTier
from kube_versions.models.analysis import ComponentVersion


def _component(
    kind: ComponentKind = ComponentKind.HELM_RELEASE,
    status: ComponentStatus = ComponentStatus.UP_TO_DATE,
    severity: SeverityTier | None = None,
) -> ComponentVersion:
    return ComponentVersion(
        name="c",
        kind=kind,
        current_version="1.0.0",
        status=status,
        namespace="default",
        severity=severity,
    )


class TestBuildRecommendations:
    def test_empty(self):
        assert build_recommendations([]) == []

    def test_all_up_to_date(self):
        assert build_recommendations([_component(severity=SeverityTier.LOW)]) == []

    def test_full_order(self):
        components = [
            _component(status=ComponentStatus.OUTDATED, severity=SeverityTier.CRITICAL),
            _component(status=ComponentStatus.OUTDATED, severity=SeverityTier.LOW),
            _component(kind=ComponentKind.POD, status=ComponentStatus.UNKNOWN),
        ]
        recs = build_recommendations(components)
        assert len(recs) == 4
        assert recs[0].startswith("CRITICAL: 1 component(s)")
        assert recs[1].startswith("2 component(s) are outdated")
        assert "helm upgrade" in recs[2]
        assert "version labels" in recs[3]

    def test_outdated_non_release_skips_helm_advice(self):
        recs = build_recommendations([_component(kind=ComponentKind.CONTAINER, status=ComponentStatus.OUTDATED)])
        assert len(recs) == 1
        assert "helm upgrade" not in recs[0]

    def test_unknown_only(self):
        recs = build_recommendations([_component(kind=ComponentKind.CONTAINER, status=ComponentStatus.UNKNOWN)])
        assert len(recs) == 1
        assert "version labels" in recs[0]

    def test_critical_without_outdated(self):
        # severity and status are scored independently
        recs = build_recommendations([_component(severity=SeverityTier.CRITICAL)])
        assert len(recs) == 1
        assert recs[0].startswith("CRITICAL")
