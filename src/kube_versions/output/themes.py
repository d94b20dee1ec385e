"""Status, severity and comparison color maps."""

from kube_versions.models import Comparison, ComponentStatus, SeverityTier

STATUS_COLORS: dict[ComponentStatus, str] = {
    ComponentStatus.UP_TO_DATE: "green",
    ComponentStatus.OUTDATED: "yellow bold",
    ComponentStatus.UNKNOWN: "dim",
}

SEVERITY_COLORS: dict[SeverityTier, str] = {
    SeverityTier.LOW: "green",
    SeverityTier.MEDIUM: "yellow",
    SeverityTier.HIGH: "red",
    SeverityTier.CRITICAL: "red bold",
}

COMPARISON_COLORS: dict[Comparison, str] = {
    Comparison.OLDER: "yellow",
    Comparison.NEWER: "cyan",
    Comparison.SAME: "green",
    Comparison.INVALID: "red",
}


def styled_status(status: ComponentStatus) -> str:
    color = STATUS_COLORS.get(status, "white")
    return f"[{color}]{status.value}[/{color}]"


def styled_severity(severity: SeverityTier | None) -> str:
    if severity is None:
        return "-"
    color = SEVERITY_COLORS.get(severity, "white")
    return f"[{color}]{severity.value}[/{color}]"


def styled_comparison(comparison: Comparison) -> str:
    color = COMPARISON_COLORS.get(comparison, "white")
    return f"[{color}]{comparison.value}[/{color}]"
