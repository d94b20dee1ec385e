"""Direct comparison of two versions of a component."""

from __future__ import annotations

import logging

from kube_versions.models import Comparison
from kube_versions.models.analysis import VersionComparison
from kube_versions.utils.version_compare import ParsedVersion, compare_parts, parse_version

logger = logging.getLogger(__name__)

_BASE_MIGRATION_STEPS = (
    "1. Back up the current state",
    "2. Test the upgrade in a development environment",
    "3. Review logs and metrics after the upgrade",
)

_UPGRADE_MIGRATION_STEPS = (
    "4. Schedule a maintenance window if needed",
    "5. Run the upgrade",
    "6. Verify functionality",
    "7. Monitor for regressions",
)


def compare_versions(component: str, current_version: str, target_version: str) -> VersionComparison:
    """Compare ``current_version`` with ``target_version`` and suggest next steps."""
    comparison = _relation(current_version, target_version)
    return VersionComparison(
        component=component,
        current_version=current_version,
        target_version=target_version,
        comparison=comparison,
        recommendation=_recommendation(comparison, current_version, target_version),
        breaking_changes=_breaking_changes(current_version, target_version),
        migration_steps=_migration_steps(comparison),
    )


def _strict_parse(version: str) -> ParsedVersion:
    if not isinstance(version, str):
        raise TypeError(f"version must be a string, got {type(version).__name__}")
    return parse_version(version)


def _relation(current: str, target: str) -> Comparison:
    try:
        result = compare_parts(_strict_parse(current).parts, _strict_parse(target).parts)
    except (TypeError, ValueError):
        logger.debug("Cannot compare %r with %r", current, target, exc_info=True)
        return Comparison.INVALID
    if result == 0:
        return Comparison.SAME
    if result < 0:
        return Comparison.OLDER
    return Comparison.NEWER


def _recommendation(comparison: Comparison, current: str, target: str) -> str:
    if comparison == Comparison.OLDER:
        return f"Upgrade recommended from {current} to {target}"
    if comparison == Comparison.NEWER:
        return f"Current version {current} is newer than {target}. Verify compatibility"
    if comparison == Comparison.SAME:
        return f"Versions are identical ({current})"
    return f"Cannot compare versions {current} and {target}"


def _breaking_changes(current: str, target: str) -> list[str]:
    """Flag a major version jump; there is no changelog source behind this."""
    try:
        major_diff = _strict_parse(target).major - _strict_parse(current).major
    except (TypeError, ValueError):
        return ["Could not determine breaking changes"]

    if major_diff > 0:
        return [
            f"Major version change detected ({current} -> {target})",
            "Review the component's migration documentation",
            "Test thoroughly before upgrading in production",
        ]
    return []


def _migration_steps(comparison: Comparison) -> list[str]:
    steps = list(_BASE_MIGRATION_STEPS)
    if comparison == Comparison.OLDER:
        steps.extend(_UPGRADE_MIGRATION_STEPS)
    return steps
