"""Classify a component's version against the latest known version."""

from __future__ import annotations

import logging

from kube_versions.models import ComponentStatus, SeverityTier
from kube_versions.utils.version_compare import compare_parts, parse_version

logger = logging.getLogger(__name__)


def classify_status(current: str | None, latest: str | None) -> ComponentStatus:
    """Return the status of ``current`` relative to ``latest``.

    A missing side is ``unknown``.  If the strings cannot be compared,
    equal strings are ``up-to-date`` and anything else is ``unknown``;
    a failed comparison never reports ``outdated``.
    """
    if not current or not latest:
        return ComponentStatus.UNKNOWN

    try:
        cur = parse_version(current)
        lat = parse_version(latest)
        if cur.opaque or lat.opaque:
            logger.debug("Comparing non-semantic versions %r and %r", current, latest)
        if compare_parts(cur.parts, lat.parts) < 0:
            return ComponentStatus.OUTDATED
        return ComponentStatus.UP_TO_DATE
    except (TypeError, ValueError):
        logger.debug("Could not compare %r with %r", current, latest, exc_info=True)
        return ComponentStatus.UP_TO_DATE if current == latest else ComponentStatus.UNKNOWN


def classify_severity(current: str | None, latest: str | None) -> SeverityTier:
    """Score how far ``current`` lags behind ``latest``.

    Only the major and minor distance matter:

    - more than 2 majors behind: critical
    - 2 majors behind: high
    - 1 major, or more than 5 minors behind: medium
    - anything else: low
    """
    if not latest:
        return SeverityTier.LOW

    try:
        cur = parse_version(current)
        lat = parse_version(latest)
        major_diff = lat.major - cur.major
        minor_diff = lat.minor - cur.minor
    except (TypeError, ValueError):
        logger.debug("Could not score %r against %r", current, latest, exc_info=True)
        return SeverityTier.LOW

    if major_diff > 2:
        return SeverityTier.CRITICAL
    if major_diff > 1:
        return SeverityTier.HIGH
    if major_diff == 1 or minor_diff > 5:
        return SeverityTier.MEDIUM
    return SeverityTier.LOW
