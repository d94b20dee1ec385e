"""Data models for kube-versions."""

from __future__ import annotations

import enum


class ComponentKind(enum.Enum):
    POD = "pod"
    CONTAINER = "container"
    HELM_RELEASE = "helm-release"


class ComponentStatus(enum.Enum):
    UP_TO_DATE = "up-to-date"
    OUTDATED = "outdated"
    UNKNOWN = "unknown"


class SeverityTier(enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Comparison(enum.Enum):
    NEWER = "newer"
    OLDER = "older"
    SAME = "same"
    INVALID = "invalid"
