"""Decode Helm v3 release data from Kubernetes Secrets or ConfigMaps."""

from __future__ import annotations

import binascii
import logging
from typing import Any

from kube_versions.models.release import HelmRelease
from kube_versions.utils.encoding import decode_release

logger = logging.getLogger(__name__)

_DECODE_ERRORS = (AttributeError, binascii.Error, EOFError, OSError, ValueError)


def _object_name(obj: Any) -> str:
    meta = getattr(obj, "metadata", None)
    return (meta.name if meta else None) or "<unknown>"


def decode_storage_object(obj: Any) -> HelmRelease | None:
    """Decode a Helm storage Secret or ConfigMap, or return None if it is unreadable."""
    data = getattr(obj, "data", None)
    if not data or "release" not in data:
        return None
    try:
        release = HelmRelease.from_dict(decode_release(data["release"]))
    except _DECODE_ERRORS:
        logger.debug("Failed to decode Helm storage object %s", _object_name(obj), exc_info=True)
        return None
    # Older releases may omit the namespace from the payload
    if not release.namespace and obj.metadata:
        release.namespace = obj.metadata.namespace or ""
    return release


def storage_labels(obj: Any) -> tuple[str, str, int]:
    """Read (name, namespace, revision) from storage labels without decoding the payload."""
    meta = getattr(obj, "metadata", None)
    labels = dict(meta.labels or {}) if meta else {}
    namespace = (meta.namespace or "") if meta else ""
    try:
        revision = int(labels.get("version", "0"))
    except ValueError:
        revision = 0
    return labels.get("name", ""), namespace, revision
