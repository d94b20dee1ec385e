"""List installed Helm releases from cluster storage."""

from __future__ import annotations

import logging
from typing import Any

from kube_versions.config.settings import settings
from kube_versions.core.errors import CollectionError
from kube_versions.core.helm_decoder import decode_storage_object, storage_labels
from kube_versions.core.k8s_client import K8S_ERRORS, K8sClient
from kube_versions.models.release import HelmRelease, PackageRelease

logger = logging.getLogger(__name__)


class ReleaseStore:
    """Reads Helm releases straight from their storage Secrets/ConfigMaps."""

    def __init__(self, k8s: K8sClient):
        self.k8s = k8s

    def list_releases(self, namespace: str | None = None) -> list[HelmRelease]:
        """Return the latest revision of each release, sorted by namespace and name."""
        if settings.storage_driver == "configmaps":
            objects = self.k8s.list_helm_configmaps(namespace=namespace)
        else:
            objects = self.k8s.list_helm_secrets(namespace=namespace)

        latest: dict[tuple[str, str], tuple[int, Any]] = {}
        for obj in objects:
            name, ns, revision = storage_labels(obj)
            current = latest.get((name, ns))
            if current is None or revision > current[0]:
                latest[(name, ns)] = (revision, obj)

        releases: list[HelmRelease] = []
        for _, obj in latest.values():
            release = decode_storage_object(obj)
            if release:
                releases.append(release)

        releases.sort(key=lambda r: (r.namespace, r.name))
        return releases

    def list_package_releases(
        self,
        namespace: str | None = None,
        status: str | None = None,
    ) -> list[PackageRelease]:
        """List releases for version analysis.

        Raises CollectionError when the cluster cannot be read.
        """
        try:
            releases = self.list_releases(namespace=namespace)
        except K8S_ERRORS as e:
            raise CollectionError("helm releases", str(e)) from e

        packages = [PackageRelease.from_helm_release(r) for r in releases]
        if status:
            packages = [p for p in packages if p.status == status]
        logger.debug("Collected %d helm release(s) in %s", len(packages), namespace or "all namespaces")
        return packages
