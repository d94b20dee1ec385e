"""List running workloads and the images they run."""

from __future__ import annotations

import logging

from kube_versions.core.errors import CollectionError
from kube_versions.core.k8s_client import K8S_ERRORS, K8sClient
from kube_versions.models.workload import WorkloadInstance

logger = logging.getLogger(__name__)


class WorkloadStore:
    def __init__(self, k8s: K8sClient):
        self.k8s = k8s

    def list_workloads(
        self,
        namespace: str | None = None,
        selector: str | None = None,
    ) -> list[WorkloadInstance]:
        """List pods as workload snapshots, in API order.

        Raises CollectionError when the cluster cannot be read.
        """
        try:
            pods = self.k8s.list_pods(namespace=namespace, label_selector=selector)
        except K8S_ERRORS as e:
            raise CollectionError("pods", str(e)) from e

        workloads = [WorkloadInstance.from_pod(p) for p in pods]
        logger.debug("Collected %d pod(s) in %s", len(workloads), namespace or "all namespaces")
        return workloads
