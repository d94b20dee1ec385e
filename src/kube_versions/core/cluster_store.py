"""Cluster-wide facts: server version, nodes and object counts."""

from __future__ import annotations

import logging

from kube_versions.core.errors import CollectionError
from kube_versions.core.k8s_client import K8S_ERRORS, K8sClient
from kube_versions.models.cluster import ClusterInfo, NodeInfo

logger = logging.getLogger(__name__)


class ClusterStore:
    def __init__(self, k8s: K8sClient):
        self.k8s = k8s

    def cluster_info(self) -> ClusterInfo:
        """Summarize the API server version, nodes, namespaces and totals.

        Raises CollectionError when the cluster cannot be read.
        """
        try:
            version = self.k8s.server_version()
            nodes = [NodeInfo.from_node(n) for n in self.k8s.list_nodes()]
            namespaces = [ns.metadata.name for ns in self.k8s.list_namespaces()]
            total_pods = len(self.k8s.list_pods())
            total_services = len(self.k8s.list_services())
        except K8S_ERRORS as e:
            raise CollectionError("cluster info", str(e)) from e

        logger.debug("Cluster %s has %d node(s)", version, len(nodes))
        return ClusterInfo(
            version=version,
            nodes=nodes,
            namespaces=namespaces,
            total_pods=total_pods,
            total_services=total_services,
        )
