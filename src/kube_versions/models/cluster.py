"""Cluster-level version facts: API server and nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from kube_versions.utils.age import format_age

_ROLE_PREFIX = "node-role.kubernetes.io/"


@dataclass(frozen=True)
class NodeInfo:
    name: str
    status: str = "NotReady"
    roles: tuple[str, ...] = ("worker",)
    created: datetime | None = None
    kubelet_version: str = ""
    os: str = ""
    kernel: str = ""
    container_runtime: str = ""

    @classmethod
    def from_node(cls, node: Any) -> NodeInfo:
        """Build from a kubernetes ``V1Node``.

        Roles come from ``node-role.kubernetes.io/<role>`` labels; a node
        without any is a ``worker``.
        """
        meta = node.metadata
        status = node.status
        info = getattr(status, "node_info", None)
        conditions = list(getattr(status, "conditions", None) or [])
        ready = any(c.type == "Ready" and c.status == "True" for c in conditions)
        roles = tuple(
            label[len(_ROLE_PREFIX):]
            for label in (meta.labels or {})
            if label.startswith(_ROLE_PREFIX) and label[len(_ROLE_PREFIX):]
        )
        return cls(
            name=meta.name or "",
            status="Ready" if ready else "NotReady",
            roles=roles or ("worker",),
            created=getattr(meta, "creation_timestamp", None),
            kubelet_version=(info.kubelet_version or "") if info else "",
            os=f"{info.operating_system or ''} {info.os_image or ''}".strip() if info else "",
            kernel=(info.kernel_version or "") if info else "",
            container_runtime=(info.container_runtime_version or "") if info else "",
        )

    @property
    def age(self) -> str:
        return format_age(self.created)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status,
            "roles": list(self.roles),
            "age": self.age,
            "version": self.kubelet_version,
            "os": self.os,
            "kernel": self.kernel,
            "containerRuntime": self.container_runtime,
        }


@dataclass
class ClusterInfo:
    version: str
    nodes: list[NodeInfo] = field(default_factory=list)
    namespaces: list[str] = field(default_factory=list)
    total_pods: int = 0
    total_services: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "nodes": [n.to_dict() for n in self.nodes],
            "namespaces": list(self.namespaces),
            "totalPods": self.total_pods,
            "totalServices": self.total_services,
        }
