"""Running workload models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from kube_versions.utils.age import format_age


@dataclass(frozen=True)
class WorkloadInstance:
    name: str
    namespace: str
    images: tuple[str, ...] = ()
    labels: Mapping[str, str] = field(default_factory=dict)
    phase: str = ""
    node: str = ""
    ready: str = "0/0"
    restarts: int = 0
    created: datetime | None = None
    annotations: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_pod(cls, pod: Any) -> WorkloadInstance:
        """Build from a kubernetes ``V1Pod``.

        Container images come first, then init containers, each image
        listed once.  Readiness and restarts count regular containers only.
        """
        meta = pod.metadata
        spec = pod.spec
        status = pod.status
        images: dict[str, None] = {}
        if spec is not None:
            for container in list(spec.containers or []) + list(spec.init_containers or []):
                if container.image:
                    images.setdefault(container.image, None)

        statuses = list(getattr(status, "container_statuses", None) or [])
        ready = sum(1 for s in statuses if s.ready)
        return cls(
            name=meta.name or "",
            namespace=meta.namespace or "",
            images=tuple(images),
            labels=dict(meta.labels or {}),
            phase=(status.phase or "") if status else "",
            node=(spec.node_name or "") if spec else "",
            ready=f"{ready}/{len(statuses)}",
            restarts=sum(s.restart_count or 0 for s in statuses),
            created=getattr(meta, "creation_timestamp", None),
            annotations=dict(getattr(meta, "annotations", None) or {}),
        )

    @property
    def age(self) -> str:
        return format_age(self.created)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "namespace": self.namespace,
            "status": self.phase,
            "ready": self.ready,
            "restarts": self.restarts,
            "age": self.age,
            "node": self.node,
            "images": list(self.images),
            "labels": dict(self.labels),
            "annotations": dict(self.annotations),
        }
