"""Exceptions raised by kube-versions."""

from __future__ import annotations


class KubeVersionsError(Exception):
    """Base class for all kube-versions errors."""


class CollectionError(KubeVersionsError):
    """Listing workloads or releases from the cluster failed."""

    def __init__(self, source: str, detail: str):
        self.source = source
        self.detail = detail
        super().__init__(f"Failed to collect {source}: {detail}")


class LookupFailure(KubeVersionsError):
    """A chart registry lookup failed for a single chart."""

    def __init__(self, chart_name: str, detail: str):
        self.chart_name = chart_name
        self.detail = detail
        super().__init__(f"Chart lookup failed for {chart_name!r}: {detail}")
