"""kube-versions: outdated component analysis for Kubernetes clusters."""

__version__ = "0.1.0"
