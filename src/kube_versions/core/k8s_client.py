"""Kubernetes API wrapper."""

from __future__ import annotations

from typing import Any

from kubernetes import client, config
from kubernetes.client import ApiException
from urllib3.exceptions import HTTPError

from kube_versions.config.settings import settings

# Failures talking to the API server that end a listing call
K8S_ERRORS = (ApiException, config.ConfigException, HTTPError, OSError)


class K8sClient:
    """Lazily configured access to the core/v1 API."""

    def __init__(self, context: str | None = None):
        self.context = context
        self._core_v1: client.CoreV1Api | None = None
        self._api_client: client.ApiClient | None = None

    def _load_config(self) -> client.ApiClient:
        if self._api_client is not None:
            return self._api_client
        try:
            cfg = client.Configuration()
            config.load_kube_config(
                context=self.context,
                client_configuration=cfg,
            )
            # Prevent indefinite hangs on unreachable clusters
            cfg.retries = 1
            if not cfg.connection_pool_maxsize:
                cfg.connection_pool_maxsize = 4
            self._api_client = client.ApiClient(configuration=cfg)
        except config.ConfigException:
            config.load_incluster_config()
            self._api_client = client.ApiClient()
        return self._api_client

    @property
    def core_v1(self) -> client.CoreV1Api:
        if self._core_v1 is None:
            self._core_v1 = client.CoreV1Api(api_client=self._load_config())
        return self._core_v1

    def list_pods(
        self, namespace: str | None = None, label_selector: str | None = None,
    ) -> list[Any]:
        """List pods in one namespace, or across all when ``namespace`` is None."""
        kwargs: dict[str, Any] = {"_request_timeout": settings.request_timeout}
        if label_selector:
            kwargs["label_selector"] = label_selector
        if namespace:
            result = self.core_v1.list_namespaced_pod(namespace=namespace, **kwargs)
        else:
            result = self.core_v1.list_pod_for_all_namespaces(**kwargs)
        return result.items

    def list_helm_secrets(self, namespace: str | None = None) -> list[Any]:
        """List Helm release storage secrets."""
        kwargs: dict[str, Any] = {
            "label_selector": settings.helm_label_selector,
            "field_selector": f"type={settings.secret_type}",
            "_request_timeout": settings.request_timeout,
        }
        if namespace:
            result = self.core_v1.list_namespaced_secret(namespace=namespace, **kwargs)
        else:
            result = self.core_v1.list_secret_for_all_namespaces(**kwargs)
        return result.items

    def list_helm_configmaps(self, namespace: str | None = None) -> list[Any]:
        """List Helm release storage ConfigMaps."""
        kwargs: dict[str, Any] = {
            "label_selector": settings.helm_label_selector,
            "_request_timeout": settings.request_timeout,
        }
        if namespace:
            result = self.core_v1.list_namespaced_config_map(namespace=namespace, **kwargs)
        else:
            result = self.core_v1.list_config_map_for_all_namespaces(**kwargs)
        return result.items

    def server_version(self) -> str:
        """API server ``gitVersion``, e.g. ``v1.29.2``."""
        info = client.VersionApi(api_client=self._load_config()).get_code(
            _request_timeout=settings.request_timeout,
        )
        return info.git_version or ""

    def list_nodes(self) -> list[Any]:
        return self.core_v1.list_node(_request_timeout=settings.request_timeout).items

    def list_namespaces(self) -> list[Any]:
        return self.core_v1.list_namespace(_request_timeout=settings.request_timeout).items

    def list_services(self) -> list[Any]:
        return self.core_v1.list_service_for_all_namespaces(_request_timeout=settings.request_timeout).items
