"""Application configuration and defaults.

Values come from the environment when set, otherwise from the same
locations Helm itself uses.
"""

from __future__ import annotations

import logging
import os
import platform
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r", name, raw)
        return default
    return value if value > 0 else default


def _user_dir(xdg_var: str, fallback: str) -> Path:
    """Per-user helm directory: %APPDATA% on Windows, XDG elsewhere."""
    if platform.system() == "Windows":
        appdata = os.environ.get("APPDATA", "")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
        return base / "helm"
    xdg = os.environ.get(xdg_var, "")
    return (Path(xdg) if xdg else Path.home() / fallback) / "helm"


def _default_helm_cache_dir() -> Path:
    """Repository cache directory, resolved in helm's own order."""
    repo_cache = os.environ.get("HELM_REPOSITORY_CACHE", "")
    if repo_cache:
        return Path(repo_cache)
    cache_home = os.environ.get("HELM_CACHE_HOME", "")
    if cache_home:
        return Path(cache_home) / "repository"
    if platform.system() == "Windows":
        temp = os.environ.get("TEMP", "")
        if temp and (Path(temp) / "helm" / "repository").exists():
            return Path(temp) / "helm" / "repository"
    return _user_dir("XDG_CACHE_HOME", ".cache") / "repository"


def _default_helm_config_dir() -> Path:
    config_home = os.environ.get("HELM_CONFIG_HOME", "")
    if config_home:
        return Path(config_home)
    return _user_dir("XDG_CONFIG_HOME", ".config")


def _default_storage_driver() -> str:
    driver = os.environ.get("HELM_DRIVER", "secrets").lower()
    # helm accepts the singular forms too
    if driver in ("configmap", "configmaps"):
        return "configmaps"
    return "secrets"


@dataclass
class Settings:
    helm_cache_dir: Path = field(default_factory=_default_helm_cache_dir)
    helm_config_dir: Path = field(default_factory=_default_helm_config_dir)
    storage_driver: str = field(default_factory=_default_storage_driver)
    helm_label_selector: str = "owner=helm"
    secret_type: str = "helm.sh/release.v1"
    lookup_workers: int = field(default_factory=lambda: _env_int("KUBE_VERSIONS_LOOKUP_WORKERS", 8))
    request_timeout: int = field(default_factory=lambda: _env_int("KUBE_VERSIONS_REQUEST_TIMEOUT", 30))
    log_level: str = field(default_factory=lambda: os.environ.get("KUBE_VERSIONS_LOG_LEVEL", "WARNING").upper())

    @property
    def repositories_file(self) -> Path:
        return self.helm_config_dir / "repositories.yaml"

    @property
    def index_cache_dir(self) -> Path:
        return self.helm_cache_dir


# Global singleton
settings = Settings()
