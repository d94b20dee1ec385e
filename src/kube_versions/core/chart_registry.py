"""Published chart versions from the local Helm repository cache."""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path

import yaml

from kube_versions.config.settings import settings
from kube_versions.core.errors import LookupFailure
from kube_versions.models.chart import ChartVersion
from kube_versions.utils.version_compare import chart_version_sort_key, is_prerelease

logger = logging.getLogger(__name__)

# Prefer the C-accelerated YAML loader when available (~10x faster).
_YamlLoader = getattr(yaml, "CSafeLoader", yaml.SafeLoader)

# {chart_name: [{"version": ..., "appVersion": ...}, ...]}
LightIndex = dict[str, list[dict[str, str]]]


def _mtime(path: Path) -> float | None:
    try:
        return path.stat().st_mtime
    except OSError:
        return None


class ChartRegistry:
    """Looks up chart versions in ``helm repo update`` index files.

    Only repositories already added to helm and refreshed locally are
    searched; nothing is fetched over the network.  Parsed files are kept
    in memory until their modification time changes.
    """

    def __init__(self, repositories_file: Path | None = None, index_dir: Path | None = None):
        self.repositories_file = repositories_file or settings.repositories_file
        self.index_dir = index_dir or settings.index_cache_dir
        self._lock = threading.Lock()
        self._index_locks: dict[Path, threading.Lock] = {}
        self._repos: tuple[float | None, dict[str, str]] | None = None
        self._indexes: dict[Path, tuple[float | None, LightIndex | LookupFailure]] = {}

    def lookup_chart_versions(self, chart_name: str) -> list[ChartVersion]:
        """Return every known version of ``chart_name``, newest first.

        Pre-releases are left out, as ``helm search repo`` does without
        ``--devel``.  An unknown chart yields an empty list.  Raises
        LookupFailure when the repository list or an index file exists but
        cannot be read.
        """
        seen: set[str] = set()
        found: list[ChartVersion] = []
        for repo_name in self.repositories():
            index_path = self.index_dir / f"{repo_name}-index.yaml"
            if not index_path.exists():
                continue
            for entry in self._load_index(index_path).get(chart_name, []):
                version = entry.get("version", "")
                if not version or version in seen or is_prerelease(version):
                    continue
                seen.add(version)
                found.append(ChartVersion(
                    version=version,
                    app_version=entry.get("appVersion", ""),
                    repo_name=repo_name,
                ))

        found.sort(key=lambda cv: chart_version_sort_key(cv.version), reverse=True)
        return found

    def repositories(self) -> dict[str, str]:
        """Repo name -> URL mapping from repositories.yaml."""
        mtime = _mtime(self.repositories_file)
        with self._lock:
            if self._repos is None or self._repos[0] != mtime:
                self._repos = (mtime, self._read_repositories())
            return self._repos[1]

    def _read_repositories(self) -> dict[str, str]:
        if not self.repositories_file.exists():
            logger.debug("No helm repositories file at %s", self.repositories_file)
            return {}
        try:
            data = yaml.safe_load(self.repositories_file.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise LookupFailure(self.repositories_file.name, f"unreadable repository list: {e}") from e
        if not isinstance(data, dict) or not data.get("repositories"):
            return {}
        return {
            r["name"]: r["url"]
            for r in data["repositories"]
            if isinstance(r, dict) and "name" in r and "url" in r
        }

    def _load_index(self, index_path: Path) -> LightIndex:
        mtime = _mtime(index_path)
        # parsing is serialized per index file, not across the registry
        with self._lock:
            path_lock = self._index_locks.setdefault(index_path, threading.Lock())
        with path_lock:
            cached = self._indexes.get(index_path)
            if cached is None or cached[0] != mtime:
                try:
                    cached = (mtime, _read_index(index_path))
                except LookupFailure as e:
                    cached = (mtime, e)
                self._indexes[index_path] = cached
        if isinstance(cached[1], LookupFailure):
            raise cached[1]
        return cached[1]


# ---------------------------------------------------------------------------
# Lightweight JSON sidecar cache for index.yaml files
#
# Helm repo index files can be 25+ MB of YAML.  Even the C loader takes
# seconds to parse them, so only {chart_name: [{version, appVersion}]} is
# kept in a small JSON file next to the index.  The sidecar is regenerated
# whenever the source index.yaml is newer.
# ---------------------------------------------------------------------------

def _sidecar_path(index_path: Path) -> Path:
    return index_path.with_suffix(".json")


def _sidecar_is_fresh(index_path: Path, sidecar: Path) -> bool:
    """True if the sidecar exists and is at least as new as the index."""
    try:
        return sidecar.stat().st_mtime >= index_path.stat().st_mtime
    except OSError:
        return False


def _read_index(index_path: Path) -> LightIndex:
    sidecar = _sidecar_path(index_path)
    if _sidecar_is_fresh(index_path, sidecar):
        try:
            return json.loads(sidecar.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.debug("Corrupt sidecar %s, rebuilding", sidecar, exc_info=True)
    return _build_sidecar(index_path)


def _build_sidecar(index_path: Path) -> LightIndex:
    """Parse the full YAML index once and write the JSON sidecar."""
    try:
        data = yaml.load(index_path.read_text(encoding="utf-8"), Loader=_YamlLoader)
    except (OSError, yaml.YAMLError) as e:
        raise LookupFailure(index_path.name, f"unreadable index: {e}") from e
    if not isinstance(data, dict) or not isinstance(data.get("entries"), dict):
        raise LookupFailure(index_path.name, "index has no entries")

    lightweight: LightIndex = {}
    for chart_name, chart_entries in data["entries"].items():
        lightweight[chart_name] = [
            {"version": str(e.get("version", "")), "appVersion": str(e.get("appVersion", "") or "")}
            for e in chart_entries or []
            if isinstance(e, dict) and "version" in e
        ]

    sidecar = _sidecar_path(index_path)
    try:
        sidecar.write_text(json.dumps(lightweight), encoding="utf-8")
    except OSError:
        logger.debug("Could not write sidecar cache %s", sidecar, exc_info=True)

    return lightweight
