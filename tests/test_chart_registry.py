"""Tests for chart version lookups against the local Helm cache."""

import json
import os
import threading

import pytest
import yaml

from conftest import FakeReleases, FakeWorkloads
from kube_versions.core import chart_registry
from kube_versions.core.analyzer import VersionAnalyzer
from kube_versions.core.chart_registry import ChartRegistry
from kube_versions.core.errors import LookupFailure
from kube_versions.models import ComponentStatus
from kube_versions.models.release import PackageRelease


def _write_repos(path, names):
    path.write_text(yaml.safe_dump({
        "apiVersion": "",
        "repositories": [{"name": n, "url": f"https://charts.example.com/{n}"} for n in names],
    }))


def _write_index(cache_dir, repo, entries):
    index = cache_dir / f"{repo}-index.yaml"
    index.write_text(yaml.safe_dump({"apiVersion": "v1", "entries": entries}))
    return index


@pytest.fixture
def helm_dirs(tmp_path):
    config_dir = tmp_path / "config"
    cache_dir = tmp_path / "cache"
    config_dir.mkdir()
    cache_dir.mkdir()
    return config_dir / "repositories.yaml", cache_dir


def _registry(helm_dirs) -> ChartRegistry:
    repos_file, cache_dir = helm_dirs
    return ChartRegistry(repositories_file=repos_file, index_dir=cache_dir)


class TestLookupChartVersions:
    def test_newest_first(self, helm_dirs):
        repos_file, cache_dir = helm_dirs
        _write_repos(repos_file, ["bitnami"])
        _write_index(cache_dir, "bitnami", {
            "nginx": [
                {"version": "15.4.4", "appVersion": "1.25.2"},
                {"version": "15.10.0", "appVersion": "1.25.3"},
                {"version": "15.5.1", "appVersion": "1.25.3"},
            ],
        })

        versions = _registry(helm_dirs).lookup_chart_versions("nginx")

        assert [v.version for v in versions] == ["15.10.0", "15.5.1", "15.4.4"]
        assert versions[0].app_version == "1.25.3"
        assert versions[0].repo_name == "bitnami"

    def test_merges_repos_without_duplicates(self, helm_dirs):
        repos_file, cache_dir = helm_dirs
        _write_repos(repos_file, ["a", "b"])
        _write_index(cache_dir, "a", {"redis": [{"version": "1.0.0"}]})
        _write_index(cache_dir, "b", {"redis": [{"version": "1.0.0"}, {"version": "2.0.0"}]})

        versions = _registry(helm_dirs).lookup_chart_versions("redis")

        assert [(v.version, v.repo_name) for v in versions] == [("2.0.0", "b"), ("1.0.0", "a")]

    def test_unknown_chart_is_empty(self, helm_dirs):
        repos_file, cache_dir = helm_dirs
        _write_repos(repos_file, ["a"])
        _write_index(cache_dir, "a", {"redis": [{"version": "1.0.0"}]})
        assert _registry(helm_dirs).lookup_chart_versions("nginx") == []

    def test_no_repositories_file(self, helm_dirs):
        assert _registry(helm_dirs).lookup_chart_versions("nginx") == []

    def test_missing_index_is_skipped(self, helm_dirs):
        repos_file, _ = helm_dirs
        _write_repos(repos_file, ["never-updated"])
        assert _registry(helm_dirs).lookup_chart_versions("nginx") == []

    def test_corrupt_index_raises_lookup_failure(self, helm_dirs):
        repos_file, cache_dir = helm_dirs
        _write_repos(repos_file, ["broken"])
        (cache_dir / "broken-index.yaml").write_text("entries: [unclosed")

        registry = _registry(helm_dirs)
        with pytest.raises(LookupFailure):
            registry.lookup_chart_versions("nginx")
        # the failure is remembered until the file changes
        with pytest.raises(LookupFailure):
            registry.lookup_chart_versions("redis")

    def test_corrupt_repositories_file_raises_lookup_failure(self, helm_dirs):
        repos_file, _ = helm_dirs
        repos_file.write_text("repositories: [unclosed")
        with pytest.raises(LookupFailure):
            _registry(helm_dirs).lookup_chart_versions("nginx")

    def test_writes_json_sidecar(self, helm_dirs):
        repos_file, cache_dir = helm_dirs
        _write_repos(repos_file, ["a"])
        _write_index(cache_dir, "a", {"redis": [{"version": "1.0.0", "appVersion": "7.0", "digest": "abc"}]})

        _registry(helm_dirs).lookup_chart_versions("redis")

        sidecar = json.loads((cache_dir / "a-index.json").read_text())
        assert sidecar == {"redis": [{"version": "1.0.0", "appVersion": "7.0"}]}

    def test_fresh_sidecar_is_used(self, helm_dirs):
        repos_file, cache_dir = helm_dirs
        _write_repos(repos_file, ["a"])
        index = _write_index(cache_dir, "a", {"redis": [{"version": "1.0.0"}]})
        sidecar = cache_dir / "a-index.json"
        sidecar.write_text(json.dumps({"redis": [{"version": "9.9.9", "appVersion": ""}]}))
        stat = index.stat()
        os.utime(sidecar, (stat.st_atime, stat.st_mtime + 10))

        versions = _registry(helm_dirs).lookup_chart_versions("redis")

        assert [v.version for v in versions] == ["9.9.9"]

    def test_reloads_after_index_changes(self, helm_dirs):
        repos_file, cache_dir = helm_dirs
        _write_repos(repos_file, ["a"])
        index = _write_index(cache_dir, "a", {"redis": [{"version": "1.0.0"}]})
        registry = _registry(helm_dirs)
        assert [v.version for v in registry.lookup_chart_versions("redis")] == ["1.0.0"]

        _write_index(cache_dir, "a", {"redis": [{"version": "1.0.0"}, {"version": "1.1.0"}]})
        stat = index.stat()
        os.utime(index, (stat.st_atime, stat.st_mtime + 100))

        assert [v.version for v in registry.lookup_chart_versions("redis")] == ["1.1.0", "1.0.0"]

    def test_prereleases_are_skipped(self, helm_dirs):
        repos_file, cache_dir = helm_dirs
        _write_repos(repos_file, ["a"])
        _write_index(cache_dir, "a", {"nginx": [
            {"version": "2.0.0-rc.1"},
            {"version": "1.5.0"},
            {"version": "1.6.0-beta"},
            {"version": "1.4.0+build-7"},
        ]})

        versions = _registry(helm_dirs).lookup_chart_versions("nginx")

        assert [v.version for v in versions] == ["1.5.0", "1.4.0+build-7"]

    def test_only_prereleases_is_empty(self, helm_dirs):
        repos_file, cache_dir = helm_dirs
        _write_repos(repos_file, ["a"])
        _write_index(cache_dir, "a", {"nginx": [{"version": "2.0.0-alpha.1"}]})
        assert _registry(helm_dirs).lookup_chart_versions("nginx") == []

    def test_indexes_parse_concurrently(self, helm_dirs, monkeypatch):
        repos_file, cache_dir = helm_dirs
        _write_repos(repos_file, ["a", "b"])
        _write_index(cache_dir, "a", {"redis": [{"version": "1.0.0"}]})
        _write_index(cache_dir, "b", {"redis": [{"version": "2.0.0"}]})
        registry = _registry(helm_dirs)
        barrier = threading.Barrier(2, timeout=5)
        real_read = chart_registry._read_index

        def _read_both_at_once(path):
            # deadlocks (BrokenBarrierError) if index parsing is serialized
            barrier.wait()
            return real_read(path)

        monkeypatch.setattr(chart_registry, "_read_index", _read_both_at_once)
        errors = []

        def _load(name):
            try:
                registry._load_index(cache_dir / f"{name}-index.yaml")
            except threading.BrokenBarrierError as e:
                errors.append(e)

        threads = [threading.Thread(target=_load, args=(n,)) for n in ("a", "b")]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []


class TestAnalyzerWithRegistry:
    def test_release_candidate_is_not_latest(self, helm_dirs):
        repos_file, cache_dir = helm_dirs
        _write_repos(repos_file, ["bitnami"])
        _write_index(cache_dir, "bitnami", {"nginx": [{"version": "1.5.0"}, {"version": "2.0.0-rc.1"}]})
        analyzer = VersionAnalyzer(
            workloads=FakeWorkloads(),
            releases=FakeReleases([
                PackageRelease(name="web", namespace="default", chart="nginx-1.5.0", status="deployed"),
            ]),
            registry=_registry(helm_dirs),
            max_workers=1,
        )

        [component] = analyzer.analyze_versions().components

        assert component.latest_version == "1.5.0"
        assert component.status == ComponentStatus.UP_TO_DATE
        assert component.update_available is False
