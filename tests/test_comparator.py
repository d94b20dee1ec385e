"""Tests for direct two-version comparison."""

from kube_versions.core.comparator import compare_versions
from kube_versions.models import Comparison


class TestCompareVersions:
    def test_same(self):
        result = compare_versions("x", "1.0.0", "1.0.0")
        assert result.comparison == Comparison.SAME
        assert result.recommendation == "Versions are identical (1.0.0)"
        assert result.breaking_changes == []
        assert len(result.migration_steps) == 3

    def test_older_suggests_upgrade(self):
        result = compare_versions("redis", "6.2.0", "7.0.0")
        assert result.comparison == Comparison.OLDER
        assert "Upgrade recommended from 6.2.0 to 7.0.0" == result.recommendation
        assert len(result.migration_steps) == 7
        assert result.migration_steps[3].startswith("4.")
        assert result.migration_steps[-1].startswith("7.")

    def test_newer_warns(self):
        result = compare_versions("redis", "7.2.0", "7.0.0")
        assert result.comparison == Comparison.NEWER
        assert "newer than 7.0.0" in result.recommendation
        assert len(result.migration_steps) == 3

    def test_major_jump_lists_breaking_changes(self):
        result = compare_versions("postgres", "13.4", "v15.1")
        assert len(result.breaking_changes) == 3
        assert "13.4 -> v15.1" in result.breaking_changes[0]

    def test_minor_jump_has_no_breaking_changes(self):
        assert compare_versions("postgres", "15.1", "15.4").breaking_changes == []

    def test_downgrade_across_major_has_no_breaking_changes(self):
        assert compare_versions("postgres", "15.1", "13.0").breaking_changes == []

    def test_non_string_input_is_invalid(self):
        result = compare_versions("app", None, "1.0.0")
        assert result.comparison == Comparison.INVALID
        assert result.recommendation.startswith("Cannot compare")
        assert result.breaking_changes == ["Could not determine breaking changes"]
        assert len(result.migration_steps) == 3

    def test_to_dict_uses_camel_case(self):
        data = compare_versions("x", "1.0.0", "2.0.0").to_dict()
        assert data["currentVersion"] == "1.0.0"
        assert data["targetVersion"] == "2.0.0"
        assert data["comparison"] == "older"
        assert "breakingChanges" in data
        assert "migrationSteps" in data
