"""Chart metadata and registry models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ChartMetadata:
    name: str = ""
    version: str = ""
    app_version: str = ""

    @classmethod
    def from_dict(cls, d: dict) -> ChartMetadata:
        if not d:
            return cls()
        return cls(
            name=d.get("name", ""),
            version=d.get("version", ""),
            app_version=d.get("appVersion", ""),
        )


@dataclass
class ChartVersion:
    """One published version of a chart in a repository index."""

    version: str
    app_version: str = ""
    repo_name: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "version": self.version,
            "appVersion": self.app_version,
            "repo": self.repo_name,
        }
