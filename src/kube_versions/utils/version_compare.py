"""Version string parsing and comparison utilities."""

from __future__ import annotations

import re
from dataclasses import dataclass

from packaging.version import Version, InvalidVersion

_LEADING_DIGITS = re.compile(r"\s*\+?(\d+)", re.ASCII)


@dataclass(frozen=True)
class ParsedVersion:
    """Numeric parts of a version string.

    ``opaque`` is set when the string was not purely dotted integers
    (``latest``, ``1.25rc1``, a commit hash...).  The parts are still
    zero-filled so opaque versions stay comparable.
    """

    parts: tuple[int, ...]
    opaque: bool = False

    @property
    def major(self) -> int:
        return self.parts[0] if self.parts else 0

    @property
    def minor(self) -> int:
        return self.parts[1] if len(self.parts) > 1 else 0


@dataclass(frozen=True)
class ImageRef:
    name: str
    version: str


def parse_version(version: str | None) -> ParsedVersion:
    """Parse a free-form version string into numeric parts, never raising.

    One leading ``v``/``V`` is dropped and everything after the first ``-``
    (pre-release or build suffix) is ignored.  Segments contribute their
    leading digits; a segment without any becomes 0.
    """
    if not isinstance(version, str):
        return ParsedVersion(parts=(), opaque=True)

    clean = version[1:] if version[:1] in ("v", "V") else version
    clean = clean.split("-", 1)[0]
    if not clean:
        return ParsedVersion(parts=(), opaque=True)

    parts: list[int] = []
    opaque = False
    for segment in clean.split("."):
        if not (segment.isascii() and segment.isdigit()):
            opaque = True
        match = _LEADING_DIGITS.match(segment)
        parts.append(int(match.group(1)) if match else 0)
    return ParsedVersion(parts=tuple(parts), opaque=opaque)


def compare_parts(a: tuple[int, ...] | list[int], b: tuple[int, ...] | list[int]) -> int:
    """Compare two part sequences, most significant first.

    Missing trailing parts count as 0, so ``(1, 2)`` equals ``(1, 2, 0)``.
    """
    for i in range(max(len(a), len(b))):
        left = a[i] if i < len(a) else 0
        right = b[i] if i < len(b) else 0
        if left < right:
            return -1
        if left > right:
            return 1
    return 0


def split_image(image: str) -> ImageRef:
    """Split ``registry:port/repo:tag`` into name and tag.

    Only the last ``:`` separates the tag, so registry ports survive in the
    name.  Untagged references report ``latest``.
    """
    parts = image.split(":")
    if len(parts) < 2:
        return ImageRef(name=image, version="latest")
    return ImageRef(name=":".join(parts[:-1]), version=parts[-1] or "latest")


def is_prerelease(version: str) -> bool:
    """True for SemVer pre-releases such as ``2.0.0-rc.1``.

    Build metadata after ``+`` is ignored, so ``1.0.0+build-7`` is a release.
    """
    return "-" in version.split("+", 1)[0]


def chart_version_sort_key(v: str) -> tuple[int, Version | tuple[int, ...]]:
    """Sort key ordering chart versions oldest to newest.

    PEP 440 parseable versions sort above anything that only parses
    loosely, since Helm chart versions are required to be SemVer.
    """
    try:
        return (1, Version(v[1:] if v[:1] in ("v", "V") else v))
    except InvalidVersion:
        return (0, parse_version(v).parts)
