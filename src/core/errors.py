"""Domain exceptions.

Why dedicated types:
- The linter itself never raises; loader failures need a type the CLI can
  map to exit code 2 without catching unrelated errors.

Note: a malformed constraint is not an error, it is kept opaque.
"""

from __future__ import annotations

from pathlib import Path


class ManifestLintError(Exception):
    """Base error for manifest-lint."""


class ManifestLoadError(ManifestLintError):
    """The manifest file could not be read or is not a JSON object."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
