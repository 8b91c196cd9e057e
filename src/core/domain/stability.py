"""Release stability levels.

Mirrors the stability flags understood in Composer manifests
(``minimum-stability`` and ``@<stability>`` suffixes).
"""

from __future__ import annotations

from enum import Enum


class Stability(str, Enum):
    """Stability levels, most stable first."""

    STABLE = "stable"
    RC = "RC"
    BETA = "beta"
    ALPHA = "alpha"
    DEV = "dev"

    @classmethod
    def default(cls) -> "Stability":
        """Return the stability assumed when a manifest does not set one."""

        return cls.STABLE

    @classmethod
    def parse(cls, value: str) -> "Stability | None":
        """Look up a stability by name, case-insensitively. ``None`` if unknown."""

        wanted = value.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None
