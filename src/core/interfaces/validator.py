"""Manifest validator contract.

Why Protocol:
- Structural typing: the base validator and the linter satisfy it without
  a shared abstract base.
- The CLI and tests can swap in any object with a `validate` method.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Manifest, ValidationResult


@runtime_checkable
class ManifestValidator(Protocol):
    """Minimal contract for a manifest validator.

    Rules:
    - `validate` is synchronous and side-effect free.
    - It never raises for missing optional fields; problems become messages
      in the returned `ValidationResult`.
    """

    def validate(self, manifest: Manifest) -> ValidationResult:
        """Validate a parsed manifest and return the collected messages."""

        ...
