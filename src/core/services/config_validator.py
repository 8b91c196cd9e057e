"""Structural validation of a parsed manifest.

`ConfigValidator` performs the checks every manifest must pass (name,
requirement maps, stability value) and is the extension point for stricter
validators: subclasses override `do_validate`, call the parent first and
append to the same `ValidationResult`.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from core.domain.models import Manifest, ValidationResult
from core.domain.stability import Stability

logger = logging.getLogger(__name__)

_PACKAGE_NAME_RE = re.compile(r"^[a-z0-9]([_.-]?[a-z0-9]+)*/[a-z0-9](([_.]?|-{0,2})[a-z0-9]+)*$")

REQUIREMENT_SECTIONS: tuple[str, ...] = ("require", "require-dev")


class ConfigValidator:
    """Base manifest validator (errors, publish errors and basic warnings)."""

    def validate(self, manifest: Manifest) -> ValidationResult:
        result = ValidationResult()
        self.do_validate(manifest, result)
        logger.debug(
            "%s: %d error(s), %d publish error(s), %d warning(s)",
            type(self).__name__,
            len(result.errors),
            len(result.publish_errors),
            len(result.warnings),
        )
        return result

    def do_validate(self, manifest: Manifest, result: ValidationResult) -> ValidationResult:
        self._check_name(manifest, result)

        if not manifest.get("description"):
            result.publish_errors.append("The property description is required")

        if not manifest.get("license"):
            result.warnings.append("No license specified, it is recommended to do so")

        for section in REQUIREMENT_SECTIONS:
            self._check_requirements(manifest, section, result)
        self._check_duplicate_requirements(manifest, result)

        stability = manifest.get("minimum-stability")
        if stability and (not isinstance(stability, str) or Stability.parse(stability) is None):
            allowed = ", ".join(s.value for s in Stability)
            result.errors.append(
                f"minimum-stability : invalid value ({stability}), must be one of {allowed}"
            )

        return result

    def _check_name(self, manifest: Manifest, result: ValidationResult) -> None:
        name = manifest.get("name")
        if not name:
            result.publish_errors.append("The property name is required")
            return
        if not isinstance(name, str):
            result.errors.append("name : must be a string")
            return

        if name != name.lower():
            result.warnings.append(
                f'Name "{name}" does not match the best practice (e.g. lower-cased/with dashes). '
                f'We suggest using "{name.lower()}" instead.'
            )
        if not _PACKAGE_NAME_RE.match(name.lower()):
            result.errors.append(
                f'name : "{name}" is invalid, it should have a vendor name, a forward slash, '
                "and a package name (e.g. vendor/package)"
            )

    def _check_requirements(self, manifest: Manifest, section: str, result: ValidationResult) -> None:
        requirements: Any = manifest.get(section)
        if requirements is None:
            return
        if not isinstance(requirements, dict):
            result.errors.append(f"{section} : must be an object mapping package names to constraints")
            return
        for target, constraint in requirements.items():
            if not isinstance(constraint, str):
                result.errors.append(f"{section}.{target} : constraint must be a string")

    def _check_duplicate_requirements(self, manifest: Manifest, result: ValidationResult) -> None:
        require = manifest.get("require")
        require_dev = manifest.get("require-dev")
        if not isinstance(require, dict) or not isinstance(require_dev, dict):
            return
        dev_names = {name.lower() for name in require_dev}
        for name in require:
            if name.lower() in dev_names:
                result.warnings.append(
                    f"{name} is required both in require and require-dev, "
                    "this can lead to unexpected behavior"
                )
