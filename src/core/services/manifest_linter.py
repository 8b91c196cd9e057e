"""Best-practice linting of a manifest and its requirement links.

`ManifestLinter` decorates `ConfigValidator`: errors and publish errors come
from the base checks unchanged, and the linter appends advisory warnings:

1. missing ``extra.branch-alias``;
2. ``minimum-stability`` set to anything other than ``stable``;
3. per requirement link (in input order): no upper bound, use of ``*``,
   use of ``dev-master``.

The linter reads the links it is given and never mutates them.
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Iterable, Sequence

from core.domain.models import Link, Manifest, Package, Pool, ValidationResult
from core.domain.stability import Stability
from core.services.config_validator import ConfigValidator
from core.versions import compare_versions, version_cmp

logger = logging.getLogger(__name__)

BRANCH_ALIAS_WARNING = (
    "Provide a branch alias to make it easier for developers to reference "
    "development versions of this package"
)
MINIMUM_STABILITY_WARNING = (
    "For production applications, minimum stability should be set to stable "
    "with individual dependencies flagged as unstable as required."
)
UPPER_BOUND_WARNING = (
    "{target}: Missing an upper bound to the constraint; See 'The Next Significant Release' - "
    "http://getcomposer.org/doc/01-basic-usage.md#package-versions"
)
STAR_WARNING = (
    "{target}: The use of * is discouraged and may lead to inconsistent or unexpected results. "
    "Use a more specific version constraint."
)
DEV_MASTER_WARNING = (
    "{target}: The use of dev-master is discouraged as it may not mean the latest development copy. "
    "Use a more specific version constraint."
)


def merge_required_links(package: Package, *, include_dev: bool = True) -> list[Link]:
    """Run-time then dev requirements, one link per target (first one wins)."""

    links = list(package.requires)
    if include_dev:
        links.extend(package.dev_requires)

    seen: set[str] = set()
    merged: list[Link] = []
    for link in links:
        key = link.target.lower()
        if key in seen:
            continue
        seen.add(key)
        merged.append(link)
    return merged


def get_latest_package(packages: Iterable[Package]) -> Package | None:
    """Highest-versioned package of ``packages`` (``None`` when empty)."""

    candidates = list(packages)
    if not candidates:
        return None
    return max(candidates, key=cmp_to_key(lambda a, b: version_cmp(a.version, b.version)))


class ManifestLinter(ConfigValidator):
    """Extended validator producing best-practice warnings.

    Args:
        root_package: package whose requirements are linted when `validate`
            is called without explicit links.
        pool: optional package pool used by `latest_for`.
        include_dev: whether dev requirements are linted too.
    """

    compare_versions = staticmethod(compare_versions)

    def __init__(
        self,
        root_package: Package | None = None,
        *,
        pool: Pool | None = None,
        include_dev: bool = True,
    ) -> None:
        self._root_package = root_package
        self._pool = pool
        self._include_dev = include_dev

    def required_links(self) -> list[Link]:
        if self._root_package is None:
            return []
        return merge_required_links(self._root_package, include_dev=self._include_dev)

    def validate(
        self,
        manifest: Manifest,
        required_links: Sequence[Link] | None = None,
        result: ValidationResult | None = None,
    ) -> ValidationResult:
        """Validate ``manifest`` and append the linter warnings.

        When ``result`` is given the base checks are skipped: its errors and
        publish errors pass through unchanged and the linter warnings are
        appended after its own warnings. ``result`` itself is not modified.
        """

        if result is None:
            result = super().validate(manifest)
        else:
            result = result.model_copy(deep=True)

        links = self.required_links() if required_links is None else list(required_links)
        result.warnings.extend(self.lint(manifest, links))
        return result

    def lint(self, manifest: Manifest, required_links: Iterable[Link]) -> list[str]:
        """Warnings only: manifest-level first, then per link in input order."""

        warnings: list[str] = []

        extra = manifest.get("extra")
        if not isinstance(extra, dict) or extra.get("branch-alias") is None:
            warnings.append(BRANCH_ALIAS_WARNING)

        stability = manifest.get("minimum-stability")
        if stability and stability != Stability.STABLE.value:
            warnings.append(MINIMUM_STABILITY_WARNING)

        for link in required_links:
            warnings.extend(self.lint_link(link))

        for warning in warnings:
            logger.debug("lint warning: %s", warning)
        return warnings

    def lint_link(self, link: Link) -> list[str]:
        """Constraint warnings for a single link (zero to three)."""

        has_lower = has_upper = has_star = has_master = False

        for constraint in link.constraint.flatten():
            pretty = constraint.pretty_string().lower()
            if "*" in pretty:
                has_star = True
            elif "dev-master" in pretty:
                has_master = True

            if constraint.is_lower_bound():
                has_lower = True
            if constraint.is_upper_bound():
                has_upper = True

        warnings: list[str] = []
        if has_lower and not has_upper:
            warnings.append(UPPER_BOUND_WARNING.format(target=link.target))
        if has_star:
            warnings.append(STAR_WARNING.format(target=link.target))
        if has_master:
            warnings.append(DEV_MASTER_WARNING.format(target=link.target))
        return warnings

    def latest_for(self, link: Link) -> Package | None:
        """Latest package in the pool satisfying ``link`` (``None`` without a pool)."""

        if self._pool is None:
            return None
        return get_latest_package(self._pool.what_provides(link.target, link.constraint))
