"""Domain models (Pydantic v2).

These models describe *what* a package and its requirements are, not how they
were read. The loader in ``adapters.manifest_loader`` builds them from a
``composer.json`` mapping; tests build them directly.
"""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.constraints import Constraint, EmptyConstraint
from core.domain.stability import Stability

Manifest = dict[str, Any]


class Link(BaseModel):
    """Dependency edge from a requiring package to a target package name."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(
        ...,
        min_length=1,
        description="Name of the package that declares the requirement.",
    )
    target: str = Field(
        ...,
        min_length=1,
        description="Name of the required package.",
    )
    constraint: Constraint = Field(
        default_factory=EmptyConstraint,
        description="Version constraint the target must satisfy.",
    )
    description: str = Field(
        default="relates to",
        description="Kind of link ('requires', 'requires (for development)', ...).",
    )
    pretty_constraint: str | None = Field(
        default=None,
        description="Constraint exactly as written in the manifest.",
    )

    def pretty_string(self) -> str:
        constraint = self.pretty_constraint or self.constraint.pretty_string()
        return f"{self.source} {self.description} {self.target} ({constraint})"


class Package(BaseModel):
    """A package version together with its declared requirements."""

    name: str = Field(
        ...,
        min_length=1,
        description="Package name, usually 'vendor/package'.",
    )
    version: str = Field(
        default="1.0.0",
        min_length=1,
        description="Version used for comparisons.",
    )
    pretty_version: str | None = Field(
        default=None,
        description="Version as displayed to users.",
    )
    requires: list[Link] = Field(default_factory=list)
    dev_requires: list[Link] = Field(default_factory=list)
    minimum_stability: str = Field(
        default=Stability.STABLE.value,
        description="Raw 'minimum-stability' value (not validated here).",
    )
    extra: dict[str, Any] = Field(default_factory=dict)


class ValidationResult(BaseModel):
    """Ordered messages produced by a validation run."""

    errors: list[str] = Field(
        default_factory=list,
        description="Problems that make the manifest invalid.",
    )
    publish_errors: list[str] = Field(
        default_factory=list,
        description="Problems that only matter when publishing the package.",
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Advisory messages; never block anything.",
    )

    @property
    def is_valid(self) -> bool:
        return not self.errors


class Repository(BaseModel):
    """Ordered collection of packages."""

    name: str = Field(default="array")
    packages: list[Package] = Field(default_factory=list)

    def find_packages(self, name: str) -> list[Package]:
        wanted = name.lower()
        return [p for p in self.packages if p.name.lower() == wanted]


class Pool:
    """Aggregates repositories for package lookups.

    Repositories are searched in the order they were added.
    """

    def __init__(self, repositories: Iterable[Repository] = ()) -> None:
        self._repositories: list[Repository] = []
        for repository in repositories:
            self.add_repository(repository)

    def add_repository(self, repository: Repository) -> None:
        self._repositories.append(repository)

    def what_provides(self, name: str, constraint: Constraint | None = None) -> list[Package]:
        """Packages named ``name`` whose version satisfies ``constraint``."""

        found: list[Package] = []
        for repository in self._repositories:
            for package in repository.find_packages(name):
                if constraint is None or constraint.matches(package.version):
                    found.append(package)
        return found
