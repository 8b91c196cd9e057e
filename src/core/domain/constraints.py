"""Version constraint variants.

A link carries exactly one constraint. Constraints are read-only values with
three capabilities shared by every variant:

- ``pretty_string()``: the human readable form (what the user wrote).
- ``flatten()``: the ordered list of simple parts (a singleton for simple
  constraints).
- ``matches(version)``: whether a concrete version satisfies it.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.versions import compare_versions, normalize_operator

Operator = Literal["==", "!=", "<", "<=", ">", ">="]

LOWER_BOUND_OPERATORS: frozenset[str] = frozenset({">", ">="})
UPPER_BOUND_OPERATORS: frozenset[str] = frozenset({"<", "<="})


class VersionConstraint(BaseModel):
    """Simple constraint: one operator applied to one version."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["version"] = "version"
    operator: Operator = Field(
        ...,
        description="Comparison operator (aliases such as 'ge' or '=' are normalized).",
    )
    version: str = Field(
        ...,
        min_length=1,
        description="Version or branch name the operator is applied to.",
    )
    pretty: str | None = Field(
        default=None,
        description="Original text of the constraint, if it came from a manifest.",
    )

    @field_validator("operator", mode="before")
    @classmethod
    def _normalize_operator(cls, value: object) -> object:
        if isinstance(value, str):
            return normalize_operator(value)
        return value

    def pretty_string(self) -> str:
        if self.pretty:
            return self.pretty
        return f"{self.operator} {self.version}"

    def flatten(self) -> list["VersionConstraint"]:
        return [self]

    def matches(self, version: str) -> bool:
        return compare_versions(version, self.version, self.operator)

    def is_lower_bound(self) -> bool:
        return self.operator in LOWER_BOUND_OPERATORS

    def is_upper_bound(self) -> bool:
        return self.operator in UPPER_BOUND_OPERATORS


class MultiConstraint(BaseModel):
    """Conjunction of simple constraints, kept in declaration order."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["multi"] = "multi"
    constraints: tuple[VersionConstraint, ...] = Field(
        ...,
        min_length=1,
        description="Sub-constraints; all of them must match.",
    )
    pretty: str | None = Field(default=None)

    def pretty_string(self) -> str:
        if self.pretty:
            return self.pretty
        return ",".join(c.pretty_string() for c in self.constraints)

    def flatten(self) -> list[VersionConstraint]:
        return list(self.constraints)

    def matches(self, version: str) -> bool:
        return all(c.matches(version) for c in self.constraints)


class EmptyConstraint(BaseModel):
    """Matches any version (``*``). Carries no operator."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["empty"] = "empty"
    pretty: str | None = Field(default=None)

    def pretty_string(self) -> str:
        return self.pretty or "*"

    def flatten(self) -> list["EmptyConstraint"]:
        return [self]

    def matches(self, version: str) -> bool:
        return True

    def is_lower_bound(self) -> bool:
        return False

    def is_upper_bound(self) -> bool:
        return False


Constraint = Annotated[
    Union[VersionConstraint, MultiConstraint, EmptyConstraint],
    Field(discriminator="kind"),
]
