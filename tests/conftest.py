"""Shared fixtures for the manifest-lint test-suite."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable

import pytest

from core.domain.constraints import EmptyConstraint, MultiConstraint, VersionConstraint
from core.domain.models import Link


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no MANIFEST_LINT_* variables."""

    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.upper().startswith("MANIFEST_LINT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    def _write(data: dict[str, Any], name: str = "composer.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def clean_manifest() -> dict[str, Any]:
    """A manifest that passes every check."""

    return {
        "name": "acme/app",
        "description": "Demo application",
        "license": "MIT",
        "require": {"acme/lib": ">=1.0,<2.0"},
        "extra": {"branch-alias": {"dev-master": "1.0.x-dev"}},
    }


def simple(operator: str, version: str) -> VersionConstraint:
    return VersionConstraint(operator=operator, version=version, pretty=f"{operator}{version}")


def link(target: str, constraint: Any, source: str = "acme/app") -> Link:
    return Link(source=source, target=target, constraint=constraint, description="requires")


def star() -> EmptyConstraint:
    return EmptyConstraint()


def multi(*parts: VersionConstraint) -> MultiConstraint:
    return MultiConstraint(constraints=parts)
