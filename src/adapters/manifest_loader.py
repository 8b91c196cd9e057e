"""Reads ``composer.json`` and builds the root package.

Scope:
- Loading is plain JSON; the result is the raw manifest mapping the
  validators inspect.
- Constraint strings are only tokenized (``,``/space separated
  ``<op><version>`` terms). Anything richer (``~``, ``^``, ``||``) is kept as
  an opaque ``==`` constraint with its original text.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from core.domain.constraints import EmptyConstraint, MultiConstraint, VersionConstraint
from core.domain.models import Link, Manifest, Package
from core.domain.stability import Stability
from core.errors import ManifestLoadError

logger = logging.getLogger(__name__)

ROOT_PACKAGE_NAME = "__root__"
ROOT_PACKAGE_VERSION = "1.0.0"

_TERM_RE = re.compile(r"\s*(?P<op>>=|<=|!=|==|<>|<|>|=)?\s*(?P<version>[^\s,]+)")


def load_manifest(path: Path) -> Manifest:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ManifestLoadError(path, "file not found") from None
    except OSError as exc:
        raise ManifestLoadError(path, f"cannot be read ({exc.strerror or exc})") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ManifestLoadError(path, f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc

    if not isinstance(data, dict):
        raise ManifestLoadError(path, "top-level value must be a JSON object")
    return data


def _parse_term(op: str | None, version: str, pretty: str) -> VersionConstraint:
    # Stability flags ("1.0@dev") do not take part in comparisons.
    bare = version.split("@", 1)[0] or version
    return VersionConstraint(operator=op or "==", version=bare, pretty=pretty)


def _opaque(pretty: str) -> VersionConstraint:
    return VersionConstraint(operator="==", version=pretty, pretty=pretty)


def parse_constraint(text: str) -> VersionConstraint | MultiConstraint | EmptyConstraint:
    """Turn a requirement string into a constraint object."""

    pretty = text.strip()
    if pretty in ("", "*"):
        return EmptyConstraint(pretty=pretty or "*")
    if "|" in pretty or " - " in pretty:
        return _opaque(pretty)

    terms = [
        _parse_term(match.group("op"), match.group("version"), match.group(0).strip())
        for match in _TERM_RE.finditer(pretty)
    ]
    if not terms:
        return _opaque(pretty)
    if len(terms) == 1:
        return terms[0]
    return MultiConstraint(constraints=tuple(terms), pretty=pretty)


def _build_links(source: str, requirements: Any, description: str) -> list[Link]:
    if not isinstance(requirements, dict):
        return []

    links: list[Link] = []
    for target, constraint in requirements.items():
        # Non-string constraints are reported by ConfigValidator.
        if not isinstance(constraint, str):
            continue
        links.append(
            Link(
                source=source,
                target=target,
                constraint=parse_constraint(constraint),
                description=description,
                pretty_constraint=constraint,
            )
        )
    return links


def build_root_package(manifest: Manifest) -> Package:
    """Build the root `Package` described by ``manifest``."""

    name = manifest.get("name")
    if not isinstance(name, str) or not name:
        name = ROOT_PACKAGE_NAME

    version = manifest.get("version")
    if not isinstance(version, str) or not version:
        version = ROOT_PACKAGE_VERSION

    stability = manifest.get("minimum-stability")
    extra = manifest.get("extra")

    package = Package(
        name=name,
        version=version,
        requires=_build_links(name, manifest.get("require"), "requires"),
        dev_requires=_build_links(name, manifest.get("require-dev"), "requires (for development)"),
        minimum_stability=str(stability) if stability else Stability.default().value,
        extra=extra if isinstance(extra, dict) else {},
    )
    for link in package.requires + package.dev_requires:
        logger.debug("loaded link: %s", link.pretty_string())
    return package
