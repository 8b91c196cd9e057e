"""Tests for manifest loading and root package building."""

from __future__ import annotations

import pytest

from adapters.manifest_loader import (
    ROOT_PACKAGE_NAME,
    build_root_package,
    load_manifest,
    parse_constraint,
)
from core.domain.constraints import EmptyConstraint, MultiConstraint, VersionConstraint
from core.errors import ManifestLoadError
from core.services.manifest_linter import (
    BRANCH_ALIAS_WARNING,
    DEV_MASTER_WARNING,
    STAR_WARNING,
    UPPER_BOUND_WARNING,
    ManifestLinter,
)


# ------------------------------------------------------------------
# parse_constraint
# ------------------------------------------------------------------


@pytest.mark.parametrize("text", ["*", "", "  "])
def test_star_and_empty_are_empty_constraints(text):
    constraint = parse_constraint(text)

    assert isinstance(constraint, EmptyConstraint)
    assert constraint.pretty_string() == "*"


def test_comma_separated_range_is_multi():
    constraint = parse_constraint(">=1.0,<2.0")

    assert isinstance(constraint, MultiConstraint)
    assert [c.operator for c in constraint.flatten()] == [">=", "<"]
    assert [c.version for c in constraint.flatten()] == ["1.0", "2.0"]
    assert constraint.pretty_string() == ">=1.0,<2.0"


def test_space_separated_range_is_multi():
    constraint = parse_constraint(">= 1.0 < 2.0")

    assert [c.operator for c in constraint.flatten()] == [">=", "<"]


def test_bare_version_is_exact_match():
    constraint = parse_constraint("dev-master")

    assert isinstance(constraint, VersionConstraint)
    assert constraint.operator == "=="
    assert constraint.version == "dev-master"
    assert constraint.matches("dev-master") is True


def test_operator_aliases_are_normalized():
    assert parse_constraint("<>1.0").operator == "!="
    assert parse_constraint("=1.0").operator == "=="


def test_unsupported_syntax_is_kept_opaque():
    tilde = parse_constraint("~1.2")
    alternatives = parse_constraint("1.0 || 2.0")

    assert (tilde.operator, tilde.version) == ("==", "~1.2")
    assert isinstance(alternatives, VersionConstraint)
    assert alternatives.pretty_string() == "1.0 || 2.0"


def test_stability_flag_is_dropped_from_version():
    constraint = parse_constraint("1.0@dev")

    assert constraint.version == "1.0"
    assert constraint.pretty_string() == "1.0@dev"


# ------------------------------------------------------------------
# load_manifest
# ------------------------------------------------------------------


def test_load_manifest_reads_object(write_manifest, clean_manifest):
    path = write_manifest(clean_manifest)

    assert load_manifest(path) == clean_manifest


def test_load_manifest_missing_file(tmp_path):
    with pytest.raises(ManifestLoadError, match="file not found"):
        load_manifest(tmp_path / "missing.json")


def test_load_manifest_invalid_json(tmp_path):
    path = tmp_path / "composer.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ManifestLoadError, match="invalid JSON"):
        load_manifest(path)


def test_load_manifest_rejects_non_object(tmp_path):
    path = tmp_path / "composer.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ManifestLoadError, match="JSON object"):
        load_manifest(path)


# ------------------------------------------------------------------
# build_root_package
# ------------------------------------------------------------------


def test_build_root_package_links_in_manifest_order():
    package = build_root_package(
        {
            "name": "acme/app",
            "require": {"php": ">=7.4", "acme/lib": "^1.0", "acme/bad": 3},
            "require-dev": {"phpunit/phpunit": "*"},
            "minimum-stability": "dev",
        }
    )

    assert package.name == "acme/app"
    assert [l.target for l in package.requires] == ["php", "acme/lib"]
    assert [l.target for l in package.dev_requires] == ["phpunit/phpunit"]
    assert package.dev_requires[0].description == "requires (for development)"
    assert package.requires[0].pretty_constraint == ">=7.4"
    assert package.minimum_stability == "dev"


def test_build_root_package_defaults():
    package = build_root_package({"extra": "not-a-mapping"})

    assert package.name == ROOT_PACKAGE_NAME
    assert package.version == "1.0.0"
    assert package.requires == []
    assert package.extra == {}
    assert package.minimum_stability == "stable"


def test_loaded_manifest_lints_end_to_end(write_manifest, clean_manifest):
    clean_manifest["require"] = {"php": ">=7.4", "acme/lib": "dev-master"}
    clean_manifest["require-dev"] = {"phpunit/phpunit": "*"}
    manifest = load_manifest(write_manifest(clean_manifest))

    result = ManifestLinter(build_root_package(manifest)).validate(manifest)

    assert result.errors == []
    assert result.warnings == [
        UPPER_BOUND_WARNING.format(target="php"),
        DEV_MASTER_WARNING.format(target="acme/lib"),
        STAR_WARNING.format(target="phpunit/phpunit"),
    ]


@pytest.mark.parametrize("text", [",", " , ", ",,"])
def test_separator_only_constraint_is_kept_opaque(text):
    constraint = parse_constraint(text)

    assert isinstance(constraint, VersionConstraint)
    assert constraint.operator == "=="
    assert constraint.pretty_string() == text.strip()


def test_separator_only_requirement_still_builds_package():
    package = build_root_package({"name": "acme/app", "require": {"acme/lib": ","}})

    assert [l.target for l in package.requires] == ["acme/lib"]
    assert ManifestLinter(package).lint({}, package.requires) == [BRANCH_ALIAS_WARNING]


def test_hyphen_range_is_kept_opaque():
    constraint = parse_constraint("1.0 - 2.0")

    assert isinstance(constraint, VersionConstraint)
    assert (constraint.operator, constraint.version) == ("==", "1.0 - 2.0")
