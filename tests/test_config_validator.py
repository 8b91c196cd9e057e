"""Tests for the base manifest validator."""

from __future__ import annotations

from core.interfaces.validator import ManifestValidator
from core.services.config_validator import ConfigValidator


def _validate(manifest):
    return ConfigValidator().validate(manifest)


def test_clean_manifest_has_no_messages(clean_manifest):
    result = _validate(clean_manifest)

    assert result.errors == []
    assert result.publish_errors == []
    assert result.warnings == []
    assert result.is_valid is True


def test_missing_name_and_description_are_publish_errors(clean_manifest):
    del clean_manifest["name"]
    del clean_manifest["description"]

    result = _validate(clean_manifest)

    assert result.publish_errors == [
        "The property name is required",
        "The property description is required",
    ]
    assert result.is_valid is True


def test_missing_license_warns(clean_manifest):
    del clean_manifest["license"]

    assert _validate(clean_manifest).warnings == ["No license specified, it is recommended to do so"]


def test_uppercase_name_warns_with_suggestion(clean_manifest):
    clean_manifest["name"] = "Acme/App"

    result = _validate(clean_manifest)

    assert result.errors == []
    assert len(result.warnings) == 1
    assert '"acme/app"' in result.warnings[0]


def test_name_without_vendor_is_error(clean_manifest):
    clean_manifest["name"] = "acme"

    result = _validate(clean_manifest)

    assert len(result.errors) == 1
    assert result.errors[0].startswith('name : "acme" is invalid')
    assert result.is_valid is False


def test_require_must_be_mapping(clean_manifest):
    clean_manifest["require"] = ["acme/lib"]

    assert _validate(clean_manifest).errors == [
        "require : must be an object mapping package names to constraints"
    ]


def test_non_string_constraint_is_error(clean_manifest):
    clean_manifest["require-dev"] = {"acme/tool": 1}

    assert _validate(clean_manifest).errors == ["require-dev.acme/tool : constraint must be a string"]


def test_package_in_require_and_require_dev_warns(clean_manifest):
    clean_manifest["require-dev"] = {"acme/lib": "^1.0"}

    warnings = _validate(clean_manifest).warnings

    assert warnings == [
        "acme/lib is required both in require and require-dev, this can lead to unexpected behavior"
    ]


def test_unknown_minimum_stability_is_error(clean_manifest):
    clean_manifest["minimum-stability"] = "unstable"

    result = _validate(clean_manifest)

    assert len(result.errors) == 1
    assert result.errors[0].startswith("minimum-stability : invalid value (unstable)")


def test_known_minimum_stability_is_accepted(clean_manifest):
    for value in ("stable", "RC", "rc", "beta", "alpha", "dev"):
        clean_manifest["minimum-stability"] = value
        assert _validate(clean_manifest).errors == []


def test_base_validator_satisfies_protocol():
    assert isinstance(ConfigValidator(), ManifestValidator)
