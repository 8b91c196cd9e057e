"""JSON export of a validation result.

Why JSON:
- CI jobs and dashboards consume the report without parsing Rich output.
- Stable key order and UTF-8 so two runs can be diffed.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.domain.models import ValidationResult


def result_to_payload(result: ValidationResult) -> dict[str, Any]:
    payload = result.model_dump(mode="json")
    payload["valid"] = result.is_valid
    return payload


def render_result_json(result: ValidationResult) -> str:
    return json.dumps(result_to_payload(result), ensure_ascii=False, indent=2, sort_keys=True)


def export_result_json(*, result: ValidationResult, output_path: Path) -> Path:
    """Write `ValidationResult` to ``output_path`` as UTF-8 JSON."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_result_json(result) + "\n", encoding="utf-8")
    return output_path
