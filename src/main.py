"""Script entry point.

Why it exists:
- `python -m main` from `src/` runs the CLI without an editable install.
- Installed copies use the `manifest-lint` script instead (same `run`).
"""

from __future__ import annotations

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
