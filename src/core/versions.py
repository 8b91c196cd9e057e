"""Version string comparison.

Follows the precedence rules of PHP's ``version_compare`` (the rules Composer
manifests are written against):

- ``-``, ``_``, ``+`` and any other non-alphanumeric character separate
  segments; a separator is also implied between digits and letters
  (``1.0rc1`` -> ``1.0.rc.1``).
- Numeric segments compare numerically.
- Tags compare as ``<other> < dev < alpha = a < beta = b < RC = rc < # < pl = p``
  where ``#`` stands for any number.

Two ``dev-`` branch names have no ordering: only identity is defined.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable

OPERATORS: tuple[str, ...] = ("==", "!=", "<", "<=", ">", ">=")

_OPERATOR_ALIASES: dict[str, str] = {
    "=": "==",
    "eq": "==",
    "<>": "!=",
    "ne": "!=",
    "lt": "<",
    "le": "<=",
    "gt": ">",
    "ge": ">=",
}

# Prefix-matched in order, so "a" catches anything starting with "a".
_SPECIAL_FORMS: tuple[tuple[str, int], ...] = (
    ("dev", 0),
    ("alpha", 1),
    ("a", 1),
    ("beta", 2),
    ("b", 2),
    ("RC", 3),
    ("rc", 3),
    ("#", 4),
    ("pl", 5),
    ("p", 5),
)
_UNKNOWN_FORM = -6
_NUMBER_FORM = "#"


def normalize_operator(operator: str) -> str:
    """Map an operator (or one of its aliases) to its canonical spelling."""

    op = operator.strip()
    op = _OPERATOR_ALIASES.get(op.lower(), op)
    if op not in OPERATORS:
        raise ValueError(f"Unsupported version operator: {operator!r}")
    return op


def _canonicalize(version: str) -> list[str]:
    out: list[str] = []
    for ch in version:
        if not ch.isalnum():
            if out and out[-1] != ".":
                out.append(".")
            continue
        if out and out[-1] != "." and ch.isdigit() != out[-1].isdigit():
            out.append(".")
        out.append(ch)
    return [segment for segment in "".join(out).split(".") if segment]


def _special_rank(segment: str) -> int:
    for name, rank in _SPECIAL_FORMS:
        if segment.startswith(name):
            return rank
    return _UNKNOWN_FORM


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _compare_segments(a: str, b: str) -> int:
    a_num, b_num = a.isdigit(), b.isdigit()
    if a_num and b_num:
        return _sign(int(a) - int(b))
    if a_num:
        a = _NUMBER_FORM
    if b_num:
        b = _NUMBER_FORM
    return _sign(_special_rank(a) - _special_rank(b))


def _compare_tail(segment: str) -> int:
    """Compare the first unmatched segment of the longer version to nothing."""

    if segment.isdigit():
        return 1
    return _compare_segments(segment, _NUMBER_FORM)


def version_cmp(a: str, b: str) -> int:
    """Three-way comparison of two version strings (-1, 0 or 1)."""

    if not a or not b:
        return _sign(len(a) - len(b)) if (a or b) else 0

    left, right = _canonicalize(a), _canonicalize(b)
    for x, y in zip(left, right):
        result = _compare_segments(x, y)
        if result:
            return result

    if len(left) > len(right):
        return _compare_tail(left[len(right)])
    if len(right) > len(left):
        return -_compare_tail(right[len(left)])
    return 0


def compare_versions(a: str, b: str, operator: str) -> bool:
    """Compare ``a`` and ``b`` with ``operator``.

    Two ``dev-`` versions are only ever equal to themselves: the result is
    true iff the operator is ``==`` and the strings are identical, any other
    operator yields false.
    """

    # Checked before normalization: only the literal "==" is meaningful here.
    if a.startswith("dev-") and b.startswith("dev-"):
        return operator == "==" and a == b

    op = normalize_operator(operator)
    result = version_cmp(a, b)
    if op == "==":
        return result == 0
    if op == "!=":
        return result != 0
    if op == "<":
        return result < 0
    if op == "<=":
        return result <= 0
    if op == ">":
        return result > 0
    return result >= 0


def sort_versions(versions: Iterable[str]) -> list[str]:
    """Return ``versions`` in ascending order."""

    return sorted(versions, key=cmp_to_key(version_cmp))
