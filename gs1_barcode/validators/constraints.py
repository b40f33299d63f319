"""
Composable constraint predicates for ValidatorConfig.

Each builder returns a plain callable `str -> bool`, so predicates can be
stored in a config, combined, and reused across many data structures.

    >>> lot_rule = all_of([matches(r"^[A-Za-z0-9]+$"), max_len(20)])
    >>> lot_rule("ABC123")
    True
    >>> lot_rule("ABC-123")
    False

Every primitive returns False for non-string values.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, List, Pattern, Union

from .validators import is_valid_date

Predicate = Callable[[str], bool]

_NUMERIC = re.compile(r"[0-9]+")


def _positive_int(n: int, name: str) -> None:
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise ValueError(f"{name} expects a positive integer, got {n!r}")


def is_num() -> Predicate:
    """Value consists of ASCII digits only."""
    def predicate(value: str) -> bool:
        return isinstance(value, str) and _NUMERIC.fullmatch(value) is not None
    return predicate


def length(n: int) -> Predicate:
    """Value has exactly `n` characters."""
    _positive_int(n, "length")

    def predicate(value: str) -> bool:
        return isinstance(value, str) and len(value) == n
    return predicate


def min_len(n: int) -> Predicate:
    _positive_int(n, "min_len")

    def predicate(value: str) -> bool:
        return isinstance(value, str) and len(value) >= n
    return predicate


def max_len(n: int) -> Predicate:
    _positive_int(n, "max_len")

    def predicate(value: str) -> bool:
        return isinstance(value, str) and len(value) <= n
    return predicate


def between(lower: int, upper: int) -> Predicate:
    """
    Value is an integer string within [lower, upper].
    """
    if not (isinstance(lower, int) and isinstance(upper, int)) or lower >= upper:
        raise ValueError(f"between expects integers with lower < upper, got {lower!r}, {upper!r}")

    def predicate(value: str) -> bool:
        if not isinstance(value, str) or _NUMERIC.fullmatch(value) is None:
            return False
        return lower <= int(value) <= upper
    return predicate


def matches(pattern: Union[str, Pattern[str]]) -> Predicate:
    """Value matches `pattern` (re.search semantics; anchor it yourself)."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def predicate(value: str) -> bool:
        return isinstance(value, str) and compiled.search(value) is not None
    return predicate


def date_yymmdd() -> Predicate:
    """Value is a real calendar date in YYMMDD form."""
    def predicate(value: str) -> bool:
        return isinstance(value, str) and is_valid_date(value, "YYMMDD")
    return predicate


def negate(inner: Predicate) -> Predicate:
    def predicate(value: str) -> bool:
        return not inner(value)
    return predicate


def all_of(predicates: Iterable[Predicate]) -> Predicate:
    """Logical AND of `predicates`."""
    checks: List[Predicate] = list(predicates)

    def predicate(value: str) -> bool:
        return all(check(value) for check in checks)
    return predicate


def any_of(predicates: Iterable[Predicate]) -> Predicate:
    """Logical OR of `predicates`."""
    checks: List[Predicate] = list(predicates)

    def predicate(value: str) -> bool:
        return any(check(value) for check in checks)
    return predicate
