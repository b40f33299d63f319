"""
GS1 Data Structure Rule Validator

Runs an ordered pipeline of checks over a decoded DataStructure:

1. required AIs present
2. forbidden AIs absent
3. check digits of AIs that carry one (00, 01, 02)
4. YYMMDD dates of AIs that carry one (11, 12, 13, 15, 17)
5. custom per-AI constraint predicates

By default every stage runs and all violations are collected. With
`fail_fast` every stage after the first is skipped as soon as any error
exists. The first stage always runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from ..core.ai_registry import DEFAULT_REGISTRY, AIRegistry
from ..core.data_structure import DataStructure
from .constraints import Predicate
from .validators import is_valid_check_digit, is_valid_date

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Validation error codes."""
    INVALID_CHECK_DIGIT = "invalid_check_digit"
    INVALID_DATE = "invalid_date"
    MISSING_AI = "missing_ai"
    FORBIDDEN_AI = "forbidden_ai"
    CONSTRAINT_VIOLATION = "constraint_violation"


@dataclass(frozen=True)
class ValidationError:
    """A single rule violation."""
    kind: ErrorKind
    ai: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {'kind': self.kind.value, 'ai': self.ai, 'message': self.message}


@dataclass(frozen=True)
class ValidationReport:
    """
    Outcome of validating one DataStructure.

    `valid` is True only when `errors` is empty.
    """
    errors: Tuple[ValidationError, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.valid

    def to_dict(self) -> Dict[str, Any]:
        return {
            'valid': self.valid,
            'errors': [e.to_dict() for e in self.errors],
        }


def _ai_tuple(ais: Iterable[str], name: str) -> Tuple[str, ...]:
    if isinstance(ais, str):
        raise TypeError(f"{name} must be an iterable of AI strings, not a string")
    items = tuple(ais)
    for ai in items:
        if not isinstance(ai, str):
            raise TypeError(f"{name} entries must be strings, got {ai!r}")
    return items


@dataclass(frozen=True)
class ValidatorConfig:
    """
    Rules used to validate a DataStructure.

    Configs are immutable; the builder methods return new configs, so one
    config can be built once and shared:

        config = (
            ValidatorConfig(fail_fast=True)
            .add_required_ai("01")
            .add_constraint("10", max_len(20))
        )

    Attributes:
        fail_fast: Stop after the first stage that produced errors
        required_ais: AIs that must be present
        forbidden_ais: AIs that must not be present
        constraints: AI -> predicate over that AI's data
    """
    fail_fast: bool = False
    required_ais: Tuple[str, ...] = ()
    forbidden_ais: Tuple[str, ...] = ()
    constraints: Mapping[str, Predicate] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.fail_fast, bool):
            raise TypeError("fail_fast must be a bool")
        object.__setattr__(self, "required_ais", _ai_tuple(self.required_ais, "required_ais"))
        object.__setattr__(self, "forbidden_ais", _ai_tuple(self.forbidden_ais, "forbidden_ais"))

        constraints = dict(self.constraints)
        for ai, predicate in constraints.items():
            if not isinstance(ai, str) or not callable(predicate):
                raise TypeError(f"constraint for {ai!r} must map an AI string to a callable")
        object.__setattr__(self, "constraints", MappingProxyType(constraints))

    def __hash__(self) -> int:
        return hash((
            self.fail_fast,
            self.required_ais,
            self.forbidden_ais,
            frozenset(self.constraints.items()),
        ))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ValidatorConfig":
        """
        Build a config from plain data (e.g. loaded JSON).

        Only `fail_fast`, `required_ais` and `forbidden_ais` are read;
        predicates cannot be expressed as data.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"config data must be a mapping, got {type(data).__name__}")
        return cls(
            fail_fast=data.get('fail_fast', False),
            required_ais=data.get('required_ais', ()),
            forbidden_ais=data.get('forbidden_ais', ()),
        )

    # builder

    def with_fail_fast(self, fail_fast: bool) -> "ValidatorConfig":
        return replace(self, fail_fast=fail_fast)

    def with_required_ais(self, ais: Iterable[str]) -> "ValidatorConfig":
        """Replace the required AIs."""
        return replace(self, required_ais=ais)

    def add_required_ai(self, ai: str) -> "ValidatorConfig":
        return replace(self, required_ais=self.required_ais + (ai,))

    def with_forbidden_ais(self, ais: Iterable[str]) -> "ValidatorConfig":
        """Replace the forbidden AIs."""
        return replace(self, forbidden_ais=ais)

    def add_forbidden_ai(self, ai: str) -> "ValidatorConfig":
        return replace(self, forbidden_ais=self.forbidden_ais + (ai,))

    def with_constraints(self, constraints: Mapping[str, Predicate]) -> "ValidatorConfig":
        """Replace all constraints."""
        return replace(self, constraints=dict(constraints))

    def add_constraint(self, ai: str, predicate: Predicate) -> "ValidatorConfig":
        """Add (or replace) the constraint for `ai`."""
        constraints = dict(self.constraints)
        constraints[ai] = predicate
        return replace(self, constraints=constraints)


Stage = Callable[[DataStructure, ValidatorConfig], List[ValidationError]]


class Validator:
    """
    Validator bound to an AI registry.

    Stateless between calls; one instance can serve many threads.
    """

    def __init__(self, registry: Optional[AIRegistry] = None):
        self.registry = registry or DEFAULT_REGISTRY
        self._stages: List[Tuple[str, Stage]] = [
            ("required", self._check_required),
            ("forbidden", self._check_forbidden),
            ("check_digit", self._check_digits),
            ("date", self._check_dates),
            ("constraints", self._check_constraints),
        ]

    def validate(self, ds: DataStructure, config: ValidatorConfig) -> ValidationReport:
        errors: List[ValidationError] = []

        for name, stage in self._stages:
            if errors and config.fail_fast:
                logger.debug("fail_fast: skipping stage %s", name)
                continue
            found = stage(ds, config)
            if found:
                logger.debug("Stage %s: %d error(s)", name, len(found))
            errors.extend(found)

        return ValidationReport(errors=tuple(errors))

    # stages

    def _check_required(self, ds: DataStructure, config: ValidatorConfig) -> List[ValidationError]:
        return [
            ValidationError(
                kind=ErrorKind.MISSING_AI,
                ai=ai,
                message=f'Missing required AI: "{ai}"',
            )
            for ai in config.required_ais
            if ai not in ds.ais
        ]

    def _check_forbidden(self, ds: DataStructure, config: ValidatorConfig) -> List[ValidationError]:
        return [
            ValidationError(
                kind=ErrorKind.FORBIDDEN_AI,
                ai=ai,
                message=f'Forbidden AI found: "{ai}"',
            )
            for ai in config.forbidden_ais
            if ai in ds.ais
        ]

    def _check_digits(self, ds: DataStructure, config: ValidatorConfig) -> List[ValidationError]:
        return [
            ValidationError(
                kind=ErrorKind.INVALID_CHECK_DIGIT,
                ai=ai,
                message=f'Invalid check digit in AI: "{ai}"',
            )
            for ai in sorted(self.registry.check_digit_ais())
            if ai in ds.ais and not is_valid_check_digit(ds.ais[ai])
        ]

    def _check_dates(self, ds: DataStructure, config: ValidatorConfig) -> List[ValidationError]:
        return [
            ValidationError(
                kind=ErrorKind.INVALID_DATE,
                ai=ai,
                message=f'Invalid date in AI: "{ai}"',
            )
            for ai in sorted(self.registry.date_ais())
            if ai in ds.ais and not is_valid_date(ds.ais[ai], "YYMMDD")
        ]

    def _check_constraints(self, ds: DataStructure, config: ValidatorConfig) -> List[ValidationError]:
        errors = []
        for ai, predicate in config.constraints.items():
            # Constraints never imply presence
            if ai not in ds.ais:
                continue
            if not predicate(ds.ais[ai]):
                errors.append(ValidationError(
                    kind=ErrorKind.CONSTRAINT_VIOLATION,
                    ai=ai,
                    message=f'Constraint check failed in AI: "{ai}"',
                ))
        return errors


_DEFAULT_VALIDATOR = Validator()


def validate(ds: DataStructure, config: Optional[ValidatorConfig] = None) -> ValidationReport:
    """
    Validate a decoded DataStructure against `config`.

    With no config only the check digit and date stages can produce errors.
    """
    return _DEFAULT_VALIDATOR.validate(ds, config or ValidatorConfig())
