"""Constraint fragments for the field-level validator.

Each builder maps one schema keyword to a declarative fragment consumed by
``schema_types.validation``. Fragments are plain dicts and never influence
which runtime type is produced.
"""

from typing import TypeAlias, Any

ConstraintFragment: TypeAlias = dict[str, Any]


def inclusion(values) -> ConstraintFragment:
    return {"inclusion": list(values)}


def string_minimum(n: int) -> ConstraintFragment:
    return {"minimum": n}


def string_maximum(n: int) -> ConstraintFragment:
    return {"maximum": n}


def pattern(value: str, message: str | None = None) -> ConstraintFragment:
    if message:
        return {"format": value, "message": message}
    return {"format": value}


def lower_bound(n, exclusive: bool = False) -> ConstraintFragment:
    return {"greaterThan": n} if exclusive else {"greaterThanOrEqualTo": n}


def upper_bound(n, exclusive: bool = False) -> ConstraintFragment:
    return {"lessThan": n} if exclusive else {"lessThanOrEqualTo": n}


def only_integer() -> ConstraintFragment:
    return {"onlyInteger": True}


def min_items(n: int) -> ConstraintFragment:
    return {"length": {"minimum": n}}


def max_items(n: int) -> ConstraintFragment:
    return {"length": {"maximum": n}}


def with_presence(fragment) -> ConstraintFragment:
    """Mark a fragment as required, overwriting any existing ``presence`` key.

    Union fragments are per-alternative sequences and cannot be merged into a
    mapping; a required union field only keeps the presence rule.
    """
    if isinstance(fragment, dict):
        return {**fragment, "presence": True}
    return {"presence": True}
