from __future__ import annotations

import operator
from enum import Enum
from typing import Callable

from shared.scalar_types import ScalarKind, ScalarKindError

Predicate = Callable[[object, object], bool]


class ComparisonFunction(str, Enum):
    def __new__(
        cls, value: str, symbol: str, fn: Predicate, ordering: bool
    ) -> "ComparisonFunction":
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.symbol = symbol
        obj.fn = fn
        obj.ordering = ordering
        return obj

    EQ = ("eq", "==", operator.eq, False)
    NE = ("ne", "!=", operator.ne, False)
    GT = ("gt", ">", operator.gt, True)
    GTE = ("gte", ">=", operator.ge, True)
    LT = ("lt", "<", operator.lt, True)
    LTE = ("lte", "<=", operator.le, True)

    @classmethod
    def from_name(cls, name: str) -> "ComparisonFunction":
        normalized = name.lower()
        aliases = {"ge": "gte", "le": "lte"}
        normalized = aliases.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ScalarKindError(f"unknown comparison function: {name}") from exc


# Opaque pointers compare by identity, never by value.
_POINTER_PREDICATES = {
    ComparisonFunction.EQ: operator.is_,
    ComparisonFunction.NE: operator.is_not,
}


def supports(fn: ComparisonFunction, kind: ScalarKind) -> bool:
    if fn.ordering:
        return kind.orderable
    return kind.equatable


def scalar_predicate(fn: ComparisonFunction, kind: ScalarKind) -> Predicate:
    if not supports(fn, kind):
        raise ScalarKindError(
            f"{kind.type_name} does not support {fn.value} ({fn.symbol})"
        )
    if kind.is_pointer:
        return _POINTER_PREDICATES[fn]
    return fn.fn


__all__ = [
    "ComparisonFunction",
    "Predicate",
    "scalar_predicate",
    "supports",
]
