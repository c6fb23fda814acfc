from __future__ import annotations

from typing import List, Sequence

from genapi.errors import LengthMismatchError, UnsupportedKernelError
from shared.scalar_functions import ComparisonFunction, Predicate, scalar_predicate
from shared.scalar_types import ScalarKind, ScalarKindError


def _resolve(
    fn: ComparisonFunction | str, kind: ScalarKind | str
) -> tuple[ComparisonFunction, ScalarKind, Predicate]:
    try:
        if not isinstance(fn, ComparisonFunction):
            fn = ComparisonFunction.from_name(fn)
        if not isinstance(kind, ScalarKind):
            kind = ScalarKind.from_suffix(kind)
        return fn, kind, scalar_predicate(fn, kind)
    except ScalarKindError as exc:
        raise UnsupportedKernelError(str(exc)) from exc


def _require_same(kind: ScalarKind) -> tuple:
    if not kind.has_additive_identity:
        raise UnsupportedKernelError(
            f"{kind.type_name} has no same-type indicator kernels"
        )
    return kind.zero, kind.one


def _check_lengths(a: Sequence[object], b: Sequence[object]) -> None:
    if len(a) != len(b):
        raise LengthMismatchError(len(a), len(b))


def compare_array_array(
    fn: ComparisonFunction | str,
    kind: ScalarKind | str,
    a: Sequence[object],
    b: Sequence[object],
) -> List[bool]:
    _, _, predicate = _resolve(fn, kind)
    _check_lengths(a, b)
    return [bool(predicate(x, y)) for x, y in zip(a, b)]


def compare_array_scalar(
    fn: ComparisonFunction | str,
    kind: ScalarKind | str,
    a: Sequence[object],
    b: object,
) -> List[bool]:
    _, _, predicate = _resolve(fn, kind)
    return [bool(predicate(x, b)) for x in a]


def compare_array_array_same(
    fn: ComparisonFunction | str,
    kind: ScalarKind | str,
    a: Sequence[object],
    b: Sequence[object],
) -> List[object]:
    _, kind, predicate = _resolve(fn, kind)
    zero, one = _require_same(kind)
    _check_lengths(a, b)
    return [one if predicate(x, y) else zero for x, y in zip(a, b)]


def compare_array_scalar_same(
    fn: ComparisonFunction | str,
    kind: ScalarKind | str,
    a: Sequence[object],
    b: object,
) -> List[object]:
    _, kind, predicate = _resolve(fn, kind)
    zero, one = _require_same(kind)
    return [one if predicate(x, b) else zero for x in a]


__all__ = [
    "compare_array_array",
    "compare_array_array_same",
    "compare_array_scalar",
    "compare_array_scalar_same",
]
