from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


class Arity(str, Enum):
    UNARY = "unary"
    BINARY = "binary"


class ResultKind(str, Enum):
    BOOLS = "Bools"
    SAME = "Same"


class Shape(str, Enum):
    ARRAY_ARRAY = "DD"
    ARRAY_SCALAR = "DS"


@dataclass(frozen=True)
class OperatorDescriptor:
    internal_name: str
    public_name: str
    arity: Arity
    needs_result_flag: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OperatorDescriptor):
            return NotImplemented
        return self.internal_name == other.internal_name

    def __hash__(self) -> int:
        return hash(self.internal_name)


@dataclass(frozen=True)
class _OpSpec:
    name: str
    arity: Arity
    opcode: int
    comparison: str | None = None
    orderable: bool = False
    result_kinds: frozenset = field(
        default_factory=lambda: frozenset({ResultKind.SAME})
    )

    @property
    def is_comparison(self) -> bool:
        return self.comparison is not None


def _unary_spec(name: str, opcode: int) -> _OpSpec:
    return _OpSpec(name=name, arity=Arity.UNARY, opcode=int(opcode))


def _binary_spec(
    name: str,
    opcode: int,
    comparison: str | None = None,
    *,
    orderable: bool = False,
    result_kinds: Iterable[ResultKind] = (),
) -> _OpSpec:
    kinds = frozenset(result_kinds)
    if comparison is not None and not kinds:
        kinds = frozenset({ResultKind.BOOLS, ResultKind.SAME})
    if not kinds:
        kinds = frozenset({ResultKind.SAME})
    return _OpSpec(
        name=name,
        arity=Arity.BINARY,
        opcode=int(opcode),
        comparison=comparison,
        orderable=orderable,
        result_kinds=kinds,
    )


__all__ = [
    "Arity",
    "OperatorDescriptor",
    "ResultKind",
    "Shape",
    "_OpSpec",
    "_binary_spec",
    "_unary_spec",
]
