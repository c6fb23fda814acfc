from __future__ import annotations

from enum import IntEnum
from typing import Dict, List

from genapi.declarations import BinaryOperatorType, UnaryOperatorType
from genapi.specs import Arity, ResultKind, _OpSpec, _binary_spec, _unary_spec

_VALID_COMPARISONS = {"eq", "ne", "gt", "gte", "lt", "lte"}
_ORDERING_COMPARISONS = {"gt", "gte", "lt", "lte"}


class _OpBuilder:
    def __init__(
        self,
        registry: "_OpRegistry",
        opcode: IntEnum,
        arity: Arity,
    ) -> None:
        self._registry = registry
        self._opcode = opcode
        self._arity = arity
        self._comparison: str | None = None
        self._result_kinds: list[ResultKind] = []

    def comparison(self, name: str) -> "_OpBuilder":
        self._comparison = name
        return self

    def results(self, *kinds: ResultKind) -> "_OpBuilder":
        self._result_kinds = list(kinds)
        return self

    def build(self) -> _OpSpec:
        name = self._opcode.name
        if self._arity == Arity.UNARY:
            if self._comparison is not None:
                raise ValueError(f"Unary op '{name}' cannot be a comparison.")
            spec = _unary_spec(name, self._opcode)
        else:
            if (
                self._comparison is not None
                and self._comparison not in _VALID_COMPARISONS
            ):
                raise ValueError(
                    f"Unsupported comparison '{self._comparison}' for op '{name}'."
                )
            spec = _binary_spec(
                name,
                self._opcode,
                self._comparison,
                orderable=self._comparison in _ORDERING_COMPARISONS,
                result_kinds=self._result_kinds,
            )
        self._registry._add(spec)
        return spec


class _OpRegistry:
    def __init__(self) -> None:
        self._specs: dict[str, _OpSpec] = {}

    def register_unary(self, opcode: IntEnum) -> _OpBuilder:
        return _OpBuilder(self, opcode, Arity.UNARY)

    def register_binary(self, opcode: IntEnum) -> _OpBuilder:
        return _OpBuilder(self, opcode, Arity.BINARY)

    def _add(self, spec: _OpSpec) -> None:
        if spec.name in self._specs:
            raise ValueError(f"Duplicate op spec registered: {spec.name}")
        self._specs[spec.name] = spec

    def build(self) -> dict[str, _OpSpec]:
        _validate_registry(self._specs)
        return dict(self._specs)


def _validate_registry(specs: dict[str, _OpSpec]) -> None:
    seen_opcodes: dict[tuple[Arity, int], str] = {}
    for spec in specs.values():
        key = (spec.arity, spec.opcode)
        if key in seen_opcodes:
            raise ValueError(
                "Duplicate opcode registered for ops "
                f"'{seen_opcodes[key]}' and '{spec.name}'."
            )
        seen_opcodes[key] = spec.name
        if spec.comparison is None and ResultKind.BOOLS in spec.result_kinds:
            raise ValueError(
                f"Only comparison ops can produce boolean masks: '{spec.name}'."
            )


_REGISTRY = _OpRegistry()

# To add an op, declare its opcode in genapi.declarations first, then register
# it here in declaration order.
for _opcode in (
    UnaryOperatorType.absOpType,
    UnaryOperatorType.signOpType,
    UnaryOperatorType.ceilOpType,
    UnaryOperatorType.floorOpType,
    UnaryOperatorType.sinOpType,
    UnaryOperatorType.cosOpType,
    UnaryOperatorType.expOpType,
    UnaryOperatorType.lnOpType,
    UnaryOperatorType.log2OpType,
    UnaryOperatorType.negOpType,
    UnaryOperatorType.squareOpType,
    UnaryOperatorType.sqrtOpType,
    UnaryOperatorType.inverseOpType,
    UnaryOperatorType.inverseSqrtOpType,
    UnaryOperatorType.cubeOpType,
    UnaryOperatorType.tanhOpType,
    UnaryOperatorType.sigmoidOpType,
    UnaryOperatorType.log1pOpType,
    UnaryOperatorType.expm1OpType,
    UnaryOperatorType.softplusOpType,
):
    _REGISTRY.register_unary(_opcode).build()

_REGISTRY.register_binary(BinaryOperatorType.addOpType).build()
_REGISTRY.register_binary(BinaryOperatorType.subOpType).build()
_REGISTRY.register_binary(BinaryOperatorType.mulOpType).build()
_REGISTRY.register_binary(BinaryOperatorType.divOpType).build()
_REGISTRY.register_binary(BinaryOperatorType.powOpType).build()
_REGISTRY.register_binary(BinaryOperatorType.ltOpType).comparison("lt").build()
_REGISTRY.register_binary(BinaryOperatorType.gtOpType).comparison("gt").build()
_REGISTRY.register_binary(BinaryOperatorType.lteOpType).comparison("lte").build()
_REGISTRY.register_binary(BinaryOperatorType.gteOpType).comparison("gte").build()
_REGISTRY.register_binary(BinaryOperatorType.eqOpType).comparison("eq").build()
_REGISTRY.register_binary(BinaryOperatorType.neOpType).comparison("ne").build()

SUPPORTED_OPS: Dict[str, _OpSpec] = _REGISTRY.build()


def registered_names(arity: Arity) -> List[str]:
    return [spec.name for spec in SUPPORTED_OPS.values() if spec.arity == arity]


def comparison_specs() -> List[_OpSpec]:
    return [spec for spec in SUPPORTED_OPS.values() if spec.is_comparison]


__all__ = [
    "SUPPORTED_OPS",
    "comparison_specs",
    "registered_names",
]
