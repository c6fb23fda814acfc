from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, Iterable, Iterator, List, Sequence

from genapi import kernels
from genapi.errors import UnsupportedKernelError
from genapi.ops_registry import comparison_specs
from genapi.specs import ResultKind, Shape
from shared.scalar_functions import ComparisonFunction, supports
from shared.scalar_types import ScalarKind, ScalarKindError

Kernel = Callable[[Sequence[object], object], List[object]]

_KERNELS = {
    (Shape.ARRAY_ARRAY, ResultKind.BOOLS): kernels.compare_array_array,
    (Shape.ARRAY_ARRAY, ResultKind.SAME): kernels.compare_array_array_same,
    (Shape.ARRAY_SCALAR, ResultKind.BOOLS): kernels.compare_array_scalar,
    (Shape.ARRAY_SCALAR, ResultKind.SAME): kernels.compare_array_scalar_same,
}


@dataclass(frozen=True)
class KernelVariant:
    op: ComparisonFunction
    kind: ScalarKind
    shape: Shape
    result: ResultKind

    @property
    def name(self) -> str:
        return f"{self.op.value}{self.shape.value}{self.result.value}{self.kind.suffix}"

    def is_supported(self) -> bool:
        if not supports(self.op, self.kind):
            return False
        if self.result == ResultKind.SAME:
            return self.kind.has_additive_identity
        return True

    def kernel(self) -> Kernel:
        return partial(_KERNELS[(self.shape, self.result)], self.op, self.kind)


def _registry_comparisons() -> List[ComparisonFunction]:
    return [ComparisonFunction.from_name(spec.comparison) for spec in comparison_specs()]


def build_variants(
    ops: Iterable[ComparisonFunction], kinds: Iterable[ScalarKind]
) -> List[KernelVariant]:
    kinds = list(kinds)
    variants: List[KernelVariant] = []
    for op in ops:
        for kind in kinds:
            for shape in Shape:
                for result in ResultKind:
                    variant = KernelVariant(op, kind, shape, result)
                    if variant.is_supported():
                        variants.append(variant)
    return variants


class KernelMatrix:
    """Comparison kernels for every supported operator, kind, shape and result.

    Kernels are addressable by their conventional name, e.g.
    ``matrix["eqDDBoolsI32"](a, b)`` or ``matrix["gteDSSameF64"](a, 2.0)``.
    """

    def __init__(
        self,
        ops: Iterable[ComparisonFunction] | None = None,
        kinds: Iterable[ScalarKind] | None = None,
    ) -> None:
        ops = _registry_comparisons() if ops is None else list(ops)
        kinds = list(ScalarKind) if kinds is None else list(kinds)
        self._variants: Dict[str, KernelVariant] = {}
        self._kernels: Dict[str, Kernel] = {}
        for variant in build_variants(ops, kinds):
            self._variants[variant.name] = variant
            self._kernels[variant.name] = variant.kernel()

    def __getitem__(self, name: str) -> Kernel:
        try:
            return self._kernels[name]
        except KeyError:
            raise UnsupportedKernelError(f"no comparison kernel named '{name}'") from None

    def __contains__(self, name: object) -> bool:
        return name in self._kernels

    def __len__(self) -> int:
        return len(self._kernels)

    def __iter__(self) -> Iterator[str]:
        return iter(self._kernels)

    def names(self) -> List[str]:
        return list(self._kernels)

    def variants(self) -> List[KernelVariant]:
        return list(self._variants.values())

    def variant(self, name: str) -> KernelVariant:
        try:
            return self._variants[name]
        except KeyError:
            raise UnsupportedKernelError(f"no comparison kernel named '{name}'") from None

    def lookup(
        self,
        op: ComparisonFunction | str,
        kind: ScalarKind | str,
        shape: Shape = Shape.ARRAY_ARRAY,
        result: ResultKind = ResultKind.BOOLS,
    ) -> Kernel:
        try:
            if not isinstance(op, ComparisonFunction):
                op = ComparisonFunction.from_name(op)
            if not isinstance(kind, ScalarKind):
                kind = ScalarKind.from_suffix(kind)
        except ScalarKindError as exc:
            raise UnsupportedKernelError(str(exc)) from exc
        return self[KernelVariant(op, kind, Shape(shape), ResultKind(result)).name]


_KERNEL_MATRIX: KernelMatrix | None = None


def get_kernel_matrix() -> KernelMatrix:
    global _KERNEL_MATRIX
    if _KERNEL_MATRIX is None:
        _KERNEL_MATRIX = KernelMatrix()
    return _KERNEL_MATRIX


__all__ = [
    "Kernel",
    "KernelMatrix",
    "KernelVariant",
    "build_variants",
    "get_kernel_matrix",
]
