from __future__ import annotations

import numbers

import torch

from genapi.errors import LengthMismatchError, UnsupportedKernelError
from genapi.kernel_matrix import get_kernel_matrix
from genapi.specs import ResultKind, Shape
from shared.scalar_functions import ComparisonFunction
from shared.scalar_types import ScalarKind, ScalarKindError


def _kind_for(tensor: torch.Tensor) -> ScalarKind:
    try:
        return ScalarKind.from_torch_dtype(tensor.dtype)
    except ScalarKindError as exc:
        raise UnsupportedKernelError(str(exc)) from exc


def compare_tensors(
    op: ComparisonFunction | str,
    a: torch.Tensor,
    b: torch.Tensor | numbers.Number,
    *,
    same: bool = False,
) -> torch.Tensor:
    """Elementwise comparison of ``a`` against a tensor or a scalar.

    Returns a ``torch.bool`` mask, or a tensor of ``a.dtype`` holding 1/0 when
    ``same`` is set. Tensor operands must share shape and dtype; there is no
    broadcasting.
    """
    kind = _kind_for(a)
    result = ResultKind.SAME if same else ResultKind.BOOLS
    left = a.reshape(-1).tolist()
    if isinstance(b, torch.Tensor):
        if tuple(b.shape) != tuple(a.shape):
            raise LengthMismatchError(tuple(a.shape), tuple(b.shape))
        if b.dtype != a.dtype:
            raise UnsupportedKernelError(
                f"dtype mismatch: {a.dtype} vs {b.dtype}"
            )
        kernel = get_kernel_matrix().lookup(op, kind, Shape.ARRAY_ARRAY, result)
        values = kernel(left, b.reshape(-1).tolist())
    elif isinstance(b, numbers.Number):
        kernel = get_kernel_matrix().lookup(op, kind, Shape.ARRAY_SCALAR, result)
        values = kernel(left, b)
    else:
        raise TypeError(
            f"unsupported operand type(s) for comparison: {type(a)!r} and {type(b)!r}"
        )
    dtype = a.dtype if same else torch.bool
    return torch.tensor(values, dtype=dtype).reshape(a.shape)


__all__ = ["compare_tensors"]
