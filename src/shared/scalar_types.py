from __future__ import annotations

from enum import Enum


class ScalarKindError(RuntimeError):
    pass


_ZERO_ONE = {
    "int": (0, 1),
    "float": (0.0, 1.0),
    "complex": (0j, 1 + 0j),
}


class ScalarKind(str, Enum):
    """Data kinds covered by the comparison kernel matrix.

    Each member carries the kernel-name suffix and the capabilities that decide
    which kernels exist for it: every kind supports equality, ``orderable``
    kinds additionally get the ordering operators, and kinds with an additive
    identity get the same-type 0/1 indicator variants.
    """

    def __new__(
        cls,
        suffix: str,
        type_name: str,
        value_class: str,
        orderable: bool,
        has_additive_identity: bool,
        torch_name: str | None,
    ) -> "ScalarKind":
        obj = str.__new__(cls, suffix)
        obj._value_ = suffix
        obj.suffix = suffix
        obj.type_name = type_name
        obj.value_class = value_class
        obj.equatable = True
        obj.orderable = orderable
        obj.has_additive_identity = has_additive_identity
        obj.torch_name = torch_name
        return obj

    BOOL = ("B", "bool", "bool", False, False, "bool")
    INT = ("I", "int", "int", True, True, None)
    INT8 = ("I8", "int8", "int", True, True, "int8")
    INT16 = ("I16", "int16", "int", True, True, "int16")
    INT32 = ("I32", "int32", "int", True, True, "int32")
    INT64 = ("I64", "int64", "int", True, True, "int64")
    UINT = ("U", "uint", "int", True, True, None)
    UINT8 = ("U8", "uint8", "int", True, True, "uint8")
    UINT16 = ("U16", "uint16", "int", True, True, "uint16")
    UINT32 = ("U32", "uint32", "int", True, True, "uint32")
    UINT64 = ("U64", "uint64", "int", True, True, "uint64")
    UINTPTR = ("Uintptr", "uintptr", "int", True, False, None)
    FLOAT32 = ("F32", "float32", "float", True, True, "float32")
    FLOAT64 = ("F64", "float64", "float", True, True, "float64")
    COMPLEX64 = ("C64", "complex64", "complex", False, True, "complex64")
    COMPLEX128 = ("C128", "complex128", "complex", False, True, "complex128")
    STRING = ("Str", "string", "str", True, False, None)
    UNSAFE_POINTER = ("UnsafePointer", "unsafe_pointer", "pointer", False, False, None)

    @property
    def zero(self) -> int | float | complex:
        return self._identity()[0]

    @property
    def one(self) -> int | float | complex:
        return self._identity()[1]

    def _identity(self) -> tuple:
        if not self.has_additive_identity:
            raise ScalarKindError(
                f"{self.type_name} has no additive identity"
            )
        return _ZERO_ONE[self.value_class]

    @property
    def is_pointer(self) -> bool:
        return self.value_class == "pointer"

    @classmethod
    def from_torch_dtype(cls, dtype: object) -> "ScalarKind":
        if isinstance(dtype, ScalarKind):
            return dtype
        if isinstance(dtype, str):
            dtype_name = dtype
        else:
            dtype_name = str(dtype)
        normalized = dtype_name.lower()
        if normalized.startswith("torch."):
            normalized = normalized[len("torch.") :]
        mapping = {
            kind.torch_name: kind for kind in cls if kind.torch_name is not None
        }
        try:
            return mapping[normalized]
        except KeyError as exc:
            raise ScalarKindError(
                f"unsupported dtype for comparison kernels: {dtype_name}"
            ) from exc

    @classmethod
    def from_suffix(cls, suffix: str) -> "ScalarKind":
        try:
            return cls(suffix)
        except ValueError as exc:
            raise ScalarKindError(f"unknown kind suffix: {suffix}") from exc


__all__ = ["ScalarKind", "ScalarKindError"]
