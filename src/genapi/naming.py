from __future__ import annotations

from typing import Dict, Iterable, List

from genapi.errors import NameCollisionError
from genapi.specs import Arity, OperatorDescriptor

OPCODE_SUFFIX = "OpType"

# legacy public names
_UNARY_OVERRIDES = {"Ln": "Log"}
_BINARY_OVERRIDES = {"Mul": "HadamardProd", "Div": "HadamardDiv"}
_OVERRIDES = {Arity.UNARY: _UNARY_OVERRIDES, Arity.BINARY: _BINARY_OVERRIDES}

RESULT_FLAG_OPS = frozenset({"Lt", "Gt", "Lte", "Gte", "Eq", "Ne"})


def strip_suffix(name: str, suffix: str = OPCODE_SUFFIX) -> str:
    if suffix and name.endswith(suffix):
        return name[: -len(suffix)]
    return name


def capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def public_name(internal_name: str, arity: Arity) -> str:
    api_name = capitalize(strip_suffix(internal_name))
    return _OVERRIDES[Arity(arity)].get(api_name, api_name)


def normalize(internal_name: str, arity: Arity) -> OperatorDescriptor:
    arity = Arity(arity)
    api_name = public_name(internal_name, arity)
    return OperatorDescriptor(
        internal_name=internal_name,
        public_name=api_name,
        arity=arity,
        needs_result_flag=arity == Arity.BINARY and api_name in RESULT_FLAG_OPS,
    )


def describe_operators(
    internal_names: Iterable[str], arity: Arity
) -> List[OperatorDescriptor]:
    descriptors: List[OperatorDescriptor] = []
    seen: Dict[str, str] = {}
    for internal_name in internal_names:
        descriptor = normalize(internal_name, arity)
        previous = seen.get(descriptor.public_name)
        if previous is not None:
            raise NameCollisionError(descriptor.public_name, previous, internal_name)
        seen[descriptor.public_name] = internal_name
        descriptors.append(descriptor)
    return descriptors


__all__ = [
    "OPCODE_SUFFIX",
    "RESULT_FLAG_OPS",
    "capitalize",
    "describe_operators",
    "normalize",
    "public_name",
    "strip_suffix",
]
