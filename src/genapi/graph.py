from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Callable, Dict, Iterator, List, Mapping, Sequence

import torch.fx

from genapi.declarations import BinaryOperatorType, UnaryOperatorType
from genapi.errors import GraphError
from genapi.kernel_matrix import get_kernel_matrix
from genapi.ops_registry import SUPPORTED_OPS
from genapi.specs import ResultKind, Shape, _OpSpec
from shared.scalar_types import ScalarKind

NODE_META_KEY = "genapi_node"


@dataclass(eq=False)
class Node:
    name: str
    kind: ScalarKind | None = None
    op: ElemUnaryOp | ElemBinaryOp | None = None
    children: tuple[Node, ...] = ()

    @property
    def is_input(self) -> bool:
        return self.op is None


def _spec_for(op_type: UnaryOperatorType | BinaryOperatorType) -> _OpSpec:
    spec = SUPPORTED_OPS.get(op_type.name)
    if spec is None:
        raise GraphError(f"no op spec registered for {op_type.name}")
    return spec


@dataclass
class ElemUnaryOp:
    op_type: UnaryOperatorType
    arg: Node

    @property
    def spec(self) -> _OpSpec:
        return _spec_for(self.op_type)


@dataclass
class ElemBinaryOp:
    op_type: BinaryOperatorType
    left: Node
    right: Node
    ret_same: bool = False

    @property
    def spec(self) -> _OpSpec:
        return _spec_for(self.op_type)

    @property
    def is_comparison(self) -> bool:
        return self.spec.is_comparison

    def result_kind(self) -> ResultKind:
        if self.is_comparison and not self.ret_same:
            return ResultKind.BOOLS
        return ResultKind.SAME

    def compare(
        self, a: Sequence[object], b: object, *, scalar: bool = False
    ) -> List[object]:
        if not self.is_comparison:
            raise GraphError(f"{self.op_type.name} is not a comparison")
        kind = self.left.kind
        if kind is None:
            raise GraphError(f"{self.op_type.name} operands have no kind")
        shape = Shape.ARRAY_SCALAR if scalar else Shape.ARRAY_ARRAY
        kernel = get_kernel_matrix().lookup(
            self.spec.comparison, kind, shape, self.result_kind()
        )
        return kernel(a, b)


Operation = Callable[[torch.fx.Graph, torch.fx.Node], ElemBinaryOp]


def _require_node(value: object) -> Node:
    if not isinstance(value, Node):
        raise GraphError(f"expected a Node operand, got {type(value).__name__}")
    return value


def new_elem_unary_op(op_type: object, a: Node) -> ElemUnaryOp:
    try:
        op_type = UnaryOperatorType(op_type)
    except ValueError as exc:
        raise GraphError(f"unknown unary opcode {op_type!r}") from exc
    if op_type is UnaryOperatorType.maxUnaryOperator:
        raise GraphError("maxUnaryOperator is not an operator")
    return ElemUnaryOp(op_type=op_type, arg=_require_node(a))


def new_elem_bin_op(op_type: object, a: Node, b: Node) -> ElemBinaryOp:
    try:
        op_type = BinaryOperatorType(op_type)
    except ValueError as exc:
        raise GraphError(f"unknown binary opcode {op_type!r}") from exc
    if op_type is BinaryOperatorType.maxBinaryOpType:
        raise GraphError("maxBinaryOpType is not an operator")
    return ElemBinaryOp(op_type=op_type, left=_require_node(a), right=_require_node(b))


def unary_op_node(op: ElemUnaryOp, a: Node) -> Node:
    a = _require_node(a)
    if op.arg is not a:
        raise GraphError(f"{op.op_type.name} was built for a different operand")
    return Node(
        name=f"{op.op_type.name}({a.name})",
        kind=a.kind,
        op=op,
        children=(a,),
    )


def bin_op_node(op: ElemBinaryOp, a: Node, b: Node) -> Node:
    a = _require_node(a)
    b = _require_node(b)
    if op.left is not a or op.right is not b:
        raise GraphError(f"{op.op_type.name} was built for different operands")
    if a.kind is not None and b.kind is not None and a.kind != b.kind:
        raise GraphError(
            f"{op.op_type.name} expects operands of one kind, "
            f"got {a.kind.type_name} and {b.kind.type_name}"
        )
    kind = a.kind if a.kind is not None else b.kind
    spec = op.spec
    if spec.is_comparison and kind is not None:
        if spec.orderable and not kind.orderable:
            raise GraphError(f"{kind.type_name} is not orderable")
        if op.ret_same and not kind.has_additive_identity:
            raise GraphError(
                f"{kind.type_name} has no same-type result for {op.op_type.name}"
            )
    out_kind = ScalarKind.BOOL if op.result_kind() == ResultKind.BOOLS else kind
    return Node(
        name=f"{op.op_type.name}({a.name}, {b.name})",
        kind=out_kind,
        op=op,
        children=(a, b),
    )


def ordered_children(graph: torch.fx.Graph, node: torch.fx.Node) -> List[torch.fx.Node]:
    if node.graph is not graph:
        raise GraphError(f"node '{node.name}' does not belong to the given graph")
    return [arg for arg in node.args if isinstance(arg, torch.fx.Node)]


def bind(fx_node: torch.fx.Node, node: Node) -> torch.fx.Node:
    fx_node.meta[NODE_META_KEY] = _require_node(node)
    return fx_node


def as_node(value: object) -> Node:
    if isinstance(value, Node):
        return value
    if isinstance(value, torch.fx.Node):
        node = value.meta.get(NODE_META_KEY)
        if node is None:
            raise GraphError(f"graph node '{value.name}' carries no tensor node")
        return node
    raise GraphError(f"cannot convert {type(value).__name__} to a Node")


class OperationRegistry:
    def __init__(self) -> None:
        self._operations: Dict[BinaryOperatorType, Operation] = {}

    def register(self, op_type: object, operation: Operation) -> None:
        op_type = BinaryOperatorType(op_type)
        if op_type in self._operations:
            raise GraphError(f"Duplicate operation registered: {op_type.name}")
        self._operations[op_type] = operation

    def update(self, operations: Mapping[object, Operation]) -> "OperationRegistry":
        for op_type, operation in operations.items():
            self.register(op_type, operation)
        return self

    @classmethod
    def from_module(cls, module: ModuleType) -> "OperationRegistry":
        operations = getattr(module, "OPERATIONS", None)
        if operations is None:
            raise GraphError(f"module {module.__name__} defines no OPERATIONS")
        return cls().update(operations)

    def __contains__(self, op_type: object) -> bool:
        return op_type in self._operations

    def __len__(self) -> int:
        return len(self._operations)

    def __iter__(self) -> Iterator[BinaryOperatorType]:
        return iter(self._operations)

    def build(
        self, op_type: object, graph: torch.fx.Graph, node: torch.fx.Node
    ) -> ElemBinaryOp:
        operation = self._operations.get(BinaryOperatorType(op_type))
        if operation is None:
            raise GraphError(f"no operation registered for {op_type!r}")
        children = ordered_children(graph, node)
        if len(children) != 2:
            raise GraphError(
                f"binary operation expects 2 children for '{node.name}', "
                f"got {len(children)}"
            )
        return operation(graph, node)


__all__ = [
    "ElemBinaryOp",
    "ElemUnaryOp",
    "NODE_META_KEY",
    "Node",
    "Operation",
    "OperationRegistry",
    "as_node",
    "bin_op_node",
    "bind",
    "new_elem_bin_op",
    "new_elem_unary_op",
    "ordered_children",
    "unary_op_node",
]
