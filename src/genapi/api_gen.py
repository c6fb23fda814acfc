# Code generated by genapi, which is an API generation tool for pointwise operators. DO NOT EDIT.
from __future__ import annotations

from torch.fx import Graph
from torch.fx import Node as GraphNode

from genapi.graph import (
    ElemBinaryOp,
    Node,
    Operation,
    as_node,
    bin_op_node,
    new_elem_bin_op,
    new_elem_unary_op,
    ordered_children,
    unary_op_node,
)
from genapi.declarations.operator_pointwise_unary_const import UnaryOperatorType
from genapi.declarations.operator_pointwise_binary_const import BinaryOperatorType


def Abs(a: Node) -> Node:
    """Abs performs a pointwise abs."""
    return unary_op_node(new_elem_unary_op(UnaryOperatorType.absOpType, a), a)


def Sign(a: Node) -> Node:
    """Sign performs a pointwise sign."""
    return unary_op_node(new_elem_unary_op(UnaryOperatorType.signOpType, a), a)


def Ceil(a: Node) -> Node:
    """Ceil performs a pointwise ceil."""
    return unary_op_node(new_elem_unary_op(UnaryOperatorType.ceilOpType, a), a)


def Floor(a: Node) -> Node:
    """Floor performs a pointwise floor."""
    return unary_op_node(new_elem_unary_op(UnaryOperatorType.floorOpType, a), a)


def Sin(a: Node) -> Node:
    """Sin performs a pointwise sin."""
    return unary_op_node(new_elem_unary_op(UnaryOperatorType.sinOpType, a), a)


def Cos(a: Node) -> Node:
    """Cos performs a pointwise cos."""
    return unary_op_node(new_elem_unary_op(UnaryOperatorType.cosOpType, a), a)


def Exp(a: Node) -> Node:
    """Exp performs a pointwise exp."""
    return unary_op_node(new_elem_unary_op(UnaryOperatorType.expOpType, a), a)


def Log(a: Node) -> Node:
    """Log performs a pointwise log."""
    return unary_op_node(new_elem_unary_op(UnaryOperatorType.lnOpType, a), a)


def Log2(a: Node) -> Node:
    """Log2 performs a pointwise log2."""
    return unary_op_node(new_elem_unary_op(UnaryOperatorType.log2OpType, a), a)


def Neg(a: Node) -> Node:
    """Neg performs a pointwise neg."""
    return unary_op_node(new_elem_unary_op(UnaryOperatorType.negOpType, a), a)


def Square(a: Node) -> Node:
    """Square performs a pointwise square."""
    return unary_op_node(new_elem_unary_op(UnaryOperatorType.squareOpType, a), a)


def Sqrt(a: Node) -> Node:
    """Sqrt performs a pointwise sqrt."""
    return unary_op_node(new_elem_unary_op(UnaryOperatorType.sqrtOpType, a), a)


def Inverse(a: Node) -> Node:
    """Inverse performs a pointwise inverse."""
    return unary_op_node(new_elem_unary_op(UnaryOperatorType.inverseOpType, a), a)


def InverseSqrt(a: Node) -> Node:
    """InverseSqrt performs a pointwise inversesqrt."""
    return unary_op_node(new_elem_unary_op(UnaryOperatorType.inverseSqrtOpType, a), a)


def Cube(a: Node) -> Node:
    """Cube performs a pointwise cube."""
    return unary_op_node(new_elem_unary_op(UnaryOperatorType.cubeOpType, a), a)


def Tanh(a: Node) -> Node:
    """Tanh performs a pointwise tanh."""
    return unary_op_node(new_elem_unary_op(UnaryOperatorType.tanhOpType, a), a)


def Sigmoid(a: Node) -> Node:
    """Sigmoid performs a pointwise sigmoid."""
    return unary_op_node(new_elem_unary_op(UnaryOperatorType.sigmoidOpType, a), a)


def Log1p(a: Node) -> Node:
    """Log1p performs a pointwise log1p."""
    return unary_op_node(new_elem_unary_op(UnaryOperatorType.log1pOpType, a), a)


def Expm1(a: Node) -> Node:
    """Expm1 performs a pointwise expm1."""
    return unary_op_node(new_elem_unary_op(UnaryOperatorType.expm1OpType, a), a)


def Softplus(a: Node) -> Node:
    """Softplus performs a pointwise softplus."""
    return unary_op_node(new_elem_unary_op(UnaryOperatorType.softplusOpType, a), a)


def Add(a: Node, b: Node) -> Node:
    """Add performs a pointwise add operation."""
    return bin_op_node(new_elem_bin_op(BinaryOperatorType.addOpType, a, b), a, b)


def NewAddOperation() -> Operation:
    """Build Add from the ordered children of a graph node."""

    def operation(g: Graph, n: GraphNode) -> ElemBinaryOp:
        children = [as_node(child) for child in ordered_children(g, n)]
        return new_elem_bin_op(BinaryOperatorType.addOpType, children[0], children[1])

    return operation


def Sub(a: Node, b: Node) -> Node:
    """Sub performs a pointwise sub operation."""
    return bin_op_node(new_elem_bin_op(BinaryOperatorType.subOpType, a, b), a, b)


def NewSubOperation() -> Operation:
    """Build Sub from the ordered children of a graph node."""

    def operation(g: Graph, n: GraphNode) -> ElemBinaryOp:
        children = [as_node(child) for child in ordered_children(g, n)]
        return new_elem_bin_op(BinaryOperatorType.subOpType, children[0], children[1])

    return operation


def HadamardProd(a: Node, b: Node) -> Node:
    """HadamardProd performs a pointwise hadamardprod operation."""
    return bin_op_node(new_elem_bin_op(BinaryOperatorType.mulOpType, a, b), a, b)


def NewHadamardProdOperation() -> Operation:
    """Build HadamardProd from the ordered children of a graph node."""

    def operation(g: Graph, n: GraphNode) -> ElemBinaryOp:
        children = [as_node(child) for child in ordered_children(g, n)]
        return new_elem_bin_op(BinaryOperatorType.mulOpType, children[0], children[1])

    return operation


def HadamardDiv(a: Node, b: Node) -> Node:
    """HadamardDiv performs a pointwise hadamarddiv operation."""
    return bin_op_node(new_elem_bin_op(BinaryOperatorType.divOpType, a, b), a, b)


def NewHadamardDivOperation() -> Operation:
    """Build HadamardDiv from the ordered children of a graph node."""

    def operation(g: Graph, n: GraphNode) -> ElemBinaryOp:
        children = [as_node(child) for child in ordered_children(g, n)]
        return new_elem_bin_op(BinaryOperatorType.divOpType, children[0], children[1])

    return operation


def Pow(a: Node, b: Node) -> Node:
    """Pow performs a pointwise pow operation."""
    return bin_op_node(new_elem_bin_op(BinaryOperatorType.powOpType, a, b), a, b)


def NewPowOperation() -> Operation:
    """Build Pow from the ordered children of a graph node."""

    def operation(g: Graph, n: GraphNode) -> ElemBinaryOp:
        children = [as_node(child) for child in ordered_children(g, n)]
        return new_elem_bin_op(BinaryOperatorType.powOpType, children[0], children[1])

    return operation


def Lt(a: Node, b: Node, ret_same: bool = False) -> Node:
    """Lt performs a pointwise lt operation.

    ret_same indicates if the data type of the return value should be the
    same as the input data type. It defaults to Bool otherwise.
    """
    op = new_elem_bin_op(BinaryOperatorType.ltOpType, a, b)
    op.ret_same = ret_same
    return bin_op_node(op, a, b)


def NewLtOperation() -> Operation:
    """Build Lt from the ordered children of a graph node."""

    def operation(g: Graph, n: GraphNode) -> ElemBinaryOp:
        children = [as_node(child) for child in ordered_children(g, n)]
        return new_elem_bin_op(BinaryOperatorType.ltOpType, children[0], children[1])

    return operation


def Gt(a: Node, b: Node, ret_same: bool = False) -> Node:
    """Gt performs a pointwise gt operation.

    ret_same indicates if the data type of the return value should be the
    same as the input data type. It defaults to Bool otherwise.
    """
    op = new_elem_bin_op(BinaryOperatorType.gtOpType, a, b)
    op.ret_same = ret_same
    return bin_op_node(op, a, b)


def NewGtOperation() -> Operation:
    """Build Gt from the ordered children of a graph node."""

    def operation(g: Graph, n: GraphNode) -> ElemBinaryOp:
        children = [as_node(child) for child in ordered_children(g, n)]
        return new_elem_bin_op(BinaryOperatorType.gtOpType, children[0], children[1])

    return operation


def Lte(a: Node, b: Node, ret_same: bool = False) -> Node:
    """Lte performs a pointwise lte operation.

    ret_same indicates if the data type of the return value should be the
    same as the input data type. It defaults to Bool otherwise.
    """
    op = new_elem_bin_op(BinaryOperatorType.lteOpType, a, b)
    op.ret_same = ret_same
    return bin_op_node(op, a, b)


def NewLteOperation() -> Operation:
    """Build Lte from the ordered children of a graph node."""

    def operation(g: Graph, n: GraphNode) -> ElemBinaryOp:
        children = [as_node(child) for child in ordered_children(g, n)]
        return new_elem_bin_op(BinaryOperatorType.lteOpType, children[0], children[1])

    return operation


def Gte(a: Node, b: Node, ret_same: bool = False) -> Node:
    """Gte performs a pointwise gte operation.

    ret_same indicates if the data type of the return value should be the
    same as the input data type. It defaults to Bool otherwise.
    """
    op = new_elem_bin_op(BinaryOperatorType.gteOpType, a, b)
    op.ret_same = ret_same
    return bin_op_node(op, a, b)


def NewGteOperation() -> Operation:
    """Build Gte from the ordered children of a graph node."""

    def operation(g: Graph, n: GraphNode) -> ElemBinaryOp:
        children = [as_node(child) for child in ordered_children(g, n)]
        return new_elem_bin_op(BinaryOperatorType.gteOpType, children[0], children[1])

    return operation


def Eq(a: Node, b: Node, ret_same: bool = False) -> Node:
    """Eq performs a pointwise eq operation.

    ret_same indicates if the data type of the return value should be the
    same as the input data type. It defaults to Bool otherwise.
    """
    op = new_elem_bin_op(BinaryOperatorType.eqOpType, a, b)
    op.ret_same = ret_same
    return bin_op_node(op, a, b)


def NewEqOperation() -> Operation:
    """Build Eq from the ordered children of a graph node."""

    def operation(g: Graph, n: GraphNode) -> ElemBinaryOp:
        children = [as_node(child) for child in ordered_children(g, n)]
        return new_elem_bin_op(BinaryOperatorType.eqOpType, children[0], children[1])

    return operation


def Ne(a: Node, b: Node, ret_same: bool = False) -> Node:
    """Ne performs a pointwise ne operation.

    ret_same indicates if the data type of the return value should be the
    same as the input data type. It defaults to Bool otherwise.
    """
    op = new_elem_bin_op(BinaryOperatorType.neOpType, a, b)
    op.ret_same = ret_same
    return bin_op_node(op, a, b)


def NewNeOperation() -> Operation:
    """Build Ne from the ordered children of a graph node."""

    def operation(g: Graph, n: GraphNode) -> ElemBinaryOp:
        children = [as_node(child) for child in ordered_children(g, n)]
        return new_elem_bin_op(BinaryOperatorType.neOpType, children[0], children[1])

    return operation


OPERATIONS: dict[BinaryOperatorType, Operation] = {
    BinaryOperatorType.addOpType: NewAddOperation(),
    BinaryOperatorType.subOpType: NewSubOperation(),
    BinaryOperatorType.mulOpType: NewHadamardProdOperation(),
    BinaryOperatorType.divOpType: NewHadamardDivOperation(),
    BinaryOperatorType.powOpType: NewPowOperation(),
    BinaryOperatorType.ltOpType: NewLtOperation(),
    BinaryOperatorType.gtOpType: NewGtOperation(),
    BinaryOperatorType.lteOpType: NewLteOperation(),
    BinaryOperatorType.gteOpType: NewGteOperation(),
    BinaryOperatorType.eqOpType: NewEqOperation(),
    BinaryOperatorType.neOpType: NewNeOperation(),
}
