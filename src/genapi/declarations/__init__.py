from genapi.declarations.operator_pointwise_binary_const import BinaryOperatorType
from genapi.declarations.operator_pointwise_unary_const import UnaryOperatorType

__all__ = ["BinaryOperatorType", "UnaryOperatorType"]
