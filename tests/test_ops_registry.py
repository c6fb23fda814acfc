import pytest

from genapi.catalog import load_operator_names
from genapi.config import GeneratorConfig
from genapi.declarations import BinaryOperatorType, UnaryOperatorType
from genapi.naming import describe_operators
from genapi.ops_registry import (
    SUPPORTED_OPS,
    _OpRegistry,
    comparison_specs,
    registered_names,
)
from genapi.specs import Arity, ResultKind


def test_registry_matches_declarations():
    config = GeneratorConfig()

    assert registered_names(Arity.UNARY) == load_operator_names(
        config.unary_source, config.unary.type_name, config.unary.sentinel
    )
    assert registered_names(Arity.BINARY) == load_operator_names(
        config.binary_source, config.binary.type_name, config.binary.sentinel
    )


def test_registry_names_are_unique_after_normalization():
    for arity in Arity:
        descriptors = describe_operators(registered_names(arity), arity)
        assert len({desc.public_name for desc in descriptors}) == len(descriptors)


def test_comparison_specs_in_registry_order():
    assert [spec.comparison for spec in comparison_specs()] == [
        "lt",
        "gt",
        "lte",
        "gte",
        "eq",
        "ne",
    ]


def test_comparison_capabilities():
    lt = SUPPORTED_OPS["ltOpType"]
    eq = SUPPORTED_OPS["eqOpType"]
    add = SUPPORTED_OPS["addOpType"]

    assert lt.orderable and not eq.orderable
    assert lt.result_kinds == {ResultKind.BOOLS, ResultKind.SAME}
    assert add.result_kinds == {ResultKind.SAME}
    assert not add.is_comparison
    assert add.opcode == BinaryOperatorType.addOpType


def test_duplicate_registration_raises():
    registry = _OpRegistry()
    registry.register_unary(UnaryOperatorType.absOpType).build()

    with pytest.raises(ValueError, match="Duplicate op spec registered: absOpType"):
        registry.register_unary(UnaryOperatorType.absOpType).build()


def test_unary_comparison_is_rejected():
    registry = _OpRegistry()

    with pytest.raises(ValueError, match="cannot be a comparison"):
        registry.register_unary(UnaryOperatorType.absOpType).comparison("eq").build()


def test_unknown_comparison_is_rejected():
    registry = _OpRegistry()

    with pytest.raises(ValueError, match="Unsupported comparison 'approx'"):
        registry.register_binary(BinaryOperatorType.eqOpType).comparison("approx").build()


def test_boolean_masks_require_a_comparison():
    registry = _OpRegistry()
    registry.register_binary(BinaryOperatorType.addOpType).results(ResultKind.BOOLS).build()

    with pytest.raises(ValueError, match="boolean masks"):
        registry.build()
