import pytest
from jinja2 import DictLoader, Environment, StrictUndefined

from genapi.emitter import GENMSG, ApiEmitter, ModuleLayout
from genapi.errors import TemplateRenderError
from genapi.naming import describe_operators, normalize
from genapi.specs import Arity, OperatorDescriptor

LAYOUT = ModuleLayout(
    host_module="genapi.graph",
    unary_module="genapi.declarations.operator_pointwise_unary_const",
    unary_type="UnaryOperatorType",
    binary_module="genapi.declarations.operator_pointwise_binary_const",
    binary_type="BinaryOperatorType",
)


def test_render_unary():
    source = ApiEmitter(LAYOUT).render_unary(normalize("lnOpType", Arity.UNARY))

    assert source == (
        "def Log(a: Node) -> Node:\n"
        '    """Log performs a pointwise log."""\n'
        "    return unary_op_node(new_elem_unary_op(UnaryOperatorType.lnOpType, a), a)"
    )


def test_render_binary_without_result_flag():
    source = ApiEmitter(LAYOUT).render_binary(normalize("mulOpType", Arity.BINARY))

    assert source.startswith("def HadamardProd(a: Node, b: Node) -> Node:\n")
    assert "ret_same" not in source
    assert (
        "return bin_op_node(new_elem_bin_op(BinaryOperatorType.mulOpType, a, b), a, b)"
        in source
    )
    assert "\n\n\ndef NewHadamardProdOperation() -> Operation:\n" in source
    assert "ordered_children(g, n)" in source


def test_render_binary_with_result_flag():
    source = ApiEmitter(LAYOUT).render_binary(normalize("eqOpType", Arity.BINARY))

    assert source.startswith(
        "def Eq(a: Node, b: Node, ret_same: bool = False) -> Node:\n"
    )
    assert "    op = new_elem_bin_op(BinaryOperatorType.eqOpType, a, b)\n" in source
    assert "    op.ret_same = ret_same\n" in source
    assert "def NewEqOperation() -> Operation:" in source


def test_render_header_uses_layout():
    header = ApiEmitter(LAYOUT).render_header()

    assert header.splitlines()[0] == GENMSG
    assert "from genapi.graph import (" in header
    assert header.endswith(
        "from genapi.declarations.operator_pointwise_binary_const import BinaryOperatorType"
    )


def test_operation_table_lists_binary_ops_in_order():
    binary = describe_operators(["addOpType", "divOpType"], Arity.BINARY)

    table = ApiEmitter(LAYOUT).render_operation_table(binary)

    assert table == (
        "OPERATIONS: dict[BinaryOperatorType, Operation] = {\n"
        "    BinaryOperatorType.addOpType: NewAddOperation(),\n"
        "    BinaryOperatorType.divOpType: NewHadamardDivOperation(),\n"
        "}"
    )


def test_emit_joins_blocks():
    emitter = ApiEmitter(LAYOUT)
    unary = describe_operators(["absOpType"], Arity.UNARY)
    binary = describe_operators(["addOpType"], Arity.BINARY)

    source = emitter.emit(unary, binary)

    assert source.endswith("}\n")
    assert not source.endswith("\n\n")
    assert "\n\n\ndef Abs(a: Node) -> Node:" in source
    assert "\n\n\ndef Add(a: Node, b: Node) -> Node:" in source
    assert source.index("def Abs") < source.index("def Add") < source.index("OPERATIONS")


def test_emit_is_order_independent_per_operator():
    emitter = ApiEmitter(LAYOUT)
    binary = describe_operators(["addOpType", "ltOpType"], Arity.BINARY)

    forward = [emitter.render_binary(desc) for desc in binary]
    backward = [emitter.render_binary(desc) for desc in reversed(binary)]

    assert forward == list(reversed(backward))


def test_emit_with_empty_catalogs():
    source = ApiEmitter(LAYOUT).emit([], [])

    assert source.startswith(GENMSG)
    assert "OPERATIONS: dict[BinaryOperatorType, Operation] = {\n}\n" in source


def test_arity_mismatch_is_render_error():
    with pytest.raises(TemplateRenderError, match="expected unary"):
        ApiEmitter(LAYOUT).render_unary(normalize("addOpType", Arity.BINARY))


def test_invalid_function_name_is_render_error():
    descriptor = OperatorDescriptor("bad-name", "Bad-name", Arity.UNARY)

    with pytest.raises(TemplateRenderError, match="fn_name"):
        ApiEmitter(LAYOUT).render_unary(descriptor)


def test_invalid_module_path_is_render_error():
    layout = ModuleLayout(
        host_module="genapi..graph",
        unary_module=LAYOUT.unary_module,
        unary_type=LAYOUT.unary_type,
        binary_module=LAYOUT.binary_module,
        binary_type=LAYOUT.binary_type,
    )

    with pytest.raises(TemplateRenderError, match="host_module"):
        ApiEmitter(layout).render_header()


def test_missing_template_field_is_render_error():
    env = Environment(
        loader=DictLoader({"unary.py.j2": "def {{ fn_name }}({{ operand }}): ..."}),
        undefined=StrictUndefined,
    )
    emitter = ApiEmitter(LAYOUT, templates_env=lambda: env)

    with pytest.raises(TemplateRenderError, match="unary.py.j2"):
        emitter.render_unary(normalize("absOpType", Arity.UNARY))


def test_missing_template_is_render_error():
    env = Environment(loader=DictLoader({}))
    emitter = ApiEmitter(LAYOUT, templates_env=lambda: env)

    with pytest.raises(TemplateRenderError):
        emitter.render_header()
