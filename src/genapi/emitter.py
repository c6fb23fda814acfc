from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

from jinja2 import Environment, TemplateError

from genapi.errors import TemplateRenderError
from genapi.specs import Arity, OperatorDescriptor
from genapi.templates import get_template_env

logger = logging.getLogger(__name__)

GENMSG = (
    "# Code generated by genapi, which is an API generation tool for "
    "pointwise operators. DO NOT EDIT."
)


@dataclass(frozen=True)
class ModuleLayout:
    host_module: str
    unary_module: str
    unary_type: str
    binary_module: str
    binary_type: str


def _require_identifier(field: str, value: object) -> str:
    if not isinstance(value, str) or not value.isidentifier():
        raise TemplateRenderError(
            f"template field '{field}' must be an identifier, got {value!r}"
        )
    return value


def _require_module_path(field: str, value: object) -> str:
    if not isinstance(value, str) or not all(
        part.isidentifier() for part in value.split(".")
    ):
        raise TemplateRenderError(
            f"template field '{field}' must be a dotted module path, got {value!r}"
        )
    return value


class ApiEmitter:
    def __init__(
        self,
        layout: ModuleLayout,
        *,
        templates_env: Callable[[], Environment] = get_template_env,
    ) -> None:
        self._layout = layout
        self._templates_env = templates_env

    def _render(self, template_name: str, context: Dict[str, object]) -> str:
        try:
            template = self._templates_env().get_template(template_name)
            rendered = template.render(**context)
        except TemplateError as exc:
            raise TemplateRenderError(
                f"failed to render {template_name}: {exc}"
            ) from exc
        return rendered.strip()

    def _op_context(
        self, descriptor: OperatorDescriptor, arity: Arity
    ) -> Dict[str, object]:
        if descriptor.arity != arity:
            raise TemplateRenderError(
                f"{descriptor.internal_name} is {descriptor.arity.value}, "
                f"expected {arity.value}"
            )
        type_name = (
            self._layout.unary_type
            if arity == Arity.UNARY
            else self._layout.binary_type
        )
        fn_name = _require_identifier("fn_name", descriptor.public_name)
        internal_name = _require_identifier("op_type", descriptor.internal_name)
        return {
            "fn_name": fn_name,
            "op_type": f"{_require_identifier('type_name', type_name)}.{internal_name}",
            "as_same": descriptor.needs_result_flag,
        }

    def render_header(self) -> str:
        layout = self._layout
        return self._render(
            "header.py.j2",
            {
                "banner": GENMSG,
                "host_module": _require_module_path("host_module", layout.host_module),
                "unary_module": _require_module_path("unary_module", layout.unary_module),
                "unary_type": _require_identifier("unary_type", layout.unary_type),
                "binary_module": _require_module_path(
                    "binary_module", layout.binary_module
                ),
                "binary_type": _require_identifier("binary_type", layout.binary_type),
            },
        )

    def render_unary(self, descriptor: OperatorDescriptor) -> str:
        return self._render("unary.py.j2", self._op_context(descriptor, Arity.UNARY))

    def render_binary(self, descriptor: OperatorDescriptor) -> str:
        return self._render(
            "binary.py.j2", self._op_context(descriptor, Arity.BINARY)
        )

    def render_operation_table(
        self, descriptors: Sequence[OperatorDescriptor]
    ) -> str:
        operators = [self._op_context(desc, Arity.BINARY) for desc in descriptors]
        return self._render(
            "operations.py.j2",
            {
                "binary_type": self._layout.binary_type,
                "operators": operators,
            },
        )

    def emit(
        self,
        unary: Sequence[OperatorDescriptor],
        binary: Sequence[OperatorDescriptor],
    ) -> str:
        blocks: List[str] = [self.render_header()]
        for descriptor in unary:
            logger.debug("rendering unary %s", descriptor.public_name)
            blocks.append(self.render_unary(descriptor))
        for descriptor in binary:
            logger.debug("rendering binary %s", descriptor.public_name)
            blocks.append(self.render_binary(descriptor))
        blocks.append(self.render_operation_table(binary))
        return "\n\n\n".join(blocks) + "\n"


__all__ = ["ApiEmitter", "GENMSG", "ModuleLayout"]
