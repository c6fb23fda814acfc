from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import List, Tuple

from genapi.catalog import load_operator_names
from genapi.config import GeneratorConfig
from genapi.emitter import ApiEmitter, ModuleLayout
from genapi.errors import OutputWriteError
from genapi.naming import describe_operators
from genapi.ops_registry import registered_names
from genapi.specs import Arity, OperatorDescriptor

logger = logging.getLogger(__name__)


def _layout_for(config: GeneratorConfig) -> ModuleLayout:
    return ModuleLayout(
        host_module=config.host_module,
        unary_module=config.unary.module,
        unary_type=config.unary.type_name,
        binary_module=config.binary.module,
        binary_type=config.binary.type_name,
    )


def _operator_names(config: GeneratorConfig, arity: Arity) -> List[str]:
    if config.catalog == "registry":
        return registered_names(arity)
    if arity == Arity.UNARY:
        family, source = config.unary, config.unary_source
    else:
        family, source = config.binary, config.binary_source
    return load_operator_names(source, family.type_name, family.sentinel)


def collect_descriptors(
    config: GeneratorConfig,
) -> Tuple[List[OperatorDescriptor], List[OperatorDescriptor]]:
    unary = describe_operators(_operator_names(config, Arity.UNARY), Arity.UNARY)
    binary = describe_operators(_operator_names(config, Arity.BINARY), Arity.BINARY)
    logger.info(
        "collected %d unary and %d binary operators from %s",
        len(unary),
        len(binary),
        config.catalog,
    )
    logger.debug("binary operators: %s", [desc.internal_name for desc in binary])
    return unary, binary


def generate_source(config: GeneratorConfig) -> str:
    unary, binary = collect_descriptors(config)
    return ApiEmitter(_layout_for(config)).emit(unary, binary)


def write_output(path: Path, source: str) -> None:
    path = Path(path)
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(source)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise OutputWriteError(f"cannot write {path}: {exc}") from exc
    logger.info("wrote %s (%d bytes)", path, len(source))


def is_up_to_date(path: Path, source: str) -> bool:
    path = Path(path)
    if not path.exists():
        return False
    try:
        current = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise OutputWriteError(f"cannot read {path}: {exc}") from exc
    return current == source


def generate(config: GeneratorConfig) -> str:
    source = generate_source(config)
    write_output(config.output, source)
    return source


__all__ = [
    "collect_descriptors",
    "generate",
    "generate_source",
    "is_up_to_date",
    "write_output",
]
