from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping

from genapi.errors import ConfigError

_PACKAGE_DIR = Path(__file__).resolve().parent

ROOT_ENV = "GENAPI_ROOT"
OUTPUT_ENV = "GENAPI_OUTPUT"
CATALOG_ENV = "GENAPI_CATALOG"

DEFAULT_ROOT = _PACKAGE_DIR / "declarations"
DEFAULT_OUTPUT = _PACKAGE_DIR / "api_gen.py"
CATALOG_SOURCES = ("declarations", "registry")


@dataclass(frozen=True)
class FamilyConfig:
    source: str
    type_name: str
    sentinel: str
    module: str


UNARY_FAMILY = FamilyConfig(
    source="operator_pointwise_unary_const.py",
    type_name="UnaryOperatorType",
    sentinel="maxUnaryOperator",
    module="genapi.declarations.operator_pointwise_unary_const",
)
BINARY_FAMILY = FamilyConfig(
    source="operator_pointwise_binary_const.py",
    type_name="BinaryOperatorType",
    sentinel="maxBinaryOpType",
    module="genapi.declarations.operator_pointwise_binary_const",
)


@dataclass(frozen=True)
class GeneratorConfig:
    root: Path = DEFAULT_ROOT
    output: Path = DEFAULT_OUTPUT
    catalog: str = "declarations"
    host_module: str = "genapi.graph"
    unary: FamilyConfig = field(default=UNARY_FAMILY)
    binary: FamilyConfig = field(default=BINARY_FAMILY)

    def __post_init__(self) -> None:
        if self.catalog not in CATALOG_SOURCES:
            raise ConfigError(
                f"catalog must be one of {', '.join(CATALOG_SOURCES)}, "
                f"got '{self.catalog}'"
            )

    @property
    def unary_source(self) -> Path:
        return self.root / self.unary.source

    @property
    def binary_source(self) -> Path:
        return self.root / self.binary.source

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides: object
    ) -> "GeneratorConfig":
        env = os.environ if environ is None else environ
        root_value = env.get(ROOT_ENV)
        if root_value:
            root = Path(root_value).expanduser()
            if not root.is_dir():
                raise ConfigError(
                    f"{ROOT_ENV}={root_value} is not a directory"
                )
        else:
            root = DEFAULT_ROOT
        output_value = env.get(OUTPUT_ENV)
        output = Path(output_value).expanduser() if output_value else DEFAULT_OUTPUT
        config = cls(
            root=root,
            output=output,
            catalog=env.get(CATALOG_ENV) or "declarations",
        )
        overrides = {key: value for key, value in overrides.items() if value is not None}
        if overrides:
            config = replace(config, **overrides)
        return config


__all__ = [
    "BINARY_FAMILY",
    "CATALOG_ENV",
    "DEFAULT_OUTPUT",
    "DEFAULT_ROOT",
    "FamilyConfig",
    "GeneratorConfig",
    "OUTPUT_ENV",
    "ROOT_ENV",
    "UNARY_FAMILY",
]
