from __future__ import annotations


class GenapiError(RuntimeError):
    pass


class ConfigError(GenapiError):
    pass


class SourceParseError(GenapiError):
    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"cannot parse declarations in {path}: {reason}")
        self.path = path
        self.reason = reason


class NameCollisionError(GenapiError):
    def __init__(self, public_name: str, first: str, second: str) -> None:
        super().__init__(
            f"operators '{first}' and '{second}' both normalize to '{public_name}'"
        )
        self.public_name = public_name
        self.internal_names = (first, second)


class TemplateRenderError(GenapiError):
    pass


class OutputWriteError(GenapiError):
    pass


class LengthMismatchError(GenapiError, ValueError):
    def __init__(self, left: object, right: object) -> None:
        super().__init__(
            f"array-array comparison expects equal lengths, got {left} and {right}"
        )
        self.left = left
        self.right = right


class UnsupportedKernelError(GenapiError, LookupError):
    pass


class GraphError(GenapiError):
    pass


class CatalogEmptyWarning(UserWarning):
    pass


__all__ = [
    "CatalogEmptyWarning",
    "ConfigError",
    "GenapiError",
    "GraphError",
    "LengthMismatchError",
    "NameCollisionError",
    "OutputWriteError",
    "SourceParseError",
    "TemplateRenderError",
    "UnsupportedKernelError",
]
