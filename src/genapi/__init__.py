__all__ = [
    "GeneratorConfig",
    "compare_tensors",
    "generate",
    "generate_source",
    "get_kernel_matrix",
]


def __getattr__(name: str):
    if name == "GeneratorConfig":
        from .config import GeneratorConfig

        return GeneratorConfig
    if name in {"generate", "generate_source"}:
        from . import generator

        return getattr(generator, name)
    if name == "get_kernel_matrix":
        from .kernel_matrix import get_kernel_matrix

        return get_kernel_matrix
    if name == "compare_tensors":
        from .tensor_ops import compare_tensors

        return compare_tensors
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(__all__)
