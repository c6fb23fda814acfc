from __future__ import annotations

import ast
import logging
import warnings
from pathlib import Path
from typing import Iterable, List

from genapi.errors import CatalogEmptyWarning, SourceParseError

logger = logging.getLogger(__name__)


def parse_declarations(path: Path) -> ast.Module:
    try:
        source = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceParseError(path, str(exc)) from exc
    try:
        return ast.parse(source, filename=str(path))
    except SyntaxError as exc:
        raise SourceParseError(path, f"line {exc.lineno}: {exc.msg}") from exc


def _member_names(body: Iterable[ast.stmt]) -> Iterable[str]:
    for stmt in body:
        if isinstance(stmt, ast.Assign):
            for target in stmt.targets:
                if isinstance(target, ast.Name):
                    yield target.id
        elif isinstance(stmt, ast.AnnAssign):
            if isinstance(stmt.target, ast.Name):
                yield stmt.target.id


def extract_operator_names(
    tree: ast.Module, type_name: str, sentinel: str
) -> List[str]:
    """Collect the members of the first constant group declared as ``type_name``.

    A constant group is a top-level class; its name is the declared type.
    Members are returned in declaration order with ``sentinel`` dropped
    wherever it appears. When no group matches, the result is empty.
    """
    for index, stmt in enumerate(tree.body):
        if not isinstance(stmt, ast.ClassDef):
            continue
        logger.debug("DECL %d: class %s", index, stmt.name)
        if stmt.name != type_name:
            continue
        return [name for name in _member_names(stmt.body) if name != sentinel]
    return []


def load_operator_names(path: Path, type_name: str, sentinel: str) -> List[str]:
    tree = parse_declarations(path)
    names = extract_operator_names(tree, type_name, sentinel)
    if not names:
        warnings.warn(
            f"no operators declared as {type_name} in {path}",
            CatalogEmptyWarning,
            stacklevel=2,
        )
    logger.debug("%s operators from %s: %s", type_name, path, names)
    return names


__all__ = ["extract_operator_names", "load_operator_names", "parse_declarations"]
