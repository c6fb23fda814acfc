import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable

from genapi.config import CATALOG_SOURCES, GeneratorConfig
from genapi.errors import GenapiError
from genapi.generator import generate_source, is_up_to_date, write_output

logger = logging.getLogger("genapi")


def _parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="genapi",
        description="Generate the pointwise operator API module from the opcode declarations.",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Directory holding the opcode declaration modules (env: GENAPI_ROOT).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Path of the generated module (env: GENAPI_OUTPUT).",
    )
    parser.add_argument(
        "--catalog",
        choices=CATALOG_SOURCES,
        default=None,
        help=(
            "Where operator names come from: the declaration sources or the "
            "in-process op registry (env: GENAPI_CATALOG)."
        ),
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write; exit 1 if the output differs from a fresh generation.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every collected operator.",
    )
    return parser.parse_args(argv)


def main(argv: Iterable[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[genapi] %(levelname)s %(message)s",
    )
    try:
        config = GeneratorConfig.from_env(
            root=args.root, output=args.output, catalog=args.catalog
        )
        source = generate_source(config)
        if args.check:
            if not is_up_to_date(config.output, source):
                print(f"[genapi] {config.output} is out of date", file=sys.stderr)
                return 1
            logger.info("%s is up to date", config.output)
            return 0
        write_output(config.output, source)
    except GenapiError as exc:
        print(f"[genapi] error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
