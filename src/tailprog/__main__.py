"""Command line entry point: python -m tailprog [FILE]

Reads a JSON-serialized program tree (see tailprog.serialization) from FILE
or standard input and writes the unparsed program text to standard output.
"""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from tailprog.config import TailprogConfig, config_context
from tailprog.errors import RenderError
from tailprog.renderers.protocol import ASTRenderer
from tailprog.renderers.unparser import Unparser
from tailprog.serialization import from_json
from tailprog.utils.logger import log_to_stream


def build_parser() -> argparse.ArgumentParser:
    defaults = TailprogConfig()
    parser = argparse.ArgumentParser(
        prog="tailprog",
        description="Render a JSON-serialized program tree back to program text.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        help="Path to a JSON tree dump (default: read standard input)",
    )
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level name (default: %(default)s)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=defaults.max_depth,
        help="Deepest tree nesting to accept (default: %(default)s)",
    )
    return parser


def render_json(text: str, config: TailprogConfig, renderer: ASTRenderer | None = None) -> str:
    """Decode a JSON tree dump under ``config`` and render it.

    Raises:
        ValueError: If the dump does not describe a tree.
        RenderError: If the tree cannot be rendered.
    """
    with config_context(config):
        tree = from_json(text)
    return (renderer or Unparser()).render(tree)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = TailprogConfig.from_dict(
        {"log_level": args.log_level, "max_depth": args.max_depth}
    )

    if args.file is None:
        text = sys.stdin.read()
    else:
        try:
            text = args.file.read_text(encoding="utf-8")
        except OSError as e:
            sys.stderr.write(f"tailprog: error: could not read file: {e}\n")
            return 1

    try:
        with log_to_stream(config.log_level):
            output = render_json(text, config)
    except (ValueError, RenderError) as e:
        sys.stderr.write(f"tailprog: error: {e}\n")
        return 1

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
