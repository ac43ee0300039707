"""Command-line driver: print the tokens of standard input.

Run with:
    echo "x = 2 ** 8" | python -m calclex
    calclex --positions program.calc

Each token is printed as its kind, left-aligned in a fixed-width column,
a tab, and its text. A lexical error prints the error message and exits
with status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from calclex import __version__
from calclex.config import LexerConfig
from calclex.errors import LexicalError
from calclex.lexer import Lexer
from calclex.source import CharacterSource, StreamSource
from calclex.tokens import Token
from calclex.utils.logger import get_logger

logger = get_logger(__name__)

KIND_WIDTH = 15


def format_token(token: Token, *, positions: bool = False) -> str:
    """Format a token as ``KIND<tab>text`` with the kind padded to a fixed width."""
    line = f"{token.kind.name:<{KIND_WIDTH}}\t{token.text}"
    if positions:
        line += f"\t{token.line}:{token.column}"
    return line


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calclex",
        description="Tokenize an arithmetic/assignment program.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Input file (default: standard input)",
    )
    parser.add_argument(
        "--positions",
        action="store_true",
        help="Append line:column of each token",
    )
    parser.add_argument(
        "--keep-whitespace",
        action="store_true",
        help="Print WHITESPACE tokens too",
    )
    parser.add_argument(
        "--no-flush",
        action="store_true",
        help="Drop a token still open at end of input",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(
    source: CharacterSource,
    out: TextIO,
    *,
    name: str,
    config: LexerConfig,
    positions: bool = False,
) -> int:
    """Tokenize ``source`` into ``out``. Returns the process exit status."""
    count = 0
    with Lexer(source, config=config) as lexer:
        try:
            for token in lexer:
                print(format_token(token, positions=positions), file=out)
                count += 1
        except LexicalError as e:
            print(e, file=out)
            logger.debug("Stopped %s after %d tokens", name, count)
            return 1
        except UnicodeDecodeError as e:
            print(f"{name}: cannot decode input: {e.reason} at byte {e.start}", file=out)
            logger.debug("Undecodable input in %s after %d tokens", name, count)
            return 1
    logger.debug("Tokenized %s: %d tokens", name, count)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for ``calclex`` and ``python -m calclex``."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    config = LexerConfig(
        flush_at_eof=not args.no_flush,
        keep_whitespace=args.keep_whitespace,
    )

    if args.file is None:
        # stdin is not ours to close
        source: CharacterSource = StreamSource(sys.stdin, owns_stream=False)
        name = "<stdin>"
    else:
        try:
            source = StreamSource(open(args.file, encoding="utf-8"))
        except OSError as e:
            print(f"calclex: cannot open {args.file}: {e.strerror}", file=sys.stderr)
            return 2
        name = args.file

    return run(source, sys.stdout, name=name, config=config, positions=args.positions)

