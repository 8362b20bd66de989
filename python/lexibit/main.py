"""lexibit CLI - Word ladder compiler and solver.

Usage:
    python -m lexibit.main compile words.txt --length 4
    python -m lexibit.main compile words.txt          # length from config.json
    python -m lexibit.main compile --download en --length 5
    python -m lexibit.main path cold warm --lexicon output/lexicons/4-letter.json
    python -m lexibit.main random --lexicon 4-letter.json --common common.csv
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import config as cfg
from .builder import LexiconCompiler
from .errors import LexibitError
from .ingest import hunspell, ingest_file, INGESTORS
from .log import setup_logger
from .solver import Lexibit


def format_ladder(ladder: list[str]) -> str:
    return " -> ".join(ladder)


def cmd_compile(args: argparse.Namespace) -> int:
    """Compile a raw word list into ``<length>-letter.json``."""
    compiler = LexiconCompiler(args.length)

    if args.download:
        result = hunspell.download_and_ingest(
            language=args.download,
            cache_dir=args.cache_dir,
            word_length=args.length,
            force=args.force,
        )
    else:
        result = ingest_file(args.wordlist, word_length=args.length, fmt=args.format)
    compiler.add_result(result)

    print(f"Source: {result.source_path}")
    print(f"  {result.total_valid:,}/{result.total_raw:,} entries kept")

    stats = compiler.build(args.output_dir)
    print(f"Words: {stats.total_words:,}")
    print(f"Edges: {stats.total_edges:,}")
    print(f"Isolated: {stats.isolated_words:,}")
    for filepath in stats.files_written:
        print(f"Wrote: {filepath}")
    return 0


def _load_solver(args: argparse.Namespace) -> Lexibit:
    return Lexibit.from_sources(args.lexicon, args.common)


def cmd_path(args: argparse.Namespace) -> int:
    solver = _load_solver(args)
    ladder = solver.path(args.start, args.end)
    if ladder is None:
        print("No path")
        return 0
    print(format_ladder(ladder))
    print(f"({len(ladder) - 1} steps)")
    return 0


def cmd_random(args: argparse.Namespace) -> int:
    solver = _load_solver(args)
    pair = solver.random_common_word_pair(max_attempts=args.max_attempts)
    if pair is None:
        print(f"No connected pair found in {args.max_attempts} attempts")
        return 1
    print(f"{pair.one} -> {pair.two}")
    print(format_ladder(pair.path))
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    solver = _load_solver(args)
    print(f"Word length: {solver.length}")
    print(f"Words: {solver.size():,}")
    print(f"Common words: {len(solver.common_words):,}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser, with defaults from config.json."""
    project_root = Path(__file__).parent.parent.parent

    parser = argparse.ArgumentParser(
        description="lexibit - Word ladder compiler and solver"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=cfg.get_default("verbose", False),
        help="Log progress",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        default=cfg.get_default("quiet", False),
        help="Log errors only",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    compile_parser = subparsers.add_parser(
        "compile", help="Compile a word list into a lexicon"
    )
    source = compile_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("wordlist", nargs="?", type=Path, help="Raw word list")
    source.add_argument(
        "--download",
        type=str,
        metavar="LANG",
        help=f"Download a Hunspell dictionary ({', '.join(hunspell.HUNSPELL_URLS)})",
    )
    compile_parser.add_argument(
        "--length",
        "-n",
        type=int,
        default=cfg.default_word_length(),
        help=f"Word length to compile (default: {cfg.default_word_length()})",
    )
    compile_parser.add_argument(
        "--format",
        "-f",
        choices=["auto", *INGESTORS],
        default=cfg.get_default("format", "auto"),
        help="Word list format (default: detect from extension)",
    )
    compile_parser.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        default=project_root / cfg.default_output_dir(),
        help="Output directory for compiled lexicons",
    )
    compile_parser.add_argument(
        "--cache-dir",
        "-c",
        type=Path,
        default=project_root / cfg.default_cache_dir(),
        help="Cache directory for downloaded sources",
    )
    compile_parser.add_argument(
        "--force",
        action="store_true",
        help="Force re-download of dictionaries",
    )
    compile_parser.set_defaults(func=cmd_compile)

    def add_sources(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--lexicon", "-l", required=True, help="Compiled lexicon path or URL"
        )
        sub.add_argument(
            "--common", help="Comma separated common word list path or URL"
        )

    path_parser = subparsers.add_parser("path", help="Find a shortest word ladder")
    path_parser.add_argument("start")
    path_parser.add_argument("end")
    add_sources(path_parser)
    path_parser.set_defaults(func=cmd_path)

    random_parser = subparsers.add_parser(
        "random", help="Pick a random connected pair of common words"
    )
    add_sources(random_parser)
    random_parser.add_argument(
        "--max-attempts",
        type=int,
        default=cfg.default_max_attempts(),
        help=f"Pairs to try before giving up (default: {cfg.default_max_attempts()})",
    )
    random_parser.set_defaults(func=cmd_random)

    info_parser = subparsers.add_parser("info", help="Describe a compiled lexicon")
    add_sources(info_parser)
    info_parser.set_defaults(func=cmd_info)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose:
        level = logging.INFO
    elif args.quiet:
        level = logging.ERROR
    setup_logger("lexibit", level)

    try:
        return args.func(args)
    except LexibitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (ValueError, OSError) as e:
        # Unknown download language, unreadable word list
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
