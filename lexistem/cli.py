#!/usr/bin/env python3
"""
Lexistem CLI

Usage:
    lexistem stem WORD [WORD...] [--strict]
    lexistem keywords [PATH] [--limit LIMIT]
    lexistem titles [PATH]
    lexistem analyze [PATH] [--json]

PATH defaults to "-" (stdin).
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from lexistem.config import AnalyzerConfig, StemmerConfig
from lexistem.errors import LexistemError
from lexistem.keywords import KeywordAnalyzer, top_keywords
from lexistem.stemmer import PorterStemmer
from lexistem.titles import extract_titles

logger = logging.getLogger("lexistem.cli")


def read_text(path: str) -> str:
    """Read a file, or stdin for "-"."""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def cmd_stem(args):
    """Stem each word given on the command line."""
    config = StemmerConfig(strict=args.strict or StemmerConfig.from_env().strict)
    stemmer = PorterStemmer(config)
    for word in args.words:
        print(f"{word}\t{stemmer.stem(word)}")


def cmd_keywords(args):
    """Print ranked keywords."""
    config = AnalyzerConfig.from_env()
    analysis = KeywordAnalyzer(config).analyze(read_text(args.path))
    keywords = top_keywords(analysis.keywords, args.limit)

    if not keywords:
        print("No keywords found.")
        return
    print(f"{len(keywords)} keywords from {analysis.word_count} words:\n")
    for i, kw in enumerate(keywords, 1):
        print(f"  {i:3}. {kw.word:20} {kw.rank:.4f}")


def cmd_titles(args):
    """Print capitalised titles with their counts."""
    titles = extract_titles(read_text(args.path))
    if not titles:
        print("No titles found.")
        return
    for t in titles:
        print(f"  {t.count:3}x {t.text}")


def cmd_analyze(args):
    """Print a full analysis summary, or the whole analysis as JSON."""
    analysis = KeywordAnalyzer(AnalyzerConfig.from_env()).analyze(read_text(args.path))

    if args.json:
        print(json.dumps(asdict(analysis), indent=2))
        return

    sentences = sum(len(p.sentences) for p in analysis.paragraphs)
    print("=== Lexistem Analysis ===\n")
    print(f"Words: {analysis.word_count}")
    print(f"Sentences: {sentences}")
    print(f"Paragraphs: {len(analysis.paragraphs)}")

    print("\nTop keywords:")
    for kw in analysis.keywords[:10]:
        print(f"  {kw.word}: {kw.rank:.4f}")

    if analysis.titles:
        print("\nTitles:")
        for t in analysis.titles:
            print(f"  {t.text} ({t.count})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lexistem",
        description="lexistem: Porter stemming and keyword analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # stem
    stem_parser = subparsers.add_parser("stem", help="Stem words")
    stem_parser.add_argument("words", nargs="+", help="Lowercase words")
    stem_parser.add_argument("--strict", action="store_true", help="Reject characters outside a-z")

    # keywords
    kw_parser = subparsers.add_parser("keywords", help="Rank keywords in a text")
    kw_parser.add_argument("path", nargs="?", default="-", help="Input file (default: stdin)")
    kw_parser.add_argument("--limit", "-l", type=int, default=None)

    # titles
    titles_parser = subparsers.add_parser("titles", help="Extract capitalised titles")
    titles_parser.add_argument("path", nargs="?", default="-", help="Input file (default: stdin)")

    # analyze
    analyze_parser = subparsers.add_parser("analyze", help="Full keyword analysis")
    analyze_parser.add_argument("path", nargs="?", default="-", help="Input file (default: stdin)")
    analyze_parser.add_argument("--json", action="store_true", help="Emit JSON")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [lexistem] %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    commands = {
        "stem": cmd_stem,
        "keywords": cmd_keywords,
        "titles": cmd_titles,
        "analyze": cmd_analyze,
    }

    try:
        commands[args.command](args)
    except LexistemError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
