#!/usr/bin/env python3
"""
Rank the lines of a text file against a query with BM25.

Each non-empty line is one document. Defaults for k1, b and gamma come from
BM25_K1 / BM25_B / BM25_GAMMA in .env.local or .env (project root), then the
process environment; command-line flags win.

Usage:
    python scripts/search_corpus.py docs.txt "kubernetes deployment" --top 5
    python scripts/search_corpus.py docs.txt deploy --partial
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from bm25_corpus import Corpus
from bm25_corpus.logging_config import setup_logging

project_root = Path(__file__).parent.parent

logger = logging.getLogger("search_corpus")


def load_environment() -> None:
    """Load .env.local (highest priority) or .env from the project root"""
    env_local = project_root / ".env.local"
    env_file = project_root / ".env"
    if env_local.exists():
        load_dotenv(env_local)
    elif env_file.exists():
        load_dotenv(env_file)


def _env_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}")


def read_documents(path: Path) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="BM25 search over the lines of a text file")
    parser.add_argument("file", type=Path, help="UTF-8 text file, one document per line")
    parser.add_argument("query", help="Free-text query")
    parser.add_argument("--partial", action="store_true", help="Match query terms as substrings")
    parser.add_argument("--top", type=int, default=10, help="Number of results to print (default: 10)")
    parser.add_argument("--k1", type=float, default=None)
    parser.add_argument("--b", type=float, default=None)
    parser.add_argument("--gamma", type=float, default=None)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_environment()

    log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
    setup_logging(
        log_file=os.getenv("LOG_FILE") or None,
        console_level=getattr(logging, log_level, logging.WARNING)
    )

    args = build_parser().parse_args(argv)

    try:
        options = {
            "k1": args.k1 if args.k1 is not None else _env_float("BM25_K1"),
            "b": args.b if args.b is not None else _env_float("BM25_B"),
            "gamma": args.gamma if args.gamma is not None else _env_float("BM25_GAMMA"),
        }
        documents = read_documents(args.file)
        corpus = Corpus(documents, options)
    except (OSError, ValueError) as e:  # includes CorpusConfigurationError
        logger.error(f"Cannot build corpus from {args.file}: {e}")
        return 1

    results = corpus.search(args.query, partial=args.partial)
    logger.info(f"{len(results)} of {len(corpus)} documents matched {args.query!r}")

    for rank, result in enumerate(results[:args.top], start=1):
        print(f"{rank:3d}. {result.score:.4f}  {result.document}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
