"""
Score a document index and emit the word-cloud terms as JSON.

Usage:
  uv run python -m scripts.build_wordcloud data/wordcloud/index.json
  uv run python -m scripts.build_wordcloud index.jsonl --top-k 50 --output words.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from src.relevance import (
    RelevanceScorer,
    ScorerConfig,
    load_documents,
    to_cloud_words,
)

logger = logging.getLogger(__name__)


def run(
    index_path: Path,
    *,
    config: ScorerConfig,
    output: Path | None = None,
) -> list[dict]:
    documents = load_documents(index_path)
    terms = RelevanceScorer(config=config).score(documents)
    words = to_cloud_words(terms)
    payload = json.dumps(words, indent=2)
    if output is None:
        print(payload)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(payload + "\n", encoding="utf-8")
        logger.info("Wrote %s terms from %s documents to %s", len(words), len(documents), output)
    return words


def main(argv: list[str] | None = None) -> int:
    defaults = ScorerConfig.from_env()
    parser = argparse.ArgumentParser(
        description="Rank the salient terms of a document index for a word cloud.",
    )
    parser.add_argument("index", type=Path, help="JSON array or JSONL file of {id|link, text}")
    parser.add_argument("--top-k", type=int, default=defaults.top_k)
    parser.add_argument("--min-size", type=float, default=defaults.output_range[0])
    parser.add_argument("--max-size", type=float, default=defaults.output_range[1])
    parser.add_argument("--min-term-length", type=int, default=defaults.min_term_length)
    parser.add_argument("--workers", type=int, default=defaults.workers)
    parser.add_argument("--output", type=Path, default=None, help="Write JSON here instead of stdout")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ScorerConfig(
            top_k=args.top_k,
            output_range=(args.min_size, args.max_size),
            min_term_length=args.min_term_length,
            workers=args.workers,
        )
        run(args.index, config=config, output=args.output)
    except (FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
