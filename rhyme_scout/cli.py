"""Command-line entry point for Rhyme Scout."""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional, Sequence

from rhyme_scout.config import Settings
from rhyme_scout.core.categories import ALL_CATEGORIES, parse_categories
from rhyme_scout.core.strength import score_rhyme_breakdown, strength_label
from rhyme_scout.core.stress import estimate_stress
from rhyme_scout.utils.logging_config import configure_logging


def _parse_list(values: Optional[Sequence[str]]) -> List[str]:
    """Normalize CLI list arguments.

    Accepts ``--category rhyme,near_rhyme`` as well as separate tokens.
    """

    if not values:
        return []

    items: List[str] = []
    for value in values:
        parts = [part.strip() for part in str(value).split(",")]
        items.extend(part for part in parts if part)
    return items


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rhyme-scout",
        description="Find rhymes and estimate stress patterns from spelling.",
    )
    parser.add_argument("--log-level", help="Override RHYMES_LOG_LEVEL for this run.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Query the word-relations API.")
    search.add_argument("word", help="Word to find rhymes for.")
    search.add_argument(
        "--category",
        nargs="*",
        metavar="NAME",
        help="Categories to query: " + ", ".join(category.value for category in ALL_CATEGORIES) + ".",
    )
    search.add_argument("--syllables", type=_positive_int, help="Only keep words with this many syllables.")
    search.add_argument("--max", dest="max_results", type=_positive_int, help="Results per category.")
    search.add_argument("--json", action="store_true", help="Emit JSON instead of markdown.")
    search.add_argument("--no-strength", action="store_true", help="Hide rhyme strength in text output.")

    analyze = subparsers.add_parser("analyze", help="Estimate stress for a word offline.")
    analyze.add_argument("word")
    analyze.add_argument("--syllables", type=_positive_int, help="Known syllable count.")
    analyze.add_argument("--json", action="store_true")

    score = subparsers.add_parser("score", help="Score how strongly two words rhyme, offline.")
    score.add_argument("word")
    score.add_argument("candidate")
    score.add_argument("--api-score", type=float, default=0.0, help="Relevance score from the API.")
    score.add_argument("--json", action="store_true")

    return parser


def _run_search(args: argparse.Namespace, settings: Settings) -> int:
    from rhyme_scout.app.app import RhymeScoutApp

    try:
        categories = parse_categories(_parse_list(args.category))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    app = RhymeScoutApp(settings)
    results = app.search(
        args.word,
        categories=categories,
        syllables=args.syllables,
        max_results=args.max_results,
    )
    if args.json:
        json.dump(results.as_dict(), sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
    else:
        print(app.format_results(results, show_strength=not args.no_strength))
    return 0


def _run_analyze(args: argparse.Namespace) -> int:
    estimate = estimate_stress(args.word, args.syllables)
    if args.json:
        payload = {
            "word": args.word,
            "syllables": estimate.syllable_count,
            "stress_pattern": estimate.pattern,
            "breakdown": estimate.breakdown,
        }
        json.dump(payload, sys.stdout, ensure_ascii=False)
        sys.stdout.write("\n")
        return 0
    print(f"{args.word}: {estimate.syllable_count} syllables, {estimate.display} ({'-'.join(estimate.breakdown)})")
    return 0


def _run_score(args: argparse.Namespace) -> int:
    breakdown = score_rhyme_breakdown(args.word, args.candidate, args.api_score)
    if args.json:
        payload = {
            "word": args.word,
            "candidate": args.candidate,
            "strength": breakdown.total,
            "label": strength_label(breakdown.total),
            "api": breakdown.api,
            "suffix": breakdown.suffix,
            "vowel": breakdown.vowel,
            "consonant": breakdown.consonant,
        }
        json.dump(payload, sys.stdout, ensure_ascii=False)
        sys.stdout.write("\n")
        return 0
    print(f"{args.word} / {args.candidate}: {breakdown.total} ({strength_label(breakdown.total)})")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    configure_logging(args.log_level or settings.log_level)

    if args.command == "search":
        return _run_search(args, settings)
    if args.command == "analyze":
        return _run_analyze(args)
    return _run_score(args)


if __name__ == "__main__":
    raise SystemExit(main())
