"""
Compute descriptive statistics for a tweet export.

Inputs:
    A CSV of posts with a text column and a creation-date column
    (default data/raw/fake_tweets.csv with columns 'text' and 'date_created').
Outputs:
    data/results/<prefix>_top_tokens.csv, _stop_words.csv, _char_freqs.csv,
    _symbols.csv, _posts_by_month.csv and _summary.json, ready for charting.
Usage:
    python scripts/1_corpus_statistics.py --csv data/raw/fake_tweets.csv --top_n 20
"""

import os
import argparse
import logging

import pandas as pd

from tweet_stats.config import (
    AnalyzerConfig,
    CharSource,
    DateErrorPolicy,
    HashtagPolicy,
    DEFAULT_STOP_WORDS,
    nltk_stop_words,
)
from tweet_stats.export import write_report
from tweet_stats.filters import symbol_label
from tweet_stats.records import records_from_frame
from tweet_stats.report import CorpusAnalyzer

# -----------------------------
# Configuration
# -----------------------------
DATA_DIR = "data"
RAW_CSV = os.path.join(DATA_DIR, "raw", "fake_tweets.csv")
RESULTS_DIR = os.path.join(DATA_DIR, "results")


def print_ranking(title, pairs, label=str):
    print(f"\n{title}")
    print("-" * len(title))
    for key, n in pairs:
        print(f"{label(key)}: {n}")


def main():
    """Load the CSV, run the analyzer, print a summary and write the tables."""
    parser = argparse.ArgumentParser()
    parser.add_argument("--csv", type=str, default=RAW_CSV, help=f"Input CSV (default: {RAW_CSV})")
    parser.add_argument("--text_column", type=str, default="text")
    parser.add_argument("--date_column", type=str, default="date_created")
    parser.add_argument(
        "--top_n",
        type=int,
        default=20,
        help="Number of top tokens, characters and symbols to report (default: 20)",
    )
    parser.add_argument(
        "--top_n_stop_words",
        type=int,
        default=10,
        help="Number of stop words to report (default: 10)",
    )
    parser.add_argument(
        "--hashtag_policy",
        type=str,
        default=HashtagPolicy.STRIP_MARKER.value,
        choices=[p.value for p in HashtagPolicy],
    )
    parser.add_argument(
        "--char_source",
        type=str,
        default=CharSource.RAW.value,
        choices=[c.value for c in CharSource],
        help="Count characters of the raw or the normalized text (default: raw)",
    )
    parser.add_argument(
        "--on_date_error",
        type=str,
        default=DateErrorPolicy.ABORT.value,
        choices=[p.value for p in DateErrorPolicy],
    )
    parser.add_argument(
        "--month_first",
        action="store_true",
        help="Read ambiguous dates like 05/01/2024 as May 5 (default: day first)",
    )
    parser.add_argument(
        "--nltk_stopwords",
        action="store_true",
        help="Use the NLTK English stop-word list instead of the built-in set",
    )
    parser.add_argument("--prefix", type=str, default="corpus")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = AnalyzerConfig(
        stop_words=nltk_stop_words() if args.nltk_stopwords else DEFAULT_STOP_WORDS,
        top_n_tokens=args.top_n,
        top_n_stop_words=args.top_n_stop_words,
        top_n_chars=args.top_n,
        top_n_symbols=args.top_n,
        hashtag_policy=args.hashtag_policy,
        char_source=args.char_source,
        date_error_policy=args.on_date_error,
        dayfirst=not args.month_first,
    )

    print(f"Loading posts from {args.csv} ...")
    df = pd.read_csv(args.csv)
    records = records_from_frame(df, args.text_column, args.date_column)
    if not records:
        print("No data loaded from CSV. Nothing to do.")
        return
    print(f"Loaded {len(records)} posts.")

    report = CorpusAnalyzer(records, config).report()

    print("\n=== Descriptive statistics ===")
    print(f"Total word count: {report.word_count}")
    print(f"Vocabulary size:  {report.vocabulary_size}")
    print_ranking(f"Top {config.top_n_tokens} tokens", report.top_tokens)
    print_ranking("Character frequency", report.char_ranking, label=symbol_label)
    print_ranking("Most common symbols", report.symbols, label=symbol_label)
    print_ranking("Stop words identified", report.stop_words)
    print_ranking("Posts per month", report.monthly.items())

    paths = write_report(report, RESULTS_DIR, prefix=args.prefix)
    print()
    for name, path in paths.items():
        print(f"Wrote {name} to {path}")


if __name__ == "__main__":
    main()
