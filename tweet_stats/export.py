"""
Hand a finished CorpusReport to downstream consumers as tables and JSON.

Outputs (under out_dir, with `prefix` prepended):
    <prefix>_top_tokens.csv      term, count
    <prefix>_stop_words.csv      term, count
    <prefix>_char_freqs.csv      char, label, count
    <prefix>_symbols.csv         char, label, count
    <prefix>_posts_by_month.csv  month, count
    <prefix>_summary.json        scalar statistics plus the monthly series
"""

import os
import json

import pandas as pd

from tweet_stats.filters import symbol_label


def ranking_frame(pairs, key_name: str = "term") -> pd.DataFrame:
    """
    Build a two-column table from ranked (key, count) pairs.

    Args:
        pairs: Output of rank()/top() or a filtered ranking.
        key_name: Name for the key column.
    Returns:
        DataFrame with columns [key_name, "count"] in the given order.
    """
    return pd.DataFrame(list(pairs), columns=[key_name, "count"])


def char_frame(pairs) -> pd.DataFrame:
    """Character ranking with a display label column for chart legends."""
    df = ranking_frame(pairs, key_name="char")
    df.insert(1, "label", [symbol_label(ch) for ch in df["char"]])
    return df


def monthly_frame(monthly) -> pd.DataFrame:
    return pd.DataFrame(
        {"month": list(monthly.keys()), "count": list(monthly.values())}
    )


def summary_dict(report) -> dict:
    return {
        "n_records": report.n_records,
        "word_count": report.word_count,
        "vocabulary_size": report.vocabulary_size,
        "posts_by_month": dict(report.monthly),
    }


def write_report(report, out_dir: str, prefix: str = "corpus"):
    """
    Persist every table of a report.

    Returns:
        Dict of output name -> file path.
    """
    os.makedirs(out_dir, exist_ok=True)
    paths = {
        "top_tokens": os.path.join(out_dir, f"{prefix}_top_tokens.csv"),
        "stop_words": os.path.join(out_dir, f"{prefix}_stop_words.csv"),
        "char_freqs": os.path.join(out_dir, f"{prefix}_char_freqs.csv"),
        "symbols": os.path.join(out_dir, f"{prefix}_symbols.csv"),
        "posts_by_month": os.path.join(out_dir, f"{prefix}_posts_by_month.csv"),
        "summary": os.path.join(out_dir, f"{prefix}_summary.json"),
    }

    ranking_frame(report.top_tokens).to_csv(paths["top_tokens"], index=False)
    ranking_frame(report.stop_words).to_csv(paths["stop_words"], index=False)
    char_frame(report.char_ranking).to_csv(paths["char_freqs"], index=False)
    char_frame(report.symbols).to_csv(paths["symbols"], index=False)
    monthly_frame(report.monthly).to_csv(paths["posts_by_month"], index=False)
    with open(paths["summary"], "w") as f:
        json.dump(summary_dict(report), f, indent=2)

    return paths
