"""
Post-processing of frequency tables: stop-word incidence and symbol characters.
"""

import unicodedata

from tweet_stats.frequency import rank


def filter_stop_words(table, stop_words, limit: int):
    """
    Select the configured stop words from a token table.

    Args:
        table: Token frequency table.
        stop_words: Set of stop words to look for.
        limit: Maximum number of entries to return.
    Returns:
        (token, count) pairs in descending count order, every token a member
        of stop_words, at most `limit` long.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    found = [(tok, c) for tok, c in rank(table) if tok in stop_words]
    return found[:limit]


def _is_punctuation(ch: str) -> bool:
    return unicodedata.category(ch).startswith("P")


def is_symbol(ch: str) -> bool:
    """
    True for whitespace, punctuation, non-ASCII, or non-alphanumeric characters.

    Any one clause is enough; the clauses overlap.
    """
    return (
        ch.isspace()
        or _is_punctuation(ch)
        or not ch.isascii()
        or not ch.isalnum()
    )


def symbols_distribution(char_table):
    """Symbol characters of a character table, ranked like rank()."""
    return [(ch, c) for ch, c in rank(char_table) if is_symbol(ch)]


def symbol_label(ch: str) -> str:
    """Display label for a symbol: SPACE for whitespace, repr() otherwise."""
    if ch.isspace():
        return "SPACE"
    return repr(ch)
