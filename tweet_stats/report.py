"""
Corpus-level statistics and report assembly.

CorpusAnalyzer derives every table from its records on first use and keeps the
results in a StatsCache. replace_corpus() swaps the records and clears the
cache; nothing else mutates analyzer state.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from tweet_stats.config import AnalyzerConfig, CharSource
from tweet_stats.dates import aggregate_by_month
from tweet_stats.filters import filter_stop_words, symbols_distribution
from tweet_stats.frequency import count, top
from tweet_stats.text import clean_and_tokenize, normalize

logger = logging.getLogger(__name__)


class StatsCache:
    """Memoized results for one corpus."""

    def __init__(self):
        self._values = {}

    def get_or_compute(self, name, compute):
        if name not in self._values:
            logger.debug(f"Computing {name}")
            self._values[name] = compute()
        return self._values[name]

    def invalidate(self):
        self._values.clear()

    def __contains__(self, name):
        return name in self._values

    def __len__(self):
        return len(self._values)


@dataclass(frozen=True)
class CorpusReport:
    n_records: int
    word_count: int
    vocabulary_size: int
    top_tokens: List[Tuple[str, int]]
    stop_words: List[Tuple[str, int]]
    char_ranking: List[Tuple[str, int]]
    symbols: List[Tuple[str, int]]
    monthly: Dict[str, int]


class CorpusAnalyzer:
    """Descriptive statistics over an in-memory list of Records."""

    def __init__(self, records, config: AnalyzerConfig = None):
        self.config = config if config is not None else AnalyzerConfig()
        self.cache = StatsCache()
        self._records = tuple(records)

    @property
    def records(self):
        return self._records

    def replace_corpus(self, records):
        """Swap in a new corpus and drop every cached table."""
        self._records = tuple(records)
        self.cache.invalidate()

    # -----------------------------
    # Tokens
    # -----------------------------
    def _record_tokens(self):
        policy = self.config.hashtag_policy
        return self.cache.get_or_compute(
            "record_tokens",
            lambda: [clean_and_tokenize(r.text, policy) for r in self._records],
        )

    @property
    def token_table(self):
        return self.cache.get_or_compute(
            "token_table",
            lambda: count(tok for toks in self._record_tokens() for tok in toks),
        )

    @property
    def word_count(self) -> int:
        """Number of tokens across all records."""
        return self.cache.get_or_compute(
            "word_count", lambda: sum(len(toks) for toks in self._record_tokens())
        )

    @property
    def vocabulary_size(self) -> int:
        return len(self.token_table)

    def top_tokens(self, n: int = None):
        n = self.config.top_n_tokens if n is None else n
        return top(self.token_table, n)

    def common_stop_words(self, limit: int = None):
        limit = self.config.top_n_stop_words if limit is None else limit
        return filter_stop_words(self.token_table, self.config.stop_words, limit)

    # -----------------------------
    # Characters
    # -----------------------------
    def _char_texts(self):
        for r in self._records:
            if r.text is None:
                continue
            if self.config.char_source is CharSource.NORMALIZED:
                yield normalize(r.text, self.config.hashtag_policy)
            else:
                yield r.text

    @property
    def char_table(self):
        return self.cache.get_or_compute(
            "char_table",
            lambda: count(ch for text in self._char_texts() for ch in text),
        )

    def top_characters(self, n: int = None):
        n = self.config.top_n_chars if n is None else n
        return top(self.char_table, n)

    def symbols_distribution(self, n: int = None):
        n = self.config.top_n_symbols if n is None else n
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        symbols = self.cache.get_or_compute(
            "symbols", lambda: symbols_distribution(self.char_table)
        )
        return symbols[:n]

    # -----------------------------
    # Dates
    # -----------------------------
    @property
    def posts_by_month(self):
        return self.cache.get_or_compute(
            "posts_by_month",
            lambda: aggregate_by_month(
                self._records, self.config.date_error_policy, self.config.dayfirst
            ),
        )

    def report(self) -> CorpusReport:
        """Assemble every statistic into one read-only report."""
        return CorpusReport(
            n_records=len(self._records),
            word_count=self.word_count,
            vocabulary_size=self.vocabulary_size,
            top_tokens=self.top_tokens(),
            stop_words=self.common_stop_words(),
            char_ranking=self.top_characters(),
            symbols=self.symbols_distribution(),
            monthly=dict(self.posts_by_month),
        )
