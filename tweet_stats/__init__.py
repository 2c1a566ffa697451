from tweet_stats.config import (
    AnalyzerConfig,
    CharSource,
    DateErrorPolicy,
    HashtagPolicy,
    DEFAULT_STOP_WORDS,
)
from tweet_stats.dates import DateParseError, aggregate_by_month
from tweet_stats.filters import filter_stop_words, is_symbol, symbols_distribution
from tweet_stats.frequency import count, rank, top
from tweet_stats.records import Record, records_from_frame
from tweet_stats.report import CorpusAnalyzer, CorpusReport, StatsCache
from tweet_stats.text import normalize, tokenize
