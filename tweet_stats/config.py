"""
Analyzer configuration: stop words, ranking limits and pipeline policies.

The configuration is a frozen value passed explicitly to the analyzer; nothing
in the pipeline reads module-level state other than the defaults below.
"""

from dataclasses import dataclass, field
from enum import Enum

from nltk import download
from nltk.corpus import stopwords

# -----------------------------
# Defaults
# -----------------------------
DEFAULT_STOP_WORDS = frozenset(
    {
        "although", "happen", "new", "none", "form",
        "something", "where", "try", "out", "medical",
    }
)
TOP_N_TOKENS = 20
TOP_N_STOP_WORDS = 10
TOP_N_CHARS = 20
TOP_N_SYMBOLS = 20


class HashtagPolicy(str, Enum):
    """How the normalizer treats `#word` tokens."""

    STRIP_MARKER = "strip_marker"
    STRIP_WHOLE_TOKEN = "strip_whole_token"


class CharSource(str, Enum):
    """Which text feeds the character frequency table."""

    RAW = "raw"
    NORMALIZED = "normalized"


class DateErrorPolicy(str, Enum):
    """What to do with a record whose timestamp cannot be parsed."""

    ABORT = "abort"
    SKIP = "skip"


@dataclass(frozen=True)
class AnalyzerConfig:
    stop_words: frozenset = field(default=DEFAULT_STOP_WORDS)
    top_n_tokens: int = TOP_N_TOKENS
    top_n_stop_words: int = TOP_N_STOP_WORDS
    top_n_chars: int = TOP_N_CHARS
    top_n_symbols: int = TOP_N_SYMBOLS
    hashtag_policy: HashtagPolicy = HashtagPolicy.STRIP_MARKER
    char_source: CharSource = CharSource.RAW
    date_error_policy: DateErrorPolicy = DateErrorPolicy.ABORT
    dayfirst: bool = True

    def __post_init__(self):
        # accept any iterable of words, store an immutable set
        object.__setattr__(self, "stop_words", frozenset(self.stop_words))
        object.__setattr__(self, "hashtag_policy", HashtagPolicy(self.hashtag_policy))
        object.__setattr__(self, "char_source", CharSource(self.char_source))
        object.__setattr__(
            self, "date_error_policy", DateErrorPolicy(self.date_error_policy)
        )
        for name in ("top_n_tokens", "top_n_stop_words", "top_n_chars", "top_n_symbols"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")


def nltk_stop_words(language: str = "english"):
    """
    Load the NLTK stop-word list for one language.

    Args:
        language: Corpus file name under nltk_data/corpora/stopwords.
    Returns:
        frozenset of lowercase stop words.
    """
    # Ensure required NLTK data is present (no-op if already installed)
    download("stopwords", quiet=True)
    return frozenset(w.lower() for w in stopwords.words(language))
