"""
Post text normalization and tokenization.

normalize() maps raw post text to lowercase alphabetic words separated by single
spaces. The steps run in a fixed order; later patterns assume the earlier
cleanup already happened.
"""

import re
from typing import List

import pandas as pd

from tweet_stats.config import HashtagPolicy

URL_RE = re.compile(r"http\S+")
MENTION_RE = re.compile(r"@user\d+")
HASHTAG_MARKER_RE = re.compile(r"#(?=\w)")
HASHTAG_TOKEN_RE = re.compile(r"#\w+")
EMOJI_RE = re.compile(
    "["
    "\U0001F000-\U0001FAFF"  # pictographs, emoticons, transport, flags
    "\u2600-\u27BF"          # misc symbols and dingbats
    "\uFE0F"                 # variation selector-16
    "\u200D"                 # zero-width joiner
    "]+"
)
# non-word, non-space characters plus underscore (\w includes "_")
PUNCT_RE = re.compile(r"[^\w\s]|_")
WHITESPACE_RE = re.compile(r"\s+")


def _replace_numeric(text: str) -> str:
    return "".join(" " if ch.isnumeric() else ch for ch in text)


def normalize(text, hashtag_policy=HashtagPolicy.STRIP_MARKER) -> str:
    """
    Canonicalize one post.

    Removed spans (mentions, hashtags, emoji) are replaced by a space so the
    words around them stay separate, which keeps normalize() a fixed point on
    its own output.

    Args:
        text: Raw post text; None or a pandas missing value yields "".
        hashtag_policy: STRIP_MARKER keeps the hashtag word, STRIP_WHOLE_TOKEN
            drops it.
    Returns:
        Lowercase words separated by single spaces, no leading/trailing space.
    """
    if text is None or (not isinstance(text, str) and pd.isna(text)):
        return ""

    text = str(text).lower()
    text = URL_RE.sub("", text)
    text = MENTION_RE.sub(" ", text)
    if HashtagPolicy(hashtag_policy) is HashtagPolicy.STRIP_WHOLE_TOKEN:
        text = HASHTAG_TOKEN_RE.sub(" ", text)
    else:
        text = HASHTAG_MARKER_RE.sub(" ", text)
    text = EMOJI_RE.sub(" ", text)
    text = PUNCT_RE.sub(" ", text)
    text = _replace_numeric(text)
    return WHITESPACE_RE.sub(" ", text).strip()


def tokenize(normalized: str) -> List[str]:
    """Split normalized text on whitespace, dropping empty tokens."""
    return [tok for tok in normalized.split() if tok]


def clean_and_tokenize(text, hashtag_policy=HashtagPolicy.STRIP_MARKER) -> List[str]:
    """normalize() followed by tokenize()."""
    return tokenize(normalize(text, hashtag_policy))
