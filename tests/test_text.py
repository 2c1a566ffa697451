"""
Unit tests for normalization and tokenization
"""

import re

import pytest

from tweet_stats.config import HashtagPolicy
from tweet_stats.text import clean_and_tokenize, normalize, tokenize


class TestNormalize:
    """Tests for the normalization steps"""

    def test_example_post(self):
        """Test URL, mention and hashtag marker are removed"""
        assert normalize("Hello WORLD! #fun http://x.co @user1") == "hello world fun"

    def test_none_yields_empty_string(self):
        """Test missing text normalizes to empty string"""
        assert normalize(None) == ""

    def test_nan_yields_empty_string(self):
        """Test pandas missing value normalizes to empty string"""
        assert normalize(float("nan")) == ""

    def test_lowercases(self):
        assert normalize("ABC Def") == "abc def"

    def test_url_removed_up_to_whitespace(self):
        """Test the whole non-whitespace run after http is dropped"""
        assert normalize("see https://example.com/a?b=1 now") == "see now"

    def test_mention_removed(self):
        assert normalize("@user123 thanks @User7") == "thanks"

    def test_other_at_words_lose_only_marker(self):
        """Test non-@userN mentions are only stripped of punctuation"""
        assert normalize("@alice hi") == "alice hi"

    def test_hashtag_strip_marker_keeps_word(self):
        assert normalize("#Vaccine news", HashtagPolicy.STRIP_MARKER) == "vaccine news"

    def test_hashtag_strip_whole_token(self):
        assert normalize("#Vaccine news", HashtagPolicy.STRIP_WHOLE_TOKEN) == "news"

    def test_hashtag_policy_accepts_string_value(self):
        assert normalize("#a b", "strip_whole_token") == "b"

    def test_emoji_removed(self):
        assert normalize("great 😀🎉 day ☀️") == "great day"

    def test_emoji_between_words_does_not_fuse_them(self):
        assert normalize("good😀day") == "good day"

    def test_punctuation_and_underscore_replaced(self):
        assert normalize("wait...what?!snake_case") == "wait what snake case"

    def test_digits_replaced(self):
        assert normalize("covid19 in 2020") == "covid in"

    def test_whitespace_collapsed_and_trimmed(self):
        assert normalize("  a \t\n  b   ") == "a b"

    def test_only_noise_yields_empty(self):
        assert normalize("!!! 123 @user9 http://x 😀") == ""

    @pytest.mark.parametrize(
        "text",
        [
            "Hello WORLD! #fun http://x.co @user1",
            "ht@user1tpx and h😀ttp://oops",
            "İstanbul ÉCOLE straße",
            "snake_case #tag_2 ½ ² x²",
            "  multiple   spaces\tand\nnewlines ",
            "",
        ],
    )
    def test_idempotent(self, text):
        """Test normalize is a fixed point on its own output"""
        once = normalize(text)
        assert normalize(once) == once

    @pytest.mark.parametrize("policy", list(HashtagPolicy))
    def test_output_is_lowercase_words(self, policy):
        """Test output only holds lowercase alphabetic words and single spaces"""
        out = normalize("Mixed CASE, 42 #Tags @user3 https://t.co/x :) 🚀 end.", policy)
        assert out == out.strip()
        assert "  " not in out
        for tok in out.split(" "):
            assert tok.isalpha()
            assert tok == tok.lower()
        assert not re.search(r"[#@\d]", out)


class TestTokenize:
    """Tests for whitespace tokenization"""

    def test_splits_on_whitespace(self):
        assert tokenize("hello world fun") == ["hello", "world", "fun"]

    def test_empty_string_has_no_tokens(self):
        assert tokenize("") == []

    def test_drops_empty_tokens(self):
        assert tokenize("  a   b ") == ["a", "b"]

    def test_clean_and_tokenize_example(self):
        assert clean_and_tokenize("Hello WORLD! #fun http://x.co @user1") == ["hello", "world", "fun"]
        assert clean_and_tokenize("hello again") == ["hello", "again"]

    def test_clean_and_tokenize_none(self):
        assert clean_and_tokenize(None) == []
