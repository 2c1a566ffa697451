"""
Pytest configuration and shared fixtures
"""

import pytest
import tempfile
import shutil

import pandas as pd

from tweet_stats.records import Record


@pytest.fixture
def temp_dir():
    """Create temporary directory for test files"""
    dirpath = tempfile.mkdtemp()
    yield dirpath
    shutil.rmtree(dirpath)


@pytest.fixture
def example_records():
    """Two-post corpus with a URL, a mention and a hashtag"""
    return [
        Record(text="Hello WORLD! #fun http://x.co @user1", timestamp="2024-01-05"),
        Record(text="hello again", timestamp="2024-02-10"),
    ]


@pytest.fixture
def tweet_records():
    """Larger corpus with stop words, emoji, digits and a missing text"""
    return [
        Record(text="Something new will happen out there #Medical", timestamp="2023-11-02 10:15:00"),
        Record(text="Try this new form 😀 now!!! http://t.co/abc", timestamp="2023-11-20"),
        Record(text=None, timestamp="2023-12-01"),
        Record(text="@user42 where is the new clinic? call 555-0199", timestamp="2024-01-15T08:00:00Z"),
        Record(text="none of it is new", timestamp="Jan 30 2024"),
    ]


@pytest.fixture
def tweet_frame():
    """DataFrame shaped like the tweet CSV export"""
    return pd.DataFrame(
        {
            "tweet_id": [1, 2, 3],
            "text": ["First post!", None, "third #post"],
            "date_created": ["2024-03-01", "2024-03-15", "2024-04-02"],
        }
    )
