"""
Bucket records by calendar month of their timestamp.

Timestamps are parsed with pandas.to_datetime, which accepts ISO dates,
datetimes with offsets and most free-form date strings. Slash and dot dates
such as "05/01/2024" are read day first by default; strings that start with a
four-digit year are always read year-month-day. Bucket keys look like
"2024-01" and sort chronologically as plain strings.
"""

import logging
import re
from collections import Counter

import pandas as pd

from tweet_stats.config import DateErrorPolicy

logger = logging.getLogger(__name__)

YEAR_FIRST_RE = re.compile(r"^\s*\d{4}[-/.]")


class DateParseError(ValueError):
    """A record's timestamp could not be parsed into a calendar date."""

    def __init__(self, index, value):
        self.index = index
        self.value = value
        super().__init__(f"Cannot parse timestamp {value!r} of record {index}")


def parse_timestamp(value, dayfirst: bool = True) -> pd.Timestamp:
    """
    Parse one timestamp string.

    Args:
        value: Date or datetime string.
        dayfirst: Read ambiguous dates like 05/01/2024 as 5 January. Every
            record is parsed with the same order.

    Raises:
        ValueError: when the value is missing or not a recognizable date.
    """
    if value is None:
        raise ValueError("missing timestamp")
    try:
        ts = pd.to_datetime(
            value, dayfirst=dayfirst and not YEAR_FIRST_RE.match(str(value))
        )
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(str(e)) from e
    if pd.isna(ts):
        raise ValueError(f"not a date: {value!r}")
    return ts


def month_key(value, dayfirst: bool = True) -> str:
    """Calendar bucket key "YYYY-MM" for one timestamp string."""
    ts = parse_timestamp(value, dayfirst)
    return f"{ts.year:04d}-{ts.month:02d}"


def aggregate_by_month(records, on_error=DateErrorPolicy.ABORT, dayfirst: bool = True):
    """
    Count records per calendar month.

    Args:
        records: Iterable of Record.
        on_error: ABORT raises DateParseError at the first bad timestamp,
            SKIP logs a warning and leaves the record out.
        dayfirst: Passed to parse_timestamp for every record.
    Returns:
        Dict "YYYY-MM" -> count, in ascending key order.
    """
    on_error = DateErrorPolicy(on_error)
    monthly_counts = Counter()
    n_skipped = 0

    for i, record in enumerate(records):
        try:
            key = month_key(record.timestamp, dayfirst)
        except ValueError as e:
            if on_error is DateErrorPolicy.ABORT:
                raise DateParseError(i, record.timestamp) from e
            logger.warning(f"Skipping record {i}: unparseable timestamp {record.timestamp!r}")
            n_skipped += 1
            continue
        monthly_counts[key] += 1

    if n_skipped:
        logger.info(f"Skipped {n_skipped} records with unparseable timestamps")
    return dict(sorted(monthly_counts.items()))
