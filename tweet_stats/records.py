"""
Corpus records and the DataFrame adapter used by the command-line loader.
"""

from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

TEXT_COLUMN = "text"
TIMESTAMP_COLUMN = "date_created"


@dataclass(frozen=True)
class Record:
    """One post: possibly missing text plus a date string."""

    text: Optional[str]
    timestamp: str


def records_from_frame(
    df: pd.DataFrame,
    text_column: str = TEXT_COLUMN,
    timestamp_column: str = TIMESTAMP_COLUMN,
) -> List[Record]:
    """
    Convert a loaded tweet table into Records, preserving row order.

    Args:
        df: DataFrame as returned by pandas.read_csv on the tweet export.
        text_column: Column holding the post body.
        timestamp_column: Column holding the creation date.
    Returns:
        List of Record with missing text mapped to None.
    """
    required_cols = {text_column, timestamp_column}
    missing = required_cols - set(df.columns)
    if missing:
        raise ValueError(f"Missing required columns: {sorted(missing)}")

    records = []
    for text, timestamp in zip(df[text_column], df[timestamp_column]):
        text = None if pd.isna(text) else str(text)
        timestamp = None if pd.isna(timestamp) else str(timestamp)
        records.append(Record(text=text, timestamp=timestamp))
    return records
