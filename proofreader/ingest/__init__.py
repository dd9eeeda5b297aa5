"""
Input reading and record sampling.
"""

from proofreader.ingest.reader import open_delimited
from proofreader.ingest.source import FIRST_SEQUENCE_NUMBER, Record, RecordSource

__all__ = [
    "FIRST_SEQUENCE_NUMBER",
    "Record",
    "RecordSource",
    "open_delimited",
]
