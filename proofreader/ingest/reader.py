"""
Compressed Delimited Input

Opens a gzip-compressed delimited file and reads its header row. Any
failure up to and including the header is an InputError; failures after
that belong to the record source and surface as StreamError.
"""

import csv
import gzip
import logging
import os
import zlib
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

from proofreader.errors import InputError


logger = logging.getLogger(__name__)


@contextmanager
def open_delimited(path: str, delimiter: str = "|") -> Iterator[Tuple[List[str], Iterator[List[str]]]]:
    """Open a compressed delimited file.

    Usage:
        with open_delimited("events.csv.gz", "|") as (header, rows):
            for row in rows:
                ...

    Args:
        path: Path to the gzip-compressed input.
        delimiter: Single-character field separator.

    Yields:
        Tuple of (header labels, iterator over the remaining rows).

    Raises:
        InputError: If the file is missing, unreadable or not valid gzip.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise InputError(f"Could not find input file {path}")
    if not file_path.is_file():
        raise InputError(f"Input path is not a file: {path}")
    if not os.access(file_path, os.R_OK):
        raise InputError(f"Permission denied reading input file {path}")

    try:
        stream = gzip.open(file_path, "rt", encoding="utf-8", newline="")
    except OSError as e:
        raise InputError(f"Could not open input file {path} ({e})") from e

    with stream:
        reader = csv.reader(stream, delimiter=delimiter)
        try:
            header = next(reader, None)
        except (OSError, EOFError, zlib.error, UnicodeDecodeError, csv.Error) as e:
            raise InputError(f"Could not read input file {path} ({e})") from e

        if header is None:
            logger.warning(f"Input file {path} is empty")
            header = []

        yield header, reader
