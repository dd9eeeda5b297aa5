"""
Record Source

Turns decoded rows into line-numbered Records and decides, record by
record, whether each one is sampled into validation. Sequence numbers are
assigned before the sampling decision so they always match the original
record position in the file. Blank lines are not records and take no
sequence number.
"""

import csv
import logging
import random
import zlib
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional

from proofreader.errors import StreamError

if TYPE_CHECKING:
    from proofreader.validation.sink import DiagnosticSink


logger = logging.getLogger(__name__)

# Row 1 is the header, so the first record is row 2
FIRST_SEQUENCE_NUMBER = 2

READ_ERRORS = (csv.Error, OSError, EOFError, zlib.error, UnicodeDecodeError)


@dataclass(frozen=True)
class Record:
    """One decoded row and its original position in the file."""
    fields: List[str]
    sequence_number: int


class RecordSource:
    """Iterable of sampled Records read from a row iterator.

    Args:
        rows: Iterator of decoded rows (lists of strings) after the header.
        sample_percentage: Chance, 0-100, that a record is forwarded.
        rng: Random source for sampling; seed it for reproducible runs.
        progress_interval: Emit a progress notice every N records read.
        sink: Destination for progress notices.
        skip_records: Number of leading records read but never forwarded.
    """

    def __init__(
        self,
        rows: Iterable[List[str]],
        sample_percentage: int = 100,
        rng: Optional[random.Random] = None,
        progress_interval: int = 100,
        sink: Optional["DiagnosticSink"] = None,
        skip_records: int = 0,
    ):
        self._rows = iter(rows)
        self.sample_percentage = sample_percentage
        self._rng = rng or random.Random()
        self.progress_interval = progress_interval
        self._sink = sink
        self.skip_records = skip_records
        self.records_read = 0
        self.records_forwarded = 0

    @property
    def last_sequence_number(self) -> int:
        return FIRST_SEQUENCE_NUMBER + self.records_read - 1

    def _sampled(self) -> bool:
        if self.sample_percentage >= 100:
            return True
        if self.sample_percentage <= 0:
            return False
        return self._rng.randrange(100) < self.sample_percentage

    def _next_row(self) -> Optional[List[str]]:
        """Return the next non-empty row, or None at end of input."""
        while True:
            try:
                row = next(self._rows)
            except StopIteration:
                return None
            except READ_ERRORS as e:
                raise StreamError(f"Failed reading input: {e}", self.last_sequence_number) from e
            # csv yields [] for a blank line; it is not a record
            if row:
                return row

    def __iter__(self) -> Iterator[Record]:
        sequence_number = FIRST_SEQUENCE_NUMBER + self.records_read
        while True:
            row = self._next_row()
            if row is None:
                logger.debug(f"End of input after {self.records_read} record(s)")
                return

            self.records_read += 1
            if self._sink is not None and sequence_number % self.progress_interval == 0:
                self._sink.notify(f"Reading line number {sequence_number}")

            if self.records_read > self.skip_records and self._sampled():
                self.records_forwarded += 1
                yield Record(fields=row, sequence_number=sequence_number)

            sequence_number += 1
