"""
Record Handoff

Single-slot rendezvous between the record source and the validation engine.
A producer calling put() is blocked until the consumer has taken the record,
so the source can never run ahead of validation and buffer records.

Either side may abort the handoff when it fails. Aborting wakes every
waiter: a blocked producer gets HandoffClosed and a blocked consumer sees
end of input, so neither thread is left waiting forever.
"""

import threading
from typing import Iterator, Optional

from proofreader.errors import HandoffClosed
from proofreader.ingest.source import Record


class Handoff:
    """Unbuffered, closable channel carrying one Record at a time."""

    def __init__(self):
        self._cond = threading.Condition()
        self._slot: Optional[Record] = None
        self._taken = 0
        self._closed = False
        self._aborted = False

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed or self._aborted

    @property
    def aborted(self) -> bool:
        with self._cond:
            return self._aborted

    def put(self, record: Record) -> None:
        """Hand a record to the consumer and wait until it has been taken.

        Raises:
            HandoffClosed: If the handoff was closed or aborted.
        """
        with self._cond:
            while self._slot is not None and not self._aborted:
                self._cond.wait()
            if self._aborted:
                raise HandoffClosed("Handoff aborted; validation has stopped")
            if self._closed:
                raise HandoffClosed("Handoff already closed")

            self._slot = record
            ticket = self._taken
            self._cond.notify_all()

            while self._taken == ticket and not self._aborted:
                self._cond.wait()
            if self._taken == ticket:
                # aborted before the consumer took it
                raise HandoffClosed("Handoff aborted; validation has stopped")

    def get(self) -> Optional[Record]:
        """Wait for the next record.

        Returns:
            The next record, or None once the handoff is closed or aborted
            and no record is pending.
        """
        with self._cond:
            while self._slot is None and not (self._closed or self._aborted):
                self._cond.wait()
            if self._aborted or self._slot is None:
                return None
            record = self._slot
            self._slot = None
            self._taken += 1
            self._cond.notify_all()
            return record

    def close(self) -> None:
        """Signal end of input. Records already taken are unaffected."""
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def abort(self) -> None:
        """Stop both sides immediately, discarding any untaken record."""
        with self._cond:
            self._aborted = True
            self._slot = None
            self._cond.notify_all()

    def __iter__(self) -> Iterator[Record]:
        while True:
            record = self.get()
            if record is None:
                return
            yield record
