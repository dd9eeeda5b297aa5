"""
Proofread Runner

Wires one run together: opens the input, builds the schema from the
header, then runs the record source and the validation engine as two
threads joined by a rendezvous handoff.

The source runs on the calling thread and the engine on a worker thread.
If either side fails it aborts the handoff, which releases the other side,
so a failed engine can never leave the source blocked forever.
"""

import logging
import random
import threading
import time
from typing import Optional

from proofreader.config.schema import ProofreadConfig
from proofreader.errors import HandoffClosed, PipelineError
from proofreader.formats.registry import FormatRegistry, default_registry
from proofreader.ingest.reader import open_delimited
from proofreader.ingest.source import RecordSource
from proofreader.utils.logging_config import logging_config
from proofreader.validation.engine import ValidationEngine
from proofreader.validation.handoff import Handoff
from proofreader.validation.report import COLUMN_COUNT, FIELD_FORMAT, RunSummary
from proofreader.validation.schema import Schema, build_schema, split_field_format
from proofreader.validation.sink import DiagnosticSink


logger = logging.getLogger(__name__)


class ProofreadRunner:
    """Runs the read/validate pipeline for a single input file.

    Finding counts start from zero on every call to run(), so one runner
    may proofread the same file more than once.

    Example:
        >>> config = ProofreadConfig(filename="events.csv.gz", defined_format="backup")
        >>> summary = ProofreadRunner(config).run()
        >>> print(summary.format_human())
    """

    def __init__(
        self,
        config: ProofreadConfig,
        registry: Optional[FormatRegistry] = None,
        sink: Optional[DiagnosticSink] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.registry = registry or default_registry
        self.sink = sink or DiagnosticSink()
        self.rng = rng or random.Random(config.seed)
        self._engine_error: Optional[BaseException] = None

    def run(self) -> RunSummary:
        """Proofread the configured file.

        Returns:
            RunSummary with record and finding totals.

        Raises:
            InputError: If the input cannot be opened or decompressed.
            ConfigurationError: If the schema cannot be built.
            StreamError: If reading fails after the header.
            PipelineError: If the validation engine stops unexpectedly.
        """
        config = self.config
        self._engine_error = None
        self.sink.reset()
        start = time.time()

        with open_delimited(config.filename, config.delimiter) as (header, rows):
            schema = build_schema(
                split_field_format(config.field_format),
                header,
                config.blank_cols,
                registry=self.registry,
            )
            if config.display_header:
                self._display_header(schema)

            source = RecordSource(
                rows,
                sample_percentage=config.sample_percentage,
                rng=self.rng,
                progress_interval=config.output_lines,
                sink=self.sink,
                skip_records=config.skip_lines,
            )
            engine = ValidationEngine(schema, self.sink)

            logger.info(f"Start processing - {config.filename}")
            self._pump(source, engine)

        duration = time.time() - start
        logging_config.log_operation_timing(f"Proofreading {config.filename}", duration)

        counts = self.sink.counts()
        return RunSummary(
            file_path=config.filename,
            records_read=source.records_read,
            records_forwarded=source.records_forwarded,
            records_checked=engine.records_checked,
            column_count_findings=counts[COLUMN_COUNT],
            field_format_findings=counts[FIELD_FORMAT],
            duration_ms=int(duration * 1000),
        )

    def _pump(self, source: RecordSource, engine: ValidationEngine) -> None:
        """Feed the engine from the source until input ends or a side fails."""
        handoff = Handoff()
        worker = threading.Thread(
            target=self._drain,
            args=(engine, handoff),
            name="proofreader-engine",
            daemon=True,
        )
        worker.start()

        try:
            for record in source:
                handoff.put(record)
        except HandoffClosed:
            logger.debug("Handoff aborted by the validation engine; stopping reader")
        except BaseException:
            handoff.abort()
            worker.join()
            raise
        else:
            handoff.close()

        worker.join()

        if self._engine_error is not None:
            raise PipelineError(
                f"Validation stopped unexpectedly: {self._engine_error}"
            ) from self._engine_error

    def _drain(self, engine: ValidationEngine, handoff: Handoff) -> None:
        try:
            engine.run(handoff)
        except Exception as e:
            logger.error(f"Validation engine failed: {e}")
            self._engine_error = e
            handoff.abort()

    def _display_header(self, schema: Schema) -> None:
        self.sink.notify("Header")
        self.sink.notify("------")
        for line in schema.describe():
            self.sink.notify(line)
