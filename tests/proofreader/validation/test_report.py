"""
Tests for proofreader.validation.report and proofreader.validation.sink
"""

import json
import logging
import threading

from proofreader.validation.report import COLUMN_COUNT, FIELD_FORMAT, Diagnostic, RunSummary
from proofreader.validation.sink import DiagnosticSink


class TestDiagnostic:
    def test_field_format_line(self):
        diagnostic = Diagnostic.field_format(5, 0, "id", "not-a-uuid", "uuid")
        assert diagnostic.format_human() == (
            'L:5 C:0 H:id "not-a-uuid" not formatted as "uuid" type'
        )

    def test_column_count_line(self):
        diagnostic = Diagnostic.column_count(7, actual=3, expected=2)
        assert diagnostic.kind == COLUMN_COUNT
        assert diagnostic.format_human() == "L:7 Items in line(3) != Items in format(2)"


class TestRunSummary:
    def test_totals_and_dict(self):
        summary = RunSummary(
            file_path="events.csv.gz",
            records_read=10,
            records_forwarded=8,
            records_checked=8,
            column_count_findings=1,
            field_format_findings=2,
        )
        data = json.loads(summary.to_json())
        assert summary.total_findings == 3
        assert data["findings"] == {"column_count": 1, "field_format": 2, "total": 3}
        assert data["records_read"] == 10

    def test_format_human(self):
        summary = RunSummary(file_path="events.csv.gz", records_read=4, records_forwarded=4, records_checked=4)
        text = summary.format_human()
        assert "✅ events.csv.gz: 0 finding(s)" in text
        assert "records validated: 4 of 4 sampled" in text


class TestDiagnosticSink:
    def test_findings_logged_as_warnings(self, caplog):
        sink = DiagnosticSink()
        with caplog.at_level(logging.INFO, logger="proofreader.diagnostics"):
            sink.emit(Diagnostic.field_format(2, 1, "count", "x", "int"))
            sink.notify("Reading line number 100")

        assert [r.levelno for r in caplog.records] == [logging.WARNING, logging.INFO]
        assert 'L:2 C:1 H:count "x" not formatted as "int" type' in caplog.text

    def test_counts_are_thread_safe(self):
        sink = DiagnosticSink(logger=logging.getLogger("test.sink.silent"))
        logging.getLogger("test.sink.silent").disabled = True
        diagnostic = Diagnostic.field_format(2, 0, "a", "b", "int")

        def emit_many():
            for _ in range(500):
                sink.emit(diagnostic)

        threads = [threading.Thread(target=emit_many) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sink.count(FIELD_FORMAT) == 2000
        assert sink.counts()[COLUMN_COUNT] == 0

    def test_reset_clears_counts(self):
        sink = DiagnosticSink(logger=logging.getLogger("test.sink.silent"))
        logging.getLogger("test.sink.silent").disabled = True
        sink.emit(Diagnostic.column_count(3, 1, 2))
        sink.reset()
        assert sink.counts() == {COLUMN_COUNT: 0, FIELD_FORMAT: 0}
