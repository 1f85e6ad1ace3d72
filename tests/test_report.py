"""
Tests for Console Reporting
===========================
"""

import io
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from markovtext.markov import ProbabilityTable, train
from markovtext.report import Output, format_generated, format_table


class TestFormatTable:

    def test_one_line_per_context(self):
        table = train("abcabcabcabc", 3)
        lines = format_table(table, precision=2).splitlines()
        assert lines[0] == "Order-3 table, 3 contexts"
        assert lines[1:] == [
            "'abc' -> 'a': 1.00",
            "'bca' -> 'b': 1.00",
            "'cab' -> 'c': 1.00",
        ]

    def test_whitespace_escaped(self):
        table = ProbabilityTable.from_rows(1, {"\t": {" ": 0.25, "\n": 0.75}})
        lines = format_table(table, precision=2).splitlines()
        assert lines[1] == "'\\t' -> ' ': 0.25, '\\n': 0.75"

    def test_default_precision_from_settings(self):
        table = train("aaaa", 2)
        assert format_table(table).splitlines()[1] == "'aa' -> 'a': 1.0000"

    def test_empty_table(self):
        assert format_table(ProbabilityTable(context_length=4)) == "Order-4 table, 0 contexts"


def test_format_generated():
    assert format_generated("abc") == "\n\nGenerated Text:\n\nabc"


class TestOutput:

    def test_print(self):
        stream = io.StringIO()
        Output(stream=stream).print("hello")
        assert stream.getvalue() == "hello\n"

    def test_quiet_suppresses_print_not_result(self):
        stream = io.StringIO()
        out = Output(quiet=True, stream=stream)
        out.print("table")
        out.result("text")
        assert stream.getvalue() == "text\n"

    def test_error_goes_to_err_stream(self):
        stream, err = io.StringIO(), io.StringIO()
        Output(quiet=True, stream=stream, err_stream=err).error("boom")
        assert stream.getvalue() == ""
        assert err.getvalue() == "Error: boom\n"
