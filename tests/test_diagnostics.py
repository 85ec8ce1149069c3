import pytest

from jsl.diagnostics import Diagnostic, DiagnosticCollector, ErrorListener
from jsl.tokens import SourcePosition


def test_error_listener_is_abstract():
    with pytest.raises(TypeError):
        ErrorListener()


def test_collector_records_errors_in_order():
    collector = DiagnosticCollector()
    first = SourcePosition("a.jsl", 1)
    second = SourcePosition("a.jsl", 3)
    collector.error(first, "first problem")
    collector.error(second, "second problem")
    assert [d.message for d in collector] == ["first problem", "second problem"]
    assert [d.position for d in collector] == [first, second]
    assert collector.has_errors


def test_collector_separates_warnings_from_errors():
    collector = DiagnosticCollector()
    pos = SourcePosition("b.jsl", 2)
    collector.warning(pos, "careful")
    assert not collector.has_errors
    collector.error(pos, "broken")
    assert [d.message for d in collector.warnings] == ["careful"]
    assert [d.message for d in collector.errors] == ["broken"]
    assert len(collector) == 2


def test_empty_collector_has_no_errors():
    collector = DiagnosticCollector()
    assert len(collector) == 0
    assert collector.has_errors is False
    assert collector.errors == []


def test_diagnostic_text_mentions_file_and_message():
    diag = Diagnostic("error", SourcePosition("main.jsl", 5), "expected an expression")
    text = str(diag)
    assert "main.jsl" in text
    assert "expected an expression" in text
    assert diag.is_error


def test_custom_listener_subclass_receives_calls():
    class Recorder(ErrorListener):
        def __init__(self):
            self.calls = []

        def error(self, pos, msg):
            self.calls.append(("error", msg))

        def warning(self, pos, msg):
            self.calls.append(("warning", msg))

    recorder = Recorder()
    recorder.error(SourcePosition(), "x")
    recorder.warning(SourcePosition(), "y")
    assert recorder.calls == [("error", "x"), ("warning", "y")]