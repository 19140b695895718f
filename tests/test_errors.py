# =============================================================================
# test_errors.py - Error Hierarchy and Collector Tests
# =============================================================================

import pytest

from loxscan.errors import (
    Diagnostic,
    ErrorCollector,
    LoxError,
    ScanError,
    ScanFailed,
    TooManyErrors,
    UnexpectedCharacterError,
    UnterminatedStringError,
    format_report,
)


class TestDiagnostic:

    def test_format(self):
        assert str(Diagnostic(3, "Unexpected character")) == "[line 3] Error: Unexpected character"


class TestScanErrors:
    """Test exception formatting and hierarchy."""

    def test_hierarchy(self):
        assert issubclass(ScanError, LoxError)
        assert issubclass(UnexpectedCharacterError, ScanError)
        assert issubclass(UnterminatedStringError, ScanError)
        assert issubclass(TooManyErrors, ScanError)
        assert issubclass(ScanFailed, LoxError)

    def test_plain_message(self):
        error = ScanError("Something odd", 4)
        assert str(error) == "[line 4] Error: Something odd"
        assert error.diagnostic == Diagnostic(4, "Something odd")

    def test_unexpected_character(self):
        error = UnexpectedCharacterError("@", 2)
        assert error.char == "@"
        assert error.message == "Unexpected character"
        assert str(error) == (
            "[line 2] Error: Unexpected character\n"
            "hint: '@' (0x40) is not valid outside a string"
        )

    def test_unterminated_string(self):
        error = UnterminatedStringError(1)
        assert error.line == 1
        assert error.message == "Unterminated string"
        assert "hint: add a closing" in str(error)


class TestFormatReport:

    def test_single_error(self):
        report = format_report([Diagnostic(1, "Unexpected character")])
        assert report == "[line 1] Error: Unexpected character\n1 error"

    def test_plural_summary(self):
        report = format_report([Diagnostic(1, "a"), Diagnostic(3, "b")])
        assert report.splitlines() == [
            "[line 1] Error: a",
            "[line 3] Error: b",
            "2 errors",
        ]


class TestErrorCollector:
    """Test ErrorCollector as a reporter."""

    def test_empty(self):
        collector = ErrorCollector()
        assert not collector.has_errors()
        assert collector.error_count() == 0
        collector.raise_if_errors()

    def test_collects_in_order(self):
        collector = ErrorCollector()
        collector.error(1, "first")
        collector.error(5, "second")
        assert collector.diagnostics == [Diagnostic(1, "first"), Diagnostic(5, "second")]

    def test_report(self):
        collector = ErrorCollector()
        collector.error(1, "Unexpected character")
        assert collector.report() == "[line 1] Error: Unexpected character\n1 error"
        collector.error(2, "Unterminated string")
        assert collector.report().endswith("\n2 errors")

    def test_clear(self):
        collector = ErrorCollector()
        collector.error(1, "x")
        collector.clear()
        assert not collector.has_errors()

    def test_raise_if_errors(self):
        collector = ErrorCollector()
        collector.error(7, "Unterminated string")
        with pytest.raises(ScanFailed) as exc_info:
            collector.raise_if_errors()
        assert exc_info.value.diagnostics == [Diagnostic(7, "Unterminated string")]
        assert "[line 7] Error: Unterminated string" in str(exc_info.value)

    def test_max_errors(self):
        collector = ErrorCollector(max_errors=3)
        collector.error(1, "a")
        collector.error(1, "b")
        with pytest.raises(TooManyErrors) as exc_info:
            collector.error(2, "c")
        assert exc_info.value.limit == 3
        assert exc_info.value.line == 2
        assert collector.error_count() == 3

    def test_zero_means_unlimited(self):
        collector = ErrorCollector(max_errors=0)
        for line in range(1, 500):
            collector.error(line, "bad")
        assert collector.error_count() == 499
