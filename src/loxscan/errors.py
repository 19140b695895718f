"""
Lox Scanner Error Hierarchy
===========================

This module defines the exceptions and diagnostic plumbing for the
scanner. All exceptions inherit from LoxError, allowing callers to catch
every package error with a single except clause.

Exception Hierarchy
-------------------
LoxError (base)
├── ScanError - a single lexical error at a source line
│   ├── UnexpectedCharacterError - character that starts no lexeme
│   ├── UnterminatedStringError - end of input inside a string
│   └── TooManyErrors - error limit reached
└── ScanFailed - aggregate report of collected errors

Error Reporting
---------------
The scanner itself never raises for malformed input. It calls an
ErrorReporter with (line, message) and keeps going. ErrorCollector is the
standard reporter: it stores Diagnostic records so the caller can decide
whether to print them, continue, or raise.

Message Format
--------------
    [line 3] Error: Unexpected character
    hint: '@' (0x40) is not valid outside a string
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol


logger = logging.getLogger(__name__)


# =============================================================================
# Base Exception Class
# =============================================================================

class LoxError(Exception):
    """
    Base exception for all loxscan errors.

        try:
            collector.raise_if_errors()
        except LoxError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Diagnostics and Reporters
# =============================================================================

@dataclass(frozen=True)
class Diagnostic:
    """
    One error reported during a scan.

    Attributes:
        line: Line number where the error was detected (1-indexed)
        message: Human-readable description
    """
    line: int
    message: str

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


class ErrorReporter(Protocol):
    """Anything the scanner can hand (line, message) errors to."""

    def error(self, line: int, message: str) -> None:
        ...


# =============================================================================
# Scan Exceptions
# =============================================================================

class ScanError(LoxError):
    """
    A lexical error at a specific source line.

    Attributes:
        message: The error description
        line: Line where the error was detected
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        message: str,
        line: int,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.line = line
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error with its line and hint.

            [line 1] Error: Unterminated string
            hint: add a closing '"' to complete the string
        """
        parts = [str(self.diagnostic)]

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)

    @property
    def diagnostic(self) -> Diagnostic:
        """Return the (line, message) record for this error."""
        return Diagnostic(self.line, self.message)


class UnexpectedCharacterError(ScanError):
    """
    Character that cannot begin any Lox lexeme.

    Examples: @, #, $, and any non-ASCII character outside a string.
    """

    def __init__(self, char: str, line: int):
        self.char = char
        super().__init__(
            "Unexpected character",
            line,
            hint=f"'{char}' (0x{ord(char):02X}) is not valid outside a string",
        )


class UnterminatedStringError(ScanError):
    """
    End of input reached inside a string literal.

    Strings may span lines, so this is only detected at end of input and
    is reported on the last line.
    """

    def __init__(self, line: int):
        super().__init__(
            "Unterminated string",
            line,
            hint="add a closing '\"' to complete the string",
        )


class TooManyErrors(ScanError):
    """
    Raised when the configured error limit has been reached.

    Prevents a hopeless input (a binary file, say) from flooding output.
    """

    def __init__(self, limit: int, line: int):
        self.limit = limit
        super().__init__(f"Too many errors ({limit}), stopping.", line)


class ScanFailed(LoxError):
    """
    Aggregate error carrying a pre-formatted report of every diagnostic.

    Raised by ErrorCollector.raise_if_errors() for callers that prefer
    fail-fast handling over inspecting diagnostics.
    """

    def __init__(self, report: str, diagnostics: List[Diagnostic]):
        self.report = report
        self.diagnostics = diagnostics
        super().__init__(report)


# =============================================================================
# Error Collection
# =============================================================================

def format_report(diagnostics: List[Diagnostic]) -> str:
    """
    Format diagnostics one per line, followed by an error count.

        [line 1] Error: Unexpected character
        [line 2] Error: Unterminated string
        2 errors
    """
    lines = [str(diagnostic) for diagnostic in diagnostics]

    error_word = "error" if len(diagnostics) == 1 else "errors"
    lines.append(f"{len(diagnostics)} {error_word}")

    return "\n".join(lines)


class ErrorCollector:
    """
    Collects scan errors for batch reporting.

    Implements ErrorReporter, so an instance can be handed straight to a
    Scanner. The scan carries on after every error, and the caller looks
    at the collected diagnostics afterwards.

    Example:
        collector = ErrorCollector()
        tokens = Scanner(source, collector).scan_tokens()
        if collector.has_errors():
            print(collector.report())
            sys.exit(65)
    """

    def __init__(self, max_errors: int = 0):
        """
        Initialize the error collector.

        Args:
            max_errors: Maximum errors to accept before raising
                TooManyErrors (0 means no limit)
        """
        self.diagnostics: List[Diagnostic] = []
        self.max_errors = max_errors

    def error(self, line: int, message: str) -> None:
        """
        Record an error reported by the scanner.

        Raises:
            TooManyErrors: If max_errors has been reached
        """
        diagnostic = Diagnostic(line, message)
        logger.debug(f"Collected {diagnostic}")
        self.diagnostics.append(diagnostic)
        if self.max_errors and len(self.diagnostics) >= self.max_errors:
            raise TooManyErrors(self.max_errors, line)

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.diagnostics) > 0

    def error_count(self) -> int:
        """Return the number of collected errors."""
        return len(self.diagnostics)

    def report(self) -> str:
        """Format all diagnostics followed by a summary line."""
        return format_report(self.diagnostics)

    def clear(self) -> None:
        """Forget all collected errors."""
        self.diagnostics.clear()

    def raise_if_errors(self) -> None:
        """Raise ScanFailed if any errors were collected."""
        if self.has_errors():
            raise ScanFailed(self.report(), list(self.diagnostics))
