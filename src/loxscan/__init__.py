"""
loxscan - Scanner for the Lox Scripting Language
================================================

This package implements the first stage of a Lox front end: a
hand-written, single-pass scanner that turns source text into a flat
list of tokens for a parser.

Main Components
---------------
- **tokens**: TokenType, the keyword table, and the Token record
- **scanner**: the Scanner state machine and the scan_tokens() helper
- **errors**: exception hierarchy, Diagnostic, and ErrorCollector
- **config**: ScanConfig for the command-line driver

Quick Start
-----------
Scan a string:
    >>> from loxscan import scan_tokens
    >>> result = scan_tokens('var answer = 42;')
    >>> [token.type.name for token in result.tokens]
    ['VAR', 'IDENTIFIER', 'EQUAL', 'NUMBER', 'SEMICOLON', 'EOF']
    >>> result.had_error
    False

Supply your own error reporter:
    >>> from loxscan import Scanner, ErrorCollector
    >>> collector = ErrorCollector()
    >>> tokens = Scanner('"open', collector).scan_tokens()
    >>> print(collector.report())
    [line 1] Error: Unterminated string
    1 error

Or use the command-line tool:
    $ loxscan hello.lox
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from loxscan.tokens import KEYWORDS, Token, TokenType
from loxscan.scanner import Scanner, ScanResult, scan_tokens
from loxscan.errors import (
    Diagnostic,
    ErrorCollector,
    ErrorReporter,
    LoxError,
    ScanError,
    ScanFailed,
    TooManyErrors,
    UnexpectedCharacterError,
    UnterminatedStringError,
    format_report,
)
from loxscan.config import ScanConfig

__all__ = [
    # Version info
    "__version__",
    # Tokens
    "KEYWORDS",
    "Token",
    "TokenType",
    # Scanner
    "Scanner",
    "ScanResult",
    "scan_tokens",
    # Errors
    "Diagnostic",
    "ErrorCollector",
    "ErrorReporter",
    "LoxError",
    "ScanError",
    "ScanFailed",
    "TooManyErrors",
    "UnexpectedCharacterError",
    "UnterminatedStringError",
    "format_report",
    # Configuration
    "ScanConfig",
]
