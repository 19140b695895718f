"""
Lox Scanner
===========

This module implements the scanner (lexer) for the Lox scripting
language. It converts source text into a flat list of tokens for the
parser in a single left-to-right pass with at most two characters of
lookahead.

Lexical Grammar
---------------
- Punctuation: ( ) { } , . - + ; *
- Operators: ! != = == < <= > >= /
- Comments: // to end of line (no token)
- Numbers: digits with an optional fraction, e.g. 123, 12.5
  A trailing '.' is not part of the number: "12." is NUMBER then DOT.
- Strings: "double quoted", may span lines, no escape sequences
- Identifiers: [A-Za-z_][A-Za-z0-9_]*, keywords matched on the whole word

Error Recovery
--------------
The scanner never stops on bad input. Unexpected characters and
unterminated strings are handed to an ErrorReporter as (line, message)
and scanning carries on, so one pass reports every lexical error.

Example Usage
-------------
>>> from loxscan.scanner import Scanner
>>> for token in Scanner('print 1 + 2;').scan_tokens():
...     print(token)
PRINT print null
NUMBER 1 1.0
PLUS + null
NUMBER 2 2.0
SEMICOLON ; null
EOF  null
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from loxscan.errors import (
    Diagnostic,
    ErrorCollector,
    ErrorReporter,
    ScanError,
    ScanFailed,
    UnexpectedCharacterError,
    UnterminatedStringError,
    format_report,
)
from loxscan.tokens import KEYWORDS, Literal, Token, TokenType


logger = logging.getLogger(__name__)


# =============================================================================
# Character Classification
# =============================================================================
# Comparisons rather than str.isdigit()/isalpha(): those accept Unicode
# digits and letters, and Lox identifiers are ASCII only. All three
# return False for the empty string returned past end of input.

def is_digit(char: str) -> bool:
    """Return True for an ASCII decimal digit."""
    return "0" <= char <= "9"


def is_alpha(char: str) -> bool:
    """Return True for an ASCII letter or underscore."""
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_"


def is_alphanumeric(char: str) -> bool:
    """Return True for a character that can continue an identifier."""
    return is_alpha(char) or is_digit(char)


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes Lox source code.

    One instance scans one source text. The cursor is a pair of indices:
    _start marks the first character of the lexeme being scanned and
    _current the next unread character, with
    0 <= _start <= _current <= len(source) at all times.

    Usage:
        collector = ErrorCollector()
        tokens = Scanner(source, collector).scan_tokens()

    Attributes:
        source: The source code being tokenized
    """

    # Tokens that never need lookahead
    SINGLE_CHAR_TOKENS = {
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "{": TokenType.LEFT_BRACE,
        "}": TokenType.RIGHT_BRACE,
        ",": TokenType.COMMA,
        ".": TokenType.DOT,
        "-": TokenType.MINUS,
        "+": TokenType.PLUS,
        ";": TokenType.SEMICOLON,
        "*": TokenType.STAR,
    }

    # First character -> (type with '=' following, type without)
    EQUALS_PAIRS = {
        "!": (TokenType.BANG_EQUAL, TokenType.BANG),
        "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
        "<": (TokenType.LESS_EQUAL, TokenType.LESS),
        ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
    }

    WHITESPACE = " \r\t"

    def __init__(self, source: str, reporter: Optional[ErrorReporter] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: The Lox source code to tokenize
            reporter: Receives (line, message) for each lexical error.
                Defaults to a fresh ErrorCollector, available as
                self.reporter after the scan.
        """
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorCollector()

        self._tokens: List[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1

        # Line of the first character of the lexeme being scanned
        self._start_line = 1

        self._scanned = False

    def scan_tokens(self) -> List[Token]:
        """
        Scan the whole source and return its tokens.

        The list always ends with exactly one EOF token. Calling this a
        second time returns the same list without rescanning.

        Returns:
            The tokens in source order
        """
        if self._scanned:
            return self._tokens

        logger.debug(f"Scanning {len(self.source)} characters")

        while not self._at_end():
            # Beginning of the next lexeme
            self._start = self._current
            self._start_line = self._line
            self._scan_token()

        self._tokens.append(Token(TokenType.EOF, "", None, self._line))
        self._scanned = True

        logger.debug(f"Scanned {len(self._tokens)} tokens over {self._line} lines")
        return self._tokens

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of source."""
        return self._current >= len(self.source)

    def _advance(self) -> str:
        """Consume and return the current character."""
        char = self.source[self._current]
        self._current += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it equals expected."""
        if self._at_end() or self.source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        """Return the next unread character, or "" at end of source."""
        if self._at_end():
            return ""
        return self.source[self._current]

    def _peek_next(self) -> str:
        """Return the character after the next one, or "" past the end."""
        if self._current + 1 >= len(self.source):
            return ""
        return self.source[self._current + 1]

    # =========================================================================
    # Token Creation and Error Reporting
    # =========================================================================

    def _add_token(self, token_type: TokenType, literal: Literal = None) -> None:
        """
        Append a token for the lexeme between _start and _current.

        The token carries the line the lexeme began on, which differs from
        the current line only for strings that span lines.
        """
        lexeme = self.source[self._start:self._current]
        self._tokens.append(Token(token_type, lexeme, literal, self._start_line))

    def _report(self, error: ScanError) -> None:
        """
        Hand an error to the reporter and keep scanning.

        Only (line, message) reaches the reporter; the hint is logged.
        """
        logger.debug(str(error))
        self.reporter.error(error.line, error.message)

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> None:
        """Consume one character and dispatch on it."""
        char = self._advance()

        if char in self.SINGLE_CHAR_TOKENS:
            self._add_token(self.SINGLE_CHAR_TOKENS[char])
            return

        if char in self.EQUALS_PAIRS:
            long_form, short_form = self.EQUALS_PAIRS[char]
            self._add_token(long_form if self._match("=") else short_form)
            return

        if char == "/":
            if self._match("/"):
                # Comment runs to end of line; the newline is left for the loop
                while self._peek() != "\n" and not self._at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
            return

        if char in self.WHITESPACE:
            return

        if char == "\n":
            self._line += 1
            return

        if char == '"':
            self._scan_string()
            return

        if is_digit(char):
            self._scan_number()
            return

        if is_alpha(char):
            self._scan_identifier()
            return

        self._report(UnexpectedCharacterError(char, self._line))

    def _scan_identifier(self) -> None:
        """
        Scan an identifier or keyword.

        The whole word is looked up once, so "forest" is an identifier
        even though it starts with the keyword "for".
        """
        while is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self._start:self._current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _scan_number(self) -> None:
        """
        Scan a number literal: digits, then an optional '.' and digits.

        The '.' is consumed only when a digit follows it, which takes two
        characters of lookahead.
        """
        while is_digit(self._peek()):
            self._advance()

        if self._peek() == "." and is_digit(self._peek_next()):
            self._advance()  # consume the "."
            while is_digit(self._peek()):
                self._advance()

        self._add_token(
            TokenType.NUMBER,
            float(self.source[self._start:self._current]),
        )

    def _scan_string(self) -> None:
        """
        Scan a string literal whose opening quote has been consumed.

        Strings may span lines. Backslashes are ordinary characters. At
        end of input without a closing quote the error is reported and
        no token is produced.
        """
        while self._peek() != '"' and not self._at_end():
            if self._advance() == "\n":
                self._line += 1

        if self._at_end():
            self._report(UnterminatedStringError(self._line))
            return

        self._advance()  # consume closing "

        # Trim the surrounding quotes
        value = self.source[self._start + 1:self._current - 1]
        self._add_token(TokenType.STRING, value)


# =============================================================================
# Convenience Function
# =============================================================================

@dataclass
class ScanResult:
    """
    Tokens and diagnostics from one scan.

    Attributes:
        tokens: Scanned tokens, ending with EOF
        diagnostics: Errors reported during the scan, in source order
    """
    tokens: List[Token]
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def had_error(self) -> bool:
        """True if any lexical error was reported."""
        return len(self.diagnostics) > 0

    def raise_if_errors(self) -> None:
        """Raise ScanFailed if the scan reported any errors."""
        if self.had_error:
            raise ScanFailed(format_report(self.diagnostics), list(self.diagnostics))


def scan_tokens(source: str, collector: Optional[ErrorCollector] = None) -> ScanResult:
    """
    Scan source and return its tokens together with any diagnostics.

    Args:
        source: Lox source code
        collector: Collector to report into (a fresh one if None)

    Returns:
        ScanResult with the token list and collected diagnostics

    Raises:
        TooManyErrors: If the collector has an error limit and it is reached
    """
    if collector is None:
        collector = ErrorCollector()
    tokens = Scanner(source, collector).scan_tokens()
    return ScanResult(tokens=tokens, diagnostics=list(collector.diagnostics))
