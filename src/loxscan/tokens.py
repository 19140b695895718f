"""
Lox Token Definitions
=====================

This module defines the output contract of the scanner: the token type
enumeration, the reserved-word table, and the immutable Token record
handed to the parser.

Token Categories
----------------
- Single-character punctuation: ( ) { } , . - + ; * /
- One or two character operators: ! != = == < <= > >=
- Literals: IDENTIFIER, STRING, NUMBER
- Keywords: and, class, else, false, fun, for, if, nil, or,
  print, return, super, this, true, var, while
- End of input: EOF

Example
-------
>>> from loxscan.tokens import Token, TokenType
>>> tok = Token(TokenType.NUMBER, "12.5", 12.5, 1)
>>> str(tok)
'NUMBER 12.5 12.5'
"""

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping, Union


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Lexical categories of the Lox language.

    The set and the names are fixed: the parser dispatches on them, so
    adding or renaming a member is a breaking change.
    """

    # === Single-character tokens ===
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    MINUS = auto()          # -
    PLUS = auto()           # +
    SEMICOLON = auto()      # ;
    SLASH = auto()          # /
    STAR = auto()           # *

    # === One or two character tokens ===
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=

    # === Literals ===
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # === Keywords ===
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # === Structural ===
    EOF = auto()


# =============================================================================
# Keyword Mapping
# =============================================================================

# Read-only view; built once at import and shared by every Scanner.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
})


# Decoded literal values carried by NUMBER and STRING tokens
Literal = Union[float, str, None]


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single lexical token.

    Tokens are created once by the scanner and never modified.

    Attributes:
        type: The TokenType classification
        lexeme: The exact source text matched ("" for EOF)
        literal: Decoded value, a float for NUMBER, the text between the
            quotes for STRING, None for everything else
        line: Line number in source (1-indexed)
    """
    type: TokenType
    lexeme: str
    literal: Literal
    line: int

    def __str__(self) -> str:
        """Format as 'TYPE lexeme literal', with a missing literal shown as null."""
        literal = "null" if self.literal is None else self.literal
        return f"{self.type.name} {self.lexeme} {literal}"

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.literal is not None:
            return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, L{self.line})"
        return f"Token({self.type.name}, {self.lexeme!r}, L{self.line})"

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.type in KEYWORDS.values()

    def to_dict(self) -> dict:
        """Return a JSON-serializable view of the token."""
        return {
            "type": self.type.name,
            "lexeme": self.lexeme,
            "literal": self.literal,
            "line": self.line,
        }

