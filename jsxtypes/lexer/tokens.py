"""
Token definitions for the TypeScript declaration lexer.

This module contains the TokenType enum, Token dataclass, and
constant mappings for keywords and punctuators.
"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Enumeration of all token types recognized by the declaration lexer."""

    # Declaration keywords
    INTERFACE = auto()
    TYPE = auto()
    NAMESPACE = auto()
    MODULE = auto()
    GLOBAL = auto()
    DECLARE = auto()
    EXPORT = auto()
    IMPORT = auto()
    DEFAULT = auto()
    ABSTRACT = auto()
    CLASS = auto()
    ENUM = auto()
    FUNCTION = auto()
    CONST = auto()
    LET = auto()
    VAR = auto()
    EXTENDS = auto()
    READONLY = auto()

    # Punctuators
    LT = auto()
    GT = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    SEMICOLON = auto()
    COMMA = auto()
    DOT = auto()
    COLON = auto()
    QUESTION = auto()
    EQ = auto()
    PIPE = auto()
    AMPERSAND = auto()
    ARROW = auto()
    ELLIPSIS = auto()
    QUESTION_DOT = auto()
    OTHER = auto()

    # Literals
    NUMBER = auto()
    STRING_LITERAL = auto()
    TEMPLATE_LITERAL = auto()
    IDENTIFIER = auto()

    # Special
    EOF = auto()


@dataclass
class Token:
    """Represents a single token from the lexer."""
    type: TokenType
    value: str
    line: int
    column: int
    start: int = 0
    end: int = 0
    newline_before: bool = False  # A line break separates this token from the previous one

    @property
    def is_name(self) -> bool:
        """Whether this token can be used as an identifier or property name."""
        return self.type == TokenType.IDENTIFIER or self.type in KEYWORD_TYPES


# Keyword to TokenType mapping. All of these are contextual in declaration
# files, so the parser also accepts them wherever a name is expected.
KEYWORDS = {
    'interface': TokenType.INTERFACE,
    'type': TokenType.TYPE,
    'namespace': TokenType.NAMESPACE,
    'module': TokenType.MODULE,
    'global': TokenType.GLOBAL,
    'declare': TokenType.DECLARE,
    'export': TokenType.EXPORT,
    'import': TokenType.IMPORT,
    'default': TokenType.DEFAULT,
    'abstract': TokenType.ABSTRACT,
    'class': TokenType.CLASS,
    'enum': TokenType.ENUM,
    'function': TokenType.FUNCTION,
    'const': TokenType.CONST,
    'let': TokenType.LET,
    'var': TokenType.VAR,
    'extends': TokenType.EXTENDS,
    'readonly': TokenType.READONLY,
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())

# Multi-character punctuators, longest first
MULTI_CHAR_OPS = {
    '...': TokenType.ELLIPSIS,
    '=>': TokenType.ARROW,
    '?.': TokenType.QUESTION_DOT,
}

# Single-character punctuators. '<' and '>' are never merged so that nested
# generic argument lists such as Foo<Bar<T>> close one level at a time.
SINGLE_CHAR_OPS = {
    '<': TokenType.LT,
    '>': TokenType.GT,
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    '{': TokenType.LBRACE,
    '}': TokenType.RBRACE,
    '[': TokenType.LBRACKET,
    ']': TokenType.RBRACKET,
    ';': TokenType.SEMICOLON,
    ',': TokenType.COMMA,
    '.': TokenType.DOT,
    ':': TokenType.COLON,
    '?': TokenType.QUESTION,
    '=': TokenType.EQ,
    '|': TokenType.PIPE,
    '&': TokenType.AMPERSAND,
}

# Brackets that open and close a nesting level
OPENING_BRACKETS = frozenset({TokenType.LPAREN, TokenType.LBRACE, TokenType.LBRACKET, TokenType.LT})
CLOSING_BRACKETS = frozenset({TokenType.RPAREN, TokenType.RBRACE, TokenType.RBRACKET, TokenType.GT})
