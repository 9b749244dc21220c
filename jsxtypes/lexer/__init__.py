"""
Lexer module for the JSX type generator.

This module provides tokenization of TypeScript declaration files.
"""

from .tokens import TokenType, Token, KEYWORDS, MULTI_CHAR_OPS, SINGLE_CHAR_OPS
from .lexer import Lexer

__all__ = [
    'TokenType',
    'Token',
    'KEYWORDS',
    'MULTI_CHAR_OPS',
    'SINGLE_CHAR_OPS',
    'Lexer',
]
