"""
JSX Type Definition Generator

This package generates JSX type definitions for vhtml from the React
type definitions in @types/react.

Module Structure:
- lexer/: Tokenization (TokenType, Token, Lexer)
- parser/: Declaration tree and parsing (Parser, SourceFile, InterfaceDeclaration, ...)
- type_system/: Name tables and attribute type rewrites
- transform/: Extractor, collector, normalizer and emitter stages
- codegen/: Printer, formatter and diagnostics
- generate_types.py: Main generator and CLI

Usage:
    from jsxtypes import JsxTypesGenerator

    JsxTypesGenerator('input/vhtml.d.ts',
                      'node_modules/@types/react/index.d.ts',
                      'types/index.d.ts').run()
"""

# Re-export main classes for convenience
from .generate_types import JsxTypesGenerator
from .lexer import Lexer
from .parser import Parser, parse_file, parse_source
from .errors import GeneratorError, MissingDeclarationError, UnexpectedShapeError

__all__ = [
    'JsxTypesGenerator',
    'Lexer',
    'Parser',
    'parse_file',
    'parse_source',
    'GeneratorError',
    'MissingDeclarationError',
    'UnexpectedShapeError',
]
