"""
Parser module for the JSX type generator.

This module provides declaration tree node definitions and the parser
implementation.
"""

from .ast_nodes import (
    # Base
    ASTNode,
    Statement,
    RawStatement,
    # Interfaces
    TypeParameter,
    ExtendsClause,
    InterfaceMember,
    PropertySignature,
    RawMember,
    InterfaceDeclaration,
    # Type aliases
    TypeAliasDeclaration,
    # Scopes
    Scope,
    NamespaceDeclaration,
    SourceFile,
)
from .parser import Parser, parse_source, parse_file

__all__ = [
    # Base
    'ASTNode',
    'Statement',
    'RawStatement',
    # Interfaces
    'TypeParameter',
    'ExtendsClause',
    'InterfaceMember',
    'PropertySignature',
    'RawMember',
    'InterfaceDeclaration',
    # Type aliases
    'TypeAliasDeclaration',
    # Scopes
    'Scope',
    'NamespaceDeclaration',
    'SourceFile',
    # Parser
    'Parser',
    'parse_source',
    'parse_file',
]
