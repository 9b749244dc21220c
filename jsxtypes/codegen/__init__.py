"""
Code generation module for the JSX type generator.

This module prints declaration trees back to TypeScript, formats the
result and collects diagnostics about applied rewrites.
"""

from .printer import DeclarationPrinter
from .formatter import TextFormatter, format_text
from .diagnostics import GeneratorDiagnostics, Diagnostic, DiagnosticSeverity

__all__ = [
    'DeclarationPrinter',
    'TextFormatter',
    'format_text',
    'GeneratorDiagnostics',
    'Diagnostic',
    'DiagnosticSeverity',
]
