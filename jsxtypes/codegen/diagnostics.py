"""
Diagnostic/report system for the generator.

Collects and reports the rewrites the generator applied while adapting
React's declarations: dropped parents and properties, collapsed event
handler types and interfaces converted to type aliases. Helps developers
see what the generated file no longer carries.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import List


class DiagnosticSeverity(Enum):
    """Severity levels for generator diagnostics."""
    WARNING = 'warning'
    INFO = 'info'


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    severity: DiagnosticSeverity
    code: str
    message: str
    declaration: str = ''
    construct: str = ''  # e.g., 'parent', 'property', 'event handler'

    def __str__(self) -> str:
        if self.declaration:
            return f'[{self.severity.value}] {self.declaration}: {self.message} ({self.code})'
        return f'[{self.severity.value}] {self.message} ({self.code})'


class GeneratorDiagnostics:
    """
    Collects generator diagnostics during normalization and emission.

    Usage:
        diag = GeneratorDiagnostics()
        diag.info_parent_dropped("HTMLAttributes", "ClassAttributes")
        # ... after generation ...
        diag.print_summary()
    """

    def __init__(self, verbose: bool = False):
        self._diagnostics: List[Diagnostic] = []
        self._verbose = verbose

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Get all collected diagnostics."""
        return list(self._diagnostics)

    @property
    def warnings(self) -> List[Diagnostic]:
        """Get only warning-level diagnostics."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.WARNING]

    @property
    def infos(self) -> List[Diagnostic]:
        """Get only info-level diagnostics."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.INFO]

    @property
    def count(self) -> int:
        """Get total diagnostic count."""
        return len(self._diagnostics)

    def clear(self) -> None:
        """Clear all diagnostics."""
        self._diagnostics.clear()

    # =========================================================================
    # SPECIFIC DIAGNOSTIC METHODS
    # =========================================================================

    def info_parent_dropped(self, interface_name: str, parent: str) -> None:
        """Record that an unsupported parent interface was removed."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I001',
            message=f'Parent interface "{parent}" was dropped.',
            declaration=interface_name,
            construct='parent',
        ))

    def info_property_dropped(self, interface_name: str, property_name: str) -> None:
        """Record that a React-only property was removed."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I002',
            message=f'Property "{property_name}" was dropped.',
            declaration=interface_name,
            construct='property',
        ))

    def info_event_handler_collapsed(self, interface_name: str, property_name: str, type_text: str) -> None:
        """Record that an event handler type was replaced by string."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I003',
            message=f'Event handler "{property_name}: {type_text}" was collapsed to string.',
            declaration=interface_name,
            construct='event handler',
        ))

    def info_interface_aliased(self, interface_name: str, type_text: str) -> None:
        """Record that a member-less interface became an intersection alias."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I004',
            message=f'Interface without properties emitted as "type {interface_name} = {type_text}".',
            declaration=interface_name,
            construct='type alias',
        ))

    def warn_empty_interface(self, interface_name: str) -> None:
        """Warn that an interface has neither properties nor parents."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W001',
            message='Interface has no properties and no parents; kept as an empty interface.',
            declaration=interface_name,
            construct='empty interface',
        ))

    # =========================================================================
    # REPORTING
    # =========================================================================

    @staticmethod
    def _group(diags: List[Diagnostic]) -> dict:
        by_construct: dict = {}
        for d in diags:
            by_construct.setdefault(d.construct or 'other', []).append(d)
        return by_construct

    def print_summary(self, file=None) -> None:
        """Print a summary of all diagnostics to stderr (or specified file)."""
        if file is None:
            file = sys.stderr

        if not self._diagnostics:
            return

        warnings = self.warnings
        if warnings:
            print(f'\nGenerator warnings ({len(warnings)}):', file=file)
            for construct, diags in sorted(self._group(warnings).items()):
                print(f'  {construct}: {len(diags)} occurrence(s)', file=file)
                if self._verbose:
                    for d in diags:
                        print(f'    {d}', file=file)

        infos = self.infos
        if infos:
            print(f'\nGenerator rewrites ({len(infos)}):', file=file)
            for construct, diags in sorted(self._group(infos).items()):
                print(f'  {construct}: {len(diags)} occurrence(s)', file=file)
                if self._verbose:
                    for d in diags:
                        print(f'    {d}', file=file)

    def get_summary(self) -> str:
        """Get a summary string of all diagnostics."""
        if not self._diagnostics:
            return 'No generator diagnostics.'

        parts = [
            f'{len(diags)} {construct}'
            for construct, diags in sorted(self._group(self._diagnostics).items())
        ]
        return f'Generator diagnostics: {", ".join(parts)}'
