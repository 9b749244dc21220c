"""
Declaration emission.

Merges extracted declarations into the template's `JSX` namespace and
writes the finished declaration file.
"""

import copy
from pathlib import Path
from typing import Iterable, Optional

from ..parser.ast_nodes import (
    InterfaceDeclaration,
    TypeAliasDeclaration,
    NamespaceDeclaration,
    SourceFile,
)
from ..codegen.diagnostics import GeneratorDiagnostics
from ..codegen.formatter import format_text
from ..codegen.printer import DeclarationPrinter


def intersection_of_parents(interface: InterfaceDeclaration) -> str:
    """Build `(A) & (B)` from an interface's extends clauses."""
    return ' & '.join(f'({clause.get_text()})' for clause in interface.extends)


class DeclarationEmitter:
    """Appends declarations to a namespace scope and renders the template."""

    def __init__(
        self,
        namespace: NamespaceDeclaration,
        printer: Optional[DeclarationPrinter] = None,
        diagnostics: Optional[GeneratorDiagnostics] = None,
    ):
        self.namespace = namespace
        self.printer = printer or DeclarationPrinter()
        self.diagnostics = diagnostics or GeneratorDiagnostics()

    def add_intrinsic_elements(self, interface: InterfaceDeclaration) -> InterfaceDeclaration:
        """Add a structural copy, so later edits to `interface` do not leak into the output."""
        return self.namespace.add_interface(copy.deepcopy(interface))

    def emit(self, declarations: Iterable[object]) -> None:
        for node in declarations:
            if isinstance(node, InterfaceDeclaration):
                self.emit_interface(node)
            elif isinstance(node, TypeAliasDeclaration):
                self.namespace.add_statements(self.printer.print_statement(node))
            else:
                raise TypeError(f"Cannot emit {type(node).__name__}")

    def emit_interface(self, interface: InterfaceDeclaration) -> None:
        # An interface with no properties of its own is emitted as the
        # intersection of its parents (tslint: no-empty-interface)
        if not interface.get_properties():
            if interface.extends:
                type_text = intersection_of_parents(interface)
                self.namespace.add_type_alias(interface.name, type_text)
                self.diagnostics.info_interface_aliased(interface.name, type_text)
                return
            self.diagnostics.warn_empty_interface(interface.name)

        self.namespace.add_statements(self.printer.print_statement(interface))


def render_source_file(unit: SourceFile, indent_size: int = 4) -> str:
    """Print and format a whole declaration file."""
    return format_text(DeclarationPrinter().print_source_file(unit), indent_size)


def write_output_file(text: str, output_path) -> Path:
    """Write rendered declarations, replacing any existing file."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        f.write(text)
    return path
