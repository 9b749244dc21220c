#!/usr/bin/env python3
"""
JSX Type Definition Generator

Generates JSX type definitions for vhtml by extracting the intrinsic
element table and its attribute interfaces from React's declarations
and merging them into a hand-written template.

Key features:
- Event handler attributes collapse to string
- Children and style attributes accept the types vhtml serializes
- `class` / `for` accepted alongside `className` / `htmlFor`
- Attribute-less interfaces emitted as intersection type aliases

Usage:
    python -m jsxtypes input/vhtml.d.ts node_modules/@types/react/index.d.ts types/index.d.ts

The generator uses a modular architecture with separate packages for:
- lexer: Tokenization (tokens.py, lexer.py)
- parser: Declaration tree and parsing (ast_nodes.py, parser.py)
- type_system: Name tables and type rewrites (mappings.py, references.py)
- transform: Extraction, collection, normalization and emission
- codegen: Printing, formatting and diagnostics
"""

from pathlib import Path
from typing import List, Optional

from .parser import SourceFile, parse_file
from .parser.ast_nodes import InterfaceDeclaration, NamespaceDeclaration
from .codegen import GeneratorDiagnostics
from .transform import (
    DeclarationEmitter,
    InterfaceNormalizer,
    collect_declarations,
    extract_intrinsic_elements,
    render_source_file,
    write_output_file,
)
from .transform.collector import Declaration
from .type_system import ALWAYS_INCLUDED_TYPE_NAMES, TEMPLATE_JSX_PATH


DEFAULT_INPUT_TYPES_FILE = 'input/vhtml.d.ts'
DEFAULT_REACT_TYPES_FILE = 'node_modules/@types/react/index.d.ts'
DEFAULT_OUTPUT_TYPES_FILE = 'types/index.d.ts'


class JsxTypesGenerator:
    """Main generator class that orchestrates the conversion process."""

    def __init__(
        self,
        input_types_file: str = DEFAULT_INPUT_TYPES_FILE,
        react_types_file: str = DEFAULT_REACT_TYPES_FILE,
        output_types_file: str = DEFAULT_OUTPUT_TYPES_FILE,
        indent_size: int = 4,
        verbose: bool = False,
        quiet: bool = False,
    ):
        self.input_types_file = Path(input_types_file)
        self.react_types_file = Path(react_types_file)
        self.output_types_file = Path(output_types_file)
        self.indent_size = indent_size
        self.quiet = quiet
        self.diagnostics = GeneratorDiagnostics(verbose=verbose)

    def _log(self, message: str = '', end: str = '\n') -> None:
        if not self.quiet:
            print(message, end=end, flush=True)

    @staticmethod
    def find_template_namespace(unit: SourceFile) -> NamespaceDeclaration:
        """Locate the `global.JSX` namespace the output is merged into."""
        scope = unit
        for name in TEMPLATE_JSX_PATH:
            scope = scope.get_namespace_or_throw(name)
        return scope

    def extract_declarations(self, react_file: SourceFile) -> List[Declaration]:
        """
        Extract and normalize everything the output needs from React's declarations.

        The `IntrinsicElements` interface comes first, followed by the
        collected interfaces and type aliases in document order.
        """
        # First pass:
        # Extract the IntrinsicElements interface and the type names it uses
        self._log('Extracting JSX.IntrinsicElements...')
        intrinsic_elements, type_names = extract_intrinsic_elements(react_file)
        type_names.update(ALWAYS_INCLUDED_TYPE_NAMES)

        # Second pass:
        # Extract all interfaces and type aliases we are interested in
        self._log(f'Extracting {len(type_names)} interfaces/types...')
        normalizer = InterfaceNormalizer(self.diagnostics)
        extracted: List[Declaration] = [intrinsic_elements]
        for node in collect_declarations(react_file, type_names):
            if isinstance(node, InterfaceDeclaration):
                normalizer.normalize(node)
            extracted.append(node)
            self._log('.', end='')
        self._log()
        return extracted

    def generate(self) -> str:
        """Run the full pipeline and return the formatted output text."""
        template = parse_file(self.input_types_file)

        # Extracting from React's declarations is the slow part, so resolve
        # the template namespace first to fail fast on a bad template
        jsx_namespace = self.find_template_namespace(template)

        react_file = parse_file(self.react_types_file)
        intrinsic_elements, *declarations = self.extract_declarations(react_file)

        self._log('Building type definition file...')
        emitter = DeclarationEmitter(jsx_namespace, diagnostics=self.diagnostics)
        emitter.add_intrinsic_elements(intrinsic_elements)
        emitter.emit(declarations)

        return render_source_file(template, self.indent_size)

    def write_output(self, text: str, output_path: Optional[Path] = None) -> Path:
        """Write the generated declarations, replacing any existing file."""
        path = write_output_file(text, output_path or self.output_types_file)
        self._log(f'Written: {path}')
        return path

    def run(self) -> Path:
        """Generate and write the output file."""
        text = self.generate()
        path = self.write_output(text)
        self.diagnostics.print_summary()
        return path


# =============================================================================
# CLI INTERFACE
# =============================================================================

def main(args: Optional[list] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(description='Generate JSX type definitions for vhtml from @types/react')
    parser.add_argument('input', nargs='?', default=DEFAULT_INPUT_TYPES_FILE,
                        help='Template declaration file containing `declare global { namespace JSX {} }`')
    parser.add_argument('react', nargs='?', default=DEFAULT_REACT_TYPES_FILE,
                        help="React's declaration file")
    parser.add_argument('output', nargs='?', default=DEFAULT_OUTPUT_TYPES_FILE,
                        help='Output declaration file')
    parser.add_argument('--stdout', action='store_true', help='Print to stdout instead of file')
    parser.add_argument('--indent-size', type=int, default=4, help='Spaces per indentation level')
    parser.add_argument('-v', '--verbose', action='store_true', help='List every applied rewrite')
    parser.add_argument('-q', '--quiet', action='store_true', help='Suppress progress output')

    parsed = parser.parse_args(args)

    generator = JsxTypesGenerator(
        parsed.input,
        parsed.react,
        parsed.output,
        indent_size=parsed.indent_size,
        verbose=parsed.verbose,
        quiet=parsed.quiet or parsed.stdout,
    )

    if parsed.stdout:
        print(generator.generate(), end='')
    else:
        generator.run()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
