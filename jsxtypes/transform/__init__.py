"""
Transformation stages of the JSX type generator.

- extractor: locate and rewrite `JSX.IntrinsicElements`
- collector: gather interfaces and type aliases across nested namespaces
- normalizer: adapt attribute interfaces for a string-only runtime
- emitter: merge declarations into the template and write the result
"""

from .extractor import extract_intrinsic_elements, resolve_interface
from .collector import get_all_interfaces_and_type_aliases, collect_declarations
from .normalizer import InterfaceNormalizer
from .emitter import DeclarationEmitter, intersection_of_parents, render_source_file, write_output_file

__all__ = [
    'extract_intrinsic_elements',
    'resolve_interface',
    'get_all_interfaces_and_type_aliases',
    'collect_declarations',
    'InterfaceNormalizer',
    'DeclarationEmitter',
    'intersection_of_parents',
    'render_source_file',
    'write_output_file',
]
