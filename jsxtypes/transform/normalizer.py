"""
Attribute interface normalization.

Converts an attributes interface from React's declarations for use with a
string-only JSX runtime: generics are erased, React-only parents and
properties are removed, property types and names are rewritten.
"""

from dataclasses import replace
from typing import Optional

from ..errors import UnexpectedShapeError
from ..parser.ast_nodes import InterfaceDeclaration, PropertySignature
from ..codegen.diagnostics import GeneratorDiagnostics
from ..type_system.mappings import (
    DROPPED_PARENT_INTERFACES,
    ALLOWED_PARENT_INTERFACES,
    DROPPED_PROPERTIES,
    PRESERVED_CASE_PROPERTIES,
    UNNORMALIZED_TYPE_PROPERTIES,
    ALIASED_PROPERTIES,
    is_event_handler_type,
    normalize_attribute_type,
)


class InterfaceNormalizer:
    """
    Rewrites attribute interfaces in place.

    Rewrites, in order:
    - remove all type parameters
    - drop `ClassAttributes` parents, strip type arguments from the others
    - drop React-only properties, normalize types, lowercase names
    - duplicate `className` as `class` and `htmlFor` as `for`
    """

    def __init__(self, diagnostics: Optional[GeneratorDiagnostics] = None):
        self.diagnostics = diagnostics or GeneratorDiagnostics()

    def normalize(self, interface: InterfaceDeclaration) -> InterfaceDeclaration:
        interface.type_parameters = []
        self.normalize_extends(interface)
        # Iterate over a snapshot; aliases are appended while looping
        for prop in interface.get_properties():
            self.normalize_property(interface, prop)
        return interface

    def normalize_extends(self, interface: InterfaceDeclaration) -> None:
        for clause in list(interface.extends):
            parent = clause.expression

            if parent in DROPPED_PARENT_INTERFACES:
                interface.remove_extends(clause)
                self.diagnostics.info_parent_dropped(interface.name, parent)
                continue

            if parent not in ALLOWED_PARENT_INTERFACES:
                raise UnexpectedShapeError(
                    f"Interface {interface.name} has unexpected parent interface: {parent}"
                )

            # Remove generic type arguments (<T>)
            clause.type_arguments = []

    def normalize_property(self, interface: InterfaceDeclaration, prop: PropertySignature) -> None:
        name = prop.name

        if name in DROPPED_PROPERTIES:
            interface.remove_member(prop)
            self.diagnostics.info_property_dropped(interface.name, name)
            return

        if prop.type is None:
            raise UnexpectedShapeError(f"Property {interface.name}.{name} has no type annotation")

        if name not in UNNORMALIZED_TYPE_PROPERTIES:
            if is_event_handler_type(prop.type):
                self.diagnostics.info_event_handler_collapsed(interface.name, name, prop.type)
            prop.type = normalize_attribute_type(prop.type)

        if name not in PRESERVED_CASE_PROPERTIES:
            prop.name = name.lower()

        alias = ALIASED_PROPERTIES.get(name)
        if alias is not None:
            interface.add_property(replace(prop, name=alias, trailing_comment=''))

