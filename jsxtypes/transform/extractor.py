"""
Intrinsic elements extraction.

Finds `JSX.IntrinsicElements` in React's declarations and rewrites each
element's type to the name of the attributes interface it uses:

    a: React.DetailedHTMLProps<React.AnchorHTMLAttributes<HTMLAnchorElement>, HTMLAnchorElement>;
    svg: React.SVGProps<SVGSVGElement>;

become

    a: AnchorHTMLAttributes;
    svg: SVGProps;
"""

from typing import Set, Tuple

from ..errors import UnexpectedShapeError
from ..parser.ast_nodes import InterfaceDeclaration, Scope
from ..type_system.mappings import INTRINSIC_ELEMENTS_PATH, HOST_NAMESPACE, WRAPPER_TYPE_NAME
from ..type_system.references import find_qualified_name


def resolve_interface(scope: Scope, path: Tuple[str, ...]) -> InterfaceDeclaration:
    """Follow a namespace path ending in an interface name, failing on any missing segment."""
    *namespaces, interface_name = path
    for name in namespaces:
        scope = scope.get_namespace_or_throw(name)
    return scope.get_interface_or_throw(interface_name)


def extract_intrinsic_elements(source_file: Scope) -> Tuple[InterfaceDeclaration, Set[str]]:
    """
    Extract the `IntrinsicElements` interface and the attribute type names it uses.

    The interface is rewritten in place.

    Args:
        source_file: Tree that contains `global.JSX.IntrinsicElements`

    Returns:
        A tuple of (interface node, set of attribute type names)
    """
    interface = resolve_interface(source_file, INTRINSIC_ELEMENTS_PATH)

    type_names: Set[str] = set()
    for prop in interface.get_properties():
        if prop.type is None:
            raise UnexpectedShapeError(f"{interface.name}.{prop.name} has no type annotation")

        target = find_qualified_name(prop.type, HOST_NAMESPACE, WRAPPER_TYPE_NAME)
        if target is None:
            raise UnexpectedShapeError(
                f"Cannot find target identifier in {interface.name}.{prop.name}: {prop.type}"
            )

        type_names.add(target.right)
        prop.type = target.right

    return interface, type_names
