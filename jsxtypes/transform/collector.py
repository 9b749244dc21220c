"""
Interface and type alias collection.

Walks a declaration tree, descending into nested namespaces, and picks out
the declarations whose names the generator needs.
"""

from typing import Iterable, List, Union

from ..errors import MissingDeclarationError, UnexpectedShapeError
from ..parser.ast_nodes import InterfaceDeclaration, TypeAliasDeclaration, NamespaceDeclaration, Scope

Declaration = Union[InterfaceDeclaration, TypeAliasDeclaration]


def get_all_interfaces_and_type_aliases(scope: Scope) -> List[Declaration]:
    """
    Recursively retrieve all interfaces and type aliases under a scope.

    Args:
        scope: Source file or namespace declaration

    Returns:
        Flattened list of all interfaces and type aliases, in document order
    """
    found: List[Declaration] = []
    for stmt in scope.statements:
        if isinstance(stmt, (InterfaceDeclaration, TypeAliasDeclaration)):
            found.append(stmt)
        elif isinstance(stmt, NamespaceDeclaration):
            found.extend(get_all_interfaces_and_type_aliases(stmt))
    return found


def collect_declarations(scope: Scope, type_names: Iterable[str]) -> List[Declaration]:
    """
    Collect the declarations named in `type_names`, in document order.

    Raises:
        MissingDeclarationError: if a name matches no declaration
        UnexpectedShapeError: if a name matches more than one declaration
    """
    wanted = set(type_names)
    selected = [d for d in get_all_interfaces_and_type_aliases(scope) if d.name in wanted]

    counts: dict = {}
    for declaration in selected:
        counts[declaration.name] = counts.get(declaration.name, 0) + 1

    missing = sorted(wanted - set(counts))
    if missing:
        raise MissingDeclarationError(f"Cannot find declarations for: {', '.join(missing)}")

    duplicated = sorted(name for name, count in counts.items() if count > 1)
    if duplicated:
        raise UnexpectedShapeError(f"Found more than one declaration for: {', '.join(duplicated)}")

    return selected
