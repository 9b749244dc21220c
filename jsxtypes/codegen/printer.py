"""
Declaration printer.

Serializes a declaration tree back to TypeScript source. Statements that
were never restructured print as their original text, so a file that is
parsed and printed without edits comes back unchanged.
"""

from ..parser.ast_nodes import (
    Statement,
    RawStatement,
    InterfaceMember,
    PropertySignature,
    RawMember,
    InterfaceDeclaration,
    TypeAliasDeclaration,
    NamespaceDeclaration,
    SourceFile,
)


class DeclarationPrinter:
    """Prints declaration tree nodes to source text."""

    def print_source_file(self, unit: SourceFile) -> str:
        parts = [stmt.leading_trivia + self.print_statement(stmt) for stmt in unit.statements]
        parts.append(unit.trailing_trivia)
        return ''.join(parts)

    def print_statement(self, stmt: Statement) -> str:
        """Print a statement without its leading trivia."""
        if isinstance(stmt, InterfaceDeclaration):
            return self.print_interface(stmt)
        if isinstance(stmt, TypeAliasDeclaration):
            return self.print_type_alias(stmt)
        if isinstance(stmt, NamespaceDeclaration):
            return self.print_namespace(stmt)
        if isinstance(stmt, RawStatement):
            return stmt.text
        raise TypeError(f"Cannot print statement of type {type(stmt).__name__}")

    # =========================================================================
    # DECLARATIONS
    # =========================================================================

    def print_namespace(self, namespace: NamespaceDeclaration) -> str:
        if namespace.keyword == 'global':
            header = f"{namespace.modifier_prefix}global {{"
        else:
            header = f"{namespace.modifier_prefix}{namespace.keyword} {namespace.name} {{"
        body = ''.join(stmt.leading_trivia + self.print_statement(stmt) for stmt in namespace.statements)
        return header + body + namespace.closing_trivia + '}'

    def print_type_alias(self, alias: TypeAliasDeclaration) -> str:
        if alias.text:
            return alias.text
        return f"{alias.modifier_prefix}type {alias.name}{alias.type_parameters} = {alias.type};"

    def print_interface(self, interface: InterfaceDeclaration) -> str:
        header = f"{interface.modifier_prefix}interface {interface.name}"
        if interface.type_parameters:
            header += '<' + ', '.join(p.text for p in interface.type_parameters) + '>'
        if interface.extends:
            header += ' extends ' + ', '.join(e.get_text() for e in interface.extends)

        body = ''.join(self.print_member_with_trivia(m) for m in interface.members)
        return f"{header} {{{body}{interface.closing_trivia}}}"

    # =========================================================================
    # MEMBERS
    # =========================================================================

    def print_member_with_trivia(self, member: InterfaceMember) -> str:
        text = member.leading_trivia + self.print_member(member)
        if member.trailing_comment:
            text += ' ' + member.trailing_comment
        return text

    def print_member(self, member: InterfaceMember) -> str:
        if isinstance(member, PropertySignature):
            return self.print_property(member)
        if isinstance(member, RawMember):
            return member.text + ';'
        raise TypeError(f"Cannot print member of type {type(member).__name__}")

    def print_property(self, prop: PropertySignature) -> str:
        text = ('readonly ' if prop.is_readonly else '') + prop.name
        if prop.has_question_token:
            text += '?'
        if prop.type is not None:
            text += ': ' + prop.type
        return text + ';'
