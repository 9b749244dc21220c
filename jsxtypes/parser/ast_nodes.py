"""
Declaration tree node definitions.

This module contains the dataclasses representing the mutable declaration
tree produced by the parser. Scopes (the source file and namespace
declarations) own their statements; every statement remembers the
whitespace and comments that precede it so untouched source prints back
unchanged.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Type, TypeVar

from ..errors import MissingDeclarationError


# =============================================================================
# BASE NODE
# =============================================================================

@dataclass
class ASTNode:
    """Base class for all declaration tree nodes."""
    pass


@dataclass
class Statement(ASTNode):
    """Base class for statements that live in a scope."""
    leading_trivia: str = field(default='\n\n', kw_only=True)
    modifiers: List[str] = field(default_factory=list, kw_only=True)

    @property
    def modifier_prefix(self) -> str:
        return ''.join(m + ' ' for m in self.modifiers)


@dataclass
class RawStatement(Statement):
    """A declaration that is carried through as verbatim source text."""
    text: str


# =============================================================================
# INTERFACE NODES
# =============================================================================

@dataclass
class TypeParameter(ASTNode):
    """A generic type parameter, e.g. `T extends Element = HTMLElement`."""
    name: str
    text: str


@dataclass
class ExtendsClause(ASTNode):
    """One entry of an interface's extends list, e.g. `HTMLAttributes<T>`."""
    expression: str
    type_arguments: List[str] = field(default_factory=list)

    def get_text(self) -> str:
        if not self.type_arguments:
            return self.expression
        return f"{self.expression}<{', '.join(self.type_arguments)}>"


@dataclass
class InterfaceMember(ASTNode):
    """Base class for interface members."""
    leading_trivia: str = field(default='\n', kw_only=True)  # Docs and blank lines before the member
    trailing_comment: str = field(default='', kw_only=True)  # Comment on the member's own line


@dataclass
class PropertySignature(InterfaceMember):
    """Represents a property signature (e.g., `className?: string | undefined;`)."""
    name: str
    type: Optional[str] = None
    has_question_token: bool = False
    is_readonly: bool = False


@dataclass
class RawMember(InterfaceMember):
    """Method, call, construct or index signature kept as source text."""
    text: str


@dataclass
class InterfaceDeclaration(Statement):
    """Represents an interface declaration."""
    name: str
    type_parameters: List[TypeParameter] = field(default_factory=list)
    extends: List[ExtendsClause] = field(default_factory=list)
    members: List[InterfaceMember] = field(default_factory=list)
    closing_trivia: str = '\n'

    def get_properties(self) -> List[PropertySignature]:
        return [m for m in self.members if isinstance(m, PropertySignature)]

    def get_property(self, name: str) -> Optional[PropertySignature]:
        for prop in self.get_properties():
            if prop.name == name:
                return prop
        return None

    def add_property(self, prop: PropertySignature) -> PropertySignature:
        self.members.append(prop)
        return prop

    def remove_member(self, member: InterfaceMember) -> None:
        self.members = [m for m in self.members if m is not member]

    def remove_extends(self, clause: ExtendsClause) -> None:
        self.extends = [e for e in self.extends if e is not clause]


# =============================================================================
# TYPE ALIAS NODES
# =============================================================================

@dataclass
class TypeAliasDeclaration(Statement):
    """
    Represents a type alias.

    Parsed aliases keep their source in `text` and print verbatim;
    synthesized aliases leave it empty and print from name and type.
    """
    name: str
    type: str
    type_parameters: str = ''
    text: str = ''


# =============================================================================
# SCOPES
# =============================================================================

N = TypeVar('N', bound=Statement)


class Scope:
    """Shared navigation and mutation helpers for statement containers."""

    statements: List[Statement]

    def _find(self, node_type: Type[N], name: str) -> Optional[N]:
        for stmt in self.statements:
            if isinstance(stmt, node_type) and getattr(stmt, 'name', None) == name:
                return stmt
        return None

    def _describe(self) -> str:
        return 'source file'

    def get_namespace(self, name: str) -> Optional['NamespaceDeclaration']:
        return self._find(NamespaceDeclaration, name)

    def get_namespace_or_throw(self, name: str) -> 'NamespaceDeclaration':
        namespace = self.get_namespace(name)
        if namespace is None:
            raise MissingDeclarationError(f"Expected to find namespace '{name}' in {self._describe()}")
        return namespace

    def get_interface(self, name: str) -> Optional[InterfaceDeclaration]:
        return self._find(InterfaceDeclaration, name)

    def get_interface_or_throw(self, name: str) -> InterfaceDeclaration:
        interface = self.get_interface(name)
        if interface is None:
            raise MissingDeclarationError(f"Expected to find interface '{name}' in {self._describe()}")
        return interface

    def get_type_alias(self, name: str) -> Optional[TypeAliasDeclaration]:
        return self._find(TypeAliasDeclaration, name)

    def add_statement(self, stmt: N) -> N:
        """
        Append a statement at the end of the scope.

        The statement's leading whitespace is replaced so it starts on a
        new line, separated by a blank line from any previous statement.
        Leading comments are kept.
        """
        separator = '\n\n' if self.statements else '\n'
        stmt.leading_trivia = separator + stmt.leading_trivia.lstrip(' \t\r\n')
        self.statements.append(stmt)
        return stmt

    def add_interface(self, interface: InterfaceDeclaration) -> InterfaceDeclaration:
        return self.add_statement(interface)

    def add_type_alias(self, name: str, type_text: str) -> TypeAliasDeclaration:
        return self.add_statement(TypeAliasDeclaration(name=name, type=type_text))

    def add_statements(self, text: str) -> List[Statement]:
        """Parse declaration text and append the resulting statements."""
        from .parser import parse_source

        added = parse_source(text).statements
        for stmt in added:
            self.add_statement(stmt)
        return added


@dataclass
class NamespaceDeclaration(Statement, Scope):
    """
    Represents `namespace X {}`, `module 'x' {}` or `declare global {}`.

    `keyword` is the declaration keyword ('namespace', 'module' or
    'global'); for `declare global` the name is 'global'.
    """
    name: str
    keyword: str = 'namespace'
    statements: List[Statement] = field(default_factory=list)
    closing_trivia: str = '\n'

    def _describe(self) -> str:
        return f"namespace '{self.name}'"

    def add_statement(self, stmt: N) -> N:
        if '\n' not in self.closing_trivia:
            self.closing_trivia = '\n' + self.closing_trivia
        return super().add_statement(stmt)


@dataclass
class SourceFile(ASTNode, Scope):
    """Root node representing an entire declaration file."""
    statements: List[Statement] = field(default_factory=list)
    trailing_trivia: str = '\n'
    path: str = ''

    def _describe(self) -> str:
        return f"'{self.path}'" if self.path else 'source file'
