"""
TypeScript declaration parser implementation.

The Parser converts a stream of tokens from the Lexer into a declaration
tree. Interfaces, type aliases and namespaces are parsed structurally;
every other declaration is captured as verbatim source text.
"""

import re
from pathlib import Path
from typing import List, Optional, Tuple

from ..lexer import Lexer, Token, TokenType
from ..lexer.tokens import OPENING_BRACKETS, CLOSING_BRACKETS
from .ast_nodes import (
    Statement,
    RawStatement,
    TypeParameter,
    ExtendsClause,
    InterfaceMember,
    PropertySignature,
    RawMember,
    InterfaceDeclaration,
    TypeAliasDeclaration,
    NamespaceDeclaration,
    SourceFile,
)


MODIFIER_TYPES = (TokenType.EXPORT, TokenType.DECLARE, TokenType.DEFAULT, TokenType.ABSTRACT)

# A line break after one of these tokens never ends a statement or member
CONTINUATION_END_TYPES = frozenset({
    TokenType.COLON, TokenType.EQ, TokenType.PIPE, TokenType.AMPERSAND,
    TokenType.ARROW, TokenType.COMMA, TokenType.DOT, TokenType.QUESTION,
    TokenType.QUESTION_DOT, TokenType.EXTENDS, TokenType.ELLIPSIS,
    TokenType.EXPORT, TokenType.DECLARE, TokenType.DEFAULT, TokenType.ABSTRACT,
    TokenType.CONST, TokenType.LET, TokenType.VAR, TokenType.FUNCTION,
    TokenType.CLASS, TokenType.ENUM, TokenType.READONLY, TokenType.TYPE,
    TokenType.IMPORT,
})
CONTINUATION_END_WORDS = frozenset({'keyof', 'typeof', 'infer', 'unique', 'is', 'as', 'new', 'asserts'})

# A line break before one of these tokens never ends a statement or member
CONTINUATION_START_TYPES = frozenset({
    TokenType.PIPE, TokenType.AMPERSAND, TokenType.DOT, TokenType.ARROW,
    TokenType.QUESTION, TokenType.COLON, TokenType.EQ, TokenType.EXTENDS,
    TokenType.QUESTION_DOT, TokenType.LBRACE,
})


class Parser:
    """
    Recursive descent parser for TypeScript declaration files.

    Parses a stream of tokens into a declaration tree, slicing the
    original source for type expressions and verbatim declarations.
    """

    def __init__(self, tokens: List[Token], source: str = '', path: str = ''):
        self.tokens = tokens
        self.source = source
        self.path = path
        self.pos = 0
        # Offset where the trivia before the next token begins
        self.cursor = 0

    def peek(self, offset: int = 0) -> Token:
        """Look ahead in the token stream without consuming."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[pos]

    def current(self) -> Token:
        """Return the current token."""
        return self.peek()

    def advance(self) -> Token:
        """Consume and return the current token."""
        token = self.current()
        if token.type != TokenType.EOF:
            self.pos += 1
            self.cursor = token.end
        return token

    def match(self, *types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current().type in types

    def expect(self, token_type: TokenType, message: str = '') -> Token:
        """Consume the current token if it matches, otherwise raise an error."""
        if self.current().type != token_type:
            location = f"{self.path}:" if self.path else ''
            raise SyntaxError(
                f"Expected {token_type.name} but got {self.current().type.name} "
                f"at {location}line {self.current().line}, column {self.current().column}: {message}"
            )
        return self.advance()

    def expect_name(self, message: str = '') -> Token:
        """Consume an identifier, allowing contextual keywords."""
        if not self.current().is_name:
            return self.expect(TokenType.IDENTIFIER, message)
        return self.advance()

    def take_trivia(self) -> str:
        """Return whitespace and comments between the cursor and the current token."""
        trivia = self.source[self.cursor:self.current().start]
        self.cursor = self.current().start
        return trivia

    def slice(self, first: Token, last: Token) -> str:
        """Return the source text spanning two tokens, inclusive."""
        return self.source[first.start:last.end]

    # =========================================================================
    # STATEMENT BOUNDARIES
    # =========================================================================

    def _ends_statement(self, prev: Token, cur: Token) -> bool:
        """Whether a line break between `prev` and `cur` terminates the construct."""
        if not cur.newline_before:
            return False
        if prev.type in CONTINUATION_END_TYPES or prev.type == TokenType.LT:
            return False
        if prev.type == TokenType.IDENTIFIER and prev.value in CONTINUATION_END_WORDS:
            return False
        return cur.type not in CONTINUATION_START_TYPES

    def scan_until_terminator(self, stop_at_comma: bool = False) -> Tuple[Optional[Token], Optional[Token]]:
        """
        Consume tokens up to the end of the current construct.

        Stops before a `;` (or `,`) at nesting depth zero, before a closing
        brace that belongs to the enclosing scope, or at a line break that
        ends the construct. Returns the first and last consumed tokens.
        """
        first: Optional[Token] = None
        last: Optional[Token] = None
        depth = 0
        while not self.match(TokenType.EOF):
            tok = self.current()
            if depth == 0:
                if tok.type == TokenType.SEMICOLON:
                    break
                if stop_at_comma and tok.type == TokenType.COMMA:
                    break
                if tok.type in CLOSING_BRACKETS and tok.type != TokenType.GT:
                    break
                if last is not None and self._ends_statement(last, tok):
                    break
            if tok.type in OPENING_BRACKETS:
                depth += 1
            elif tok.type in CLOSING_BRACKETS and depth > 0:
                depth -= 1
            if first is None:
                first = tok
            last = self.advance()
        return first, last

    def skip_balanced(self) -> Token:
        """Consume a bracketed group starting at the current opening bracket."""
        depth = 0
        while True:
            tok = self.current()
            if tok.type == TokenType.EOF:
                raise SyntaxError(f"Unbalanced brackets at line {tok.line}, column {tok.column}")
            self.advance()
            if tok.type in OPENING_BRACKETS:
                depth += 1
            elif tok.type in CLOSING_BRACKETS:
                depth -= 1
                if depth == 0:
                    return tok

    # =========================================================================
    # TOP-LEVEL PARSING
    # =========================================================================

    def parse(self) -> SourceFile:
        """Parse the entire source file into a SourceFile tree."""
        unit = SourceFile(path=self.path)
        while True:
            unit.statements.extend(self.parse_statements())
            if self.match(TokenType.EOF):
                break
            # A closing brace with no matching scope
            trivia = self.take_trivia()
            stray = self.parse_raw_statement()
            stray.leading_trivia = trivia
            unit.statements.append(stray)
        unit.trailing_trivia = self.source[self.cursor:]
        return unit

    def parse_statements(self) -> List[Statement]:
        """Parse statements until the end of the enclosing scope."""
        statements = []
        while not self.match(TokenType.RBRACE, TokenType.EOF):
            trivia = self.take_trivia()
            stmt = self.parse_statement()
            stmt.leading_trivia = trivia
            statements.append(stmt)
        return statements

    def _declaration_kind(self) -> Tuple[int, Optional[TokenType]]:
        """Look past modifiers and classify the declaration that follows."""
        i = 0
        while self.peek(i).type in MODIFIER_TYPES:
            i += 1
        keyword = self.peek(i)
        after = self.peek(i + 1)
        if keyword.type == TokenType.INTERFACE and after.is_name:
            return i, TokenType.INTERFACE
        if keyword.type == TokenType.TYPE and after.is_name and self.peek(i + 2).type in (TokenType.EQ, TokenType.LT):
            return i, TokenType.TYPE
        if keyword.type in (TokenType.NAMESPACE, TokenType.MODULE) and (
                after.is_name or after.type == TokenType.STRING_LITERAL):
            return i, keyword.type
        if keyword.type == TokenType.GLOBAL and after.type == TokenType.LBRACE:
            return i, TokenType.GLOBAL
        return i, None

    def parse_statement(self) -> Statement:
        """Parse a single statement."""
        modifier_count, kind = self._declaration_kind()
        if kind is None:
            return self.parse_raw_statement()

        modifiers = [self.advance().value for _ in range(modifier_count)]
        if kind == TokenType.INTERFACE:
            return self.parse_interface(modifiers)
        if kind == TokenType.TYPE:
            return self.parse_type_alias(modifiers)
        return self.parse_namespace(modifiers)

    def parse_raw_statement(self) -> RawStatement:
        """Capture any other declaration as verbatim text."""
        start = self.current()
        if self.match(TokenType.RBRACE, TokenType.SEMICOLON):
            # Stray token; keep it so the file still prints back unchanged
            self.advance()
            return RawStatement(text=start.value)

        depth = 0
        last = start
        while not self.match(TokenType.EOF):
            tok = self.current()
            if depth == 0:
                if tok.type == TokenType.SEMICOLON:
                    last = self.advance()
                    break
                if tok.type == TokenType.RBRACE:
                    break
                if tok is not start and self._ends_statement(last, tok):
                    break
            if tok.type in OPENING_BRACKETS:
                depth += 1
            elif tok.type in CLOSING_BRACKETS and depth > 0:
                depth -= 1
            last = self.advance()
        return RawStatement(text=self.slice(start, last))

    # =========================================================================
    # NAMESPACE PARSING
    # =========================================================================

    def parse_namespace(self, modifiers: List[str]) -> NamespaceDeclaration:
        """Parse `namespace A.B {}`, `module 'x' {}` or `global {}`."""
        keyword = self.advance()
        if keyword.type == TokenType.GLOBAL:
            name = 'global'
        elif self.match(TokenType.STRING_LITERAL):
            name = self.advance().value
        else:
            name = self.expect_name('namespace name').value
            while self.match(TokenType.DOT):
                self.advance()
                name += '.' + self.expect_name('namespace name').value

        self.expect(TokenType.LBRACE, f"namespace '{name}'")
        namespace = NamespaceDeclaration(name=name, keyword=keyword.value, modifiers=modifiers)
        namespace.statements = self.parse_statements()
        namespace.closing_trivia = self.take_trivia()
        self.expect(TokenType.RBRACE, f"end of namespace '{name}'")
        return namespace

    # =========================================================================
    # TYPE ALIAS PARSING
    # =========================================================================

    def parse_type_alias(self, modifiers: List[str]) -> TypeAliasDeclaration:
        """Parse a type alias, keeping its verbatim text."""
        first = self.peek(-len(modifiers)) if modifiers else self.current()
        self.expect(TokenType.TYPE)
        name = self.expect_name('type alias name').value

        type_parameters = ''
        if self.match(TokenType.LT):
            lt = self.current()
            gt = self.skip_balanced()
            type_parameters = self.slice(lt, gt)

        self.expect(TokenType.EQ, f"type alias '{name}'")
        type_first, type_last = self.scan_until_terminator()
        if type_first is None:
            tok = self.current()
            raise SyntaxError(f"Missing type for alias '{name}' at line {tok.line}, column {tok.column}")
        last = type_last
        if self.match(TokenType.SEMICOLON):
            last = self.advance()

        return TypeAliasDeclaration(
            name=name,
            type=self.slice(type_first, type_last),
            type_parameters=type_parameters,
            text=self.slice(first, last),
            modifiers=modifiers,
        )

    # =========================================================================
    # INTERFACE PARSING
    # =========================================================================

    def parse_interface(self, modifiers: List[str]) -> InterfaceDeclaration:
        """Parse an interface declaration."""
        self.expect(TokenType.INTERFACE)
        name = self.expect_name('interface name').value
        interface = InterfaceDeclaration(name=name, modifiers=modifiers)

        if self.match(TokenType.LT):
            interface.type_parameters = [
                TypeParameter(name=_leading_identifier(text), text=text)
                for text in self.parse_angle_list()
            ]

        if self.match(TokenType.EXTENDS):
            self.advance()
            while True:
                interface.extends.append(self.parse_extends_clause())
                if not self.match(TokenType.COMMA):
                    break
                self.advance()

        self.expect(TokenType.LBRACE, f"body of interface '{name}'")
        interface.members = self.parse_members()
        interface.closing_trivia = self.take_trivia()
        self.expect(TokenType.RBRACE, f"end of interface '{name}'")
        return interface

    def parse_angle_list(self) -> List[str]:
        """Parse `<A, B<C>, D>` into the source text of each entry."""
        self.expect(TokenType.LT)
        entries = []
        depth = 0
        first: Optional[Token] = None
        last: Optional[Token] = None
        while True:
            tok = self.current()
            if tok.type == TokenType.EOF:
                raise SyntaxError(f"Unterminated '<' list at line {tok.line}, column {tok.column}")
            if depth == 0 and tok.type in (TokenType.COMMA, TokenType.GT):
                if first is not None:
                    entries.append(self.slice(first, last))
                first = last = None
                self.advance()
                if tok.type == TokenType.GT:
                    return entries
                continue
            if tok.type in OPENING_BRACKETS:
                depth += 1
            elif tok.type in CLOSING_BRACKETS:
                depth -= 1
            if first is None:
                first = tok
            last = self.advance()

    def parse_extends_clause(self) -> ExtendsClause:
        """Parse one heritage entry such as `React.HTMLAttributes<T>`."""
        expression = self.expect_name('extends expression').value
        while self.match(TokenType.DOT):
            self.advance()
            expression += '.' + self.expect_name('extends expression').value
        type_arguments = self.parse_angle_list() if self.match(TokenType.LT) else []
        return ExtendsClause(expression=expression, type_arguments=type_arguments)

    def parse_members(self) -> List[InterfaceMember]:
        """Parse interface members up to the closing brace."""
        members: List[InterfaceMember] = []
        while not self.match(TokenType.RBRACE, TokenType.EOF):
            trivia = self.take_trivia()
            if self.match(TokenType.SEMICOLON, TokenType.COMMA):
                # Empty member
                self.advance()
                continue
            member = self.parse_member()
            member.leading_trivia = trivia
            if self.match(TokenType.SEMICOLON, TokenType.COMMA):
                self.advance()
            member.trailing_comment = self.take_trailing_comment()
            members.append(member)
        return members

    def _property_name_at(self, offset: int) -> bool:
        tok = self.peek(offset)
        return tok.is_name or tok.type in (TokenType.STRING_LITERAL, TokenType.NUMBER)

    def parse_member(self) -> InterfaceMember:
        """Parse a property signature, or capture any other member verbatim."""
        offset = 0
        is_readonly = False
        if self.match(TokenType.READONLY) and self._property_name_at(1) and not self.peek(1).newline_before:
            is_readonly = True
            offset = 1

        if self._property_name_at(offset):
            after = offset + 1
            optional = self.peek(after).type == TokenType.QUESTION
            if optional:
                after += 1
            follower = self.peek(after)
            is_property = (
                follower.type == TokenType.COLON
                or follower.type in (TokenType.SEMICOLON, TokenType.COMMA, TokenType.RBRACE)
                or follower.newline_before
            )
            if is_property:
                if is_readonly:
                    self.advance()
                name = self.advance().value
                if optional:
                    self.advance()
                prop = PropertySignature(name=name, has_question_token=optional, is_readonly=is_readonly)
                if self.match(TokenType.COLON):
                    self.advance()
                    type_first, type_last = self.scan_until_terminator(stop_at_comma=True)
                    if type_first is not None:
                        prop.type = self.slice(type_first, type_last)
                return prop

        first, last = self.scan_until_terminator(stop_at_comma=True)
        if first is None:
            tok = self.current()
            raise SyntaxError(f"Unexpected {tok.type.name} in interface body at line {tok.line}, column {tok.column}")
        return RawMember(text=self.slice(first, last))

    def take_trailing_comment(self) -> str:
        """Consume a comment that sits on the same line as the previous member."""
        gap = self.source[self.cursor:self.current().start]
        line = gap.split('\n', 1)[0]
        stripped = line.strip()
        if stripped.startswith('//') or (stripped.startswith('/*') and stripped.endswith('*/')):
            self.cursor += len(line)
            return stripped
        return ''


def _leading_identifier(text: str) -> str:
    match = re.match(r'(?:const\s+|in\s+|out\s+)*([\w$]+)', text)
    return match.group(1) if match else text


def parse_source(source: str, path: str = '') -> SourceFile:
    """Tokenize and parse declaration source text."""
    tokens = Lexer(source).tokenize()
    return Parser(tokens, source, path).parse()


def parse_file(path) -> SourceFile:
    """Read and parse a declaration file."""
    with open(path, 'r', encoding='utf-8') as f:
        source = f.read()
    return parse_source(source, str(Path(path)))
