"""
Lexer implementation for TypeScript declaration files.

The Lexer tokenizes declaration source code into a stream of tokens
that can be consumed by the parser. Comments and whitespace are not
tokens; every token records its source offsets so the parser can slice
the original text (comments included) back out.
"""

from typing import List

from .tokens import Token, TokenType, KEYWORDS, MULTI_CHAR_OPS, SINGLE_CHAR_OPS


class Lexer:
    """
    Lexer for TypeScript declaration source code.

    Converts source text into a list of tokens for parsing.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self._saw_newline = False

    def peek(self, offset: int = 0) -> str:
        """Look ahead in the source without consuming."""
        pos = self.pos + offset
        if pos >= len(self.source):
            return ''
        return self.source[pos]

    def advance(self) -> str:
        """Consume and return the current character."""
        ch = self.peek()
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.column = 1
            self._saw_newline = True
        else:
            self.column += 1
        return ch

    def skip_whitespace(self) -> None:
        """Skip over whitespace characters."""
        ch = self.peek()
        while ch and ch in ' \t\r\n\ufeff':
            self.advance()
            ch = self.peek()

    def skip_comment(self) -> None:
        """Skip over single-line and multi-line comments."""
        if self.peek() == '/' and self.peek(1) == '/':
            while self.peek() and self.peek() != '\n':
                self.advance()
        elif self.peek() == '/' and self.peek(1) == '*':
            start_line, start_col = self.line, self.column
            self.advance()  # skip /
            self.advance()  # skip *
            while self.peek():
                if self.peek() == '*' and self.peek(1) == '/':
                    self.advance()  # skip *
                    self.advance()  # skip /
                    return
                self.advance()
            raise SyntaxError(f"Unterminated comment at line {start_line}, column {start_col}")

    def read_string(self) -> str:
        """Read a string literal including its quotes."""
        start_line, start_col = self.line, self.column
        quote = self.advance()
        result = quote
        while self.peek() and self.peek() != quote:
            if self.peek() == '\\':
                result += self.advance()
            elif self.peek() == '\n':
                break
            result += self.advance()
        if self.peek() != quote:
            raise SyntaxError(f"Unterminated string literal at line {start_line}, column {start_col}")
        result += self.advance()
        return result

    def read_template(self) -> str:
        """Read a template literal, including nested ${...} placeholders."""
        start_line, start_col = self.line, self.column
        result = self.advance()  # opening backtick
        while self.peek():
            ch = self.peek()
            if ch == '\\':
                result += self.advance()
                result += self.advance()
            elif ch == '`':
                return result + self.advance()
            elif ch == '$' and self.peek(1) == '{':
                depth = 0
                while self.peek():
                    ch = self.advance()
                    result += ch
                    if ch == '{':
                        depth += 1
                    elif ch == '}':
                        depth -= 1
                        if depth == 0:
                            break
            else:
                result += self.advance()
        raise SyntaxError(f"Unterminated template literal at line {start_line}, column {start_col}")

    def read_number(self) -> str:
        """Read a numeric literal (decimal, hex, bigint suffix)."""
        result = ''
        while self.peek() and (self.peek().isalnum() or self.peek() in '._'):
            if self.peek() == '.' and not self.peek(1).isdigit():
                break
            result += self.advance()
        return result

    def read_identifier(self) -> str:
        """Read an identifier or keyword."""
        result = ''
        while self.peek() and (self.peek().isalnum() or self.peek() in '_$#'):
            result += self.advance()
        return result

    def add_token(self, token_type: TokenType, value: str, start: int, line: int, column: int) -> None:
        """Add a token to the token list."""
        self.tokens.append(Token(
            token_type, value, line, column,
            start=start, end=self.pos, newline_before=self._saw_newline,
        ))
        self._saw_newline = False

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source and return a list of tokens.

        Returns:
            List of Token objects, ending with an EOF token.
        """
        while self.pos < len(self.source):
            self.skip_whitespace()

            if self.pos >= len(self.source):
                break

            if self.peek() == '/' and self.peek(1) in '/*':
                self.skip_comment()
                continue

            start = self.pos
            start_line = self.line
            start_col = self.column
            ch = self.peek()

            if ch in '"\'':
                value = self.read_string()
                self.add_token(TokenType.STRING_LITERAL, value, start, start_line, start_col)
                continue

            if ch == '`':
                value = self.read_template()
                self.add_token(TokenType.TEMPLATE_LITERAL, value, start, start_line, start_col)
                continue

            if ch.isdigit() or (ch == '.' and self.peek(1).isdigit()):
                value = self.read_number()
                self.add_token(TokenType.NUMBER, value, start, start_line, start_col)
                continue

            if ch.isalpha() or ch in '_$#':
                value = self.read_identifier()
                token_type = KEYWORDS.get(value, TokenType.IDENTIFIER)
                self.add_token(token_type, value, start, start_line, start_col)
                continue

            matched = False
            for op, token_type in MULTI_CHAR_OPS.items():
                if self.source.startswith(op, self.pos):
                    for _ in op:
                        self.advance()
                    self.add_token(token_type, op, start, start_line, start_col)
                    matched = True
                    break
            if matched:
                continue

            self.advance()
            self.add_token(SINGLE_CHAR_OPS.get(ch, TokenType.OTHER), ch, start, start_line, start_col)

        self.tokens.append(Token(
            TokenType.EOF, '', self.line, self.column,
            start=len(self.source), end=len(self.source), newline_before=self._saw_newline,
        ))
        return self.tokens
