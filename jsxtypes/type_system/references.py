"""
Qualified name lookup inside type expressions.

Type expressions are kept as source text in the declaration tree. This
module tokenizes that text and walks the qualified names (`A.B`, `A.B.C`)
it contains in the order a pre-order tree traversal would visit them:
for `A.B.C` the outer name `A.B` . `C` comes before the inner `A` . `B`.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from ..lexer import Lexer, TokenType


@dataclass(frozen=True)
class QualifiedName:
    """A qualified type name split at its last dot."""
    left: str
    right: str

    def __str__(self) -> str:
        return f'{self.left}.{self.right}'


def iter_qualified_names(type_text: str) -> Iterator[QualifiedName]:
    """Yield every qualified name in a type expression, in pre-order."""
    tokens = Lexer(type_text).tokenize()
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        if not tok.is_name or (i > 0 and tokens[i - 1].type == TokenType.DOT):
            i += 1
            continue

        parts = [tok.value]
        j = i
        while (j + 2 < len(tokens)
               and tokens[j + 1].type == TokenType.DOT
               and tokens[j + 2].is_name):
            parts.append(tokens[j + 2].value)
            j += 2

        for k in range(len(parts) - 1, 0, -1):
            yield QualifiedName('.'.join(parts[:k]), parts[k])
        i = j + 1


def find_qualified_name(type_text: str, left: str, excluded_right: str = '') -> Optional[QualifiedName]:
    """
    Find the first qualified name with the given left-hand side.

    Args:
        type_text: Type expression to search
        left: Required left-hand side, e.g. 'React'
        excluded_right: Right-hand identifier to skip, e.g. 'DetailedHTMLProps'

    Returns:
        The first matching QualifiedName, or None
    """
    for name in iter_qualified_names(type_text):
        if name.left == left and name.right != excluded_right:
            return name
    return None
