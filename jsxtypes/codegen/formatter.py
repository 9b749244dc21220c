"""
Source formatting pass.

Re-indents printed declaration text by bracket depth. Running the pass on
its own output returns the same text, which keeps generated files stable
between runs.
"""

from typing import List, Tuple


class TextFormatter:
    """
    Line-based re-indenter for TypeScript declaration text.

    Rules:
    - each line is indented by the bracket depth at its start
    - a line that opens with a closing bracket is outdented one level
    - union / intersection continuation lines are indented one extra level
    - JSDoc `*` lines line up under the opening `/**`
    - trailing whitespace is removed and the text ends with one newline
    """

    def __init__(self, indent_size: int = 4):
        self.indent_unit = ' ' * indent_size

    def format(self, text: str) -> str:
        lines = text.replace('\r\n', '\n').split('\n')
        out: List[str] = []
        depth = 0
        in_comment = False

        for line in lines:
            stripped = line.strip()
            if not stripped:
                out.append('')
                continue

            if in_comment:
                prefix = self.indent_unit * depth
                out.append(prefix + (' ' + stripped if stripped.startswith('*') else stripped))
                in_comment = '*/' not in stripped
                continue

            level = depth
            if stripped[0] in ')]}':
                level -= 1
            elif stripped[0] in '|&' and not stripped.startswith(('||', '&&')):
                level += 1
            out.append(self.indent_unit * max(level, 0) + stripped)
            depth, in_comment = self._scan(stripped, depth)

        return '\n'.join(out).rstrip('\n') + '\n'

    def _scan(self, line: str, depth: int) -> Tuple[int, bool]:
        """Track bracket depth across a line, skipping strings and comments."""
        i = 0
        quote = ''
        while i < len(line):
            ch = line[i]
            if quote:
                if ch == '\\':
                    i += 2
                    continue
                if ch == quote:
                    quote = ''
            elif ch in '\'"`':
                quote = ch
            elif line.startswith('//', i):
                break
            elif line.startswith('/*', i):
                end = line.find('*/', i + 2)
                if end == -1:
                    return depth, True
                i = end + 2
                continue
            elif ch in '({[':
                depth += 1
            elif ch in ')}]':
                depth = max(depth - 1, 0)
            i += 1
        return depth, False


def format_text(text: str, indent_size: int = 4) -> str:
    """Format declaration text with the given indent width."""
    return TextFormatter(indent_size).format(text)
