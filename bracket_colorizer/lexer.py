from typing import Sequence, Tuple

from .model import Position


def utf8_width(char: str) -> int:
    code = ord(char)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


class LexicalContext:
    """
    Tracks whether the scan is inside a string literal, a comment or
    plain code, together with the position of the next character.

    Only C-style comments (`//` and `/* */`) and single or double quoted
    strings with backslash escapes are recognised. The caller drives the
    scan with an explicit index: `step` says how many characters the
    current token spans and whether it is code, `advance` moves the
    position over them.
    """
    __slots__ = [
        'in_double_quote_string',
        'in_single_quote_string',
        'in_line_comment',
        'in_block_comment',
        'escape_next',
        'line',
        'column',
        'byte_offset',
    ]

    def __init__(self):
        self.in_double_quote_string = False
        self.in_single_quote_string = False
        self.in_line_comment = False
        self.in_block_comment = False
        self.escape_next = False
        self.line = 0
        self.column = 0
        self.byte_offset = 0

    def in_string(self) -> bool:
        return self.in_double_quote_string or self.in_single_quote_string

    def in_comment(self) -> bool:
        return self.in_line_comment or self.in_block_comment

    def in_code(self) -> bool:
        return not (self.in_string() or self.in_comment())

    def position(self) -> Position:
        return Position(self.line, self.column, self.byte_offset)

    def step(self, chars: Sequence[str], i: int) -> Tuple[int, bool]:
        char = chars[i]

        if self.escape_next:
            self.escape_next = False
            return 1, False

        if char == '\\' and self.in_string():
            self.escape_next = True
            return 1, False

        if char == '\n':
            self.in_line_comment = False
            return 1, False

        if char == '"':
            if not self.in_single_quote_string and not self.in_comment():
                self.in_double_quote_string = not self.in_double_quote_string
        elif char == "'":
            if not self.in_double_quote_string and not self.in_comment():
                self.in_single_quote_string = not self.in_single_quote_string

        if not self.in_string() and i + 1 < len(chars):
            following = chars[i + 1]
            if char == '/':
                if following == '/':
                    self.in_line_comment = True
                elif following == '*':
                    self.in_block_comment = True
            elif char == '*' and following == '/' and self.in_block_comment:
                self.in_block_comment = False
                return 2, False

        return 1, self.in_code()

    def advance(self, chars: Sequence[str], i: int, width: int = 1):
        for char in chars[i:i + width]:
            if char == '\n':
                self.line += 1
                self.column = 0
            else:
                self.column += 1
            self.byte_offset += utf8_width(char)
