"""Conversions between flat character offsets and line/character positions.

Characters within a line are counted in UTF-16 code units, the unit editors
speaking the language server protocol use, so a character outside the Basic
Multilingual Plane takes two columns.
"""

from .models import Position, Range


def _width(char: str) -> int:
    return 2 if ord(char) > 0xFFFF else 1


def offset_to_position(text: str, offset: int) -> Position:
    """Position of offset in text; offsets past the end clamp to the end"""
    line = 0
    column = 0
    for char in text[: max(0, min(offset, len(text)))]:
        if char == "\n":
            line += 1
            column = 0
        else:
            column += _width(char)
    return Position(line, column)


def position_to_offset(text: str, position: Position) -> int:
    """Offset of position in text, or -1 if the text never reaches it"""
    line = 0
    column = 0
    for offset, char in enumerate(text):
        if line == position.line and column == position.character:
            return offset
        if char == "\n":
            line += 1
            column = 0
        else:
            column += _width(char)

    if line == position.line and column == position.character:
        return len(text)
    return -1


def to_range(text: str, start: int, end: int) -> Range:
    return Range(offset_to_position(text, start), offset_to_position(text, end))
