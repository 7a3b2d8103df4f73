"""
Diagnostics
===========

Translates the lexer's absolute error indices into line/column locations
and renders compiler-style messages:

    program.plc:3:9: error: expected digit after decimal point
        let x = 1.;
                ^
    hint: a decimal literal cannot end in '.'

Lines are terminated by '\\n'; a '\\r' immediately before it belongs to the
line break and is not shown. Columns count characters, starting at 1.
"""

from plc_lexer.errors import LexError, SourceLocation


def locate(source: str, index: int, filename: str = "<input>") -> SourceLocation:
    """
    Convert an absolute index into a SourceLocation.

    Args:
        source: The complete source text
        index: Offset into source; len(source) denotes end of input
        filename: Name to report in the location

    Raises:
        ValueError: If index is outside 0..len(source)
    """
    if not 0 <= index <= len(source):
        raise ValueError(f"index {index} out of range for source of length {len(source)}")

    line = source.count("\n", 0, index) + 1
    line_start = source.rfind("\n", 0, index) + 1
    return SourceLocation(filename, line, index - line_start + 1)


def line_text(source: str, index: int) -> str:
    """Return the text of the line containing index, without its line break."""
    line_start = source.rfind("\n", 0, index) + 1
    line_end = source.find("\n", line_start)
    if line_end == -1:
        line_end = len(source)
    return source[line_start:line_end].rstrip("\r")


def format_error(source: str, error: LexError, filename: str = "<input>") -> str:
    """
    Format a LexError with location, source context and hint.

    Args:
        source: The source text that was being lexed
        error: The error raised by the lexer
        filename: Name of the source file for the location prefix
    """
    location = locate(source, error.index, filename)
    parts = [f"{location}: error: {error.message}"]

    # Source context with caret pointer, repeating tabs so the caret lines up
    text = line_text(source, error.index)
    parts.append(f"    {text}")
    padding = "    " + "".join(
        "\t" if char == "\t" else " " for char in text[:location.column - 1]
    )
    parts.append(f"{padding}^")

    if error.hint:
        parts.append(f"hint: {error.hint}")

    return "\n".join(parts)
