"""Text wrapping helpers shared by the CLI and library callers."""

import logging
import re

logger = logging.getLogger(__name__)

OVERFLOW_POLICIES = ("drop", "break", "overflow")

_PARAGRAPH_BREAK = re.compile(r"\n{2,}")


def wrap_line(line: str, width: int, overflow: str = "drop") -> list[str]:
    """Wraps a single line of text (no newlines) into lines of at most width characters.

    Words longer than width are handled by the overflow policy:
    "drop" skips them, "break" splits them into width-sized chunks and
    "overflow" prints them on a line of their own.
    """
    if overflow not in OVERFLOW_POLICIES:
        raise ValueError(f"Unknown overflow policy: {overflow!r}")

    lines = []
    current_line = ""

    for word in line.strip().split():
        if len(word) > width:
            if overflow == "drop" or (overflow == "break" and width < 1):
                logger.debug(f"Dropping word longer than {width} characters: {word!r}")
                continue

            if current_line:
                lines.append(current_line.strip())
                current_line = ""

            if overflow == "overflow":
                lines.append(word)
                continue

            # break: full chunks get their own line, the tail keeps filling
            while len(word) > width:
                lines.append(word[:width])
                word = word[width:]
            if word:
                current_line = word + " "
            continue

        # current_line carries the trailing space that separates it from word
        if len(current_line) + len(word) > width:
            lines.append(current_line.strip())
            current_line = ""

        current_line += word + " "

    if current_line:
        lines.append(current_line.strip())

    return lines


def wrap_paragraph(paragraph: str, width: int, overflow: str = "drop") -> list[str]:
    """Wraps each newline-separated line of a paragraph independently."""
    lines = []
    for line in paragraph.strip().split("\n"):
        if line:
            lines.extend(wrap_line(line, width, overflow))
    return lines


def wrap_essay(essay: str, width: int, overflow: str = "drop") -> list[str]:
    """
    Wraps a whole block of text, keeping paragraphs apart.

    Paragraphs are separated by two or more newlines in the input and by a
    single empty line in the output. Paragraphs that wrap to nothing do not
    produce a separator, and the result never starts or ends with one.

    Args:
        essay: Text of any length
        width: Maximum length of a wrapped line
        overflow: Policy for words longer than width (see wrap_line)

    Returns:
        Wrapped lines, with "" between paragraphs
    """
    lines = []
    for paragraph in _PARAGRAPH_BREAK.split(essay.strip()):
        if not paragraph:
            continue
        paragraph_lines = wrap_paragraph(paragraph, width, overflow)
        if paragraph_lines:
            lines.extend(paragraph_lines)
            lines.append("")

    if lines:
        lines.pop()
    return lines
