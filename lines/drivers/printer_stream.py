import sys
from typing import Iterable, Optional, TextIO


class PrinterDriver:
    """Writes wrapped lines to a text stream, framing each with a prefix and suffix."""

    def __init__(
        self,
        prefix: str = "",
        suffix: str = "",
        stream: Optional[TextIO] = None,
    ):
        self.prefix = prefix
        self.suffix = suffix
        self.stream = stream if stream is not None else sys.stdout
        self.lines_printed = 0

    def print_text(self, text: str):
        """Prints one framed line."""
        self.stream.write(f"{self.prefix}{text}{self.suffix}\n")
        self.lines_printed += 1

    def print_lines(self, lines: Iterable[str]):
        for line in lines:
            self.print_text(line)

    def reset_buffer(self):
        """Reset the printed line counter."""
        self.lines_printed = 0

    def flush_buffer(self):
        """Flush the underlying stream."""
        self.stream.flush()

    def close(self):
        """Flush the stream; the stream itself belongs to the caller."""
        self.flush_buffer()
