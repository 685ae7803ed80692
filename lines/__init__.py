"""Break text into lines of a desired length, keeping paragraphs apart."""

from lines.utils import OVERFLOW_POLICIES, wrap_essay, wrap_line, wrap_paragraph

__all__ = ["OVERFLOW_POLICIES", "wrap_essay", "wrap_line", "wrap_paragraph"]
