"""Caret-annotated rendering of parse failures."""

from __future__ import annotations

_GUTTER = "    |"


def format_diagnostic(text: str, offset: int, description: str) -> str:
    """Render a parse failure as a multi-line, caret-annotated message.

    The input is echoed on a numbered line, with a caret under the
    character at *offset* and the description after it::

            |
          5 | 2024-13-01
            |      ^ invalid month 13 (expected 01-12)

    Offsets past the end of the input put the caret one past the last
    character, which reads as "expected more input".

    Args:
        text: The original, unmodified input.
        offset: 0-based offset where matching diverged.
        description: What the parser expected at that point.
    """
    column = min(max(offset, 0), len(text))
    info = description.replace("\n", ", ")
    return "\n".join(
        [
            _GUTTER,
            f"{offset:3} | {text}",
            f"{_GUTTER} {' ' * column}^ {info}",
        ]
    )
