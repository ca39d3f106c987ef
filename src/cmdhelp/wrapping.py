"""Greedy word wrapping for help text columns."""

from __future__ import annotations

from .errors import InvalidWrapWidthError


def wrap(text: str, width: int) -> list[str]:
    """Wrap whitespace-delimited words into lines no wider than ``width``.

    Words are packed greedily. A single word wider than ``width`` that starts a
    line is cut to exactly ``width`` characters and the rest of that word is
    dropped, so every step consumes input and no line exceeds ``width``.

    Raises:
        InvalidWrapWidthError: If ``width`` is smaller than 1.
    """
    if width < 1:
        raise InvalidWrapWidthError(width)

    words = text.split()
    lines: list[str] = []
    current: list[str] = []
    current_length = 0
    index = 0

    while index < len(words):
        word = words[index]
        needed = current_length + len(word) + (1 if current else 0)
        if needed <= width:
            current.append(word)
            current_length = needed
            index += 1
        elif not current:
            lines.append(word[:width])
            index += 1
        else:
            lines.append(" ".join(current))
            current = []
            current_length = 0

    if current:
        lines.append(" ".join(current))
    return lines


def wrap_indented(line: str, width: int) -> list[str]:
    """Wrap one line, repeating its leading indentation on every output line.

    Unlike :func:`wrap`, nothing is lost: a word wider than the available
    columns is split across as many lines as it needs. A line that already
    fits is returned unchanged apart from trailing whitespace.
    """
    if width < 1:
        raise InvalidWrapWidthError(width)

    body = line.strip()
    if not body:
        return [""]

    indent = line[: len(line) - len(line.lstrip())][: width - 1]
    if len(indent) + len(body) <= width:
        return [indent + body]

    available = width - len(indent)
    chunks = [
        word[start:start + available]
        for word in body.split()
        for start in range(0, len(word), available)
    ]
    return [indent + part for part in wrap(" ".join(chunks), available)]
