"""Splitting of comma-separated value lines with double-quote escaping.

A double quote outside a quoted run opens one, wherever it appears in a
field. Inside a quoted run a doubled quote stands for one literal quote and
commas are kept as text. Parsing stops at the first NUL character.
"""

from __future__ import annotations

__all__ = ["UnterminatedQuoteError", "count_fields", "parse_csv"]


class UnterminatedQuoteError(ValueError):
    """Raised when a line ends inside a quoted run."""


def parse_csv(line: str) -> list[str]:
    """Split ``line`` into its cells, unquoting them.

    Raises :class:`UnterminatedQuoteError` if a quoted run is never closed.
    """
    line = line.split("\0", 1)[0]
    fields: list[str] = []
    current: list[str] = []
    in_quote = False
    closing = False

    for char in line:
        if closing:
            closing = False
            if char == '"':
                # a doubled quote inside a quoted run is a literal quote
                current.append('"')
                continue
            in_quote = False

        if in_quote:
            if char == '"':
                closing = True
            else:
                current.append(char)
            continue

        if char == '"':
            in_quote = True
        elif char == ",":
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    if in_quote and not closing:
        raise UnterminatedQuoteError(f"unterminated quote in {line!r}")

    fields.append("".join(current))
    return fields


def count_fields(line: str) -> int:
    """Return the number of cells in ``line``.

    Raises :class:`UnterminatedQuoteError` if a quoted run is never closed.
    """
    return len(parse_csv(line))