"""Placeholder formats: rewrite ``?`` markers into dialect syntax.

Formatting runs once over the fully assembled statement, so the Kth
marker in the final text always pairs with the Kth bound argument.
"""

from __future__ import annotations

import abc

MARKER = '?'


class PlaceholderFormat(abc.ABC):
    """Abstract base for placeholder rewriting."""

    name: str = ''

    @abc.abstractmethod
    def replace(self, sql: str) -> str:
        """Return *sql* with every ``?`` rewritten."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class QuestionFormat(PlaceholderFormat):
    """Leave ``?`` markers untouched (sqlite3, MySQL drivers)."""

    name = 'question'

    def replace(self, sql: str) -> str:
        return sql


class NumberedFormat(PlaceholderFormat):
    """Replace the Kth marker with ``<prefix>K``, counting from 1."""

    def __init__(self, name: str, prefix: str) -> None:
        self.name = name
        self.prefix = prefix

    def replace(self, sql: str) -> str:
        pieces = sql.split(MARKER)
        out = [pieces[0]]
        for position, piece in enumerate(pieces[1:], start=1):
            out.append(f'{self.prefix}{position}')
            out.append(piece)
        return ''.join(out)


QUESTION = QuestionFormat()
DOLLAR = NumberedFormat('dollar', '$')     # PostgreSQL
COLON = NumberedFormat('colon', ':')       # Oracle
AT_P = NumberedFormat('atp', '@p')         # SQL Server

_FORMATS: dict[str, PlaceholderFormat] = {
    fmt.name: fmt for fmt in (QUESTION, DOLLAR, COLON, AT_P)
}


def placeholder_format(name: str | PlaceholderFormat) -> PlaceholderFormat:
    """Look up a placeholder format by name (case-insensitive).

    Passing a :class:`PlaceholderFormat` returns it unchanged.
    """
    if isinstance(name, PlaceholderFormat):
        return name
    try:
        return _FORMATS[name.lower()]
    except KeyError:
        available = ", ".join(sorted(_FORMATS))
        raise ValueError(
            f"Unknown placeholder format {name!r}. Available: {available}"
        )
