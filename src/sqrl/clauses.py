"""Clause slots for a DELETE statement and their rendering."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Any, Sequence

from .exc import MissingTargetError
from .expressions import Part
from .placeholder import PlaceholderFormat, QUESTION
from .runner.base import Runner


class ResultMode(enum.Enum):
    """What ``exec()`` returns."""

    RESULT = 'result'
    ROWS_AFFECTED = 'rows_affected'
    LAST_INSERT_ID = 'last_insert_id'


@dataclass
class DeleteClauses:
    """Per-clause state owned by one :class:`~sqrl.delete_.DeleteBuilder`."""

    placeholder: PlaceholderFormat = QUESTION
    runner: Runner | None = None
    result_mode: ResultMode = ResultMode.RESULT

    prefixes: list[Part] = field(default_factory=list)
    what: list[str] = field(default_factory=list)
    from_: str = ''
    usings: list[str] = field(default_factory=list)
    joins: list[Part] = field(default_factory=list)
    where_parts: list[Part] = field(default_factory=list)
    order_bys: list[str] = field(default_factory=list)
    limit: int | None = None
    offset: int | None = None
    suffixes: list[Part] = field(default_factory=list)
    returning: list[Part] = field(default_factory=list)

    def copy(self) -> DeleteClauses:
        """Copy with every list slot duplicated."""
        return replace(
            self,
            prefixes=list(self.prefixes),
            what=list(self.what),
            usings=list(self.usings),
            joins=list(self.joins),
            where_parts=list(self.where_parts),
            order_bys=list(self.order_bys),
            suffixes=list(self.suffixes),
            returning=list(self.returning),
        )

    def render(self) -> tuple[str, list[Any]]:
        """Assemble the statement with ``?`` markers still in place."""
        if not self.what and not self.from_:
            raise MissingTargetError()

        sql: list[str] = []
        args: list[Any] = []

        _append_parts(sql, args, self.prefixes, ' ')

        head = 'DELETE'
        if self.what and self.what != [self.from_]:
            head += ' ' + ', '.join(self.what)
        sql.append(head)

        if self.from_:
            sql.append(f'FROM {self.from_}')
        if self.usings:
            sql.append('USING ' + ', '.join(self.usings))

        _append_parts(sql, args, self.joins, ' ')
        _append_parts(sql, args, self.where_parts, ' AND ', keyword='WHERE')

        if self.order_bys:
            sql.append('ORDER BY ' + ', '.join(self.order_bys))
        if self.limit is not None:
            sql.append(f'LIMIT {self.limit}')
        if self.offset is not None:
            sql.append(f'OFFSET {self.offset}')

        _append_parts(sql, args, self.suffixes, ' ')
        _append_parts(sql, args, self.returning, ', ', keyword='RETURNING')

        return ' '.join(sql), args


def _append_parts(
    sql: list[str],
    args: list[Any],
    parts: Sequence[Part],
    sep: str,
    keyword: str = '',
) -> None:
    """Render *parts* joined by *sep*; empty parts are skipped."""
    texts: list[str] = []
    for part in parts:
        part_sql, part_args = part.to_sql()
        if not part_sql:
            continue
        texts.append(part_sql)
        args.extend(part_args)
    if not texts:
        return
    body = sep.join(texts)
    sql.append(f'{keyword} {body}' if keyword else body)
