"""DeleteBuilder: chainable DELETE statement builder."""

from __future__ import annotations

import operator
from typing import Any, Mapping

from .clauses import DeleteClauses, ResultMode
from .exc import RenderError
from .execute import (
    exec_with, query_with, query_row_with, scan_with,
    exec_with_async, query_with_async, query_row_with_async, scan_with_async,
)
from .expressions import Part, Sqlizer, as_part
from .placeholder import PlaceholderFormat, placeholder_format
from .runner.dbapi import as_runner


class DeleteBuilder:
    """Chainable DELETE statement builder.

    Each method updates the builder in place and returns it.  Use
    :meth:`clone` to branch a partially built statement.

    Usage::

        sql, args = (delete("orders")
                     .where("status = ?", "void")
                     .order_by("created_at")
                     .limit(100)
                     .placeholder_format("dollar")
                     .to_sql())
        # DELETE FROM orders WHERE status = $1 ORDER BY created_at LIMIT 100
    """

    def __init__(self, *tables: str, clauses: DeleteClauses | None = None) -> None:
        self._clauses = clauses if clauses is not None else DeleteClauses()
        if tables:
            self.what(*tables)

    # ── Clauses ──────────────────────────────────────────────────

    def prefix(self, sql: str, *args: Any) -> DeleteBuilder:
        """Add text before ``DELETE``, e.g. a ``WITH`` clause."""
        self._clauses.prefixes.append(Part(sql, args))
        return self

    def prefix_expr(self, sqlizer: Sqlizer) -> DeleteBuilder:
        """Add a renderable before ``DELETE``."""
        self._clauses.prefixes.append(Part(sqlizer))
        return self

    def what(self, *tables: str) -> DeleteBuilder:
        """Set the tables rows are deleted from.

        A single table also becomes the ``FROM`` table.
        """
        targets = [t for t in tables if t]
        self._clauses.what = targets
        if len(targets) == 1:
            self._clauses.from_ = targets[0]
        return self

    def from_(self, table: str) -> DeleteBuilder:
        """Set the ``FROM`` table."""
        self._clauses.from_ = table
        return self

    def join_clause(self, pred: str | Sqlizer, *args: Any) -> DeleteBuilder:
        """Add a join clause written out in full."""
        self._clauses.joins.append(Part(pred, args))
        return self

    def join(self, table: str, *args: Any, on: str | None = None) -> DeleteBuilder:
        """Add ``JOIN <table>[ ON <on>]``."""
        return self._join('JOIN', table, args, on)

    def inner_join(self, table: str, *args: Any, on: str | None = None) -> DeleteBuilder:
        return self._join('INNER JOIN', table, args, on)

    def left_join(self, table: str, *args: Any, on: str | None = None) -> DeleteBuilder:
        return self._join('LEFT JOIN', table, args, on)

    def right_join(self, table: str, *args: Any, on: str | None = None) -> DeleteBuilder:
        return self._join('RIGHT JOIN', table, args, on)

    def cross_join(self, table: str, *args: Any) -> DeleteBuilder:
        return self._join('CROSS JOIN', table, args, None)

    def _join(self, kind: str, table: str, args: tuple[Any, ...], on: str | None) -> DeleteBuilder:
        text = f'{kind} {table}'
        if on:
            text = f'{text} ON {on}'
        return self.join_clause(text, *args)

    def using(self, *tables: str) -> DeleteBuilder:
        """Add ``USING`` tables (PostgreSQL)."""
        self._clauses.usings.extend(tables)
        return self

    def where(self, pred: str | Sqlizer | Mapping[str, Any], *args: Any) -> DeleteBuilder:
        """Add a WHERE predicate (ANDed with the others).

        *pred* may be text with ``?`` markers, any renderable, or a
        mapping treated as :class:`~sqrl.expressions.Eq`.  Empty text
        adds nothing.
        """
        self._clauses.where_parts.append(as_part(pred, args))
        return self

    def order_by(self, *columns: str) -> DeleteBuilder:
        """Add ORDER BY columns or expressions."""
        self._clauses.order_bys.extend(columns)
        return self

    def limit(self, n: int) -> DeleteBuilder:
        """Set LIMIT; zero is rendered."""
        self._clauses.limit = _count("limit", n)
        return self

    def offset(self, n: int) -> DeleteBuilder:
        """Set OFFSET; zero is rendered."""
        self._clauses.offset = _count("offset", n)
        return self

    def suffix(self, sql: str, *args: Any) -> DeleteBuilder:
        """Add text after the rest of the statement."""
        self._clauses.suffixes.append(Part(sql, args))
        return self

    def suffix_expr(self, sqlizer: Sqlizer) -> DeleteBuilder:
        """Add a renderable after the rest of the statement."""
        self._clauses.suffixes.append(Part(sqlizer))
        return self

    def returning(self, *columns: str) -> DeleteBuilder:
        """Add RETURNING columns or expressions."""
        self._clauses.returning.extend(Part(c) for c in columns)
        return self

    def returning_select(self, sqlizer: Sqlizer, alias: str | None = None) -> DeleteBuilder:
        """Add ``RETURNING (<sub-query>) AS <alias>``."""
        self._clauses.returning.append(Part(sqlizer, alias=alias, subquery=True))
        return self

    # ── Execution settings ───────────────────────────────────────

    def placeholder_format(self, fmt: str | PlaceholderFormat) -> DeleteBuilder:
        """Set the placeholder format used by :meth:`to_sql`."""
        self._clauses.placeholder = placeholder_format(fmt)
        return self

    def run_with(self, runner: Any) -> DeleteBuilder:
        """Bind a Runner or DB-API connection; ``None`` unbinds."""
        self._clauses.runner = None if runner is None else as_runner(runner)
        return self

    def rows_affected(self) -> DeleteBuilder:
        """Make :meth:`exec` return the affected row count."""
        self._clauses.result_mode = ResultMode.ROWS_AFFECTED
        return self

    def last_insert_id(self) -> DeleteBuilder:
        """Make :meth:`exec` return the generated id."""
        self._clauses.result_mode = ResultMode.LAST_INSERT_ID
        return self

    # ── Rendering ────────────────────────────────────────────────

    def to_sql_raw(self) -> tuple[str, list[Any]]:
        """Render with ``?`` markers regardless of placeholder format."""
        return self._clauses.render()

    def to_sql(self) -> tuple[str, list[Any]]:
        """Render to ``(sql, args)``.

        Raises :class:`~sqrl.exc.MissingTargetError` when the statement
        names no table.
        """
        sql, args = self._clauses.render()
        return self._clauses.placeholder.replace(sql), args

    def clone(self) -> DeleteBuilder:
        """Return an independent copy of this builder."""
        return DeleteBuilder(clauses=self._clauses.copy())

    def explain(self) -> str:
        """Return the rendered statement and its arguments without executing."""
        sql, args = self.to_sql()
        return f"-- DeleteBuilder\n{sql}\n-- args: {args!r}"

    # ── Execution ────────────────────────────────────────────────

    def _decorate(self, result: Any) -> Any:
        mode = self._clauses.result_mode
        if mode is ResultMode.ROWS_AFFECTED:
            return result.rows_affected()
        if mode is ResultMode.LAST_INSERT_ID:
            return result.last_insert_id()
        return result

    def exec(self) -> Any:
        """Execute and return the result, or the requested scalar."""
        return self._decorate(exec_with(self._clauses.runner, self))

    def query(self) -> Any:
        """Execute and return the backend's row set."""
        return query_with(self._clauses.runner, self)

    def query_row(self) -> Any:
        """Execute and return the first row, or ``None``."""
        return query_row_with(self._clauses.runner, self)

    def scan(self) -> tuple[Any, ...]:
        """Execute and return the single result row as a tuple."""
        return scan_with(self._clauses.runner, self)

    async def exec_async(self) -> Any:
        """Async version of :meth:`exec`."""
        return self._decorate(await exec_with_async(self._clauses.runner, self))

    async def query_async(self) -> Any:
        return await query_with_async(self._clauses.runner, self)

    async def query_row_async(self) -> Any:
        return await query_row_with_async(self._clauses.runner, self)

    async def scan_async(self) -> tuple[Any, ...]:
        return await scan_with_async(self._clauses.runner, self)

    def __repr__(self) -> str:
        try:
            sql, _ = self.to_sql()
        except RenderError as e:
            return f"DeleteBuilder(<{e}>)"
        return f"DeleteBuilder({sql})"


def _count(name: str, n: Any) -> int:
    try:
        value = operator.index(n)
    except TypeError:
        raise TypeError(
            f"{name} must be an integer, got {type(n).__name__}"
        ) from None
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value
