"""Runner over a PEP 249 (DB-API 2.0) connection."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from ..exc import ResultError
from .base import ExecResult, Runner


log = logging.getLogger("sqrl.runner")


class CursorResult(ExecResult):
    """Execution result read from a DB-API cursor.

    ``rowcount`` and ``lastrowid`` are copied when the result is built so
    the cursor can be closed straight away.
    """

    def __init__(self, cursor: Any) -> None:
        self.rowcount = getattr(cursor, 'rowcount', -1)
        self.lastrowid = getattr(cursor, 'lastrowid', None)

    def rows_affected(self) -> int:
        if self.rowcount is None or self.rowcount < 0:
            raise ResultError("Driver did not report a row count")
        return self.rowcount

    def last_insert_id(self) -> Any:
        if self.lastrowid is None:
            raise ResultError("Driver did not report a generated id")
        return self.lastrowid

    def __repr__(self) -> str:
        return f"CursorResult(rowcount={self.rowcount})"


class DBAPIRunner(Runner):
    """Run statements on a DB-API connection such as ``sqlite3.Connection``.

    Transactions are left to the caller; no commit is issued.

    Usage::

        conn = sqlite3.connect("app.db")
        delete("users").where("id = ?", 7).run_with(DBAPIRunner(conn)).exec()
    """

    def __init__(self, connection: Any) -> None:
        self.connection = connection

    def _cursor(self, sql: str, args: Sequence[Any]) -> Any:
        cursor = self.connection.cursor()
        try:
            cursor.execute(sql, tuple(args))
        except Exception:
            cursor.close()
            raise
        return cursor

    def execute(self, sql: str, args: Sequence[Any]) -> CursorResult:
        cursor = self._cursor(sql, args)
        try:
            return CursorResult(cursor)
        finally:
            cursor.close()

    def query(self, sql: str, args: Sequence[Any]) -> Any:
        return self._cursor(sql, args)

    def query_row(self, sql: str, args: Sequence[Any]) -> Any:
        cursor = self._cursor(sql, args)
        try:
            return cursor.fetchone()
        finally:
            cursor.close()

    def __repr__(self) -> str:
        return f"DBAPIRunner({type(self.connection).__name__})"


def as_runner(backend: Any) -> Runner:
    """Return *backend* as a :class:`Runner`, wrapping DB-API connections."""
    if isinstance(backend, Runner):
        return backend
    if callable(getattr(backend, 'cursor', None)):
        log.debug("Wrapping %s in DBAPIRunner", type(backend).__name__)
        return DBAPIRunner(backend)
    raise TypeError(
        f"Cannot run statements with {type(backend).__name__}; "
        "expected a Runner or a DB-API connection"
    )
