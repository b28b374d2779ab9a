"""Test fixtures including a recording Runner stub."""

from __future__ import annotations

import asyncio
import sqlite3
from typing import Any, Sequence

import pytest

from sqrl.runner.base import ExecResult, Runner


class ResultStub(ExecResult):
    """ExecResult with canned values, or a canned error for both."""

    def __init__(self, rows: int = 0, last_id: Any = None, err: Exception | None = None) -> None:
        self.rows = rows
        self.last_id = last_id
        self.err = err

    def rows_affected(self) -> int:
        if self.err is not None:
            raise self.err
        return self.rows

    def last_insert_id(self) -> Any:
        if self.err is not None:
            raise self.err
        return self.last_id


class RunnerStub(Runner):
    """A Runner that records the last statement sent to each method.

    Raises *err* from every call when set.  The async methods are native
    coroutines so tests can observe cancellation.
    """

    def __init__(
        self,
        result: ExecResult | None = None,
        row: Any = (1,),
        err: Exception | None = None,
    ) -> None:
        self.result = result if result is not None else ResultStub()
        self.row = row
        self.err = err
        self.last_exec_sql: str | None = None
        self.last_query_sql: str | None = None
        self.last_query_row_sql: str | None = None
        self.last_args: list[Any] | None = None
        self.async_calls = 0
        self.block: asyncio.Event | None = None
        self.cancelled = False

    def _record(self, attr: str, sql: str, args: Sequence[Any]) -> None:
        setattr(self, attr, sql)
        self.last_args = list(args)
        if self.err is not None:
            raise self.err

    def execute(self, sql: str, args: Sequence[Any]) -> ExecResult:
        self._record('last_exec_sql', sql, args)
        return self.result

    def query(self, sql: str, args: Sequence[Any]) -> Any:
        self._record('last_query_sql', sql, args)
        return [self.row] if self.row is not None else []

    def query_row(self, sql: str, args: Sequence[Any]) -> Any:
        self._record('last_query_row_sql', sql, args)
        return self.row

    async def _wait(self) -> None:
        self.async_calls += 1
        if self.block is None:
            return
        try:
            await self.block.wait()
        except asyncio.CancelledError:
            self.cancelled = True
            raise

    async def execute_async(self, sql: str, args: Sequence[Any]) -> ExecResult:
        await self._wait()
        return self.execute(sql, args)

    async def query_async(self, sql: str, args: Sequence[Any]) -> Any:
        await self._wait()
        return self.query(sql, args)

    async def query_row_async(self, sql: str, args: Sequence[Any]) -> Any:
        await self._wait()
        return self.query_row(sql, args)


@pytest.fixture
def runner():
    """Fixture providing a fresh RunnerStub."""
    return RunnerStub()


@pytest.fixture
def sqlite_conn():
    """In-memory sqlite3 database with a three-row ``t`` table."""
    conn = sqlite3.connect(":memory:", check_same_thread=False)
    conn.execute("CREATE TABLE t (id INTEGER PRIMARY KEY, name TEXT)")
    conn.executemany("INSERT INTO t (name) VALUES (?)", [("a",), ("b",), ("c",)])
    conn.commit()
    yield conn
    conn.close()


@pytest.fixture
def make_runner():
    """Fixture providing the RunnerStub class for custom setups."""
    return RunnerStub


@pytest.fixture
def make_result():
    """Fixture providing the ResultStub class."""
    return ResultStub
