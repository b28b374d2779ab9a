"""Run rendered statements against a Runner.

These helpers render the statement, log it, hand ``(sql, args)`` to the
runner and time the call.  Backend errors propagate unchanged.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from .exc import NoRowsError, RunnerNotSetError
from .expressions import Sqlizer
from .runner.base import ExecResult, Runner

log = logging.getLogger("sqrl")


def _require(runner: Runner | None) -> Runner:
    if runner is None:
        raise RunnerNotSetError()
    return runner


def exec_with(runner: Runner | None, sqlizer: Sqlizer) -> ExecResult:
    """Render *sqlizer* and execute it with *runner*."""
    runner = _require(runner)
    sql, args = sqlizer.to_sql()
    log.debug("exec: %s", sql)
    t0 = time.perf_counter()
    result = runner.execute(sql, args)
    elapsed = time.perf_counter() - t0
    log.debug("exec completed in %.3fms", elapsed * 1000)
    return result


def query_with(runner: Runner | None, sqlizer: Sqlizer) -> Any:
    """Render *sqlizer* and query with *runner*, returning the row set."""
    runner = _require(runner)
    sql, args = sqlizer.to_sql()
    log.debug("query: %s", sql)
    t0 = time.perf_counter()
    rows = runner.query(sql, args)
    elapsed = time.perf_counter() - t0
    log.debug("query completed in %.3fms", elapsed * 1000)
    return rows


def query_row_with(runner: Runner | None, sqlizer: Sqlizer) -> Any:
    """Render *sqlizer* and return the first row, or ``None``."""
    runner = _require(runner)
    sql, args = sqlizer.to_sql()
    log.debug("query_row: %s", sql)
    t0 = time.perf_counter()
    row = runner.query_row(sql, args)
    elapsed = time.perf_counter() - t0
    log.debug("query_row completed in %.3fms", elapsed * 1000)
    return row


def scan_with(runner: Runner | None, sqlizer: Sqlizer) -> tuple[Any, ...]:
    """Like :func:`query_row_with` but a missing row is an error."""
    row = query_row_with(runner, sqlizer)
    if row is None:
        raise NoRowsError("Query returned no rows")
    return tuple(row)


async def exec_with_async(runner: Runner | None, sqlizer: Sqlizer) -> ExecResult:
    """Async version of :func:`exec_with`."""
    runner = _require(runner)
    sql, args = sqlizer.to_sql()
    log.debug("async exec: %s", sql)
    t0 = time.perf_counter()
    result = await runner.execute_async(sql, args)
    elapsed = time.perf_counter() - t0
    log.debug("async exec completed in %.3fms", elapsed * 1000)
    return result


async def query_with_async(runner: Runner | None, sqlizer: Sqlizer) -> Any:
    """Async version of :func:`query_with`."""
    runner = _require(runner)
    sql, args = sqlizer.to_sql()
    log.debug("async query: %s", sql)
    t0 = time.perf_counter()
    rows = await runner.query_async(sql, args)
    elapsed = time.perf_counter() - t0
    log.debug("async query completed in %.3fms", elapsed * 1000)
    return rows


async def query_row_with_async(runner: Runner | None, sqlizer: Sqlizer) -> Any:
    """Async version of :func:`query_row_with`."""
    runner = _require(runner)
    sql, args = sqlizer.to_sql()
    log.debug("async query_row: %s", sql)
    t0 = time.perf_counter()
    row = await runner.query_row_async(sql, args)
    elapsed = time.perf_counter() - t0
    log.debug("async query_row completed in %.3fms", elapsed * 1000)
    return row


async def scan_with_async(runner: Runner | None, sqlizer: Sqlizer) -> tuple[Any, ...]:
    """Async version of :func:`scan_with`."""
    row = await query_row_with_async(runner, sqlizer)
    if row is None:
        raise NoRowsError("Query returned no rows")
    return tuple(row)
