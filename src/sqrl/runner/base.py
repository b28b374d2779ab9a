"""Abstract execution backend interface."""

from __future__ import annotations

import abc
import asyncio
from typing import Any, Sequence


class ExecResult(abc.ABC):
    """Result of a statement execution."""

    @abc.abstractmethod
    def rows_affected(self) -> int:
        """Number of rows changed by the statement."""

    @abc.abstractmethod
    def last_insert_id(self) -> Any:
        """Identifier generated by the statement."""


class Runner(abc.ABC):
    """Abstract base for anything a statement can be run against.

    The async methods run their sync counterpart in a worker thread by
    default.  Backends with a native async driver override them so that
    task cancellation reaches the driver.
    """

    @abc.abstractmethod
    def execute(self, sql: str, args: Sequence[Any]) -> ExecResult:
        """Execute a statement that returns no rows.

        Parameters
        ----------
        sql : str
            Rendered statement text.
        args : Sequence[Any]
            Positional arguments, in placeholder order.
        """

    @abc.abstractmethod
    def query(self, sql: str, args: Sequence[Any]) -> Any:
        """Execute a statement and return its row set."""

    @abc.abstractmethod
    def query_row(self, sql: str, args: Sequence[Any]) -> Any:
        """Execute a statement and return its first row, or ``None``."""

    async def execute_async(self, sql: str, args: Sequence[Any]) -> ExecResult:
        return await asyncio.to_thread(self.execute, sql, args)

    async def query_async(self, sql: str, args: Sequence[Any]) -> Any:
        return await asyncio.to_thread(self.query, sql, args)

    async def query_row_async(self, sql: str, args: Sequence[Any]) -> Any:
        return await asyncio.to_thread(self.query_row, sql, args)
