"""sqrl — fluent SQL DELETE statement builder.

Usage::

    import sqlite3
    from sqrl import delete

    sql, args = (delete("trade")
                 .where("sym = ?", "AAPL")
                 .where({"venue": ["XNAS", "ARCX"]})
                 .limit(10)
                 .to_sql())
    # DELETE FROM trade WHERE sym = ? AND venue IN (?,?) LIMIT 10
    # ['AAPL', 'XNAS', 'ARCX']

    conn = sqlite3.connect("trades.db")
    removed = delete("trade").where("price < ?", 0).run_with(conn).rows_affected().exec()
"""

from .delete_ import DeleteBuilder
from .statement import StatementBuilder, statement, delete
from .clauses import DeleteClauses, ResultMode
from .expressions import (
    Sqlizer, Expr, Alias, Part, Eq, NotEq, And, Or,
    expr, alias,
)
from .placeholder import (
    PlaceholderFormat, QUESTION, DOLLAR, COLON, AT_P, placeholder_format,
)
from .execute import (
    exec_with, query_with, query_row_with, scan_with,
    exec_with_async, query_with_async, query_row_with_async, scan_with_async,
)
from .runner import Runner, ExecResult, DBAPIRunner, CursorResult
from .exc import (
    SqrlError, RenderError, MissingTargetError, RunnerNotSetError,
    NoRowsError, ResultError,
)

__version__ = "0.1.0"

__all__ = [
    # Builders
    'DeleteBuilder', 'StatementBuilder', 'statement', 'delete',
    'DeleteClauses', 'ResultMode',
    # Fragments
    'Sqlizer', 'Expr', 'Alias', 'Part', 'Eq', 'NotEq', 'And', 'Or',
    'expr', 'alias',
    # Placeholders
    'PlaceholderFormat', 'QUESTION', 'DOLLAR', 'COLON', 'AT_P',
    'placeholder_format',
    # Execution
    'exec_with', 'query_with', 'query_row_with', 'scan_with',
    'exec_with_async', 'query_with_async', 'query_row_with_async',
    'scan_with_async',
    'Runner', 'ExecResult', 'DBAPIRunner', 'CursorResult',
    # Exceptions
    'SqrlError', 'RenderError', 'MissingTargetError', 'RunnerNotSetError',
    'NoRowsError', 'ResultError',
]
