"""StatementBuilder: shared defaults for new statements."""

from __future__ import annotations

from typing import Any

from .clauses import DeleteClauses
from .delete_ import DeleteBuilder
from .placeholder import PlaceholderFormat, QUESTION, placeholder_format
from .runner.base import Runner
from .runner.dbapi import as_runner


class StatementBuilder:
    """Carries a placeholder format and Runner into every builder it creates.

    Settings return a new StatementBuilder, so a configured instance can
    be shared freely.

    Usage::

        pg = StatementBuilder().placeholder_format("dollar").run_with(conn)
        pg.delete("sessions").where("expires_at < now()").exec()
    """

    def __init__(
        self,
        placeholder: PlaceholderFormat = QUESTION,
        runner: Runner | None = None,
    ) -> None:
        self.placeholder = placeholder
        self.runner = runner

    def placeholder_format(self, fmt: str | PlaceholderFormat) -> StatementBuilder:
        return StatementBuilder(placeholder_format(fmt), self.runner)

    def run_with(self, runner: Any) -> StatementBuilder:
        return StatementBuilder(
            self.placeholder, None if runner is None else as_runner(runner),
        )

    def delete(self, *tables: str) -> DeleteBuilder:
        """Start a DELETE statement with these defaults."""
        clauses = DeleteClauses(placeholder=self.placeholder, runner=self.runner)
        return DeleteBuilder(*tables, clauses=clauses)

    def __repr__(self) -> str:
        return f"StatementBuilder(placeholder={self.placeholder.name!r}, runner={self.runner!r})"


statement = StatementBuilder()


def delete(*tables: str) -> DeleteBuilder:
    """Start a DELETE statement.

    ``delete("a")`` deletes from ``a``; ``delete("a1", "a2").from_("t AS a1")``
    renders the multi-table ``DELETE a1, a2 FROM ...`` form.
    """
    return statement.delete(*tables)
