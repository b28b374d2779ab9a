"""SQL fragments: raw text with its bound arguments.

Every clause of a statement is built from fragments.  Anything with a
``to_sql()`` method returning ``(sql, args)`` can be embedded, including
another builder used as a sub-query.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

from .exc import RenderError


@runtime_checkable
class Sqlizer(Protocol):
    """Anything that renders to ``(sql, args)``."""

    def to_sql(self) -> tuple[str, list[Any]]: ...


class Expr:
    """Raw SQL text with positional arguments.

    Usage::

        expr("price > ? AND size < ?", 100, 50)
    """
    __slots__ = ('sql', 'args')

    def __init__(self, sql: str, args: Sequence[Any] = ()) -> None:
        self.sql = sql
        self.args = tuple(args)

    def to_sql(self) -> tuple[str, list[Any]]:
        return self.sql, list(self.args)

    def __repr__(self) -> str:
        return f"Expr({self.sql!r}, {list(self.args)!r})"


class Alias:
    """Wrap a sub-query as ``(<sql>) AS <alias>``."""
    __slots__ = ('inner', 'alias')

    def __init__(self, inner: Sqlizer, alias: str) -> None:
        self.inner = inner
        self.alias = alias

    def to_sql(self) -> tuple[str, list[Any]]:
        sql, args = render_nested(self.inner)
        return f"({sql}) AS {self.alias}", args

    def __repr__(self) -> str:
        return f"Alias({self.inner!r}, {self.alias!r})"


class Part:
    """One clause entry: raw text or a nested renderable.

    For a nested renderable the extra *args* are ignored; its own
    arguments are spliced in at this position.  With ``subquery=True``
    the nested text is parenthesized and suffixed with ``AS <alias>``
    when an alias is given.
    """
    __slots__ = ('pred', 'args', 'alias', 'subquery')

    def __init__(
        self,
        pred: str | Sqlizer,
        args: Sequence[Any] = (),
        alias: str | None = None,
        subquery: bool = False,
    ) -> None:
        self.pred = pred
        self.args = tuple(args)
        self.alias = alias
        self.subquery = subquery

    def to_sql(self) -> tuple[str, list[Any]]:
        if isinstance(self.pred, str):
            return self.pred, list(self.args)
        sql, args = render_nested(self.pred)
        if self.subquery:
            sql = f"({sql})"
            if self.alias:
                sql = f"{sql} AS {self.alias}"
        return sql, args

    def __repr__(self) -> str:
        return f"Part({self.pred!r}, {list(self.args)!r})"


# ── Predicates ───────────────────────────────────────────────────

class Eq:
    """Column equality map: ``Eq({"id": 1, "deleted_at": None})``.

    Keys render in sorted order.  ``None`` becomes ``IS NULL`` and a
    list or tuple becomes ``IN (...)``.
    """
    __slots__ = ('values',)

    _op = '='
    _null_op = 'IS NULL'
    _in_op = 'IN'
    _empty = '(1=0)'

    def __init__(self, values: Mapping[str, Any]) -> None:
        self.values = dict(values)

    def to_sql(self) -> tuple[str, list[Any]]:
        exprs: list[str] = []
        args: list[Any] = []
        for key in sorted(self.values):
            value = self.values[key]
            if isinstance(value, Sqlizer):
                sub_sql, sub_args = render_nested(value)
                exprs.append(f"{key} {self._op} ({sub_sql})")
                args.extend(sub_args)
            elif value is None:
                exprs.append(f"{key} {self._null_op}")
            elif isinstance(value, (list, tuple)):
                if not value:
                    exprs.append(self._empty)
                    continue
                marks = ','.join('?' for _ in value)
                exprs.append(f"{key} {self._in_op} ({marks})")
                args.extend(value)
            else:
                exprs.append(f"{key} {self._op} ?")
                args.append(value)
        return ' AND '.join(exprs), args

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.values!r})"


class NotEq(Eq):
    """Inverse of :class:`Eq`: ``<>``, ``IS NOT NULL``, ``NOT IN``."""
    __slots__ = ()

    _op = '<>'
    _null_op = 'IS NOT NULL'
    _in_op = 'NOT IN'
    _empty = '(1=1)'


class _Conjunction:
    __slots__ = ('parts',)

    _sep = ''
    _default = ''

    def __init__(self, parts: Sequence[Sqlizer | str | Mapping[str, Any]]) -> None:
        self.parts = list(parts)

    def to_sql(self) -> tuple[str, list[Any]]:
        if not self.parts:
            return self._default, []
        texts: list[str] = []
        args: list[Any] = []
        for part in self.parts:
            sql, part_args = as_part(part).to_sql()
            if sql:
                texts.append(sql)
                args.extend(part_args)
        if not texts:
            return '', []
        return f"({self._sep.join(texts)})", args

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.parts!r})"


class And(_Conjunction):
    """``(a AND b ...)``; an empty list renders ``(1=1)``."""
    __slots__ = ()
    _sep = ' AND '
    _default = '(1=1)'


class Or(_Conjunction):
    """``(a OR b ...)``; an empty list renders ``(1=0)``."""
    __slots__ = ()
    _sep = ' OR '
    _default = '(1=0)'


# ── Helper functions ─────────────────────────────────────────────

def expr(sql: str, *args: Any) -> Expr:
    """Build a raw fragment."""
    return Expr(sql, args)


def alias(inner: Sqlizer, name: str) -> Alias:
    """Build an aliased sub-query fragment."""
    return Alias(inner, name)


def render_nested(inner: Sqlizer) -> tuple[str, list[Any]]:
    """Render a nested object, normalizing failures to :class:`RenderError`.

    Builders expose ``to_sql_raw()``, which keeps ``?`` markers so the
    outer statement numbers them once, in final order.
    """
    render = getattr(inner, 'to_sql_raw', None) or inner.to_sql
    try:
        sql, args = render()
    except RenderError:
        raise
    except Exception as e:
        raise RenderError(f"Failed to render nested {type(inner).__name__}: {e}") from e
    return sql, list(args)


def as_part(pred: str | Sqlizer | Mapping[str, Any], args: Sequence[Any] = ()) -> Part:
    """Coerce a ``where``-style predicate into a :class:`Part`."""
    if isinstance(pred, Mapping):
        return Part(Eq(pred))
    return Part(pred, args)
