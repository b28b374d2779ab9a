"""Unit tests for fragments and predicates."""

import pytest

from sqrl import Expr, Alias, Part, Eq, NotEq, And, Or, Sqlizer, expr, alias, RenderError
from sqrl.expressions import as_part, render_nested


class TestExpr:
    def test_to_sql(self):
        e = expr("a = ? AND b = ?", 1, 2)
        assert e.to_sql() == ("a = ? AND b = ?", [1, 2])

    def test_args_not_checked_against_markers(self):
        e = expr("a = ?", 1, 2, 3)
        assert e.to_sql() == ("a = ?", [1, 2, 3])

    def test_returned_args_are_a_copy(self):
        e = expr("a = ?", 1)
        _, args = e.to_sql()
        args.append(99)
        assert e.to_sql() == ("a = ?", [1])

    def test_is_sqlizer(self):
        assert isinstance(expr("1"), Sqlizer)
        assert not isinstance("1", Sqlizer)

    def test_repr(self):
        assert repr(Expr("a = ?", [1])) == "Expr('a = ?', [1])"


class TestPart:
    def test_raw_text(self):
        assert Part("x = ?", [5]).to_sql() == ("x = ?", [5])

    def test_nested_ignores_extra_args(self):
        assert Part(expr("x = ?", 1), [2]).to_sql() == ("x = ?", [1])

    def test_subquery_with_alias(self):
        p = Part(expr("SELECT ?", 1), alias="one", subquery=True)
        assert p.to_sql() == ("(SELECT ?) AS one", [1])

    def test_subquery_without_alias(self):
        p = Part(expr("SELECT 1"), subquery=True)
        assert p.to_sql() == ("(SELECT 1)", [])

    def test_as_part_mapping(self):
        assert as_part({"a": 1}).to_sql() == ("a = ?", [1])


class TestAlias:
    def test_alias(self):
        assert alias(expr("SELECT ?", 1), "x").to_sql() == ("(SELECT ?) AS x", [1])

    def test_alias_class(self):
        assert isinstance(alias(expr("1"), "x"), Alias)


class TestEq:
    def test_scalar(self):
        assert Eq({"id": 1}).to_sql() == ("id = ?", [1])

    def test_sorted_keys(self):
        sql, args = Eq({"b": 2, "a": 1}).to_sql()
        assert sql == "a = ? AND b = ?"
        assert args == [1, 2]

    def test_null(self):
        assert Eq({"deleted_at": None}).to_sql() == ("deleted_at IS NULL", [])

    def test_in_list(self):
        assert Eq({"id": [1, 2, 3]}).to_sql() == ("id IN (?,?,?)", [1, 2, 3])

    def test_empty_list(self):
        assert Eq({"id": []}).to_sql() == ("(1=0)", [])

    def test_nested_value(self):
        sql, args = Eq({"id": expr("SELECT max(id) FROM t WHERE k = ?", "k")}).to_sql()
        assert sql == "id = (SELECT max(id) FROM t WHERE k = ?)"
        assert args == ["k"]


class TestNotEq:
    def test_scalar(self):
        assert NotEq({"id": 1}).to_sql() == ("id <> ?", [1])

    def test_null(self):
        assert NotEq({"x": None}).to_sql() == ("x IS NOT NULL", [])

    def test_not_in(self):
        assert NotEq({"id": (1, 2)}).to_sql() == ("id NOT IN (?,?)", [1, 2])

    def test_empty_list(self):
        assert NotEq({"id": []}).to_sql() == ("(1=1)", [])


class TestConjunctions:
    def test_and(self):
        sql, args = And(["a = 1", expr("b = ?", 2), {"c": 3}]).to_sql()
        assert sql == "(a = 1 AND b = ? AND c = ?)"
        assert args == [2, 3]

    def test_or(self):
        sql, args = Or([expr("a = ?", 1), expr("b = ?", 2)]).to_sql()
        assert sql == "(a = ? OR b = ?)"
        assert args == [1, 2]

    def test_nested(self):
        sql, args = And([Or([expr("a = ?", 1), "b"]), expr("c = ?", 3)]).to_sql()
        assert sql == "((a = ? OR b) AND c = ?)"
        assert args == [1, 3]

    def test_empty(self):
        assert And([]).to_sql() == ("(1=1)", [])
        assert Or([]).to_sql() == ("(1=0)", [])

    def test_all_children_empty(self):
        assert And(["", Eq({})]).to_sql() == ("", [])
        assert Or([""]).to_sql() == ("", [])

    def test_empty_children_skipped(self):
        sql, args = And(["", expr("a = ?", 1)]).to_sql()
        assert sql == "(a = ?)"
        assert args == [1]


class TestRenderNested:
    def test_prefers_raw_render(self):
        class Builder:
            def to_sql(self):
                return "x = $1", [1]

            def to_sql_raw(self):
                return "x = ?", [1]

        assert render_nested(Builder()) == ("x = ?", [1])

    def test_wraps_foreign_errors(self):
        class Broken:
            def to_sql(self):
                raise KeyError("missing")

        with pytest.raises(RenderError, match="Broken"):
            render_nested(Broken())

    def test_render_error_unchanged(self):
        err = RenderError("inner")

        class Failing:
            def to_sql(self):
                raise err

        with pytest.raises(RenderError) as exc:
            render_nested(Failing())
        assert exc.value is err
