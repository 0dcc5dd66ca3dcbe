"""Tests for SQL fragment builders and positional binding."""

import pytest

from app.db.query import bind_positional, run_query
from app.db.sql import PartialUpdate, WhereClause, sql_for_partial_update
from app.domain.exceptions import BadRequestError
from app.domain.jobs import JOB_COLUMN_MAP


class TestPartialUpdate:
    """Tests for sql_for_partial_update."""

    def test_without_column_map(self):
        result = sql_for_partial_update({"obj1": "test1", "obj2": "test2"})

        assert result == PartialUpdate(set_cols='"obj1"=$1, "obj2"=$2', values=["test1", "test2"])

    def test_with_column_map(self):
        result = sql_for_partial_update(
            {"obj_1": "test1", "obj2": "test2"},
            {"obj_1": "obj1"},
        )

        assert result.set_cols == '"obj1"=$1, "obj2"=$2'
        assert result.values == ["test1", "test2"]

    def test_unpacks_as_pair(self):
        set_cols, values = sql_for_partial_update({"title": "x"})

        assert set_cols == '"title"=$1'
        assert values == ["x"]

    def test_placeholders_follow_input_order(self):
        data = {"equity": "0.1", "title": "t", "salary": 10, "companyHandle": "c1"}

        set_cols, values = sql_for_partial_update(data, JOB_COLUMN_MAP)

        assert set_cols == '"equity"=$1, "title"=$2, "salary"=$3, "company_handle"=$4'
        assert values == ["0.1", "t", 10, "c1"]

    def test_keeps_none_values(self):
        set_cols, values = sql_for_partial_update({"salary": None})

        assert set_cols == '"salary"=$1'
        assert values == [None]

    def test_empty_data_raises_bad_request(self):
        with pytest.raises(BadRequestError):
            sql_for_partial_update({})

    def test_empty_data_with_column_map_raises_bad_request(self):
        with pytest.raises(BadRequestError):
            sql_for_partial_update({}, JOB_COLUMN_MAP)

    def test_column_names_quoted_verbatim(self):
        set_cols, _ = sql_for_partial_update({"a": 1}, {"a": 'we"ird'})

        assert set_cols == '"we"ird"=$1'


class TestWhereClause:
    """Tests for incremental WHERE construction."""

    def test_empty_renders_nothing(self):
        where = WhereClause()

        assert not where
        assert str(where) == ""
        assert where.values == []

    def test_predicates_joined_with_and(self):
        where = WhereClause()
        where.add("lower(title) LIKE {}", "%dev%").add("salary >= {}", 100).add("equity > 0")

        assert str(where) == " WHERE lower(title) LIKE $1 AND salary >= $2 AND equity > 0"
        assert where.values == ["%dev%", 100]

    def test_offset_continues_numbering(self):
        where = WhereClause(offset=2).add("id = {}", 7)

        assert str(where) == " WHERE id = $3"
        assert where.values == [7]


class TestBindPositional:
    """Tests for $n to named-bind rewriting."""

    def test_rewrites_placeholders(self):
        sql, params = bind_positional("UPDATE t SET a=$1, b=$2 WHERE id = $3", ["x", "y", 5])

        assert sql == "UPDATE t SET a=:p1, b=:p2 WHERE id = :p3"
        assert params == {"p1": "x", "p2": "y", "p3": 5}

    def test_multi_digit_placeholders(self):
        values = list(range(1, 12))
        sql, params = bind_positional("SELECT $10, $11, $1", values)

        assert sql == "SELECT :p10, :p11, :p1"
        assert params == {"p10": 10, "p11": 11, "p1": 1}

    def test_missing_value_rejected(self):
        with pytest.raises(ValueError):
            bind_positional("SELECT $2", ["only one"])


class TestRunQuery:
    """Tests for run_query transaction handling."""

    def test_returns_rows_as_dicts(self, db_session, jobs):
        rows = run_query(db_session, "SELECT title FROM jobs WHERE salary >= $1 ORDER BY title", [60000])

        assert rows == [{"title": "title2"}]

    def test_driver_error_rolls_back(self, db_session, jobs):
        with pytest.raises(OverflowError):
            run_query(db_session, "SELECT id FROM jobs WHERE id = $1", [2**64])

        assert not db_session.in_transaction()
        assert len(run_query(db_session, "SELECT id FROM jobs")) == 2
