"""
Tests for the statement preprocessor.

This module tests batch splitting, lowercasing, comment removal, bucketing
clause stripping and the dropping of empty and ``set`` statements.
"""

import pytest

from hive_lineage.parser.preprocessor import (
    clean_statement,
    is_set_statement,
    preprocess,
    remove_comments,
    strip_bucketing_clause,
)


class TestStripBucketingClause:
    """Tests for strip_bucketing_clause."""

    def test_strips_clustered_by_tail(self):
        """Test removing a bare bucketing clause."""
        sql = "create table t (id int) clustered by (id) into 4 buckets"
        assert strip_bucketing_clause(sql) == "create table t (id int) "

    def test_strips_partitioned_by_before_bucketing(self):
        """Test the PARTITIONED BY clause preceding it is removed as well."""
        sql = (
            "create table t (id int)\n"
            "comment 'bucketed'\n"
            "partitioned by (ds string)\n"
            "clustered by (id) into 256 buckets"
        )
        result = strip_bucketing_clause(sql)

        assert "partitioned" not in result
        assert "clustered" not in result
        assert "comment 'bucketed'" in result

    def test_keeps_partitioned_by_without_bucketing(self):
        """Test PARTITIONED BY alone is not touched."""
        sql = "create table t (id int) partitioned by (ds string)"
        assert strip_bucketing_clause(sql) == sql

    def test_no_space_before_parenthesis(self):
        """Test ``clustered by(col)`` without a space."""
        sql = "create table t (id int) clustered by(id) into 8 buckets"
        assert "buckets" not in strip_bucketing_clause(sql)


class TestRemoveComments:
    """Tests for remove_comments."""

    def test_single_line_comment(self):
        """Test ``--`` comments are removed to end of line."""
        sql = "select * -- all columns\nfrom t"
        assert remove_comments(sql) == "select *\nfrom t"

    def test_multi_line_comment(self):
        """Test ``/* */`` comments spanning lines are removed."""
        sql = "/* header\n spanning lines */\nselect * from t"
        assert remove_comments(sql) == "select * from t"

    def test_multi_line_comment_is_non_greedy(self):
        """Test two block comments do not swallow the text between them."""
        sql = "select /* a */ id /* b */ from t"
        assert remove_comments(sql) == "select  id  from t"

    def test_blank_lines_removed_and_lines_trimmed(self):
        """Test blank lines are dropped and remaining lines trimmed."""
        sql = "\n   select id\n\n\n    from t   \n"
        assert remove_comments(sql) == "select id\nfrom t"

    def test_comment_only_statement_becomes_empty(self):
        """Test a statement made of comments only cleans to empty."""
        assert remove_comments("-- nothing to do: select * from x") == ""


class TestPreprocess:
    """Tests for preprocess."""

    def test_splits_on_semicolon(self):
        """Test a batch is split into statements."""
        result = preprocess("select 1 from a; select 2 from b")
        assert result == ["select 1 from a", "select 2 from b"]

    def test_lowercases_statements(self):
        """Test the whole statement is lowercased."""
        assert preprocess("SELECT * FROM Test.Orders") == [
            "select * from test.orders"
        ]

    def test_drops_empty_statements(self):
        """Test trailing and repeated semicolons produce no statements."""
        assert preprocess("select * from a;;  ;\n") == ["select * from a"]

    def test_drops_set_statements(self):
        """Test ``set`` statements are dropped."""
        sql = "set hive.exec.parallel=true;\nSET mapreduce.job.queuename=etl; select * from a"
        assert preprocess(sql) == ["select * from a"]

    def test_keeps_use_statements(self):
        """Test ``use`` statements pass through for the dispatcher."""
        assert preprocess("USE db1; select * from t1") == [
            "use db1",
            "select * from t1",
        ]

    def test_drops_comment_only_statements(self):
        """Test a statement holding only comments is dropped."""
        sql = "-- select * from test.bbbb\n; select * from test.a"
        assert preprocess(sql) == ["select * from test.a"]

    def test_set_detected_after_leading_comment(self):
        """Test a ``set`` preceded by a comment line is still dropped."""
        sql = "-- session settings\nset hive.auto.convert.join=false"
        assert preprocess(sql) == []

    def test_empty_input(self):
        """Test empty input yields no statements."""
        assert preprocess("") == []
        assert preprocess("   \n  ") == []

    @pytest.mark.parametrize(
        "sql",
        [
            "set",
            "set hive.exec.parallel=true",
            "set\thive.exec.parallel=true",
        ],
    )
    def test_is_set_statement(self, sql):
        """Test recognized ``set`` forms."""
        assert is_set_statement(sql)

    def test_settings_table_is_not_set_statement(self):
        """Test a statement merely starting with ``set`` letters is kept."""
        assert not is_set_statement("settings_backup")
        assert preprocess("select * from settings") == ["select * from settings"]

    def test_clean_statement_strips_bucketing_before_comments(self):
        """Test clean_statement applies every cleaning step."""
        sql = """
        -- bucketed table
        CREATE TABLE T (ID INT)
        CLUSTERED BY (ID) INTO 4 BUCKETS
        """
        assert clean_statement(sql) == "create table t (id int)"
