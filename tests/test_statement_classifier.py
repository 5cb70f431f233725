"""
Tests for statement classification and dispatch.

This module contains tests for StatementType, StatementClassifier and the
per-statement lineage records produced by StatementDispatcher.
"""

import pytest
import sqlglot

from hive_lineage.analyzer.dispatcher import StatementDispatcher
from hive_lineage.models.session import Session
from hive_lineage.models.statement_type import StatementType
from hive_lineage.parser.preprocessor import preprocess
from hive_lineage.parser.statement_classifier import StatementClassifier


class TestStatementType:
    """Tests for StatementType enum."""

    def test_has_query(self):
        """Test has_query method."""
        assert StatementType.QUERY.has_query()
        assert StatementType.CREATE_TABLE_AS.has_query()
        assert StatementType.CREATE_VIEW.has_query()
        assert StatementType.INSERT_SELECT.has_query()
        assert StatementType.INSERT_DIRECTORY.has_query()
        assert not StatementType.CREATE_TABLE.has_query()
        assert not StatementType.INSERT_VALUES.has_query()
        assert not StatementType.OTHER.has_query()

    def test_writes_table(self):
        """Test writes_table method."""
        assert StatementType.INSERT_SELECT.writes_table()
        assert StatementType.CREATE_TABLE_AS.writes_table()
        assert not StatementType.INSERT_DIRECTORY.writes_table()
        assert not StatementType.QUERY.writes_table()


class TestStatementClassifier:
    """Tests for StatementClassifier."""

    def setup_method(self):
        """Initialize before each test."""
        self.classifier = StatementClassifier()

    def _classify(self, sql: str):
        """Helper method: parse with Hive dialect and classify."""
        ast = sqlglot.parse_one(sql, read="hive")
        return self.classifier.classify(ast, sql)

    def test_classify_select(self):
        """Test classifying a SELECT."""
        classified = self._classify("select id from test.t")

        assert classified.statement_type == StatementType.QUERY
        assert classified.query_ast is classified.ast
        assert classified.target_table is None

    def test_classify_union(self):
        """Test a set operation is a query."""
        classified = self._classify("select id from a union all select id from b")
        assert classified.statement_type == StatementType.QUERY

    def test_classify_create_table_as(self):
        """Test classifying CREATE TABLE AS."""
        classified = self._classify("create table test.t1 as select id from test.src")

        assert classified.statement_type == StatementType.CREATE_TABLE_AS
        assert classified.target_table == "test.t1"
        assert classified.has_query()

    def test_classify_create_view(self):
        """Test classifying CREATE VIEW."""
        classified = self._classify("create view v1 as select id from test.src")

        assert classified.statement_type == StatementType.CREATE_VIEW
        assert classified.target_table == "v1"
        assert classified.has_query()

    def test_classify_create_table(self):
        """Test classifying DDL without a query."""
        classified = self._classify("create table test.t (id int, name string)")

        assert classified.statement_type == StatementType.CREATE_TABLE
        assert classified.target_table == "test.t"
        assert not classified.has_query()

    def test_classify_insert_select(self):
        """Test classifying INSERT OVERWRITE TABLE ... SELECT."""
        classified = self._classify(
            "insert overwrite table test.out select * from test.src"
        )

        assert classified.statement_type == StatementType.INSERT_SELECT
        assert classified.target_table == "test.out"
        assert classified.has_query()

    def test_classify_insert_values(self):
        """Test classifying INSERT ... VALUES."""
        classified = self._classify("insert into test.t values (1, 'a')")

        assert classified.statement_type == StatementType.INSERT_VALUES
        assert classified.target_table == "test.t"
        assert not classified.has_query()

    def test_classify_insert_directory(self):
        """Test classifying INSERT OVERWRITE DIRECTORY."""
        classified = self._classify(
            "insert overwrite directory '/tmp/out' select * from test.src"
        )

        assert classified.statement_type == StatementType.INSERT_DIRECTORY
        assert classified.target_table is None
        assert classified.has_query()

    def test_classify_drop(self):
        """Test other statements are OTHER."""
        classified = self._classify("drop table if exists test.t")

        assert classified.statement_type == StatementType.OTHER
        assert classified.metadata["ast_type"] == "Drop"

    @pytest.mark.parametrize(
        "sql, expected",
        [
            ("use db1", "db1"),
            ("use   sales_db", "sales_db"),
            ("use a b", None),
        ],
    )
    def test_extract_database(self, sql, expected):
        """Test extracting the database of ``use``."""
        assert self.classifier.is_use_statement(sql)
        assert self.classifier.extract_database(sql) == expected

    def test_user_table_is_not_use(self):
        """Test names starting with ``use`` are not switches."""
        assert not self.classifier.is_use_statement("users")


class TestStatementDispatcher:
    """Tests for StatementDispatcher records."""

    def setup_method(self):
        """Initialize before each test."""
        self.dispatcher = StatementDispatcher()
        self.session = Session()

    def test_records_per_statement_lineage(self):
        """Test one record per parsed statement, with qualified target."""
        sql = (
            "use dw;"
            "insert overwrite table report select * from test.src;"
            "select * from report"
        )
        self.dispatcher.process_batch(self.session, preprocess(sql))

        records = self.session.statements
        assert len(records) == 2
        assert records[0].statement_type == StatementType.INSERT_SELECT
        assert records[0].target_table == "dw.report"
        assert records[0].source_tables == ["test.src"]
        assert records[1].statement_type == StatementType.QUERY
        assert records[1].target_table is None
        assert records[1].source_tables == ["dw.report"]

    def test_target_not_in_source_list(self):
        """Test write targets never enter the source list."""
        sql = "create table test.t1 as select id from test.src"
        self.dispatcher.process_batch(self.session, preprocess(sql))

        assert self.session.all_table_names == ["test.src"]

    def test_use_does_not_reset_state(self):
        """Test ``use`` only changes the current database."""
        self.dispatcher.process_batch(
            self.session, preprocess("select * from test.a; use db2")
        )

        assert self.session.current_database == "db2"
        assert self.session.all_table_names == ["test.a"]

    def test_fold_drops_leaked_cte_names(self):
        """Test folding drops entries whose qualified name is a CTE alias."""
        self.session.table_names.extend(["cte", "test.a", "default.c"])
        self.session.cte_names.update({"cte", "defaultc"})

        kept = self.session.flush_statement()

        assert kept == ["test.a", "default.c"]
        assert self.session.table_names == []
        assert self.session.cte_names == set()
