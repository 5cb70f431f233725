"""
Statement classifier for Hive statements.

This module defines the StatementClassifier class, which identifies the kind
of each parsed statement and extracts its write target and the query part
the walker traverses.
"""

import re
from typing import Optional

import sqlglot
from sqlglot import expressions

from hive_lineage.models.classified_statement import ClassifiedStatement
from hive_lineage.models.statement_type import StatementType
from hive_lineage.utils.ast_utils import table_name_parts

USE_STATEMENT_PATTERN = re.compile(r"^use\s")


class StatementClassifier:
    """Hive statement classifier.

    Responsibilities:
    1. Recognize ``use <db>`` before the statement reaches the parser
    2. Identify the type of a parsed statement
    3. Extract the write target and the query part

    Usage:
        classifier = StatementClassifier()
        if classifier.is_use_statement(sql):
            database = classifier.extract_database(sql)
        else:
            classified = classifier.classify(ast, sql)
    """

    def is_use_statement(self, sql: str) -> bool:
        """Check if a cleaned statement switches the current database."""
        return USE_STATEMENT_PATTERN.match(sql) is not None

    def extract_database(self, sql: str) -> Optional[str]:
        """Extract the database name from ``use <db>``.

        Returns:
            The database name, or None when the statement does not have
            exactly two whitespace-separated tokens.

        Example:
            >>> StatementClassifier().extract_database("use sales_db")
            'sales_db'
        """
        parts = sql.split()
        if len(parts) == 2:
            return parts[1]
        return None

    def classify(
        self,
        ast: sqlglot.Expression,
        raw_sql: str,
        statement_index: int = 0,
    ) -> ClassifiedStatement:
        """Classify a parsed statement.

        Args:
            ast: sqlglot AST object.
            raw_sql: Cleaned SQL text.
            statement_index: Position of statement in the batch.

        Returns:
            ClassifiedStatement object.
        """
        # === SELECT / set operation / parenthesized query ===
        if isinstance(ast, expressions.Query):
            return ClassifiedStatement(
                statement_type=StatementType.QUERY,
                ast=ast,
                raw_sql=raw_sql,
                query_ast=ast,
                statement_index=statement_index,
            )

        # === CREATE TABLE / VIEW ===
        if isinstance(ast, expressions.Create):
            query_ast = self._extract_query(ast)
            if self._is_create_view(ast):
                statement_type = StatementType.CREATE_VIEW
            elif query_ast is not None:
                statement_type = StatementType.CREATE_TABLE_AS
            elif self._is_create_table(ast):
                statement_type = StatementType.CREATE_TABLE
            else:
                statement_type = StatementType.OTHER

            return ClassifiedStatement(
                statement_type=statement_type,
                ast=ast,
                raw_sql=raw_sql,
                target_table=self._extract_table_name(ast.this),
                query_ast=query_ast,
                statement_index=statement_index,
            )

        # === INSERT ... SELECT / VALUES / DIRECTORY ===
        if isinstance(ast, expressions.Insert):
            query_ast = self._extract_query(ast)
            if isinstance(ast.this, expressions.Directory):
                return ClassifiedStatement(
                    statement_type=StatementType.INSERT_DIRECTORY,
                    ast=ast,
                    raw_sql=raw_sql,
                    query_ast=query_ast,
                    statement_index=statement_index,
                    metadata={"directory": ast.this.name},
                )

            return ClassifiedStatement(
                statement_type=(
                    StatementType.INSERT_SELECT
                    if query_ast is not None
                    else StatementType.INSERT_VALUES
                ),
                ast=ast,
                raw_sql=raw_sql,
                target_table=self._extract_table_name(ast.this),
                query_ast=query_ast,
                statement_index=statement_index,
            )

        # === Everything else contributes no names ===
        return ClassifiedStatement(
            statement_type=StatementType.OTHER,
            ast=ast,
            raw_sql=raw_sql,
            statement_index=statement_index,
            metadata={"ast_type": type(ast).__name__},
        )

    # ========== Helper methods ==========

    def _is_create_view(self, ast: expressions.Create) -> bool:
        kind = ast.args.get("kind")
        return bool(kind) and kind.upper() == "VIEW"

    def _is_create_table(self, ast: expressions.Create) -> bool:
        kind = ast.args.get("kind")
        return bool(kind) and kind.upper() == "TABLE"

    def _extract_query(
        self, ast: sqlglot.Expression
    ) -> Optional[sqlglot.Expression]:
        """Extract the query part of a CREATE or INSERT statement.

        ``INSERT ... VALUES`` and plain DDL have no query part.
        """
        expression = ast.args.get("expression")
        if isinstance(expression, expressions.Query):
            return expression
        return None

    def _extract_table_name(
        self, table_expr: Optional[sqlglot.Expression]
    ) -> Optional[str]:
        """Extract the written table name, as written in the SQL.

        For CREATE TABLE with column definitions and INSERT with a column
        list the table is wrapped in a Schema.
        """
        if isinstance(table_expr, expressions.Schema):
            table_expr = table_expr.this
        if isinstance(table_expr, expressions.Table):
            parts = table_name_parts(table_expr)
            return ".".join(parts) if parts else None
        return None
