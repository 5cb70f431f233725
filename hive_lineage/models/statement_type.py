"""
Statement type enumeration.

This module defines the StatementType enum, which represents the kinds of
Hive statements the dispatcher distinguishes.
"""

from enum import Enum


class StatementType(Enum):
    """SQL statement type enumeration.

    Classification rules:
    - QUERY: SELECT, set operation or parenthesized query
    - CREATE_TABLE_AS: CREATE TABLE ... AS SELECT ...
    - CREATE_VIEW: CREATE VIEW ... AS SELECT ...
    - CREATE_TABLE: CREATE TABLE with column definitions only
    - INSERT_SELECT: INSERT INTO/OVERWRITE TABLE ... SELECT ...
    - INSERT_VALUES: INSERT ... VALUES (...)
    - INSERT_DIRECTORY: INSERT OVERWRITE [LOCAL] DIRECTORY ... SELECT ...
    - OTHER: anything else (DROP, ALTER, ...), contributes no names
    """

    QUERY = "query"
    CREATE_TABLE_AS = "create_table_as"
    CREATE_VIEW = "create_view"
    CREATE_TABLE = "create_table"
    INSERT_SELECT = "insert_select"
    INSERT_VALUES = "insert_values"
    INSERT_DIRECTORY = "insert_directory"
    OTHER = "other"

    def has_query(self) -> bool:
        """Check if statements of this type carry a query to walk.

        Returns:
            True if the statement type reads from tables, False otherwise.
        """
        return self in [
            StatementType.QUERY,
            StatementType.CREATE_TABLE_AS,
            StatementType.CREATE_VIEW,
            StatementType.INSERT_SELECT,
            StatementType.INSERT_DIRECTORY,
        ]

    def writes_table(self) -> bool:
        """Check if statements of this type write to a named table or view.

        Returns:
            True if the statement has a table write target, False otherwise.
        """
        return self in [
            StatementType.CREATE_TABLE_AS,
            StatementType.CREATE_VIEW,
            StatementType.CREATE_TABLE,
            StatementType.INSERT_SELECT,
            StatementType.INSERT_VALUES,
        ]
