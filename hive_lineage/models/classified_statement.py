"""
Classified statement model.

This module defines the ClassifiedStatement class, which represents a parsed
statement together with its type, its write target and the query part the
walker should traverse.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import sqlglot

from hive_lineage.models.statement_type import StatementType


@dataclass
class ClassifiedStatement:
    """Classified SQL statement.

    Attributes:
        statement_type: Statement type.
        ast: sqlglot AST object.
        raw_sql: Cleaned SQL text the AST was parsed from.
        target_table: Write target as written in the SQL (possibly
            unqualified), for CREATE/INSERT statements.
        query_ast: Query part to walk. For a plain query this is the whole
            AST.
        statement_index: Position in the cleaned batch (0-indexed).
        metadata: Additional information.

    Example:
        # INSERT OVERWRITE TABLE
        ClassifiedStatement(
            statement_type=StatementType.INSERT_SELECT,
            ast=...,
            raw_sql="insert overwrite table test.t select * from test.src",
            target_table="test.t",
            query_ast=...  # SELECT part
        )
    """

    statement_type: StatementType
    ast: sqlglot.Expression
    raw_sql: str

    target_table: Optional[str] = None
    query_ast: Optional[sqlglot.Expression] = None

    statement_index: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)

    def has_query(self) -> bool:
        """Check if this statement contains a query part to walk."""
        return self.statement_type.has_query() and self.query_ast is not None
