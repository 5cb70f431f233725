"""
Per-statement lineage record.

This module defines the StatementLineage class, which records the source
tables one statement read and, for write statements, the table it wrote.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from hive_lineage.models.statement_type import StatementType


@dataclass
class StatementLineage:
    """Source tables and write target of a single statement.

    The write target is kept here only; it never enters the batch's
    source-table list.

    Attributes:
        statement_index: Position in the cleaned batch (0-indexed).
        statement_type: Type of the statement.
        sql: Cleaned SQL text of the statement.
        target_table: Qualified write target, or None.
        source_tables: Qualified source tables, in reference order.

    Example:
        >>> record = StatementLineage(
        ...     statement_index=0,
        ...     statement_type=StatementType.INSERT_SELECT,
        ...     sql="insert overwrite table test.t select * from test.src",
        ...     target_table="test.t",
        ...     source_tables=["test.src"],
        ... )
        >>> record.to_dict()["target_table"]
        'test.t'
    """

    statement_index: int
    statement_type: StatementType
    sql: str
    target_table: Optional[str] = None
    source_tables: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "statement_index": self.statement_index,
            "statement_type": self.statement_type.value,
            "sql": self.sql,
            "target_table": self.target_table,
            "source_tables": list(self.source_tables),
        }
