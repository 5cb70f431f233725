"""
Name resolver for table references.

This module defines the NameResolver class, which qualifies raw table
references with the session's current database and filters out references
to CTEs of the statement being walked.
"""

from typing import Optional, Sequence

from sqlglot import expressions

from hive_lineage.models.session import Session
from hive_lineage.utils.ast_utils import table_name_parts


def origin_name(parts: Sequence[str]) -> str:
    """Concatenate name parts with no separator, for CTE membership tests.

    Example:
        >>> origin_name(["cte"])
        'cte'
        >>> origin_name(["test", "orders"])
        'testorders'
    """
    return "".join(parts)


def qualify(parts: Sequence[str], database: str) -> str:
    """Build the qualified name of a table reference.

    A reference with exactly two parts is already qualified. Any other
    reference is prefixed with ``database``.

    Example:
        >>> qualify(["orders"], "sales")
        'sales.orders'
        >>> qualify(["test", "orders"], "sales")
        'test.orders'
    """
    if len(parts) == 2:
        return ".".join(parts)
    return f"{database}.{'.'.join(parts)}"


class NameResolver:
    """Resolve table references and record them in the session.

    No deduplication happens here: a table referenced twice is recorded
    twice.

    Usage:
        resolver = NameResolver()
        resolver.resolve_and_record(table_expr, session)
    """

    def resolve(
        self, table: expressions.Table, session: Session
    ) -> Optional[str]:
        """Resolve a table reference to its qualified name.

        Args:
            table: Plain table reference.
            session: Current session.

        Returns:
            The qualified name, or None when the reference names a CTE of
            the current statement.
        """
        parts = table_name_parts(table)
        if session.is_cte(origin_name(parts)):
            return None
        return qualify(parts, session.current_database)

    def resolve_and_record(
        self, table: expressions.Table, session: Session
    ) -> Optional[str]:
        """Resolve a table reference and append it to the statement's names.

        Returns:
            The recorded qualified name, or None for a CTE reference.
        """
        qualified_name = self.resolve(table, session)
        if qualified_name is not None:
            session.record(qualified_name)
        return qualified_name

    def qualify_target(
        self, target_table: Optional[str], session: Session
    ) -> Optional[str]:
        """Qualify a write target the same way as a source table."""
        if not target_table:
            return None
        return qualify(target_table.split("."), session.current_database)
