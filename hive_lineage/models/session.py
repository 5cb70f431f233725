"""
Session state for one batch-parse call.

This module defines the Session class, the single mutable context threaded
through the dispatcher, the query walker and the name resolver while one
batch of statements is processed.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from hive_lineage.models.statement_lineage import StatementLineage
from hive_lineage.utils.warnings import WarningCollector


@dataclass
class Session:
    """Mutable context for one batch of Hive statements.

    A session belongs to exactly one batch-parse call at a time; concurrent
    calls must each use their own session.

    Attributes:
        current_database: Database used to qualify unqualified names.
            Updated only by ``use <db>``; persists across statements.
        all_table_names: Accumulated, statement-ordered source tables.
            Append-only and not deduplicated.
        table_names: Scratch list for the statement being walked.
        cte_names: WITH aliases declared by the statement being walked.
        statements: One lineage record per walked statement.
        warnings: AST shapes skipped while walking.

    Example:
        >>> session = Session()
        >>> session.current_database
        'default'
        >>> session.record("test.orders")
        >>> session.flush_statement()
        ['test.orders']
        >>> session.all_table_names
        ['test.orders']
    """

    current_database: str = "default"
    all_table_names: list[str] = field(default_factory=list)
    table_names: list[str] = field(default_factory=list)
    cte_names: set[str] = field(default_factory=set)
    statements: list[StatementLineage] = field(default_factory=list)
    warnings: WarningCollector = field(default_factory=WarningCollector)

    def record(self, qualified_name: str) -> None:
        """Append a qualified name to the current statement's list."""
        self.table_names.append(qualified_name)

    def is_cte(self, name: str) -> bool:
        """Check if a name is a CTE alias of the current statement."""
        return name in self.cte_names

    def flush_statement(self) -> list[str]:
        """Fold the current statement's names into the batch result.

        Entries that are themselves CTE aliases are dropped. The
        per-statement list and CTE set are cleared afterwards.

        Returns:
            The names that were appended to ``all_table_names``.
        """
        kept = [name for name in self.table_names if name not in self.cte_names]
        self.all_table_names.extend(kept)
        self.discard_statement()
        return kept

    def discard_statement(self) -> None:
        """Drop the current statement's names and CTE aliases unfolded."""
        self.table_names.clear()
        self.cte_names.clear()

    def get_table_names(self) -> list[str]:
        """Return a copy of the accumulated source tables."""
        return list(self.all_table_names)
