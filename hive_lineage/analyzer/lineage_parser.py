"""
Main entry point for Hive source-table extraction.

This module exposes the core functions ``parse`` and ``get_table_names``,
which operate on an explicit Session, and the HiveLineageParser class, which
owns one session and is the convenient way to process a batch.
"""

from typing import List, Optional

from hive_lineage.analyzer.dispatcher import StatementDispatcher
from hive_lineage.graph.table_graph import TableLineageGraph
from hive_lineage.models.config import LineageConfig
from hive_lineage.models.session import Session
from hive_lineage.models.statement_lineage import StatementLineage
from hive_lineage.parser.preprocessor import preprocess
from hive_lineage.utils.warnings import LineageWarning


def parse(
    session: Session, text: str, config: Optional[LineageConfig] = None
) -> None:
    """Extract the source tables of a SQL batch into ``session``.

    Args:
        session: Session to update in place.
        text: Raw Hive SQL batch.
        config: Optional LineageConfig.

    Raises:
        SqlSyntaxError: If any statement cannot be parsed. Statements before
            it remain in ``session``.
        LineageError: On any other extraction failure.

    Example:
        >>> session = Session()
        >>> parse(session, "use db1; select * from t1")
        >>> get_table_names(session)
        ['db1.t1']
    """
    dispatcher = StatementDispatcher(config)
    dispatcher.process_batch(session, preprocess(text))


def get_table_names(session: Session) -> List[str]:
    """Return a copy of the source tables accumulated in ``session``."""
    return session.get_table_names()


class HiveLineageParser:
    """Hive source-table extractor (main entry point).

    Responsibilities:
    1. Preprocess a raw batch into cleaned statements
    2. Dispatch every statement and walk its queries
    3. Expose the accumulated source tables, per-statement records and the
       table-level lineage graph

    Calling ``parse`` again continues the same session: the current database
    and accumulated names carry over.

    Attributes:
        config: LineageConfig for the extraction.
        session: Session owned by this parser.

    Usage:
        parser = HiveLineageParser()
        parser.parse("use sales; select * from orders")
        parser.get_table_names()  # ['sales.orders']
    """

    def __init__(self, config: Optional[LineageConfig] = None) -> None:
        """Initialize a HiveLineageParser.

        Args:
            config: LineageConfig for the extraction.
        """
        self.config = config or LineageConfig()
        self.session = Session(current_database=self.config.default_database)
        self.dispatcher = StatementDispatcher(self.config)

    def parse(self, text: str) -> None:
        """Extract the source tables of a raw SQL batch.

        Raises:
            SqlSyntaxError: If any statement cannot be parsed.
            LineageError: On any other extraction failure.
        """
        self.dispatcher.process_batch(self.session, preprocess(text))

    def get_table_names(self) -> List[str]:
        """Return a copy of the accumulated source tables."""
        return self.session.get_table_names()

    @property
    def current_database(self) -> str:
        return self.session.current_database

    @property
    def statements(self) -> List[StatementLineage]:
        """Per-statement lineage records, in batch order."""
        return list(self.session.statements)

    @property
    def warnings(self) -> List[LineageWarning]:
        """AST shapes skipped while walking."""
        return self.session.warnings.get_all()

    def build_graph(self) -> TableLineageGraph:
        """Build the table-level lineage graph of everything parsed so far."""
        graph = TableLineageGraph()
        for record in self.session.statements:
            graph.add_statement(record)
        return graph
