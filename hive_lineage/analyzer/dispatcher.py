"""
Statement dispatcher.

This module defines the StatementDispatcher class, which routes each cleaned
statement of a batch either to database-context handling (``use <db>``) or,
after parsing, to the query walker, and folds the per-statement results into
the session.
"""

from typing import Iterable, Optional

import sqlglot

from hive_lineage.analyzer.name_resolver import NameResolver
from hive_lineage.analyzer.query_walker import QueryWalker
from hive_lineage.exceptions import LineageError, RecursionDepthError
from hive_lineage.models.classified_statement import ClassifiedStatement
from hive_lineage.models.config import LineageConfig
from hive_lineage.models.session import Session
from hive_lineage.models.statement_lineage import StatementLineage
from hive_lineage.parser.sql_parser import SQLParser
from hive_lineage.parser.statement_classifier import StatementClassifier


class StatementDispatcher:
    """Dispatch cleaned statements of a batch.

    Responsibilities:
    1. Apply ``use <db>`` to the session
    2. Parse every other statement and walk its query part
    3. Fold the statement's names into the batch result and reset the
       statement-scoped state

    Processing is fail-fast: the first statement the parser rejects aborts
    the batch. Statements processed before it stay in the session.

    Usage:
        dispatcher = StatementDispatcher(config)
        dispatcher.process_batch(session, preprocess(raw_sql))
    """

    def __init__(self, config: Optional[LineageConfig] = None) -> None:
        """Initialize a StatementDispatcher.

        Args:
            config: LineageConfig for parsing and walking.
        """
        self.config = config or LineageConfig()

        self.parser = SQLParser(self.config)
        self.classifier = StatementClassifier()
        self.resolver = NameResolver()
        self.walker = QueryWalker(
            self.config, self.resolver, statement_handler=self.handle_statement
        )

    def process_batch(self, session: Session, statements: Iterable[str]) -> None:
        """Process cleaned statements in order.

        Args:
            session: Session to update.
            statements: Cleaned statements from the preprocessor.

        Raises:
            SqlSyntaxError: If a statement cannot be parsed.
            LineageError: On any other extraction failure.
        """
        for index, sql in enumerate(statements):
            if self.classifier.is_use_statement(sql):
                self._handle_use(sql, session)
                continue

            for ast in self.parser.parse(sql, statement_index=index):
                classified = self.classifier.classify(
                    ast, sql, statement_index=index
                )
                self._process_statement(classified, session)

    def handle_statement(
        self, ast: sqlglot.Expression, session: Session, depth: int = 0
    ) -> None:
        """Walk the query part of a parsed statement.

        A WITH clause attached to the statement itself (``with ... insert
        overwrite ...``) is registered before the query part is walked.
        Statements without a query part contribute nothing.
        """
        classified = self.classifier.classify(ast, ast.sql(dialect=self.config.dialect))
        self._walk_classified(classified, session, depth)

    def _walk_classified(
        self, classified: ClassifiedStatement, session: Session, depth: int
    ) -> None:
        if not classified.has_query():
            return
        if classified.query_ast is not classified.ast:
            self.walker.walk_with(classified.ast, session, depth)
        self.walker.walk_query(classified.query_ast, session, depth)

    def _process_statement(
        self, classified: ClassifiedStatement, session: Session
    ) -> None:
        # A failed walk leaves nothing behind for the next statement.
        try:
            self._walk_classified(classified, session, depth=0)
        except RecursionError as e:
            session.discard_statement()
            raise RecursionDepthError(
                "Query nesting is too deep to walk", depth=self.config.max_depth
            ) from e
        except LineageError:
            session.discard_statement()
            raise

        target_table = None
        if classified.statement_type.writes_table():
            target_table = self.resolver.qualify_target(
                classified.target_table, session
            )
        source_tables = session.flush_statement()
        session.statements.append(
            StatementLineage(
                statement_index=classified.statement_index,
                statement_type=classified.statement_type,
                sql=classified.raw_sql,
                target_table=target_table,
                source_tables=source_tables,
            )
        )

    def _handle_use(self, sql: str, session: Session) -> None:
        database = self.classifier.extract_database(sql)
        if database is not None:
            session.current_database = database
