"""
Query walker for source-table extraction.

This module defines the QueryWalker class, a recursive visitor over the
logical structure of a query: WITH clauses, FROM/JOIN relations, derived
tables, set operations and subqueries in WHERE/HAVING predicates. Every
plain table reference it meets is handed to the NameResolver.

WHERE/HAVING predicates are inspected at shallow depth only: an EXISTS or
IN subquery at the top of the predicate, or a subquery that is a direct
operand of the top-level binary expression. Subqueries nested deeper inside
a compound boolean expression are not traversed.
"""

from typing import Callable, Optional

import sqlglot
from sqlglot import expressions

from hive_lineage.analyzer.name_resolver import NameResolver
from hive_lineage.exceptions import LineageError, RecursionDepthError
from hive_lineage.models.config import ErrorMode, LineageConfig
from hive_lineage.models.session import Session
from hive_lineage.utils.ast_utils import (
    get_ctes,
    get_from_relation,
    get_join_relations,
    get_predicate,
    is_plain_table,
    is_set_operation,
    node_sql,
)

StatementHandler = Callable[[sqlglot.Expression, Session, int], None]


class QueryWalker:
    """Recursive walker collecting table references of a query.

    The session is passed explicitly to every call; the walker itself holds
    no per-statement state.

    Attributes:
        config: LineageConfig with the depth bound and unsupported-node mode.
        resolver: NameResolver used to record table references.
        statement_handler: Callback for write statements that appear as a
            query body (``with ... insert overwrite ...``). Set by the
            dispatcher.

    Example:
        >>> walker = QueryWalker()
        >>> session = Session()
        >>> ast = sqlglot.parse_one("select * from t1 join db.t2 on t1.id = t2.id")
        >>> walker.walk_query(ast, session)
        >>> session.table_names
        ['default.t1', 'db.t2']
    """

    def __init__(
        self,
        config: Optional[LineageConfig] = None,
        resolver: Optional[NameResolver] = None,
        statement_handler: Optional[StatementHandler] = None,
    ) -> None:
        self.config = config or LineageConfig()
        self.resolver = resolver or NameResolver()
        self.statement_handler = statement_handler

    def walk_query(
        self, query: sqlglot.Expression, session: Session, depth: int = 0
    ) -> None:
        """Walk a query and record every table it reads.

        Args:
            query: Query expression (SELECT, set operation, subquery, or an
                INSERT appearing as a query body).
            session: Current session.
            depth: Nesting depth of this query.

        Raises:
            RecursionDepthError: If ``depth`` exceeds ``config.max_depth``.
        """
        if depth > self.config.max_depth:
            raise RecursionDepthError(
                f"Query nesting exceeds the maximum depth of "
                f"{self.config.max_depth}",
                depth=depth,
            )

        # A write statement as query body goes back to statement handling,
        # which also takes care of its WITH clause.
        if isinstance(query, expressions.Insert):
            if self.statement_handler is None:
                self._skip("query body", query, session)
            else:
                self.statement_handler(query, session, depth + 1)
            return

        self.walk_with(query, session, depth)

        if isinstance(query, expressions.Select):
            self.walk_select(query, session, depth)
        elif isinstance(query, expressions.Subquery):
            self.walk_query(query.this, session, depth + 1)
        elif is_set_operation(query):
            self.walk_query(query.this, session, depth + 1)
            self.walk_query(query.expression, session, depth + 1)
        else:
            self._skip("query body", query, session)

    def walk_with(
        self, node: sqlglot.Expression, session: Session, depth: int = 0
    ) -> None:
        """Register the CTEs attached to ``node`` and walk their bodies.

        Each alias is registered before its own body is walked, so a later
        CTE referencing an earlier one is not taken for a table.
        """
        for cte in get_ctes(node):
            session.cte_names.add(cte.alias)
            self.walk_query(cte.this, session, depth + 1)

    def walk_select(
        self, select: expressions.Select, session: Session, depth: int = 0
    ) -> None:
        """Walk the FROM/JOIN relations and WHERE/HAVING predicates."""
        relation = get_from_relation(select)
        if relation is not None:
            self._walk_relation(relation, session, depth)

        for joined in get_join_relations(select):
            self._walk_relation(joined, session, depth)

        self._walk_predicate(
            get_predicate(select, expressions.Where), session, depth
        )
        self._walk_predicate(
            get_predicate(select, expressions.Having), session, depth
        )

    def _walk_relation(
        self, relation: sqlglot.Expression, session: Session, depth: int
    ) -> None:
        if is_plain_table(relation):
            self.resolver.resolve_and_record(relation, session)
        elif isinstance(relation, expressions.Subquery):
            self.walk_query(relation, session, depth + 1)
        else:
            # table-valued functions, UNNEST, VALUES, LATERAL
            self._skip("relation", relation, session)

    def _walk_predicate(
        self,
        predicate: Optional[sqlglot.Expression],
        session: Session,
        depth: int,
    ) -> None:
        if predicate is None:
            return

        if isinstance(predicate, expressions.Exists):
            self.walk_query(predicate.this, session, depth + 1)
        elif isinstance(predicate, expressions.In):
            subquery = predicate.args.get("query")
            if subquery is not None:
                self.walk_query(subquery, session, depth + 1)
        elif isinstance(predicate, expressions.Binary):
            for operand in (predicate.left, predicate.right):
                if isinstance(operand, expressions.Subquery):
                    self.walk_query(operand, session, depth + 1)

    def _skip(
        self, where: str, node: sqlglot.Expression, session: Session
    ) -> None:
        """Report an AST shape the walker does not traverse."""
        mode = self.config.on_unsupported
        if mode == ErrorMode.IGNORE:
            return
        node_type = type(node).__name__
        if mode == ErrorMode.FAIL:
            raise LineageError(
                f"Unsupported {where} of type '{node_type}': "
                f"{node_sql(node, self.config.dialect)}"
            )
        session.warnings.add_skipped_node_warning(
            where, node_type, node_sql(node, self.config.dialect)
        )
