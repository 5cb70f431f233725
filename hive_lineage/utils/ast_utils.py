"""
AST utility functions for SQL parsing.

This module provides utility functions for working with sqlglot AST objects:
locating clauses of a query, classifying query bodies and relations, and
reading the identifier parts of a table reference.

Clauses are located by expression type rather than by argument key so the
helpers do not depend on how a sqlglot release names its ``args`` entries.
"""

from typing import Optional, Type

import sqlglot
from sqlglot import expressions

SET_OPERATIONS = (expressions.Union, expressions.Intersect, expressions.Except)


def get_child(
    node: sqlglot.Expression, kind: Type[sqlglot.Expression]
) -> Optional[sqlglot.Expression]:
    """Return the first direct argument of ``node`` that is a ``kind``.

    Args:
        node: sqlglot expression to inspect.
        kind: Expression class to look for.

    Returns:
        The matching child expression, or None.

    Example:
        >>> ast = sqlglot.parse_one("SELECT id FROM users WHERE id > 1")
        >>> get_child(ast, expressions.Where) is not None
        True
    """
    for value in node.args.values():
        if isinstance(value, kind):
            return value
    return None


def get_children(
    node: sqlglot.Expression, kind: Type[sqlglot.Expression]
) -> list[sqlglot.Expression]:
    """Return every ``kind`` held in the list-valued arguments of ``node``."""
    children = []
    for value in node.args.values():
        if isinstance(value, list):
            children.extend(item for item in value if isinstance(item, kind))
    return children


def get_ctes(node: sqlglot.Expression) -> list[expressions.CTE]:
    """Extract the CTE definitions of the WITH clause attached to ``node``.

    Only the WITH clause directly attached to ``node`` is considered; WITH
    clauses of nested subqueries belong to those subqueries.

    Args:
        node: Query, INSERT or CREATE expression.

    Returns:
        CTE expressions in declaration order (empty if there is no WITH).

    Example:
        >>> ast = sqlglot.parse_one("WITH t AS (SELECT 1) SELECT * FROM t")
        >>> [cte.alias for cte in get_ctes(ast)]
        ['t']
    """
    with_clause = get_child(node, expressions.With)
    if with_clause is None:
        return []
    return [cte for cte in with_clause.expressions if isinstance(cte, expressions.CTE)]


def get_from_relation(
    select: expressions.Select,
) -> Optional[sqlglot.Expression]:
    """Extract the primary relation of a SELECT's FROM clause."""
    from_clause = get_child(select, expressions.From)
    if from_clause is None:
        return None
    return from_clause.this


def get_join_relations(select: expressions.Select) -> list[sqlglot.Expression]:
    """Extract the joined relations of a SELECT, in source order.

    sqlglot models comma-separated FROM items as joins as well, so this
    covers ``FROM a, b`` too.
    """
    return [join.this for join in get_children(select, expressions.Join)]


def get_predicate(
    select: expressions.Select, clause: Type[sqlglot.Expression]
) -> Optional[sqlglot.Expression]:
    """Extract the predicate of a WHERE or HAVING clause.

    Args:
        select: SELECT expression.
        clause: ``expressions.Where`` or ``expressions.Having``.

    Returns:
        The predicate expression, or None when the clause is absent.
    """
    found = get_child(select, clause)
    if found is None:
        return None
    return found.this


def is_set_operation(node: sqlglot.Expression) -> bool:
    """Check if the node is a UNION / INTERSECT / EXCEPT."""
    return isinstance(node, SET_OPERATIONS)


def is_plain_table(node: sqlglot.Expression) -> bool:
    """Check if the node is a plain table reference.

    Table-valued function calls are also parsed into ``Table`` nodes by
    sqlglot, with a function instead of an identifier as their name.

    Example:
        >>> ast = sqlglot.parse_one("SELECT * FROM db.users")
        >>> is_plain_table(ast.find(expressions.Table))
        True
    """
    return isinstance(node, expressions.Table) and isinstance(
        node.this, expressions.Identifier
    )


def table_name_parts(table: expressions.Table) -> list[str]:
    """Return the identifier parts of a table reference.

    Example:
        >>> ast = sqlglot.parse_one("SELECT * FROM test.users")
        >>> table_name_parts(ast.find(expressions.Table))
        ['test', 'users']
    """
    return [part.name for part in table.parts]


def node_sql(node: sqlglot.Expression, dialect: str = "hive") -> str:
    """Render a node back to SQL for diagnostics, truncated to 100 chars."""
    sql = node.sql(dialect=dialect)
    return sql if len(sql) <= 100 else sql[:100] + "..."
