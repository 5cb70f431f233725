"""
Statement preprocessor for Hive SQL batches.

This module turns a raw batch of Hive SQL into cleaned statements the parser
can accept: the batch is split on ``;``, each statement is lowercased,
bucketing DDL and comments are removed, and ``set`` statements are dropped.

Splitting is naive: a ``;`` inside a string literal also ends a statement.
Lowercasing applies to identifiers and string literals as well.
"""

import re
from typing import List

# Hive bucketing DDL, optionally preceded by a PARTITIONED BY clause. The
# generic grammar cannot parse it, so the whole tail is removed.
BUCKETING_PATTERN = re.compile(
    r"(partitioned\s+by.*)?clustered\s+by\s*\([^)]+\)\s+into\s+\d+\s+buckets",
    re.DOTALL,
)
MULTILINE_COMMENT_PATTERN = re.compile(r"/\*.*?\*/", re.DOTALL)
SINGLELINE_COMMENT_PATTERN = re.compile(r"--[^\n]*")
SET_STATEMENT_PATTERN = re.compile(r"^set(\s|$)")


def strip_bucketing_clause(sql: str) -> str:
    """Remove a ``[partitioned by ...] clustered by (...) into N buckets`` tail.

    Args:
        sql: Lowercased statement text.

    Returns:
        Statement text without the bucketing clause.

    Example:
        >>> strip_bucketing_clause(
        ...     "create table t (id int) clustered by (id) into 4 buckets"
        ... )
        'create table t (id int) '
    """
    return BUCKETING_PATTERN.sub("", sql)


def remove_comments(sql: str) -> str:
    """Remove ``/* */`` and ``--`` comments, then blank lines.

    Every remaining line is trimmed.

    Example:
        >>> remove_comments("-- header\\nselect 1 /* one */\\n\\n  from t")
        'select 1\\nfrom t'
    """
    without_multiline = MULTILINE_COMMENT_PATTERN.sub("", sql)
    without_comments = SINGLELINE_COMMENT_PATTERN.sub("", without_multiline)

    lines = (line.strip() for line in without_comments.splitlines())
    return "\n".join(line for line in lines if line)


def is_set_statement(sql: str) -> bool:
    """Check if a cleaned statement sets a session parameter."""
    return SET_STATEMENT_PATTERN.match(sql) is not None


def clean_statement(sql: str) -> str:
    """Clean a single statement: trim, lowercase, strip bucketing and comments."""
    cleaned = sql.strip().lower()
    cleaned = strip_bucketing_clause(cleaned)
    return remove_comments(cleaned)


def preprocess(raw_text: str) -> List[str]:
    """Split a batch into cleaned statements.

    Empty statements and ``set`` statements are dropped.

    Args:
        raw_text: Raw SQL batch.

    Returns:
        Cleaned statements in batch order.

    Example:
        >>> preprocess("SET hive.exec.parallel=true; USE db1; SELECT * FROM t")
        ['use db1', 'select * from t']
    """
    statements = []
    for candidate in raw_text.split(";"):
        cleaned = clean_statement(candidate)
        if not cleaned or is_set_statement(cleaned):
            continue
        statements.append(cleaned)
    return statements
