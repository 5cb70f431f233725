"""
Utility functions and helpers for lineage extraction.

This package contains sqlglot AST helpers and the warning collector.
"""

from hive_lineage.utils.ast_utils import (
    get_ctes,
    get_from_relation,
    get_join_relations,
    get_predicate,
    is_plain_table,
    is_set_operation,
    table_name_parts,
)
from hive_lineage.utils.warnings import LineageWarning, WarningCollector

__all__ = [
    "get_ctes",
    "get_from_relation",
    "get_join_relations",
    "get_predicate",
    "is_plain_table",
    "is_set_operation",
    "table_name_parts",
    "LineageWarning",
    "WarningCollector",
]
