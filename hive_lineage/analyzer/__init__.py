"""
Lineage analyzer module.

This package contains the extraction core: the StatementDispatcher that
routes statements, the QueryWalker that traverses queries, the NameResolver
that qualifies table references, and the HiveLineageParser entry point.
"""

from hive_lineage.analyzer.dispatcher import StatementDispatcher
from hive_lineage.analyzer.lineage_parser import HiveLineageParser
from hive_lineage.analyzer.name_resolver import NameResolver
from hive_lineage.analyzer.query_walker import QueryWalker

__all__ = [
    "HiveLineageParser",
    "NameResolver",
    "QueryWalker",
    "StatementDispatcher",
]
