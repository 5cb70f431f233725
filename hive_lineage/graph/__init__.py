"""
Lineage graph module.

This package contains the TableLineageGraph class for table-level lineage.
"""

from hive_lineage.graph.table_graph import TableLineageGraph

__all__ = [
    "TableLineageGraph",
]
