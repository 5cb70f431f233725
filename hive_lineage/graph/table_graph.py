"""
Table-level lineage graph.

This module defines the TableLineageGraph class, which uses networkx to
connect the source tables of each write statement to the table it writes.
"""

from __future__ import annotations

from typing import Any

import networkx as nx

from hive_lineage.models.statement_lineage import StatementLineage


class TableLineageGraph:
    """Directed graph of table-level lineage.

    Nodes are qualified table names. An edge ``source -> target`` is added
    for every source table of a statement that writes ``target``. Sources of
    read-only statements are added as nodes without edges.

    Attributes:
        graph: networkx DiGraph object representing the lineage.

    Example:
        >>> graph = TableLineageGraph()
        >>> graph.add_statement(record)
        >>> graph.get_upstream_tables("test.out")
        {'test.src'}
    """

    def __init__(self) -> None:
        """Initialize a TableLineageGraph."""
        self.graph = nx.DiGraph()

    def add_statement(self, record: StatementLineage) -> None:
        """Add the sources and target of one statement to the graph.

        Args:
            record: Per-statement lineage record.
        """
        for source in record.source_tables:
            if source not in self.graph:
                self.graph.add_node(source, node_type="source")

        if record.target_table is None:
            return

        # A table written by the batch is derived, even if read earlier.
        self.graph.add_node(record.target_table, node_type="derived")
        for source in record.source_tables:
            if self.graph.has_edge(source, record.target_table):
                self.graph.edges[source, record.target_table][
                    "statements"
                ].append(record.statement_index)
            else:
                self.graph.add_edge(
                    source,
                    record.target_table,
                    statements=[record.statement_index],
                    statement_type=record.statement_type.value,
                )

    def get_upstream_tables(self, table: str) -> set[str]:
        """Get every table ``table`` is derived from (recursive).

        Args:
            table: Qualified table name.

        Returns:
            Set of qualified upstream table names.
        """
        if table not in self.graph:
            return set()
        return set(nx.ancestors(self.graph, table))

    def get_downstream_tables(self, table: str) -> set[str]:
        """Get every table derived from ``table`` (recursive)."""
        if table not in self.graph:
            return set()
        return set(nx.descendants(self.graph, table))

    def get_source_tables(self) -> set[str]:
        """Get tables that are read but never written by the batch."""
        return {
            node
            for node, node_type in self.graph.nodes(data="node_type")
            if node_type == "source"
        }

    def get_derived_tables(self) -> set[str]:
        """Get tables written by the batch."""
        return {
            node
            for node, node_type in self.graph.nodes(data="node_type")
            if node_type == "derived"
        }

    def to_dict(self) -> dict[str, Any]:
        """Export the graph to a JSON-serializable dictionary."""
        return {
            "tables": {
                node: {"type": data.get("node_type", "source")}
                for node, data in sorted(self.graph.nodes(data=True))
            },
            "lineage": [
                {
                    "from": source,
                    "to": target,
                    "statements": list(data["statements"]),
                    "type": data["statement_type"],
                }
                for source, target, data in self.graph.edges(data=True)
            ],
        }
