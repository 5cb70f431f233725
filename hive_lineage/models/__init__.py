"""
Data models for lineage extraction.

This package contains the session state threaded through the extractor,
configuration, statement types and per-statement lineage records.
"""

from hive_lineage.models.classified_statement import ClassifiedStatement
from hive_lineage.models.config import ErrorMode, LineageConfig
from hive_lineage.models.session import Session
from hive_lineage.models.statement_lineage import StatementLineage
from hive_lineage.models.statement_type import StatementType

__all__ = [
    "ClassifiedStatement",
    "ErrorMode",
    "LineageConfig",
    "Session",
    "StatementLineage",
    "StatementType",
]
