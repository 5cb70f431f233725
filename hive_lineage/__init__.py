"""
Hive SQL source-table extractor v1.0

Extracts the fully qualified tables read by each statement of a Hive SQL
batch, honoring ``use <db>`` switches and scoping out CTE names.

Example:
    >>> from hive_lineage import HiveLineageParser
    >>> parser = HiveLineageParser()
    >>> parser.parse("use db1; select * from t1 union all select * from db2.t2")
    >>> parser.get_table_names()
    ['db1.t1', 'db2.t2']
"""

from hive_lineage.version import __version__, __version_info__

__author__ = "Hive Lineage Contributors"

from hive_lineage.analyzer.dispatcher import StatementDispatcher
from hive_lineage.analyzer.lineage_parser import (
    HiveLineageParser,
    get_table_names,
    parse,
)
from hive_lineage.analyzer.name_resolver import NameResolver
from hive_lineage.analyzer.query_walker import QueryWalker
from hive_lineage.exceptions import (
    InputDecodingError,
    LineageError,
    RecursionDepthError,
    SqlSyntaxError,
)
from hive_lineage.graph.table_graph import TableLineageGraph
from hive_lineage.models.classified_statement import ClassifiedStatement
from hive_lineage.models.config import ErrorMode, LineageConfig
from hive_lineage.models.session import Session
from hive_lineage.models.statement_lineage import StatementLineage
from hive_lineage.models.statement_type import StatementType
from hive_lineage.parser.preprocessor import preprocess
from hive_lineage.parser.statement_classifier import StatementClassifier
from hive_lineage.service import gen_all_source_table

__all__ = [
    # Version info
    "__version__",
    "__version_info__",
    # Core entry points
    "HiveLineageParser",
    "parse",
    "get_table_names",
    "gen_all_source_table",
    # Components
    "preprocess",
    "StatementDispatcher",
    "StatementClassifier",
    "QueryWalker",
    "NameResolver",
    # Configuration
    "LineageConfig",
    "ErrorMode",
    # Data models
    "Session",
    "StatementLineage",
    "StatementType",
    "ClassifiedStatement",
    "TableLineageGraph",
    # Exceptions
    "LineageError",
    "SqlSyntaxError",
    "RecursionDepthError",
    "InputDecodingError",
]
