"""
SQL parser module.

This package contains the statement preprocessor, the SQLParser class that
converts cleaned statements to sqlglot AST, and the StatementClassifier.
"""

from hive_lineage.parser.preprocessor import preprocess
from hive_lineage.parser.sql_parser import SQLParser
from hive_lineage.parser.statement_classifier import StatementClassifier

__all__ = [
    "preprocess",
    "SQLParser",
    "StatementClassifier",
]
