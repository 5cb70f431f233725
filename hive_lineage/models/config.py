"""
Configuration model for lineage extraction.

This module defines the LineageConfig class and ErrorMode enum, which control
the behavior of the extractor: the initial database, the SQL dialect handed to
the parser, the recursion bound of the query walker, and how AST shapes the
walker does not traverse are reported.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorMode(str, Enum):
    """Enumeration of handling modes for unsupported AST shapes.

    Attributes:
        FAIL: Raise a LineageError as soon as an unsupported shape is met.
        WARN: Record the shape in the warning collector and continue.
        IGNORE: Skip the shape silently.

    Example:
        >>> ErrorMode.WARN.value
        'warn'
        >>> ErrorMode.values()
        ['fail', 'warn', 'ignore']
    """

    FAIL = "fail"
    WARN = "warn"
    IGNORE = "ignore"

    @classmethod
    def values(cls) -> list[str]:
        """Return a list of all possible error mode values."""
        return [member.value for member in cls]


@dataclass
class LineageConfig:
    """Configuration settings for lineage extraction.

    Attributes:
        default_database: Database used to qualify unqualified table names
            until a ``use <db>`` statement switches it. Defaults to
            "default".
        dialect: sqlglot dialect used to parse statements. Defaults to
            "hive".
        max_depth: Maximum nesting depth of queries (CTEs, subqueries,
            set operations) the walker follows before giving up with a
            RecursionDepthError. Defaults to 256.
        on_unsupported: Handling of AST shapes the walker does not traverse
            (table-valued functions, VALUES lists, ...). Defaults to
            ErrorMode.WARN.

    Example:
        >>> config = LineageConfig(default_database="dw")
        >>> config.dialect
        'hive'
    """

    default_database: str = "default"
    dialect: str = "hive"
    max_depth: int = 256
    on_unsupported: ErrorMode = ErrorMode.WARN

    def __post_init__(self) -> None:
        """Validate configuration settings."""
        if not isinstance(self.default_database, str) or not self.default_database:
            raise TypeError("default_database must be a non-empty string")
        if not isinstance(self.dialect, str) or not self.dialect:
            raise TypeError("dialect must be a non-empty string")
        if not isinstance(self.max_depth, int) or isinstance(self.max_depth, bool):
            raise TypeError("max_depth must be an integer")
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        if not isinstance(self.on_unsupported, ErrorMode):
            raise TypeError("on_unsupported must be an ErrorMode instance")
