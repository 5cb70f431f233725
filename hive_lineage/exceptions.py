"""
Custom exception classes for Hive lineage extraction.

This module defines all custom exceptions used throughout the hive_lineage
package. Every error raised by the core derives from LineageError so callers
can catch a single type.
"""

from typing import Optional


class LineageError(Exception):
    """Base exception class for all lineage extraction errors.

    Attributes:
        message: Human-readable error message describing the error.
    """

    def __init__(self, message: str) -> None:
        """Initialize a LineageError with a message.

        Args:
            message: Error message describing what went wrong.
        """
        self.message = message
        super().__init__(self.message)


class SqlSyntaxError(LineageError):
    """Exception raised when the SQL parser rejects a cleaned statement.

    The whole batch fails on the first rejected statement. Results of the
    statements before it stay in the session but are not returned.

    Attributes:
        message: Error message reported by the parser.
        sql: The cleaned statement that failed to parse.
        statement_index: Position of the statement in the cleaned batch.
    """

    def __init__(
        self,
        message: str,
        sql: Optional[str] = None,
        statement_index: Optional[int] = None,
    ) -> None:
        """Initialize a SqlSyntaxError.

        Args:
            message: Error message reported by the parser.
            sql: Optional cleaned SQL statement for context.
            statement_index: Optional position of the statement in the batch.
        """
        self.sql = sql
        self.statement_index = statement_index

        if sql:
            message = self._build_message(message)

        super().__init__(message)

    def _build_message(self, message: str) -> str:
        """Build detailed error message with the offending statement."""
        msg = [f"SQL parsing error: {message}"]
        if self.statement_index is not None:
            msg.append(f"Statement #{self.statement_index}:")
        else:
            msg.append("Statement:")
        snippet = self.sql if len(self.sql) <= 200 else self.sql[:200] + "..."
        msg.append(f"  {snippet}")
        return "\n".join(msg)


class RecursionDepthError(LineageError):
    """Exception raised when a query nests deeper than the configured limit.

    Attributes:
        message: Error message describing the limit.
        depth: Depth at which the walk was aborted.
    """

    def __init__(self, message: str, depth: int) -> None:
        super().__init__(message)
        self.depth = depth


class InputDecodingError(LineageError):
    """Exception raised when an input file cannot be decoded to SQL text.

    Only the input layer raises this; the core never sees undecodable input.
    """
