"""
SQL parser implementation.

This module defines the SQLParser class, which converts cleaned Hive
statements to sqlglot AST objects for the query walker.
"""

from typing import List, Optional

import sqlglot
from sqlglot.errors import ParseError, TokenError

from hive_lineage.exceptions import SqlSyntaxError
from hive_lineage.models.config import LineageConfig


class SQLParser:
    """SQL parser that converts cleaned statements to AST.

    A single cleaned statement may decompose into several AST statements;
    all of them are returned in order.

    Attributes:
        config: LineageConfig object containing the dialect to parse with.

    Example:
        >>> parser = SQLParser(LineageConfig())
        >>> [type(ast).__name__ for ast in parser.parse("select id from t")]
        ['Select']
    """

    def __init__(self, config: Optional[LineageConfig] = None) -> None:
        """Initialize a SQLParser with configuration.

        Args:
            config: LineageConfig object containing parser configuration.
        """
        self.config = config or LineageConfig()

    def parse(
        self, sql: str, statement_index: Optional[int] = None
    ) -> List[sqlglot.Expression]:
        """Parse a cleaned statement into AST statements.

        Args:
            sql: Cleaned statement text.
            statement_index: Optional position of the statement in the batch,
                used in error messages.

        Returns:
            Non-empty AST statements in source order.

        Raises:
            SqlSyntaxError: If sqlglot rejects the statement or runs out of
                recursion depth on it.
        """
        try:
            parsed = sqlglot.parse(sql, read=self.config.dialect)
        except (ParseError, TokenError) as e:
            raise SqlSyntaxError(
                str(e), sql=sql, statement_index=statement_index
            ) from e
        except RecursionError as e:
            raise SqlSyntaxError(
                "Statement is nested too deeply to parse",
                sql=sql,
                statement_index=statement_index,
            ) from e

        # sqlglot yields None for empty chunks
        return [ast for ast in parsed if ast is not None]
