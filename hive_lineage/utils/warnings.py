"""
Warning system for lineage extraction.

This module defines warning collection functionality for the lineage
extractor. AST branches the walker does not handle are recorded here
instead of being dropped silently, so callers can review them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class LineageWarning:
    """Warning or error message for lineage extraction.

    Attributes:
        level: Severity level ("INFO", "WARNING", "ERROR").
        message: Warning or error message text.
        context: Optional context information (e.g., SQL snippet).

    Example:
        >>> warning = LineageWarning(
        ...     level="INFO",
        ...     message="Skipped relation Unnest",
        ...     context="explode(items)"
        ... )
        >>> warning.level
        'INFO'
    """

    level: str
    message: str
    context: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate warning level."""
        valid_levels = ["INFO", "WARNING", "ERROR"]
        if self.level not in valid_levels:
            raise ValueError(
                f"Invalid warning level: {self.level}. "
                f"Must be one of {valid_levels}"
            )


class WarningCollector:
    """Collects warnings during lineage extraction.

    Attributes:
        warnings: List of LineageWarning objects collected so far.

    Example:
        >>> collector = WarningCollector()
        >>> collector.add("WARNING", "Unsupported relation")
        >>> len(collector.get_all())
        1
    """

    def __init__(self) -> None:
        """Initialize a WarningCollector."""
        self.warnings: list[LineageWarning] = []

    def add(
        self, level: str, message: str, context: Optional[str] = None
    ) -> None:
        """Add a warning or error message.

        Args:
            level: Severity level ("INFO", "WARNING", "ERROR").
            message: Warning or error message text.
            context: Optional context information (e.g., SQL snippet).
        """
        warning = LineageWarning(level=level, message=message, context=context)
        self.warnings.append(warning)

    def get_all(self) -> list[LineageWarning]:
        """Get all collected warnings, in the order they were added."""
        return self.warnings.copy()

    def add_skipped_node_warning(
        self,
        where: str,
        node_type: str,
        context: Optional[str] = None,
    ) -> None:
        """Add a warning for an AST node the walker does not traverse.

        Args:
            where: Name of the handler that met the node (e.g. "relation").
            node_type: sqlglot expression class name of the node.
            context: Optional SQL rendering of the node.

        Example:
            >>> collector = WarningCollector()
            >>> collector.add_skipped_node_warning("relation", "Unnest")
            >>> collector.get_all()[0].message
            "Skipped relation of type 'Unnest'; it contributes no table names."
        """
        message = (
            f"Skipped {where} of type '{node_type}'; "
            f"it contributes no table names."
        )
        self.add("INFO", message, context)

    def get_summary(self) -> dict[str, int]:
        """Get a summary of warnings by level.

        Example:
            >>> collector = WarningCollector()
            >>> collector.add("INFO", "Info 1")
            >>> collector.add("WARNING", "Warning 1")
            >>> collector.get_summary() == {"INFO": 1, "WARNING": 1, "ERROR": 0}
            True
        """
        summary: dict[str, int] = {"INFO": 0, "WARNING": 0, "ERROR": 0}
        for warning in self.warnings:
            summary[warning.level] = summary.get(warning.level, 0) + 1
        return summary
