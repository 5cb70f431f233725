"""Version information."""

__version__ = "1.0.0"
__version_info__ = (1, 0, 0)

# Version history
CHANGELOG = """
# Changelog

## v1.0.0

**Hive source-table extraction**

- Multi-statement batches with `use <db>` and `set` handling
- CTE scoping (including CTEs that reference earlier CTEs)
- Subqueries in FROM/JOIN, EXISTS / IN / scalar subqueries in WHERE/HAVING
- UNION / UNION ALL / INTERSECT / EXCEPT chains
- CREATE TABLE AS, CREATE VIEW, INSERT INTO/OVERWRITE ... SELECT
- Bucketing clause and comment stripping before parsing
- Table-level lineage graph export
- CLI with plain / table / json output

### Known Limitations

- Subqueries nested deeper than one level inside a WHERE/HAVING boolean
  expression are not traversed
- `;` inside string literals splits the statement
"""
