"""
Tests for CLI functionality (end-to-end).

This module contains tests for the command-line interface, running the
actual CLI as a subprocess and checking its output.
"""

import base64
import json
import os
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class TestCLI:
    """Test CLI functionality (end-to-end)."""

    def setup_method(self):
        """Create test SQL files."""
        self.test_dir = PROJECT_ROOT / "tests" / "test_data"
        self.test_dir.mkdir(exist_ok=True, parents=True)

        self.script_file = self.test_dir / "etl_script.sql"
        self.script_file.write_text(
            """
        set hive.exec.parallel=true;
        use dw;
        create table stage as select * from ods.orders;
        insert overwrite table report
        select s.id from stage s join ods.customers c on s.cid = c.id;
        select * from ods.orders;
        """,
            encoding="utf-8",
        )

        self.b64_file = self.test_dir / "etl_script.b64"
        self.b64_file.write_text(
            base64.b64encode(b"select * from test.a").decode("ascii"),
            encoding="ascii",
        )

        self.export_file = self.test_dir / "lineage.json"

    def teardown_method(self):
        """Clean up test files."""
        for path in (self.script_file, self.b64_file, self.export_file):
            if path.exists():
                path.unlink()

    def run_cli(self, *args):
        """Run CLI command."""
        env = dict(os.environ)
        env["PYTHONIOENCODING"] = "utf-8"
        cmd = [sys.executable, "-m", "hive_lineage.cli", "--no-color"] + list(args)
        return subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            cwd=PROJECT_ROOT,
            env=env,
        )

    def test_plain_output(self):
        """Test one source table per line."""
        result = self.run_cli(str(self.script_file))

        assert result.returncode == 0
        assert result.stdout.split() == [
            "ods.orders",
            "dw.stage",
            "ods.customers",
            "ods.orders",
        ]

    def test_unique_output(self):
        """Test --unique collapses repeated names."""
        result = self.run_cli(str(self.script_file), "--unique")

        assert result.returncode == 0
        assert result.stdout.split() == ["ods.orders", "dw.stage", "ods.customers"]

    def test_literal_sql(self):
        """Test --sql input."""
        result = self.run_cli("--sql", "use db1; select * from t1")

        assert result.returncode == 0
        assert result.stdout.strip() == "db1.t1"

    def test_database_option(self):
        """Test --database sets the initial database."""
        result = self.run_cli("--sql", "select * from t1", "--database", "ods")

        assert result.returncode == 0
        assert result.stdout.strip() == "ods.t1"

    def test_base64_input(self):
        """Test --base64 input."""
        result = self.run_cli("--base64", str(self.b64_file))

        assert result.returncode == 0
        assert result.stdout.strip() == "test.a"

    def test_json_format(self):
        """Test --format json."""
        result = self.run_cli(str(self.script_file), "--format", "json")

        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert data["tables"][0] == "ods.orders"
        assert data["statements"][1]["target_table"] == "dw.report"

    def test_table_format(self):
        """Test --format table."""
        result = self.run_cli(str(self.script_file), "--format", "table")

        assert result.returncode == 0
        assert "Target" in result.stdout
        assert "dw.report" in result.stdout
        assert "Found 4 source table reference(s)" in result.stdout

    def test_export(self):
        """Test --export writes the lineage graph."""
        result = self.run_cli(
            str(self.script_file), "--export", str(self.export_file)
        )

        assert result.returncode == 0
        data = json.loads(self.export_file.read_text(encoding="utf-8"))
        assert data["tables"]["dw.report"]["type"] == "derived"
        assert len(data["statements"]) == 3

    def test_show_skipped(self):
        """Test --show-skipped lists skipped constructs with level counts."""
        result = self.run_cli(
            "--sql",
            "select * from test.a a join unnest(array(1,2)) u",
            "--show-skipped",
        )

        assert result.returncode == 0
        assert "test.a" in result.stdout
        assert "skipped construct(s)" in result.stdout
        assert "By level: INFO:" in result.stdout

    def test_deep_nesting_fails_cleanly(self):
        """Test deeply nested input exits with 1 instead of crashing."""
        sql = "select * from test.a"
        for level in range(300):
            sql = f"select * from ({sql}) s{level}"
        result = self.run_cli("--sql", sql)

        assert result.returncode == 1
        assert "Lineage extraction failed" in result.stderr
        assert "Traceback" not in result.stderr

    def test_syntax_error(self):
        """Test a parse failure exits with 1 and prints no names."""
        result = self.run_cli("--sql", "select * from test.a; select id from (select")

        assert result.returncode == 1
        assert result.stdout.strip() == ""
        assert "Lineage extraction failed" in result.stderr

    def test_missing_file(self):
        """Test a missing input file."""
        result = self.run_cli("does_not_exist.sql")

        assert result.returncode == 1
        assert "File not found" in result.stderr

    def test_no_input(self):
        """Test no input at all."""
        result = self.run_cli()

        assert result.returncode == 1
        assert "No input provided" in result.stderr
