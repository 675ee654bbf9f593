"""Tests for the wantcheck command line."""

import logging

import pytest
from click.testing import CliRunner
from wantcheck_cli.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def tree(tmp_path):
    src = tmp_path / "src"
    (src / "good").mkdir(parents=True)
    (src / "good" / "a.py").write_text('def f(v):\n    return v == None  # want "WC003"\n')
    (src / "bad").mkdir(parents=True)
    (src / "bad" / "a.py").write_text("def f(v):\n    return v == None\n")
    return tmp_path


class TestRun:
    """Test the run command."""

    def test_passing_package(self, runner, tree):
        """Test that a package matching its annotations exits cleanly."""
        result = runner.invoke(cli, ["run", str(tree), "good"])

        assert result.exit_code == 0, result.output
        assert "good" in result.output
        assert "FAIL" not in result.output

    def test_failing_package_exits_nonzero(self, runner, tree):
        """Test that an unexpected finding fails the run."""
        result = runner.invoke(cli, ["run", str(tree), "good", "bad"])

        assert result.exit_code == 1
        assert "bad/a.py:2: unexpected finding: WC003 comparison to None should use 'is'" in result.output

    def test_explicit_analysis(self, runner, tree):
        """Test selecting an analysis with --analysis."""
        result = runner.invoke(
            cli,
            ["run", str(tree), "good", "--analysis", "wantcheck_lint.rules.wc001_unused_variable:UnusedVariableRule"],
        )

        assert result.exit_code == 1
        assert "good/a.py:2: expected finding matching 'WC003'" in result.output

    def test_unknown_analysis_is_usage_error(self, runner, tree):
        """Test that an unresolvable analysis is a usage error."""
        result = runner.invoke(cli, ["run", str(tree), "good", "--analysis", "nowhere:Nothing"])

        assert result.exit_code == 2
        assert "cannot import 'nowhere'" in result.output

    def test_missing_package_reported(self, runner, tree):
        """Test that an unknown package is reported as a load failure."""
        result = runner.invoke(cli, ["run", str(tree), "absent"])

        assert result.exit_code == 1
        assert "loading absent: pattern 'absent' expanded to 0 packages, want 1" in result.output

    def test_marker_option(self, runner, tmp_path):
        """Test resolving packages under a custom source root."""
        (tmp_path / "lib" / "pkg").mkdir(parents=True)
        (tmp_path / "lib" / "pkg" / "a.py").write_text("x = 1\n")

        result = runner.invoke(cli, ["run", str(tmp_path), "pkg", "--marker", "lib"])

        assert result.exit_code == 0, result.output


class TestSuite:
    """Test the suite command."""

    def test_suite_file(self, runner, tree):
        """Test running the cases of a suite file."""
        suite_file = tree / "wantcheck.yaml"
        suite_file.write_text(
            "suites:\n"
            "  - name: good-only\n"
            "    root: .\n"
            "    analysis: wantcheck_lint:DefaultChecker\n"
            "    packages: [good]\n"
        )

        result = runner.invoke(cli, ["suite", str(suite_file)])

        assert result.exit_code == 0, result.output
        assert "good-only" in result.output

    def test_missing_suite_file(self, runner, tmp_path):
        """Test that a missing suite file is an error."""
        result = runner.invoke(cli, ["suite", str(tmp_path / "nope.yaml")])

        assert result.exit_code == 1
        assert "File not found" in result.output


class TestRules:
    """Test the rules command."""

    def test_lists_bundled_rules(self, runner):
        """Test that every bundled rule code is listed."""
        result = runner.invoke(cli, ["rules"])

        assert result.exit_code == 0
        for code in ("WC001", "WC002", "WC003"):
            assert code in result.output


def test_log_level_option(runner, tree, restore_wantcheck_logger):
    """Test that --log-level configures the wantcheck logger."""
    result = runner.invoke(cli, ["--log-level", "debug", "run", str(tree), "good"])

    assert result.exit_code == 0, result.output
    assert restore_wantcheck_logger.level == logging.DEBUG


def test_log_level_from_environment(runner, tree, restore_wantcheck_logger, monkeypatch):
    """Test that WANTCHECK_LOG_LEVEL applies when --log-level is omitted."""
    monkeypatch.setenv("WANTCHECK_LOG_LEVEL", "DEBUG")

    result = runner.invoke(cli, ["run", str(tree), "good"])

    assert result.exit_code == 0, result.output
    assert restore_wantcheck_logger.level == logging.DEBUG


def test_log_level_option_overrides_environment(runner, tree, restore_wantcheck_logger, monkeypatch):
    """Test that --log-level wins over WANTCHECK_LOG_LEVEL."""
    monkeypatch.setenv("WANTCHECK_LOG_LEVEL", "DEBUG")

    result = runner.invoke(cli, ["--log-level", "error", "run", str(tree), "good"])

    assert result.exit_code == 0, result.output
    assert restore_wantcheck_logger.level == logging.ERROR
