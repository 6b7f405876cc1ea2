"""
Tests for the CLI.

Runs the Typer application in-process with CliRunner.
"""

import pytest
from typer.testing import CliRunner

from adjgraph import __version__
from adjgraph.graph import build_sample_graph
from cli.main import app, _parse_edge, _parse_node, _run_demo_checks


@pytest.fixture
def runner():
    """A CliRunner for invoking the app."""
    return CliRunner()


class TestDemoChecks:
    """Tests for the scripted sample checks."""

    @pytest.mark.parametrize("directed", [False, True])
    def test_all_checks_pass(self, directed):
        """Test that the sample graph satisfies every check in both modes."""
        checks = _run_demo_checks(build_sample_graph(directed=directed))

        assert len(checks) == 20
        assert [c.label for c in checks if not c.passed] == []

    def test_checks_mutate_graph(self):
        """Test that the scenario leaves bbb re-added without the aaa edge."""
        graph = build_sample_graph()
        _run_demo_checks(graph)

        assert "bbb" in graph
        assert not graph.nodes_connected("aaa", "bbb")
        assert graph.get_neighbors("bbb") == ["fff", "ccc"]


class TestDemoCommand:
    """Tests for `adjgraph demo`."""

    def test_demo(self, runner):
        """Test the undirected demo run."""
        result = runner.invoke(app, ["demo"])

        assert result.exit_code == 0
        assert "20/20 checks passed" in result.output

    def test_demo_directed(self, runner):
        """Test the directed demo run."""
        result = runner.invoke(app, ["demo", "--directed"])

        assert result.exit_code == 0
        assert "directed" in result.output
        assert "20/20 checks passed" in result.output

    def test_demo_verbose(self, runner):
        """Test that --verbose still succeeds with debug logging enabled."""
        result = runner.invoke(app, ["demo", "--verbose"])

        assert result.exit_code == 0


class TestInspectCommand:
    """Tests for `adjgraph inspect`."""

    def test_inspect_connected(self, runner):
        """Test inspecting a small connected graph."""
        result = runner.invoke(
            app, ["inspect", "-n", "a=1", "-n", "b", "-e", "a:b=ab"]
        )

        assert result.exit_code == 0
        assert "Connected" in result.output
        assert "Not connected" not in result.output

    def test_inspect_reports_dropped_edges(self, runner):
        """Test that edges to unknown nodes are reported as dropped."""
        result = runner.invoke(
            app, ["inspect", "-n", "a", "-n", "b", "-e", "a:b", "-e", "a:zzz"]
        )

        assert result.exit_code == 0
        assert "1 edge(s)" in result.output

    def test_inspect_requires_nodes(self, runner):
        """Test that inspect without nodes exits with an error."""
        result = runner.invoke(app, ["inspect"])

        assert result.exit_code == 1
        assert "No nodes given" in result.output

    def test_inspect_rejects_bad_edge(self, runner):
        """Test that a malformed edge spec is a usage error."""
        result = runner.invoke(app, ["inspect", "-n", "a", "-e", "a-b"])

        assert result.exit_code == 2


class TestOptionParsing:
    """Tests for node and edge spec parsing."""

    def test_parse_node(self):
        """Test node specs with and without values."""
        assert _parse_node("a") == ("a", None)
        assert _parse_node("a=1") == ("a", "1")
        assert _parse_node("a=") == ("a", "")

    def test_parse_edge(self):
        """Test edge specs with and without values."""
        assert _parse_edge("a:b") == ("a", "b", None)
        assert _parse_edge("a:b=x=y") == ("a", "b", "x=y")


class TestVersion:
    """Tests for the top-level callback."""

    def test_version(self, runner):
        """Test that --version prints the package version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_command_prints_help(self, runner):
        """Test that running without a command shows help."""
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "demo" in result.output
