"""Tests for the pagetree command-line interface."""

import json
from pathlib import Path

from click.testing import CliRunner

from pagetree import __version__
from pagetree.cli.main import cli

FIXTURES = Path(__file__).resolve().parent.parent / "fixtures"
LANDING = str(FIXTURES / "landing_page.html")
BROKEN = str(FIXTURES / "broken_refs.html")
NO_ROOT = str(FIXTURES / "no_root.html")


# ---------------------------------------------------------------------------
# parse
# ---------------------------------------------------------------------------


class TestParseCommand:
    def test_prints_json(self):
        result = CliRunner().invoke(cli, ["parse", LANDING])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["version"] == 157
        assert data["content"]["type"] == "ContentNode"
        assert "\n  " in result.stdout

    def test_compact(self):
        result = CliRunner().invoke(cli, ["parse", LANDING, "--compact"])
        assert result.exit_code == 0, result.output
        assert result.stdout.count("\n") == 1
        assert json.loads(result.stdout)["popup"]["type"] == "ModalContainer/V1"

    def test_output_file(self, tmp_path):
        target = tmp_path / "page.json"
        result = CliRunner().invoke(cli, ["parse", LANDING, "-o", str(target)])
        assert result.exit_code == 0, result.output
        assert json.loads(target.read_text(encoding="utf-8"))["version"] == 157
        assert "Wrote" in result.output

    def test_styleguide_file(self, tmp_path):
        guide = tmp_path / "guide.json"
        guide.write_text(
            json.dumps({"buttons": [{"id": "primary", "regular": {"bg": "#000000"}}]}),
            encoding="utf-8",
        )
        result = CliRunner().invoke(cli, ["parse", LANDING, "--styleguide", str(guide)])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        button = data["content"]["children"][0]["children"][0]["children"][0]["children"][2]
        assert button["selectors"][".elButton"]["params"]["--style-background-color"] == (
            "rgb(0, 0, 0)"
        )

    def test_bad_styleguide_file(self, tmp_path):
        guide = tmp_path / "guide.json"
        guide.write_text("[1, 2]", encoding="utf-8")
        result = CliRunner().invoke(cli, ["parse", LANDING, "--styleguide", str(guide)])
        assert result.exit_code == 2
        assert "JSON object" in result.output

    def test_missing_source(self, tmp_path):
        result = CliRunner().invoke(cli, ["parse", str(tmp_path / "absent.html")])
        assert result.exit_code == 1
        assert "Source error" in result.output

    def test_no_content_root(self):
        result = CliRunner().invoke(cli, ["parse", NO_ROOT])
        assert result.exit_code == 1
        assert "nothing to convert" in result.output


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidateCommand:
    def test_clean_page(self):
        result = CliRunner().invoke(cli, ["validate", LANDING])
        assert result.exit_code == 0, result.output
        assert "OK" in result.output
        assert "0 diagnostics" in result.output

    def test_warnings_do_not_fail(self):
        result = CliRunner().invoke(cli, ["validate", BROKEN])
        assert result.exit_code == 0, result.output
        assert "WARNING" in result.output
        assert "ghost" in result.output
        assert "Summary: 0 error(s), 1 warning(s), 0 info" in result.output

    def test_no_content_root_fails(self):
        result = CliRunner().invoke(cli, ["validate", NO_ROOT])
        assert result.exit_code == 1


# ---------------------------------------------------------------------------
# inspect and global options
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_outline(self):
        result = CliRunner().invoke(cli, ["inspect", LANDING])
        assert result.exit_code == 0, result.output
        assert "Version: 157" in result.output
        assert "Anchors: 3" in result.output
        assert "SectionContainer/V1" in result.output
        assert "anchor=#pricing" in result.output
        assert "Popup:" in result.output
        assert "ModalContainer/V1" in result.output


class TestGlobalOptions:
    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ("parse", "validate", "inspect"):
            assert command in result.output
