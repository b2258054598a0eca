import json
import logging
from pathlib import Path

from click.testing import CliRunner

from cpe_names.cli import cpe_names
from cpe_names.config import LOG_LEVEL_ENV, configure_logging


def test_parse_command():
    runner = CliRunner()
    result = runner.invoke(cpe_names, ["parse", "cpe:/a:microsoft:internet_explorer:8.0.6001:beta"])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == 'part = "a"'
    assert 'version = "8\\.0\\.6001"' in lines
    assert "edition = ANY" in lines
    assert len(lines) == 11


def test_parse_command_reports_errors():
    runner = CliRunner()
    result = runner.invoke(cpe_names, ["parse", "cpe:/a:micro%02soft"])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_bind_command_defaults_to_formatted_string():
    runner = CliRunner()
    result = runner.invoke(cpe_names, ["bind", "cpe:/a:adobe:reader:9.3.2"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "cpe:2.3:a:adobe:reader:9.3.2:*:*:*:*:*:*:*"


def test_bind_command_to_uri():
    runner = CliRunner()
    result = runner.invoke(
        cpe_names,
        [
            "bind",
            r"cpe:2.3:a:foo\$bar:insight:7.4.0.1570:-:*:*:online:win2003:x64:*",
            "--to",
            "uri",
        ],
    )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "cpe:/a:foo%24bar:insight:7.4.0.1570:-:~~online~win2003~x64~"


def test_compare_command():
    runner = CliRunner()
    result = runner.invoke(
        cpe_names,
        ["compare", "cpe:2.3:a:adobe:*:9.*:*:*:*:*:*:*:*", "cpe:/a:adobe:reader:9.3.2"],
    )
    assert result.exit_code == 0, result.output
    assert "product     SUPERSET" in result.output
    assert "superset: True" in result.output
    assert "disjoint: False" in result.output


def test_compare_command_json():
    runner = CliRunner()
    result = runner.invoke(
        cpe_names,
        ["compare", "cpe:/o:microsoft:windows_7", "cpe:/o:microsoft:windows_8", "--json"],
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["disjoint"] is True
    assert payload["relations"]["product"] == "disjoint"


def test_dictionary_build_and_check(tmp_path: Path, gzipped_dictionary_file: Path):
    runner = CliRunner()
    fixtures = tmp_path / "fixtures.yml"
    result = runner.invoke(
        cpe_names, ["dictionary", "build", str(gzipped_dictionary_file), str(fixtures)]
    )
    assert result.exit_code == 0, result.output
    assert "Wrote 3 cases (0 unbind errors)" in result.output
    assert fixtures.exists()

    result = runner.invoke(cpe_names, ["dictionary", "check", str(fixtures)])
    assert result.exit_code == 0, result.output
    assert "All 3 cases PASSED." in result.output


def test_dictionary_check_reports_regressions(tmp_path: Path):
    fixtures = tmp_path / "fixtures.yml"
    fixtures.write_text(
        "- uri: 'cpe:/a:adobe:reader:9.3.2'\n"
        "  formatted_string: 'cpe:2.3:a:adobe:reader:9.3.2:*:*:*:*:*:*:*'\n"
        "  uri_to_fs: 'cpe:2.3:a:adobe:reader:9.3.1:*:*:*:*:*:*:*'\n"
        "  fs_to_uri: 'cpe:/a:adobe:reader:9.3.2'\n",
        encoding="utf-8",
    )
    runner = CliRunner()
    result = runner.invoke(cpe_names, ["dictionary", "check", str(fixtures)])
    assert result.exit_code == 1
    assert "Regressions found:" in result.output
    assert "uri_to_fs" in result.output


def test_configure_logging_reads_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    configure_logging()
    assert logging.getLogger("cpe_names").level == logging.DEBUG
    configure_logging("ERROR")
    assert logging.getLogger("cpe_names").level == logging.ERROR
