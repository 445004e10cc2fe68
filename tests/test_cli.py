"""Tests for the command line interface."""

import json
import logging

import pytest
import yaml
from click.testing import CliRunner

from tabio.cli import cli, load_records
from tabio.utils.errors import ConfigError
from tabio.xlsx.writer import export_tabular
from tabio.models.config import ExportOptions

USERS = [{"name": "John", "age": 30}, {"name": "Jane", "age": 25}]


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("tabio")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def users_xlsx(tmp_path):
    return export_tabular(USERS, "Users", ExportOptions(output_dir=tmp_path))


class TestLoadRecords:
    """Tests for reading JSON/YAML record files."""

    def test_json(self, tmp_path):
        path = tmp_path / "users.json"
        path.write_text(json.dumps(USERS))
        assert load_records(path) == USERS

    def test_yaml(self, tmp_path):
        path = tmp_path / "users.yaml"
        path.write_text(yaml.safe_dump(USERS))
        assert load_records(path) == USERS

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_records(path) == []

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"name": "John"}))
        with pytest.raises(ConfigError, match="list of objects"):
            load_records(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{")
        with pytest.raises(ConfigError, match="Cannot parse"):
            load_records(path)


class TestExportCommand:
    """Tests for `tabio export`."""

    def test_export_json(self, runner, tmp_path):
        source = tmp_path / "users.json"
        source.write_text(json.dumps(USERS))
        out = tmp_path / "out"

        result = runner.invoke(cli, ["export", str(source), "--name", "Users", "--out", str(out)])

        assert result.exit_code == 0, result.output
        assert (out / "Users.xlsx").exists()

    def test_default_name_from_input(self, runner, tmp_path):
        source = tmp_path / "people.yaml"
        source.write_text(yaml.safe_dump(USERS))

        result = runner.invoke(cli, ["export", str(source), "--out", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "people.xlsx").exists()

    def test_custom_sheet(self, runner, tmp_path):
        from openpyxl import load_workbook

        source = tmp_path / "users.json"
        source.write_text(json.dumps(USERS))

        result = runner.invoke(cli, ["export", str(source), "-o", str(tmp_path), "-s", "People"])

        assert result.exit_code == 0, result.output
        wb = load_workbook(tmp_path / "users.xlsx")
        assert wb.sheetnames == ["People"]
        wb.close()

    def test_bad_input(self, runner, tmp_path):
        source = tmp_path / "bad.json"
        source.write_text(json.dumps({"not": "a list"}))

        result = runner.invoke(cli, ["export", str(source), "--out", str(tmp_path)])

        assert result.exit_code == 1
        assert "list of objects" in result.output

    def test_unsupported_value(self, runner, tmp_path):
        """Values the spreadsheet cannot hold are reported, not raised."""
        source = tmp_path / "tags.json"
        source.write_text(json.dumps([{"name": "John", "tags": ["a", "b"]}]))

        result = runner.invoke(cli, ["export", str(source), "--out", str(tmp_path)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Cannot convert" in result.output
        assert not (tmp_path / "tags.xlsx").exists()

    def test_bad_sheet_name(self, runner, tmp_path):
        source = tmp_path / "users.json"
        source.write_text(json.dumps(USERS))

        result = runner.invoke(cli, ["export", str(source), "-o", str(tmp_path), "-s", "x" * 40])

        assert result.exit_code == 1
        assert "Invalid export options" in result.output


class TestImportCommand:
    """Tests for `tabio import`."""

    def test_json_output(self, runner, users_xlsx):
        result = runner.invoke(cli, ["import", str(users_xlsx)])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == USERS

    def test_yaml_output(self, runner, users_xlsx):
        result = runner.invoke(cli, ["import", str(users_xlsx), "--format", "yaml"])

        assert result.exit_code == 0, result.output
        assert yaml.safe_load(result.output) == USERS

    def test_table_output(self, runner, users_xlsx):
        result = runner.invoke(cli, ["import", str(users_xlsx), "-f", "table"])

        assert result.exit_code == 0, result.output
        assert "John" in result.output
        assert "Jane" in result.output

    def test_no_file_selected(self, runner):
        result = runner.invoke(cli, ["import"])

        assert result.exit_code == 1
        assert "No file selected" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["import", str(tmp_path / "missing.xlsx")])

        assert result.exit_code == 1
        assert "Error reading file" in result.output

    def test_corrupt_file(self, runner, tmp_path):
        bad = tmp_path / "bad.xlsx"
        bad.write_bytes(b"garbage")

        result = runner.invoke(cli, ["import", str(bad)])

        assert result.exit_code == 1
        assert "Error processing file" in result.output

    def test_missing_sheet(self, runner, users_xlsx):
        result = runner.invoke(cli, ["import", str(users_xlsx), "--sheet", "Other"])

        assert result.exit_code == 1
        assert "not found" in result.output
