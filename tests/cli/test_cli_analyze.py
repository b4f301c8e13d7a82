"""Tests for the oo-metrics command line."""

import json
import logging

import pytest
from typer.testing import CliRunner

from oo_metrics import __version__
from oo_metrics.cli import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def model_file(tmp_path, model_document):
    path = tmp_path / "model.json"
    path.write_text(json.dumps(model_document), encoding="utf-8")
    return path


class TestRoot:
    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_no_command_shows_help(self, runner):
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "analyze" in result.stdout


class TestCalculatorsCommand:
    def test_lists_registry(self, runner):
        result = runner.invoke(app, ["calculators"])
        assert result.exit_code == 0
        assert "raw_total_lines" in result.stdout
        assert "method_attribute_inheritance" in result.stdout


class TestAnalyzeCommand:
    def test_json_output(self, runner, model_file):
        result = runner.invoke(app, ["analyze", str(model_file), "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert list(data) == ["zoo.Animal", "zoo.Dog"]

        dog = data["zoo.Dog"]
        assert dog["RTLOC"] == 7
        assert dog["Mit"] == 1
        assert dog["Md"] == 2
        assert dog["Mi"] == 1
        assert dog["Ma"] == 3
        assert dog["MIF"] == pytest.approx(0.3333)
        assert dog["Ad"] == 2
        assert list(dog)[0] == "RTLOC"

    def test_select_type_and_calculator(self, runner, model_file):
        result = runner.invoke(
            app,
            ["analyze", str(model_file), "-t", "zoo.Dog", "-c", "raw_total_lines", "--json"],
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout) == {"zoo.Dog": {"RTLOC": 7}}

    def test_decimals(self, runner, model_file):
        result = runner.invoke(
            app, ["analyze", str(model_file), "-t", "zoo.Dog", "--json", "--decimals", "1"]
        )
        assert json.loads(result.stdout)["zoo.Dog"]["MIF"] == 0.3

    def test_table_output(self, runner, model_file):
        result = runner.invoke(app, ["analyze", str(model_file), "--type", "zoo.Dog"])
        assert result.exit_code == 0, result.output
        assert "zoo.Dog" in result.stdout
        assert "MIF" in result.stdout
        assert "0.3333" in result.stdout

    def test_parallel_workers(self, runner, model_file):
        result = runner.invoke(app, ["analyze", str(model_file), "--json", "-w", "2"])
        assert result.exit_code == 0, result.output
        assert set(json.loads(result.stdout)) == {"zoo.Animal", "zoo.Dog"}

    def test_unknown_type_exits_1(self, runner, model_file):
        result = runner.invoke(app, ["analyze", str(model_file), "--type", "zoo.Cat"])
        assert result.exit_code == 1
        assert "Unknown type" in result.stdout

    def test_unknown_calculator_exits_1(self, runner, model_file):
        result = runner.invoke(app, ["analyze", str(model_file), "-c", "bogus"])
        assert result.exit_code == 1
        assert "Unknown calculator" in result.stdout

    def test_malformed_model_exits_1(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"types": 3}', encoding="utf-8")
        result = runner.invoke(app, ["analyze", str(path)])
        assert result.exit_code == 1
        assert "Cannot load type model" in result.stdout

    def test_verbose_and_quiet_conflict(self, runner, model_file):
        result = runner.invoke(app, ["analyze", str(model_file), "-v", "-q"])
        assert result.exit_code == 1
        assert "mutually exclusive" in result.stdout

    def test_config_file(self, runner, model_file, tmp_path):
        config = tmp_path / "cfg.toml"
        config.write_text('calculators = ["raw_total_lines"]\n')
        result = runner.invoke(
            app, ["analyze", str(model_file), "--config", str(config), "--json"]
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["zoo.Animal"] == {"RTLOC": 12}


class TestVerbositySetting:
    @pytest.fixture(autouse=True)
    def package_logger(self):
        logger = logging.getLogger("oo_metrics")
        saved = logger.level
        yield logger
        logger.setLevel(saved)

    def test_env_var_sets_level(self, runner, model_file, monkeypatch, package_logger):
        monkeypatch.setenv("OO_METRICS_VERBOSITY", "quiet")
        result = runner.invoke(app, ["analyze", str(model_file), "--json"])
        assert result.exit_code == 0, result.output
        assert package_logger.level == logging.ERROR

    def test_config_file_sets_level(self, runner, model_file, tmp_path, package_logger):
        config = tmp_path / "cfg.toml"
        config.write_text('verbosity = "verbose"\n')
        result = runner.invoke(
            app, ["analyze", str(model_file), "--config", str(config), "--json"]
        )
        assert result.exit_code == 0, result.output
        assert package_logger.level == logging.DEBUG

    def test_flag_beats_config(self, runner, model_file, monkeypatch, package_logger):
        monkeypatch.setenv("OO_METRICS_VERBOSITY", "verbose")
        result = runner.invoke(app, ["analyze", str(model_file), "--json", "-q"])
        assert result.exit_code == 0, result.output
        assert package_logger.level == logging.ERROR

    def test_bad_verbosity_exits_1(self, runner, model_file, monkeypatch):
        monkeypatch.setenv("OO_METRICS_VERBOSITY", "loud")
        result = runner.invoke(app, ["analyze", str(model_file)])
        assert result.exit_code == 1
        assert "verbosity" in result.stdout
