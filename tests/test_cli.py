"""Tests for the command line interface."""
import pytest

from solid_principles.cli import main
from solid_principles.config.settings import TestingConfig


class TestCli:
    def test_single_example(self, testing_env, capsys):
        assert main(["ocp"]) == 0

        assert capsys.readouterr().out == "Area: 78.5398\nArea: 50\n"

    def test_violation_flag(self, testing_env, capsys):
        assert main(["isp", "--violation"]) == 0

        assert capsys.readouterr().out.splitlines()[-1] == "Robot is charging, not eating!"

    def test_all_examples_by_default(self, testing_env, capsys):
        assert main([]) == 0

        out = capsys.readouterr().out
        assert out.count("===") == 10
        assert "Saving data to a database: Report Data" in out

    def test_list(self, testing_env, capsys):
        assert main(["--list"]) == 0

        out = capsys.readouterr().out.splitlines()
        assert [line.split(":")[0] for line in out] == ["srp", "ocp", "lsp", "isp", "dip"]

    def test_unknown_example_exits_with_usage_error(self, testing_env, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["kiss"])

        assert exc_info.value.code == 2
        assert "Unknown example: kiss" in capsys.readouterr().err

    def test_show_violations_config(self, testing_env, monkeypatch, capsys):
        monkeypatch.setattr(TestingConfig, "SHOW_VIOLATIONS", True)

        main(["lsp"])

        assert capsys.readouterr().out.splitlines()[-1] == "Error: Penguin cannot fly"

    def test_corrected_flag_overrides_config(self, testing_env, monkeypatch, capsys):
        monkeypatch.setattr(TestingConfig, "SHOW_VIOLATIONS", True)

        main(["lsp", "--corrected"])

        assert capsys.readouterr().out.splitlines()[-1] == "Penguin cannot fly."

    def test_metrics(self, testing_env, monkeypatch, capsys):
        monkeypatch.setattr(TestingConfig, "ENABLE_METRICS", True)

        main(["srp", "--metrics"])

        err = capsys.readouterr().err
        assert 'solid_example_runs_total{example="srp",variant="corrected"}' in err
