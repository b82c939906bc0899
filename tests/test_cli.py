"""Tests for the diamond-estimator command line."""

from __future__ import annotations

import sys

import pytest

from diamond_estimator import cli


class TestEstimateCommand:
    def test_default_stone(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            cli.main(["estimate"])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert "Estimated price: $9,148" in out
        assert "Estimated range: $7,776 - $10,520" in out

    def test_custom_stone(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = cli.build_parser().parse_args(
            ["estimate", "--carat", "1.5", "--cut", "Fair", "--color", "J", "--clarity", "I1",
             "--depth", "62", "--table", "58"]
        )
        assert cli.run_estimate(args) == 0
        # -8444.03 + 11634.645 + 7180.84 - 5392.26 = 4979.195
        assert "Estimated price: $4,979" in capsys.readouterr().out

    def test_currency_symbol_from_settings(self, monkeypatch: pytest.MonkeyPatch,
                                           capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setenv("DIAMOND_ESTIMATOR_CURRENCY_SYMBOL", "€")
        assert cli.run_estimate(cli.build_parser().parse_args(["estimate"])) == 0
        assert "€9,148" in capsys.readouterr().out

    def test_invalid_inputs_exit_2(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            cli.main(["estimate", "--carat", "12", "--depth", "80"])
        assert exc.value.code == 2
        captured = capsys.readouterr()
        assert "Carat must be less than or equal to 10" in captured.err
        assert "Depth should be between 50% and 70%" in captured.err
        assert "Estimated price" not in captured.out

    @pytest.mark.parametrize("argv,message", [
        (["--carat", "nan"], "Carat must be greater than 0"),
        (["--carat", "inf"], "Carat must be less than or equal to 10"),
        (["--table", "nan"], "Table should be between 50% and 70%"),
    ])
    def test_non_finite_inputs_exit_2(self, argv, message, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            cli.main(["estimate", *argv])
        assert exc.value.code == 2
        captured = capsys.readouterr()
        assert message in captured.err
        assert captured.out == ""

    def test_unknown_grade_rejected_by_parser(self) -> None:
        with pytest.raises(SystemExit) as exc:
            cli.main(["estimate", "--cut", "Excellent"])
        assert exc.value.code == 2


class TestServeCommand:
    def test_command_line(self) -> None:
        cmd = cli.streamlit_command(9000, "0.0.0.0", headless=True)
        assert cmd[:4] == [sys.executable, "-m", "streamlit", "run"]
        assert cmd[4].endswith("app.py")
        assert cmd[cmd.index("--server.port") + 1] == "9000"
        assert cmd[cmd.index("--server.address") + 1] == "0.0.0.0"
        assert cmd[-2:] == ["--server.headless", "true"]

    def test_not_headless_by_default(self) -> None:
        assert "--server.headless" not in cli.streamlit_command(8501, "localhost", headless=False)

    def test_serve_launches_streamlit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []
        monkeypatch.setattr(cli.subprocess, "call", lambda cmd: calls.append(cmd) or 0)

        with pytest.raises(SystemExit) as exc:
            cli.main(["serve", "--port", "9123", "--headless"])

        assert exc.value.code == 0
        (cmd,) = calls
        assert cmd[cmd.index("--server.port") + 1] == "9123"
        assert "--server.headless" in cmd

    def test_no_subcommand_uses_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DIAMOND_ESTIMATOR_PORT", "8600")
        calls = []
        monkeypatch.setattr(cli.subprocess, "call", lambda cmd: calls.append(cmd) or 0)

        with pytest.raises(SystemExit):
            cli.main([])

        (cmd,) = calls
        assert cmd[cmd.index("--server.port") + 1] == "8600"
        assert "--server.headless" not in cmd
