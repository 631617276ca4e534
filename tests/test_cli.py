"""Tests for the command line entry point."""

from pathlib import Path

import pandas as pd
import pytest

from breach_risk.cli import main
from breach_risk.schema import TARGET


class TestCli:
    """generate and analyze subcommands."""

    def test_generate_then_analyze(self, temp_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        out = temp_dir / "breach.csv"

        assert main(["generate", "--out", str(out), "--rows", "100", "--seed", "9"]) == 0
        assert out.exists()

        assert main(["--log-level", "WARNING", "analyze", "--data", str(out), "--seed", "42"]) == 0
        stdout = capsys.readouterr().out
        assert "RMSE:" in stdout
        assert "Accountability" in stdout

    def test_missing_file(self, temp_dir: Path) -> None:
        assert main(["analyze", "--data", str(temp_dir / "nope.csv")]) == 1

    def test_schema_error_exits_nonzero(self, breach_frame: pd.DataFrame, write_frame,
                                        caplog: pytest.LogCaptureFixture) -> None:
        path = write_frame(breach_frame.drop(columns=[TARGET]))

        assert main(["analyze", "--data", str(path)]) == 1
        assert "[load]" in caplog.text

    def test_bad_fraction_exits_nonzero(self, breach_csv: Path) -> None:
        assert main(["analyze", "--data", str(breach_csv), "--train-fraction", "1.5"]) == 1

    def test_subcommand_required(self) -> None:
        with pytest.raises(SystemExit):
            main([])

    def test_empty_file_exits_nonzero(self, temp_dir: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = temp_dir / "empty.csv"
        path.write_text("")

        assert main(["analyze", "--data", str(path)]) == 1
        assert "[load]" in caplog.text
