"""End-to-end tests for the analysis pipeline."""

from pathlib import Path

import pandas as pd
import pytest

from breach_risk.config import AnalysisConfig
from breach_risk.encoding import EncodingScheme
from breach_risk.errors import EmptySetError, SchemaError, SingularMatrixError
from breach_risk.loader import Dataset
from breach_risk.model import fit_model
from breach_risk.pipeline import format_report, run_analysis
from breach_risk.schema import SEVERITY, TARGET


class TestRunAnalysis:
    """Full load -> fit -> evaluate -> scenario runs."""

    def test_report_shape(self, breach_csv: Path) -> None:
        report = run_analysis(AnalysisConfig(data_path=breach_csv))

        assert report.n_rows == 100
        assert len(report.split.train) == 80
        assert len(report.split.test) == 20
        assert report.evaluation.n_rows == 20
        assert report.evaluation.rmse > 0
        assert len(report.scenarios) == 3

    def test_response_ordering(self, breach_csv: Path) -> None:
        """High severity, outrage 80: Denial > Investigation > Accountability."""
        report = run_analysis(AnalysisConfig(data_path=breach_csv, seed=123))
        scores = {p.scenario.name: p.score for p in report.scenarios}

        assert scores["Denial"] > scores["Investigation"] > scores["Accountability"]

    def test_reproducible(self, breach_csv: Path) -> None:
        first = run_analysis(AnalysisConfig(data_path=breach_csv, seed=5))
        second = run_analysis(AnalysisConfig(data_path=breach_csv, seed=5))

        assert first.split == second.split
        assert first.model.coefficients == second.model.coefficients
        assert first.evaluation.rmse == second.evaluation.rmse

    def test_preloaded_dataset(self, breach_csv: Path, dataset: Dataset) -> None:
        config = AnalysisConfig(data_path=breach_csv)

        assert run_analysis(config, dataset=dataset).model == run_analysis(config).model

    def test_format_report(self, breach_csv: Path) -> None:
        text = format_report(run_analysis(AnalysisConfig(data_path=breach_csv)))

        assert "Fitted coefficients:" in text
        assert "Intercept" in text
        assert "RMSE: " in text
        for name in ("Denial", "Investigation", "Accountability"):
            assert name in text


class TestPipelineErrors:
    """Failures abort the run with the stage's error."""

    def test_missing_target_column(self, breach_frame: pd.DataFrame, write_frame) -> None:
        path = write_frame(breach_frame.drop(columns=[TARGET]))

        with pytest.raises(SchemaError):
            run_analysis(AnalysisConfig(data_path=path))

    def test_training_split_without_a_level(self, dataset: Dataset) -> None:
        scheme = EncodingScheme.canonical()
        frame = dataset.frame
        train = [int(i) for i in frame.index[frame[SEVERITY] != "High"]]

        with pytest.raises(SingularMatrixError):
            fit_model(scheme.encode_frame(dataset.rows(train)), dataset.target(train), scheme)

    def test_too_few_rows_to_split(self, breach_frame: pd.DataFrame, write_frame) -> None:
        path = write_frame(breach_frame.head(2))

        with pytest.raises(EmptySetError):
            run_analysis(AnalysisConfig(data_path=path, train_fraction=0.9))

    def test_bad_fraction(self, breach_csv: Path) -> None:
        with pytest.raises(ValueError):
            AnalysisConfig(data_path=breach_csv, train_fraction=1.2)
