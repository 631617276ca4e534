"""
End-to-end analysis run: load -> encode -> split -> fit -> evaluate, then
scenario predictions from the fitted model.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .config import AnalysisConfig
from .encoding import EncodingScheme
from .evaluate import Evaluation, evaluate
from .loader import Dataset, load_dataset
from .model import RiskModel, fit_model
from .scenarios import ScenarioPrediction, predict_scenarios, scenario_table
from .split import Split, split_indices


@dataclass(frozen=True)
class AnalysisReport:
    n_rows: int
    split: Split
    model: RiskModel
    evaluation: Evaluation
    scenarios: Tuple[ScenarioPrediction, ...]


def run_analysis(config: AnalysisConfig, dataset: Optional[Dataset] = None) -> AnalysisReport:
    if dataset is None:
        logging.info(f"Loading dataset from {config.data_path}")
        dataset = load_dataset(config.data_path)

    scheme = EncodingScheme.canonical()
    logging.debug(f"Encoding features {scheme.feature_names} "
                  f"(reference levels: {scheme.reference_levels})")

    split = split_indices(len(dataset), config.train_fraction, config.seed)
    train_frame = dataset.rows(split.train)
    test_frame = dataset.rows(split.test)

    model = fit_model(scheme.encode_frame(train_frame), dataset.target(split.train), scheme)
    evaluation = evaluate(model, test_frame)
    predictions = predict_scenarios(model, config.scenarios)
    for prediction in predictions:
        logging.debug(f"Scenario {prediction.scenario.name}: {prediction.score:.2f}")

    return AnalysisReport(
        n_rows=len(dataset),
        split=split,
        model=model,
        evaluation=evaluation,
        scenarios=tuple(predictions),
    )


def format_report(report: AnalysisReport) -> str:
    lines = []
    lines.append(f"Rows: {report.n_rows} ({len(report.split.train)} train / {len(report.split.test)} test)")
    lines.append("")
    lines.append("Fitted coefficients:")
    lines.append(report.model.coefficient_table().round(4).to_string())
    summary = report.model.summary
    if summary is not None:
        lines.append(f"R^2: {summary.r_squared:0.3f}  Adj R^2: {summary.adj_r_squared:0.3f}")
    lines.append("")
    lines.append(f"RMSE: {report.evaluation.rmse:.1f}")
    lines.append("")
    lines.append("Scenario predictions:")
    lines.append(scenario_table(report.scenarios).to_string(index=False))
    return "\n".join(lines)
