"""Political risk model for hypothetical security-breach scenarios."""

from .config import AnalysisConfig
from .encoding import EncodingScheme
from .errors import (
    BreachRiskError, DomainError, EmptySetError, SchemaError, SingularMatrixError, UnknownLevelError,
)
from .evaluate import Evaluation, evaluate, rmse
from .generator import BreachDataGenConfig, generate_breach_data, write_breach_data
from .loader import Dataset, Record, load_dataset
from .model import FitSummary, RiskModel, fit_model
from .pipeline import AnalysisReport, format_report, run_analysis
from .scenarios import CANONICAL_SCENARIOS, ScenarioInput, ScenarioPrediction, predict_scenarios, scenario_table
from .schema import AdministrationResponse, Severity
from .split import Split, split_indices

__all__ = [
    "AdministrationResponse",
    "AnalysisConfig",
    "AnalysisReport",
    "BreachDataGenConfig",
    "BreachRiskError",
    "CANONICAL_SCENARIOS",
    "Dataset",
    "DomainError",
    "EmptySetError",
    "EncodingScheme",
    "Evaluation",
    "FitSummary",
    "Record",
    "RiskModel",
    "ScenarioInput",
    "ScenarioPrediction",
    "SchemaError",
    "Severity",
    "SingularMatrixError",
    "Split",
    "UnknownLevelError",
    "evaluate",
    "fit_model",
    "format_report",
    "generate_breach_data",
    "load_dataset",
    "predict_scenarios",
    "rmse",
    "run_analysis",
    "scenario_table",
    "split_indices",
    "write_breach_data",
]
