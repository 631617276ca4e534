"""
Counterfactual predictions for hand-authored scenario rows.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

import pandas as pd

from .model import RiskModel
from .schema import AdministrationResponse, Severity


@dataclass(frozen=True)
class ScenarioInput:
    """
    A hand-authored counterfactual row.

    Unlike a Record, ``outrage`` is not held to the 0-100 range: scenario rows
    may extrapolate beyond the observed data. It must still be a finite number.
    """

    severity: Union[Severity, str]
    response: Union[AdministrationResponse, str]
    outrage: float
    label: Optional[str] = None

    @property
    def name(self) -> str:
        if self.label:
            return self.label
        return str(getattr(self.response, "value", self.response))


@dataclass(frozen=True)
class ScenarioPrediction:
    scenario: ScenarioInput
    score: float


# One scenario per administration response, holding severity and outrage fixed
CANONICAL_SCENARIOS = tuple(
    ScenarioInput(severity=Severity.HIGH, response=response, outrage=80.0, label=response.value)
    for response in AdministrationResponse
)


def predict_scenarios(model: RiskModel, scenarios: Iterable[ScenarioInput]) -> List[ScenarioPrediction]:
    scenarios = list(scenarios)
    if not scenarios:
        return []
    features = model.scheme.encode_rows(scenarios)
    scores = model.predict_features(features)
    return [ScenarioPrediction(scenario=s, score=float(v)) for s, v in zip(scenarios, scores)]


def scenario_table(predictions: Iterable[ScenarioPrediction]) -> pd.DataFrame:
    rows = []
    for prediction in predictions:
        scenario = prediction.scenario
        rows.append({
            "Scenario": scenario.name,
            "Severity": getattr(scenario.severity, "value", scenario.severity),
            "Administration_Response": getattr(scenario.response, "value", scenario.response),
            "Public_Outrage": float(scenario.outrage),
            "Predicted_Risk": round(prediction.score, 2),
        })
    return pd.DataFrame(rows, columns=["Scenario", "Severity", "Administration_Response",
                                       "Public_Outrage", "Predicted_Risk"])
