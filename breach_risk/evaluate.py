from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
import pandas as pd

from .errors import EmptySetError
from .model import RiskModel
from .schema import TARGET


def rmse(actual: Sequence[float], predicted: Sequence[float]) -> float:
    actual = np.asarray(actual, dtype=float)
    predicted = np.asarray(predicted, dtype=float)
    if actual.shape != predicted.shape:
        raise ValueError(f"series must be same length ({actual.shape} vs {predicted.shape})")
    if actual.size == 0:
        raise EmptySetError("RMSE is undefined for an empty set", stage="evaluate")
    return float(np.sqrt(np.mean((predicted - actual) ** 2)))


@dataclass(frozen=True)
class Evaluation:
    predictions: Tuple[float, ...]
    actual: Tuple[float, ...]
    rmse: float

    @property
    def n_rows(self) -> int:
        return len(self.actual)

    def residuals(self) -> np.ndarray:
        return np.asarray(self.actual) - np.asarray(self.predictions)


def evaluate(model: RiskModel, frame: pd.DataFrame) -> Evaluation:
    """Predict every held-out row of ``frame`` and score against its target column."""
    if len(frame) == 0:
        raise EmptySetError("test set is empty", stage="evaluate")
    predictions = model.predict_frame(frame)
    actual = frame[TARGET].to_numpy(dtype=float)
    result = Evaluation(
        predictions=tuple(float(v) for v in predictions),
        actual=tuple(float(v) for v in actual),
        rmse=rmse(actual, predictions),
    )
    logging.info(f"Test RMSE over {result.n_rows} rows: {result.rmse:.4f}")
    return result
