"""
Ordinary least squares fit of the political risk model.

The design matrix is the encoded feature matrix with an intercept column
prepended. Its rank is checked before fitting: a categorical level with no
training rows (an all-zero indicator) or any other collinearity makes the
coefficients non-identifiable, and the fit is refused with SingularMatrixError
rather than returning a pseudo-inverse solution.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np
import pandas as pd
import statsmodels.api as sm

from .encoding import EncodingScheme
from .errors import EmptySetError, SingularMatrixError

INTERCEPT = "Intercept"


@dataclass(frozen=True)
class FitSummary:
    # intercept first, then one entry per feature
    std_errors: Tuple[float, ...]
    p_values: Tuple[float, ...]
    r_squared: float
    adj_r_squared: float
    n_obs: int


@dataclass(frozen=True)
class RiskModel:
    scheme: EncodingScheme
    intercept: float
    coefficients: Tuple[float, ...]
    summary: Optional[FitSummary] = None

    @property
    def feature_names(self):
        return self.scheme.feature_names

    def coefficient_map(self) -> Dict[str, float]:
        return dict(zip(self.feature_names, self.coefficients))

    def coefficient(self, name: str) -> float:
        if name == INTERCEPT:
            return self.intercept
        return self.coefficient_map()[name]

    def predict_features(self, features: np.ndarray) -> np.ndarray:
        features = np.atleast_2d(np.asarray(features, dtype=float))
        return self.intercept + features @ np.asarray(self.coefficients)

    def predict_frame(self, frame: pd.DataFrame) -> np.ndarray:
        return self.predict_features(self.scheme.encode_frame(frame))

    def coefficient_table(self) -> pd.DataFrame:
        """Coefficients (and standard errors / p-values when available) as a table."""
        names = [INTERCEPT] + self.feature_names
        table = pd.DataFrame({"coef": (self.intercept,) + self.coefficients}, index=names)
        if self.summary is not None:
            table["std_err"] = self.summary.std_errors
            table["p_value"] = self.summary.p_values
        table.index.name = "term"
        return table


def _degenerate_columns(features: np.ndarray, names) -> list:
    # constant columns are collinear with the intercept
    return [name for name, column in zip(names, features.T) if column.max() == column.min()]


def fit_model(features: np.ndarray, target: np.ndarray, scheme: EncodingScheme) -> RiskModel:
    """Fit OLS coefficients (plus intercept) of ``target`` on encoded ``features``."""
    X = np.asarray(features, dtype=float)
    y = np.asarray(target, dtype=float)
    names = scheme.feature_names

    if X.ndim != 2 or X.shape[1] != len(names):
        raise ValueError(f"expected a matrix with {len(names)} feature columns, got shape {X.shape}")
    if len(X) != len(y):
        raise ValueError(f"features have {len(X)} rows but target has {len(y)}")
    if len(X) == 0:
        raise EmptySetError("cannot fit on an empty training set", stage="fit")

    design = sm.add_constant(X, has_constant="add")
    rank = int(np.linalg.matrix_rank(design))
    if rank < design.shape[1]:
        degenerate = _degenerate_columns(X, names)
        detail = f"; constant columns: {', '.join(degenerate)}" if degenerate else ""
        raise SingularMatrixError(
            f"design matrix is rank-deficient (rank {rank} < {design.shape[1]} columns, "
            f"{len(X)} rows){detail}",
            column=degenerate[0] if degenerate else None,
        )

    logging.debug(f"Fitting OLS on {len(X)} rows x {design.shape[1]} columns")
    results = sm.OLS(y, design).fit()
    params = np.asarray(results.params, dtype=float)

    summary = FitSummary(
        std_errors=tuple(float(v) for v in np.asarray(results.bse)),
        p_values=tuple(float(v) for v in np.asarray(results.pvalues)),
        r_squared=float(results.rsquared),
        adj_r_squared=float(results.rsquared_adj),
        n_obs=int(results.nobs),
    )
    model = RiskModel(
        scheme=scheme,
        intercept=float(params[0]),
        coefficients=tuple(float(v) for v in params[1:]),
        summary=summary,
    )
    logging.info(f"Fitted model on {summary.n_obs} rows, R^2 = {summary.r_squared:0.3f}")
    for name, value in model.coefficient_map().items():
        logging.debug(f"  {name}: {value:+.4f}")
    return model
