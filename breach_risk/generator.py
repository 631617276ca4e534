# breach_risk/generator.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

import numpy as np
import pandas as pd

from .schema import (
    ALLIED_TRUST, DATE, DELAY, ESCALATION, ID, OUTRAGE, REQUIRED_COLUMNS, RESPONSE,
    SEVERITY, TARGET, AdministrationResponse, Severity,
)

# -------------------------------
# Core generator
# -------------------------------

@dataclass
class BreachDataGenConfig:
    n_rows: int = 100
    seed: Optional[int] = 42
    noise_scale: float = 4.0                # higher -> noisier risk scores (higher RMSE)
    start_date: str = "2025-01-01"          # dates fall within the following year
    inject_data_issues: bool = False        # plant a few invalid values the loader must reject
    severity_weights: Dict[str, float] = field(default_factory=lambda: {
        "Low": 0.3, "Medium": 0.4, "High": 0.3,
    })
    response_weights: Dict[str, float] = field(default_factory=lambda: {
        "Denial": 1 / 3, "Investigation": 1 / 3, "Accountability": 1 / 3,
    })

    # Ground-truth linear model for the political risk score
    # risk  ~  β0 + severity dummies + response dummies + β_outrage * outrage + noise
    coeffs: Dict[str, float] = field(default_factory=lambda: {
        "intercept": 30.0,
        "severity_medium": 11.0,
        "severity_high": 22.0,
        "response_investigation": -10.0,    # relative to Denial
        "response_accountability": -20.0,
        "public_outrage": 0.5,              # per outrage point
    })


def _clip(x, low=0.0, high=100.0):
    return float(np.clip(x, low, high))


def _weights(levels, weights: Dict[str, float]) -> np.ndarray:
    p = np.array([weights.get(level, 0.0) for level in levels], dtype=float)
    if p.sum() <= 0:
        raise ValueError(f"weights for {levels} must sum to a positive value")
    return p / p.sum()


def generate_breach_data(cfg: BreachDataGenConfig) -> pd.DataFrame:
    rng = np.random.default_rng(cfg.seed)

    severities = [level.value for level in Severity]
    responses = [level.value for level in AdministrationResponse]
    severity_draws = rng.choice(severities, size=cfg.n_rows, p=_weights(severities, cfg.severity_weights))
    response_draws = rng.choice(responses, size=cfg.n_rows, p=_weights(responses, cfg.response_weights))

    start = pd.Timestamp(cfg.start_date)
    day_offsets = np.sort(rng.integers(0, 365, size=cfg.n_rows))

    b = cfg.coeffs
    rows = []
    for i, (severity, response, offset) in enumerate(zip(severity_draws, response_draws, day_offsets)):
        severity_rank = severities.index(severity)      # 0 = Low .. 2 = High
        denial = response == "Denial"
        accountability = response == "Accountability"

        # Worse breaches and denials draw more public anger
        public_outrage = _clip(rng.normal(40 + 10 * severity_rank + 5 * denial, 15))

        mu = (
            b.get("intercept", 0.0)
            + b.get("severity_medium", 0.0) * (severity == "Medium")
            + b.get("severity_high", 0.0) * (severity == "High")
            + b.get("response_investigation", 0.0) * (response == "Investigation")
            + b.get("response_accountability", 0.0) * accountability
            + b.get("public_outrage", 0.0) * public_outrage
        )
        political_risk = _clip(mu + rng.normal(0, cfg.noise_scale))

        # Downstream consequences follow the risk score loosely
        delay_months = max(0.0, rng.normal(2 + 1.5 * severity_rank + 0.03 * public_outrage, 1.0))
        allied_trust = _clip(rng.normal(85 - 0.45 * political_risk + 6 * accountability, 5))
        escalation_risk = _clip(rng.normal(15 + 0.5 * political_risk - 8 * accountability, 6))

        rows.append({
            ID: i + 1,
            DATE: (start + pd.Timedelta(days=int(offset))).strftime("%Y-%m-%d"),
            SEVERITY: severity,
            RESPONSE: response,
            OUTRAGE: round(public_outrage, 1),
            TARGET: round(political_risk, 1),
            DELAY: round(delay_months, 1),
            ALLIED_TRUST: round(allied_trust, 1),
            ESCALATION: round(escalation_risk, 1),
        })

    df = pd.DataFrame(rows, columns=REQUIRED_COLUMNS)

    # Optional: a few data-quality problems for the loader to reject
    if cfg.inject_data_issues and len(df) >= 20:
        rng = np.random.default_rng((cfg.seed or 0) + 123)
        # 1) out-of-range outrage
        bad_ix = rng.choice(df.index, size=max(1, len(df) // 50), replace=False)
        df.loc[bad_ix, OUTRAGE] = df.loc[bad_ix, OUTRAGE] + 110
        # 2) text in a numeric field
        df[DELAY] = df[DELAY].astype(object)
        text_ix = rng.choice(df.index, size=max(1, len(df) // 40), replace=False)
        df.loc[text_ix, DELAY] = "N/A"
        logging.debug(f"Injected issues at rows {sorted(bad_ix.tolist())} and {sorted(text_ix.tolist())}")

    return df


def write_breach_data(cfg: BreachDataGenConfig, path: Union[str, Path]) -> Path:
    path = Path(path)
    df = generate_breach_data(cfg)
    df.to_csv(path, index=False)
    logging.info(f"Wrote {len(df)} rows to {path}")
    return path
