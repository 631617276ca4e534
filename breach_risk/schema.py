"""
Column layout and categorical levels of the breach-consequence dataset.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Tuple


class Severity(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class AdministrationResponse(str, Enum):
    DENIAL = "Denial"
    INVESTIGATION = "Investigation"
    ACCOUNTABILITY = "Accountability"


ID = "ID"
DATE = "Date"
SEVERITY = "Severity"
RESPONSE = "Administration_Response"
OUTRAGE = "Public_Outrage"
TARGET = "Political_Risk_Score"
DELAY = "Operational_Delay_Months"
ALLIED_TRUST = "Allied_Trust_Index"
ESCALATION = "Adversary_Escalation_Risk"

REQUIRED_COLUMNS: List[str] = [
    ID, DATE, SEVERITY, RESPONSE, OUTRAGE, TARGET, DELAY, ALLIED_TRUST, ESCALATION,
]

# Canonical level order; the first level of each field is the dummy-encoding reference.
CATEGORICAL_LEVELS: Dict[str, Tuple[str, ...]] = {
    SEVERITY: tuple(level.value for level in Severity),
    RESPONSE: tuple(level.value for level in AdministrationResponse),
}

# (low, high) inclusive; None = unbounded on that side
NUMERIC_BOUNDS: Dict[str, Tuple[float, float | None]] = {
    OUTRAGE: (0.0, 100.0),
    TARGET: (0.0, 100.0),
    DELAY: (0.0, None),
    ALLIED_TRUST: (0.0, 100.0),
    ESCALATION: (0.0, 100.0),
}

# Predictors of the risk model, in design-matrix order
CATEGORICAL_FEATURES: List[str] = [SEVERITY, RESPONSE]
NUMERIC_FEATURES: List[str] = [OUTRAGE]
