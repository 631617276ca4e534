from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from .scenarios import CANONICAL_SCENARIOS, ScenarioInput


@dataclass
class AnalysisConfig:
    data_path: Union[str, Path]
    seed: int = 42
    train_fraction: float = 0.8
    scenarios: List[ScenarioInput] = field(default_factory=lambda: list(CANONICAL_SCENARIOS))

    def __post_init__(self):
        self.data_path = Path(self.data_path)
        if not 0.0 < self.train_fraction < 1.0:
            raise ValueError(f"train_fraction must be in (0, 1), got {self.train_fraction}")
