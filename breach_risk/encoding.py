"""
Reference-category dummy encoding for the risk model predictors.

The scheme is always built from the canonical level order in schema.py, never
from the levels observed in a particular split, so train, test and scenario
rows are encoded identically. The first level of each categorical field is the
dropped reference; every other level becomes a 0/1 indicator column, followed
by the numeric predictors unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Tuple

import numpy as np
import pandas as pd

from .errors import DomainError, UnknownLevelError
from .schema import CATEGORICAL_FEATURES, CATEGORICAL_LEVELS, NUMERIC_FEATURES, OUTRAGE, RESPONSE, SEVERITY

# Attribute names used when encoding Record / ScenarioInput objects
_ROW_ATTRIBUTES = {SEVERITY: "severity", RESPONSE: "response", OUTRAGE: "outrage"}


def _level_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


@dataclass(frozen=True)
class EncodingScheme:
    categorical: Tuple[Tuple[str, Tuple[str, ...]], ...]
    numeric: Tuple[str, ...]

    @classmethod
    def canonical(cls) -> "EncodingScheme":
        return cls(
            categorical=tuple((field, CATEGORICAL_LEVELS[field]) for field in CATEGORICAL_FEATURES),
            numeric=tuple(NUMERIC_FEATURES),
        )

    @property
    def reference_levels(self) -> Dict[str, str]:
        return {field: levels[0] for field, levels in self.categorical}

    @property
    def feature_names(self) -> List[str]:
        names = [f"{field}_{level}" for field, levels in self.categorical for level in levels[1:]]
        return names + list(self.numeric)

    @property
    def input_columns(self) -> List[str]:
        return [field for field, _ in self.categorical] + list(self.numeric)

    def encode_frame(self, frame: pd.DataFrame) -> np.ndarray:
        """Encode every row of ``frame`` into an (n_rows, n_features) float matrix."""
        columns = []
        for field, levels in self.categorical:
            values = frame[field].map(_level_value)
            unknown = ~values.isin(levels)
            if unknown.any():
                row = int(np.flatnonzero(unknown.to_numpy())[0])
                raise UnknownLevelError(
                    f"level {values.iloc[row]!r} is not in the encoding scheme ({', '.join(levels)})",
                    row=row, column=field,
                )
            for level in levels[1:]:
                columns.append((values == level).to_numpy(dtype=float))
        for field in self.numeric:
            values = pd.to_numeric(frame[field], errors="coerce")
            bad = ~np.isfinite(values.to_numpy(dtype=float))
            if bad.any():
                row = int(np.flatnonzero(bad)[0])
                raise DomainError(f"{frame[field].iloc[row]!r} is not a finite number",
                                  row=row, column=field, stage="encode")
            columns.append(values.to_numpy(dtype=float))

        if not columns:
            return np.empty((len(frame), 0))
        encoded = np.column_stack(columns)
        logging.debug(f"Encoded {encoded.shape[0]} rows into {encoded.shape[1]} features")
        return encoded

    def encode_rows(self, rows: Iterable[Any]) -> np.ndarray:
        """Encode objects exposing ``severity``, ``response`` and ``outrage`` attributes."""
        rows = list(rows)
        frame = pd.DataFrame(
            {column: [getattr(row, _ROW_ATTRIBUTES[column]) for row in rows]
             for column in self.input_columns},
            columns=self.input_columns,
        )
        return self.encode_frame(frame)

    def encode_row(self, row: Any) -> np.ndarray:
        return self.encode_rows([row])[0]
