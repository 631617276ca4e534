"""
Dataset loading and validation.

The whole file is rejected on the first violation: a missing column raises
SchemaError, a malformed or out-of-range value raises DomainError. Rows are
never dropped silently, so a given file always produces the same Dataset.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterator, Sequence, Union

import numpy as np
import pandas as pd

from .errors import DomainError, SchemaError
from .schema import (
    ALLIED_TRUST, CATEGORICAL_LEVELS, DATE, DELAY, ESCALATION, ID, NUMERIC_BOUNDS,
    OUTRAGE, REQUIRED_COLUMNS, RESPONSE, SEVERITY, TARGET,
    AdministrationResponse, Severity,
)

Source = Union[str, Path, IO[str]]


@dataclass(frozen=True)
class Record:
    id: int
    date: dt.date
    severity: Severity
    response: AdministrationResponse
    outrage: float
    political_risk: float
    delay_months: float
    allied_trust: float
    escalation_risk: float


class Dataset:
    """Validated, read-only table of Records in file order."""

    def __init__(self, frame: pd.DataFrame):
        self._frame = frame.reset_index(drop=True)

    def __len__(self) -> int:
        return len(self._frame)

    @property
    def frame(self) -> pd.DataFrame:
        return self._frame.copy()

    def rows(self, indices: Sequence[int]) -> pd.DataFrame:
        """Copy of the rows at the given positions, in the order given."""
        return self._frame.iloc[list(indices)].reset_index(drop=True)

    def target(self, indices: Sequence[int] | None = None) -> np.ndarray:
        column = self._frame[TARGET]
        if indices is not None:
            column = column.iloc[list(indices)]
        return column.to_numpy(dtype=float)

    def record(self, index: int) -> Record:
        row = self._frame.iloc[index]
        return Record(
            id=int(row[ID]),
            date=row[DATE].date(),
            severity=Severity(row[SEVERITY]),
            response=AdministrationResponse(row[RESPONSE]),
            outrage=float(row[OUTRAGE]),
            political_risk=float(row[TARGET]),
            delay_months=float(row[DELAY]),
            allied_trust=float(row[ALLIED_TRUST]),
            escalation_risk=float(row[ESCALATION]),
        )

    def records(self) -> Iterator[Record]:
        for index in range(len(self)):
            yield self.record(index)


def _first_row(mask: pd.Series) -> int:
    return int(np.flatnonzero(mask.to_numpy())[0])


def _check_ids(raw: pd.Series) -> pd.Series:
    ids = pd.to_numeric(raw, errors="coerce")
    bad = ~np.isfinite(ids) | (ids != ids.round()) | (ids.abs() >= 2**63)
    if bad.any():
        row = _first_row(bad)
        raise DomainError(f"identifier {raw.iloc[row]!r} is not an integer", row=row, column=ID)
    duplicated = ids.duplicated()
    if duplicated.any():
        row = _first_row(duplicated)
        raise DomainError(f"identifier {int(ids.iloc[row])} is not unique", row=row, column=ID)
    return ids.astype("int64")


def _check_dates(raw: pd.Series) -> pd.Series:
    dates = pd.to_datetime(raw, format="%Y-%m-%d", errors="coerce")
    bad = dates.isna()
    if bad.any():
        row = _first_row(bad)
        raise DomainError(f"date {raw.iloc[row]!r} is not a YYYY-MM-DD date", row=row, column=DATE)
    return dates


def _check_levels(raw: pd.Series, column: str) -> pd.Series:
    values = raw.str.strip()
    levels = CATEGORICAL_LEVELS[column]
    bad = ~values.isin(levels)
    if bad.any():
        row = _first_row(bad)
        raise DomainError(
            f"{raw.iloc[row]!r} is not one of {', '.join(levels)}", row=row, column=column
        )
    return values


def _check_numeric(raw: pd.Series, column: str) -> pd.Series:
    values = pd.to_numeric(raw, errors="coerce")
    bad = ~np.isfinite(values)
    if bad.any():
        row = _first_row(bad)
        raise DomainError(f"{raw.iloc[row]!r} is not a finite number", row=row, column=column)
    low, high = NUMERIC_BOUNDS[column]
    out_of_range = values < low
    if high is not None:
        out_of_range |= values > high
    if out_of_range.any():
        row = _first_row(out_of_range)
        upper = "" if high is None else f", {high:g}"
        raise DomainError(
            f"{values.iloc[row]:g} is outside [{low:g}{upper}]", row=row, column=column
        )
    return values.astype(float)


def load_dataset(source: Source) -> Dataset:
    """Read one delimited file and return the validated Dataset."""
    logging.debug(f"Reading dataset from {source}")
    try:
        raw = pd.read_csv(source, dtype=str, keep_default_na=False, skipinitialspace=True)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise SchemaError(f"cannot parse input columns: {exc}") from exc

    missing = [column for column in REQUIRED_COLUMNS if column not in raw.columns]
    if missing:
        raise SchemaError(f"missing required column(s): {', '.join(missing)}",
                          column=missing[0])
    extra = [column for column in raw.columns if column not in REQUIRED_COLUMNS]
    if extra:
        logging.debug(f"Ignoring extra columns: {extra}")

    frame = pd.DataFrame({
        ID: _check_ids(raw[ID]),
        DATE: _check_dates(raw[DATE]),
        SEVERITY: _check_levels(raw[SEVERITY], SEVERITY),
        RESPONSE: _check_levels(raw[RESPONSE], RESPONSE),
    })
    for column in NUMERIC_BOUNDS:
        frame[column] = _check_numeric(raw[column], column)
    frame = frame[REQUIRED_COLUMNS]

    logging.info(f"Loaded {len(frame)} rows")
    return Dataset(frame)
