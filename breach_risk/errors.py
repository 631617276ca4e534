"""
Error taxonomy for the analysis pipeline.

Every error names the pipeline stage it came from and, where known, the
offending row (dataset position) and column.
"""

from __future__ import annotations

from typing import Optional


class BreachRiskError(Exception):
    stage = "pipeline"

    def __init__(self, message: str, *, row: Optional[int] = None,
                 column: Optional[str] = None, stage: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.row = row
        self.column = column
        if stage is not None:
            self.stage = stage

    def __str__(self) -> str:
        where = []
        if self.column is not None:
            where.append(f"column={self.column}")
        if self.row is not None:
            where.append(f"row={self.row}")
        location = f" ({', '.join(where)})" if where else ""
        return f"[{self.stage}] {self.message}{location}"


class SchemaError(BreachRiskError):
    """Required input columns are missing."""
    stage = "load"


class DomainError(BreachRiskError, ValueError):
    """A value is malformed, out of range, or not an enumerated level."""
    stage = "load"


class UnknownLevelError(BreachRiskError, ValueError):
    """A categorical level is not part of the encoding scheme."""
    stage = "encode"


class SingularMatrixError(BreachRiskError):
    """The design matrix is rank-deficient."""
    stage = "fit"


class EmptySetError(BreachRiskError):
    """A train or test set has no rows."""
    stage = "split"
