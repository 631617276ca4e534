from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .errors import EmptySetError


@dataclass(frozen=True)
class Split:
    train: Tuple[int, ...]
    test: Tuple[int, ...]

    @property
    def n_rows(self) -> int:
        return len(self.train) + len(self.test)


def split_indices(n_rows: int, train_fraction: float, seed: int) -> Split:
    """
    Partition row positions 0..n_rows-1 into train and test sets.

    A uniform permutation is drawn from a Generator seeded with ``seed``; the
    first round(train_fraction * n_rows) positions go to train. The same
    (n_rows, train_fraction, seed) always yields the same Split.
    """
    if not 0.0 < train_fraction < 1.0:
        raise ValueError(f"train_fraction must be in (0, 1), got {train_fraction}")
    if n_rows < 0:
        raise ValueError(f"n_rows must be non-negative, got {n_rows}")

    n_train = int(round(train_fraction * n_rows))
    if n_train == 0:
        raise EmptySetError(f"training set would be empty ({n_rows} rows, fraction {train_fraction})")
    if n_train == n_rows:
        raise EmptySetError(f"test set would be empty ({n_rows} rows, fraction {train_fraction})")

    rng = np.random.default_rng(seed)
    order = rng.permutation(n_rows)
    split = Split(
        train=tuple(sorted(int(i) for i in order[:n_train])),
        test=tuple(sorted(int(i) for i in order[n_train:])),
    )
    logging.info(f"Split {n_rows} rows into {len(split.train)} train / {len(split.test)} test (seed={seed})")
    return split
