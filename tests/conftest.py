"""Pytest fixtures for breach_risk tests."""

import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pandas as pd
import pytest

from breach_risk.generator import BreachDataGenConfig, generate_breach_data
from breach_risk.loader import Dataset, load_dataset


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def breach_frame() -> pd.DataFrame:
    """A clean 100-row synthetic dataset."""
    return generate_breach_data(BreachDataGenConfig(n_rows=100, seed=7))


@pytest.fixture
def write_frame(temp_dir: Path) -> Callable[[pd.DataFrame, str], Path]:
    """Write a DataFrame to a CSV in the temp directory and return its path."""

    def _write(frame: pd.DataFrame, name: str = "data.csv") -> Path:
        path = temp_dir / name
        frame.to_csv(path, index=False)
        return path

    return _write


@pytest.fixture
def breach_csv(breach_frame: pd.DataFrame, write_frame) -> Path:
    return write_frame(breach_frame, "breach_scenarios.csv")


@pytest.fixture
def dataset(breach_csv: Path) -> Dataset:
    return load_dataset(breach_csv)
