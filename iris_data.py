"""
Loading and shaping the Iris measurements.

Input files hold one flower per line with five fields in a fixed order:
  sepal length, sepal width, petal length, petal width, label
There is no header row.
"""
from __future__ import annotations

import logging
import os
from typing import List

import numpy as np
import pandas as pd
from sklearn.datasets import load_iris

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = "iris-data.txt"
DEFAULT_PATH_SENTINEL = "."

FEATURE_COLUMNS: List[str] = ["sepal_length", "sepal_width", "petal_length", "petal_width"]
LABEL_COLUMN = "label"
COLUMNS: List[str] = FEATURE_COLUMNS + [LABEL_COLUMN]


# -------- Helper functions --------
def resolve_data_path(entry: str | None) -> str:
    """Map what the user typed at the path prompt to a file path."""
    entry = (entry or "").strip()
    if entry in ("", DEFAULT_PATH_SENTINEL):
        return DEFAULT_DATA_PATH
    return entry


def _missing_fields(column: pd.Series) -> pd.Series:
    # short rows come back as NaN, empty fields as ""
    return column.isna() | (column.fillna("").str.strip() == "")


def load_data(path: str, delimiter: str = ",") -> pd.DataFrame:
    """
    Read a data file into a DataFrame with one row per non-empty line.

    Feature columns are float32, the label column is text.
    Raises FileNotFoundError for a missing file and ValueError when a line
    can't be read as four numbers followed by a label.
    """
    # pandas reports a missing file with its own message; keep the path in it
    if not os.path.exists(path):
        raise FileNotFoundError(f"Data file not found: {path}")

    # labels such as "NA" or "null" are text, not missing values
    raw = pd.read_csv(path, sep=delimiter, header=None, dtype=str, keep_default_na=False,
                      skip_blank_lines=True, skipinitialspace=True)
    if raw.shape[1] != len(COLUMNS):
        raise ValueError(
            f"Expected {len(COLUMNS)} fields per line in {path}, found {raw.shape[1]}."
        )
    raw.columns = COLUMNS

    df = pd.DataFrame(index=raw.index)
    for col in FEATURE_COLUMNS:
        missing = _missing_fields(raw[col])
        if missing.any():
            line = int(missing.to_numpy().argmax()) + 1
            raise ValueError(f"Missing {col} value in record {line} of {path}.")
        df[col] = pd.to_numeric(raw[col].str.strip(), errors="raise").astype(np.float32)

    missing = _missing_fields(raw[LABEL_COLUMN])
    if missing.any():
        line = int(missing.to_numpy().argmax()) + 1
        raise ValueError(f"Missing label in record {line} of {path}.")
    df[LABEL_COLUMN] = raw[LABEL_COLUMN].str.strip()

    logger.info("Loaded %d rows from %s", len(df), path)
    return df.reset_index(drop=True)


def make_sample(sepal_length: float, sepal_width: float,
                petal_length: float, petal_width: float) -> pd.DataFrame:
    """Single unlabeled record, shaped like a row of load_data()."""
    values = np.array([[sepal_length, sepal_width, petal_length, petal_width]], dtype=np.float32)
    df = pd.DataFrame(values, columns=FEATURE_COLUMNS)
    df[LABEL_COLUMN] = None
    return df


def assemble_features(records: pd.DataFrame) -> np.ndarray:
    # label column, if present, never reaches the vector
    return records[FEATURE_COLUMNS].to_numpy(dtype=np.float32)


def save_iris_dataset(path: str, delimiter: str = ",") -> int:
    """
    Write scikit-learn's bundled Iris dataset to `path` in the input format.
    Labels are written as Iris-setosa / Iris-versicolor / Iris-virginica.
    Returns the number of rows written.
    """
    iris = load_iris(as_frame=True)
    df = iris.data.copy()
    df.columns = FEATURE_COLUMNS
    df[LABEL_COLUMN] = ["Iris-" + name for name in iris.target_names[iris.target]]

    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    df.to_csv(path, sep=delimiter, header=False, index=False)
    logger.info("Saved %d Iris rows to %s", len(df), path)
    return len(df)
