from __future__ import annotations

import logging
import time
import warnings
from typing import Sequence, Tuple

import numpy as np
import pandas as pd
from sklearn.exceptions import ConvergenceWarning
from sklearn.linear_model import LogisticRegression
from sklearn.multiclass import OneVsRestClassifier
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import FunctionTransformer

from iris_data import LABEL_COLUMN, assemble_features

logger = logging.getLogger(__name__)


# ---------------- LABEL ENCODING ----------------
def encode_labels(labels: Sequence[str]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Number the distinct labels in order of first appearance.
    Returns (codes, classes) where classes[codes[i]] == labels[i].
    """
    codes, uniques = pd.factorize(pd.Series(labels, dtype=object), sort=False)
    if (codes < 0).any():
        raise ValueError("Labels must not be missing.")
    return codes.astype(np.int64), np.asarray(uniques, dtype=object)


def decode_labels(codes, classes: np.ndarray) -> np.ndarray:
    return classes[np.asarray(codes, dtype=np.int64)]


# ---------------- PIPELINE ----------------
def build_pipeline(random_state: int | None = None) -> Pipeline:
    """
    Feature assembly followed by a linear one-vs-rest classifier.
    liblinear's dual solver fits each class by coordinate ascent on the dual
    problem; its other settings are left at the library defaults.
    """
    return Pipeline([
        ("features", FunctionTransformer(assemble_features)),
        ("clf", OneVsRestClassifier(
            LogisticRegression(solver="liblinear", dual=True, random_state=random_state)
        )),
    ])


class IrisModel:
    """Trained pipeline plus the table that turns its numeric output back into labels."""

    def __init__(self, pipeline: Pipeline, classes: np.ndarray):
        self.pipeline = pipeline
        self.classes = classes

    def predict(self, records: pd.DataFrame) -> np.ndarray:
        codes = self.pipeline.predict(records)
        logger.debug("Raw predicted categories: %s", codes)
        return decode_labels(codes, self.classes)

    def predict_one(self, record: pd.DataFrame) -> str:
        return str(self.predict(record)[0])


def train_model(records: pd.DataFrame, random_state: int | None = None) -> IrisModel:
    """Encode the label column, then fit the pipeline on the encoded rows."""
    codes, classes = encode_labels(records[LABEL_COLUMN].tolist())
    logger.info("Discovered %d classes: %s", len(classes), ", ".join(map(str, classes)))

    pipe = build_pipeline(random_state=random_state)
    started = time.perf_counter()
    # liblinear rarely meets its tolerance on raw Iris features within the default iterations
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", ConvergenceWarning)
        pipe.fit(records, codes)
    for w in caught:
        if issubclass(w.category, ConvergenceWarning):
            logger.info("Solver: %s", w.message)
        else:
            warnings.warn_explicit(w.message, w.category, w.filename, w.lineno)
    logger.info("Fitted on %d rows in %.3fs", len(records), time.perf_counter() - started)
    return IrisModel(pipe, classes)
