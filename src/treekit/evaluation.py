"""Held-out evaluation of a grown tree: printed test reports and accuracy summaries."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any, TextIO

import numpy as np
from loguru import logger
from pydantic import BaseModel, Field
from sklearn.metrics import accuracy_score

from treekit.schema import Record
from treekit.tree.inference import classify, format_distribution
from treekit.tree.models import TreeNode, format_value

# ---------------------------------------------------------------------------
# Public models
# ---------------------------------------------------------------------------


class Prediction(BaseModel):
    """The tree's answer for one test record.

    Attributes:
        actual (Any): The record's true label.
        predicted (Any): Most frequent label of the reached leaf.
        distribution (dict[Any, int]): Label counts of the reached leaf.
    """

    actual: Any = Field(description="True label of the test record.")
    predicted: Any = Field(description="Most frequent label at the leaf the record reached.")
    distribution: dict[Any, int] = Field(description="Label counts at the leaf the record reached.")

    @property
    def correct(self) -> bool:
        """Whether the predicted label equals the actual label."""
        return self.predicted == self.actual


class EvaluationReport(BaseModel):
    """Per-record predictions and overall accuracy on a test set.

    Attributes:
        predictions (list[Prediction]): One entry per test record, in input order.
        accuracy (float): Fraction of records whose predicted label is correct.
        sample_count (int): Number of test records.

    Examples:
        >>> report = EvaluationReport(
        ...     predictions=[Prediction(actual="Apple", predicted="Apple", distribution={"Apple": 2})],
        ...     accuracy=1.0,
        ...     sample_count=1,
        ... )
        >>> report.accuracy
        1.0
    """

    predictions: list[Prediction]
    accuracy: float = Field(ge=0.0, le=1.0, description="Fraction of correctly predicted records.")
    sample_count: int = Field(ge=1, description="Number of test records evaluated.")


# ---------------------------------------------------------------------------
# Public interface
# ---------------------------------------------------------------------------


def evaluate(records: Sequence[Record], tree: TreeNode) -> EvaluationReport:
    """Classify every test record and score the majority-label predictions.

    Args:
        records (Sequence[Record]): Labelled test records.
        tree (TreeNode): Root of a grown tree.

    Returns:
        EvaluationReport: Predictions in input order and their accuracy.

    Raises:
        ValueError: If `records` is empty.
    """
    if not records:
        raise ValueError("Cannot evaluate a tree on an empty test set")

    predictions: list[Prediction] = []
    for record in records:
        distribution = classify(record, tree)
        predicted = max(distribution, key=distribution.__getitem__)
        predictions.append(Prediction(actual=record.label, predicted=predicted, distribution=distribution))

    # Labels may be arbitrary hashables (e.g. Enum members); score integer codes instead.
    codes: dict[Any, int] = {}
    actual_codes = np.array([codes.setdefault(p.actual, len(codes)) for p in predictions])
    predicted_codes = np.array([codes.setdefault(p.predicted, len(codes)) for p in predictions])
    accuracy = float(accuracy_score(actual_codes, predicted_codes))

    logger.info("Tree evaluated", samples=len(records), accuracy=accuracy)
    return EvaluationReport(predictions=predictions, accuracy=accuracy, sample_count=len(records))


def run_tests(records: Sequence[Record], tree: TreeNode, file: TextIO | None = None) -> None:
    """Print each test record's true label next to the distribution it was classified into.

    Output starts with a blank line and a `Tests:` header, then one line per
    record: `Actual: <label>. Predicted: <LABEL: PCT%, ...>`.

    Args:
        records (Sequence[Record]): Labelled test records.
        tree (TreeNode): Root of a grown tree.
        file (TextIO | None): Destination stream; stdout by default.
    """
    out = file or sys.stdout
    print("\nTests:", file=out)
    for record in records:
        distribution = classify(record, tree)
        print(f"Actual: {format_value(record.label)}. Predicted: {format_distribution(distribution)}", file=out)
