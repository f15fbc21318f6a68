"""Candidate generation, partitioning, and best-split search."""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

from treekit.exceptions import FeaturesNotFoundError
from treekit.schema import FeatureSchema, FeatureSpec, Record
from treekit.tree.impurity import gini_impurity, information_gain
from treekit.tree.models import Question


class SplitResult(NamedTuple):
    """Outcome of a split search.

    Attributes:
        gain (float): Information gain of `question`, or `0.0` when no
            question improves on the parent.
        question (Question | None): The best question, or `None` when the
            record set should become a leaf.
    """

    gain: float
    question: Question | None


# ---------------------------------------------------------------------------
# Public interface -- Candidates and partitioning
# ---------------------------------------------------------------------------


def candidate_questions(records: Sequence[Record], feature: FeatureSpec) -> list[Question]:
    """Build one question per distinct value `feature` takes across `records`.

    Duplicate values yield a single question. Questions come back in order of
    first appearance, so the enumeration is repeatable for a given input.

    Args:
        records (Sequence[Record]): The records to draw values from.
        feature (FeatureSpec): The feature to build questions for.

    Returns:
        list[Question]: Distinct questions, equality tests for `"equality"`
            features and `>=` thresholds for `"ordered"` features.

    Raises:
        FeaturesNotFoundError: If a record has no value for `feature`.
    """
    unique: dict[Question, None] = {}
    for record in records:
        if feature.name not in record.values:
            raise FeaturesNotFoundError(missing_features=[feature.name], available_features=list(record.values))
        unique.setdefault(Question(feature=feature.name, kind=feature.kind, value=record[feature.name]), None)
    return list(unique)


def partition(question: Question, records: Sequence[Record]) -> tuple[list[Record], list[Record]]:
    """Split `records` by whether they satisfy `question`.

    Args:
        question (Question): The predicate to apply.
        records (Sequence[Record]): Records to split; left untouched.

    Returns:
        tuple[list[Record], list[Record]]: A 2-tuple `(matching, non_matching)`,
            each preserving the input's relative order.
    """
    matching: list[Record] = []
    non_matching: list[Record] = []
    for record in records:
        if question.matches(record):
            matching.append(record)
        else:
            non_matching.append(record)
    return matching, non_matching


# ---------------------------------------------------------------------------
# Public interface -- Split search
# ---------------------------------------------------------------------------


def find_best_split(records: Sequence[Record], schema: FeatureSchema) -> SplitResult:
    """Find the question with the highest information gain over `records`.

    Features are visited in schema order and their candidates in first-seen
    order. Candidates leaving either side empty are skipped. The held best is
    only replaced by a strictly greater gain, so the first of several tied
    questions wins.

    Args:
        records (Sequence[Record]): A non-empty record set.
        schema (FeatureSchema): The features to search over.

    Returns:
        SplitResult: `(gain, question)`, or `(0.0, None)` when no question
            has positive gain.

    Raises:
        FeaturesNotFoundError: If a record lacks a value for a schema feature.
    """
    best_gain = 0.0
    best_question: Question | None = None
    current_impurity = gini_impurity(records)

    for feature in schema:
        for question in candidate_questions(records, feature):
            true_records, false_records = partition(question, records)
            if not true_records or not false_records:
                continue

            gain = information_gain(true_records, false_records, current_impurity)
            if gain > best_gain:
                best_gain = gain
                best_question = question

    return SplitResult(gain=best_gain, question=best_question)
