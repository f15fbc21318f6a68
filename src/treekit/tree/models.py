"""Pydantic models for split questions and tree nodes, plus predicate evaluation."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from treekit.exceptions import FeaturesNotFoundError, UnsupportedFeatureKindError
from treekit.schema import FeatureKind, Record

# ---------------------------------------------------------------------------
# Public type aliases
# ---------------------------------------------------------------------------

type LabelDistribution = dict[Any, int]
"""Mapping of class label to the number of records carrying it."""

# ---------------------------------------------------------------------------
# Public models
# ---------------------------------------------------------------------------


class Question(BaseModel):
    """A binary test on one feature, e.g. `color == Red` or `size >= 3`.

    Questions are drawn from observed training values during split search; the
    winning one is stored in a `Decision` node. They are immutable and compare
    and hash by `(feature, kind, value)`.

    Attributes:
        feature (str): Feature name the test reads.
        kind (FeatureKind): `"equality"` tests `value == record[feature]`;
            `"ordered"` tests `record[feature] >= value`.
        value (Any): The equality target or numeric threshold.

    Examples:
        >>> q = Question(feature="size", kind="ordered", value=3)
        >>> str(q)
        'is size >= 3'
        >>> q.matches({"size": 5})
        True
    """

    model_config = ConfigDict(frozen=True)

    feature: str = Field(description="Feature name the test reads.")
    kind: FeatureKind = Field(description='Comparison kind: "equality" or "ordered".')
    value: Any = Field(description="Equality target or threshold drawn from the training data.")

    def matches(self, record: Record | Mapping[str, Any]) -> bool:
        """Evaluate this question against a record.

        Args:
            record (Record | Mapping[str, Any]): A `Record`, or a plain mapping
                of feature name to value.

        Returns:
            bool: `True` if the record satisfies the question.

        Raises:
            FeaturesNotFoundError: If the record has no value for `feature`.
            UnsupportedFeatureKindError: If `kind` is not a known comparison kind.
        """
        values = record.values if isinstance(record, Record) else record
        if self.feature not in values:
            raise FeaturesNotFoundError(missing_features=[self.feature], available_features=list(values))
        return _apply_comparison(self.feature, self.kind, values[self.feature], self.value)

    def __str__(self) -> str:
        """Return the question as `"is <feature> <op> <value>"`.

        Raises:
            UnsupportedFeatureKindError: If `kind` is not a known comparison kind.
        """
        symbol = _KIND_SYMBOLS.get(self.kind)
        if symbol is None:
            raise UnsupportedFeatureKindError(feature=self.feature, kind=self.kind)
        return f"is {self.feature} {symbol} {format_value(self.value)}"


class Leaf(BaseModel):
    """Terminal node holding the label distribution of the records that reached it.

    Attributes:
        node_type (Literal["leaf"]): Discriminator field; always `"leaf"`.
        distribution (LabelDistribution): Label counts, in first-seen order.
    """

    model_config = ConfigDict(frozen=True)

    node_type: Literal["leaf"] = "leaf"
    distribution: dict[Any, int] = Field(description="Label counts of the training records at this leaf.")

    @property
    def total(self) -> int:
        """Number of training records that reached this leaf."""
        return sum(self.distribution.values())


class Decision(BaseModel):
    """Internal node: a question and the two subtrees it selects between.

    Attributes:
        node_type (Literal["decision"]): Discriminator field; always `"decision"`.
        question (Question): The split predicate.
        true_branch (TreeNode): Subtree for records satisfying `question`.
        false_branch (TreeNode): Subtree for records failing `question`.
    """

    model_config = ConfigDict(frozen=True)

    node_type: Literal["decision"] = "decision"
    question: Question
    true_branch: Annotated[Leaf | Decision, Field(discriminator="node_type")]
    false_branch: Annotated[Leaf | Decision, Field(discriminator="node_type")]


Decision.model_rebuild()

# Use this alias when accepting any node; every tree is rooted at a Leaf or a Decision.
type TreeNode = Leaf | Decision

# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------


def label_counts(records: Iterable[Record]) -> LabelDistribution:
    """Count how many records carry each label.

    Args:
        records (Iterable[Record]): Records to count.

    Returns:
        LabelDistribution: Label to count, keyed in order of first appearance.

    Examples:
        >>> records = [Record(values={}, label=l) for l in "AAB"]
        >>> label_counts(records)
        {'A': 2, 'B': 1}
    """
    counts: LabelDistribution = {}
    for record in records:
        counts[record.label] = counts.get(record.label, 0) + 1
    return counts


def format_value(value: Any) -> str:
    """Format a feature value or label for display; enum members show their name."""
    if isinstance(value, Enum):
        return value.name
    return str(value)


# ---------------------------------------------------------------------------
# Private helpers -- Question evaluation
# ---------------------------------------------------------------------------

_KIND_SYMBOLS: dict[str, str] = {
    "equality": "==",
    "ordered": ">=",
}

_KIND_OPS: dict[str, Callable[[Any, Any], bool]] = {
    "equality": operator.eq,
    "ordered": operator.ge,
}


def _apply_comparison(feature: str, kind: str, x: Any, value: Any) -> bool:
    """Compare a record's feature value `x` against a question's `value`.

    Args:
        feature (str): Feature name, used in the error message.
        kind (str): The question's comparison kind.
        x (Any): The record's value for the feature.
        value (Any): The question's target or threshold.

    Returns:
        bool: `x == value` for equality features, `x >= value` for ordered ones.

    Raises:
        UnsupportedFeatureKindError: If `kind` is not a known comparison kind.
    """
    op = _KIND_OPS.get(kind)
    if op is None:
        raise UnsupportedFeatureKindError(feature=feature, kind=kind)
    return bool(op(x, value))
