"""Gini impurity and information gain over record sets."""

from __future__ import annotations

from collections.abc import Sequence

from treekit.schema import Record
from treekit.tree.models import label_counts


def gini_impurity(records: Sequence[Record]) -> float:
    """Compute the Gini impurity of a record set.

    Impurity is `1 - sum(p_k ** 2)` over the distinct labels `k`, where `p_k`
    is the fraction of records labelled `k`. A single-class set scores `0.0`.

    Args:
        records (Sequence[Record]): A non-empty record set.

    Returns:
        float: Impurity in `[0, 1)`.

    Raises:
        ValueError: If `records` is empty; impurity is undefined there.

    Examples:
        >>> records = [Record(values={}, label=l) for l in "AAB"]
        >>> round(gini_impurity(records), 4)
        0.4444
    """
    if not records:
        raise ValueError("Gini impurity is undefined for an empty record set")
    total = len(records)
    impurity = 1.0
    for count in label_counts(records).values():
        impurity -= (count / total) ** 2
    return impurity


def information_gain(
    left: Sequence[Record],
    right: Sequence[Record],
    parent_impurity: float,
) -> float:
    """Compute the weighted impurity decrease of splitting a set into `left` and `right`.

    Args:
        left (Sequence[Record]): Records satisfying the candidate question.
        right (Sequence[Record]): Records failing the candidate question.
        parent_impurity (float): Gini impurity of `left + right`.

    Returns:
        float: `parent - p * gini(left) - (1 - p) * gini(right)` with
            `p = len(left) / (len(left) + len(right))`. May be a hair below
            zero from floating-point roundoff.

    Raises:
        ValueError: If either side is empty.
    """
    if not left or not right:
        raise ValueError("Information gain needs two non-empty sides")
    p = len(left) / (len(left) + len(right))
    return parent_impurity - p * gini_impurity(left) - (1 - p) * gini_impurity(right)
