"""Recursive decision tree induction."""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from treekit.exceptions import EmptyTrainingSetError
from treekit.logging import SPLIT_LEVEL
from treekit.schema import FeatureSchema, Record
from treekit.tree.inference import leaf_count, tree_depth
from treekit.tree.models import Decision, Leaf, TreeNode, label_counts
from treekit.tree.splitting import find_best_split, partition


def build_tree(records: Sequence[Record], schema: FeatureSchema) -> TreeNode:
    """Grow a decision tree from labelled records.

    Each call runs split search on its record set. A set whose best gain is
    exactly zero (pure, or with no separating question) becomes a `Leaf`;
    otherwise the set is partitioned by the winning question and both sides
    are grown recursively. Every split leaves two strictly smaller, non-empty
    sides, so recursion always terminates.

    Args:
        records (Sequence[Record]): Training records. Every record must carry
            a value for every schema feature.
        schema (FeatureSchema): The features split search may ask about.

    Returns:
        TreeNode: The root of the grown tree.

    Raises:
        EmptyTrainingSetError: If `records` is empty.
        FeaturesNotFoundError: If a record lacks a schema feature.

    Examples:
        >>> schema = FeatureSchema.of(equality=["color"])
        >>> records = [
        ...     Record(values={"color": "Red"}, label="Apple"),
        ...     Record(values={"color": "Green"}, label="Lime"),
        ... ]
        >>> str(build_tree(records, schema).question)
        'is color == Red'
    """
    if not records:
        raise EmptyTrainingSetError()
    schema.validate_records(records)

    logger.info("Training decision tree", records=len(records), features=list(schema.names))
    tree = _grow(records, schema, depth=0)
    logger.info("Decision tree built", depth=tree_depth(tree), leaves=leaf_count(tree))
    return tree


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _grow(records: Sequence[Record], schema: FeatureSchema, *, depth: int) -> TreeNode:
    """Build the subtree for `records` found `depth` levels below the root."""
    gain, question = find_best_split(records, schema)

    if gain == 0.0 or question is None:
        distribution = label_counts(records)
        logger.debug("Leaf created", depth=depth, distribution=distribution)
        return Leaf(distribution=distribution)

    true_records, false_records = partition(question, records)
    logger.log(
        SPLIT_LEVEL,
        "Split chosen",
        depth=depth,
        question=str(question),
        gain=gain,
        true_size=len(true_records),
        false_size=len(false_records),
    )

    true_branch = _grow(true_records, schema, depth=depth + 1)
    false_branch = _grow(false_records, schema, depth=depth + 1)
    return Decision(question=question, true_branch=true_branch, false_branch=false_branch)
