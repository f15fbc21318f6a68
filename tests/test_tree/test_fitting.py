"""Tests for recursive tree induction with `build_tree`."""

from __future__ import annotations

import pytest
from pytest_check import check

from treekit.exceptions import EmptyTrainingSetError, FeaturesNotFoundError
from treekit.schema import FeatureSchema, Record
from treekit.tree.fitting import build_tree
from treekit.tree.inference import classify, leaf_count
from treekit.tree.models import Decision, Leaf, Question


def _collect_leaves(node: Leaf | Decision) -> list[Leaf]:
    """Return the leaves of a tree from left (true) to right (false).

    Args:
        node (Leaf | Decision): Root of the tree.

    Returns:
        list[Leaf]: All leaves in depth-first order.
    """
    if isinstance(node, Leaf):
        return [node]
    return _collect_leaves(node.true_branch) + _collect_leaves(node.false_branch)


class TestBuildTree:
    """Tests for `build_tree`."""

    def test_red_green_scenario(self) -> None:
        """Two apples and a lime should split on `color == Red` into two pure leaves."""
        # Arrange
        schema = FeatureSchema.of(equality=["color"])
        records = [
            Record(values={"color": "Red"}, label="Apple"),
            Record(values={"color": "Green"}, label="Lime"),
            Record(values={"color": "Red"}, label="Apple"),
        ]

        # Act
        tree = build_tree(records, schema)

        # Assert
        assert isinstance(tree, Decision)
        with check:
            assert tree.question == Question(feature="color", kind="equality", value="Red")
        with check:
            assert tree.true_branch == Leaf(distribution={"Apple": 2})
        with check:
            assert tree.false_branch == Leaf(distribution={"Lime": 1})
        with check:
            assert classify({"color": "Red"}, tree) == {"Apple": 2}

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_single_label_gives_single_leaf(self, count: int) -> None:
        """Records sharing one label should produce one leaf holding all of them.

        Args:
            count (int): Number of training records.
        """
        schema = FeatureSchema.of(equality=["color"], ordered=["diameter"])
        records = [Record(values={"color": f"c{i}", "diameter": i}, label="Apple") for i in range(count)]

        tree = build_tree(records, schema)

        assert tree == Leaf(distribution={"Apple": count})

    def test_no_signal_gives_single_mixed_leaf(self) -> None:
        """Identical features with differing labels should end in one leaf with the full distribution."""
        schema = FeatureSchema.of(equality=["color"], ordered=["diameter"])
        records = [
            Record(values={"color": "Red", "diameter": 3}, label=label) for label in ["Apple", "Cherry", "Apple"]
        ]

        tree = build_tree(records, schema)

        assert tree == Leaf(distribution={"Apple": 2, "Cherry": 1})

    def test_ordered_feature_split(self) -> None:
        """A numeric feature should split at the threshold separating the classes."""
        schema = FeatureSchema.of(ordered=["diameter"])
        records = [Record(values={"diameter": d}, label=label) for d, label in [(1, "S"), (4, "L"), (2, "S"), (3, "L")]]

        tree = build_tree(records, schema)

        assert isinstance(tree, Decision)
        with check:
            assert tree.question == Question(feature="diameter", kind="ordered", value=3)
        with check:
            assert tree.true_branch == Leaf(distribution={"L": 2})
        with check:
            assert tree.false_branch == Leaf(distribution={"S": 2})

    def test_leaves_account_for_every_training_record(
        self, fruit_records: list[Record], fruit_schema: FeatureSchema
    ) -> None:
        """Leaf totals should sum to the training set size and leaves should be non-empty.

        Args:
            fruit_records (list[Record]): Training records fixture.
            fruit_schema (FeatureSchema): Schema fixture.
        """
        tree = build_tree(fruit_records, fruit_schema)
        leaves = _collect_leaves(tree)

        with check:
            assert sum(leaf.total for leaf in leaves) == len(fruit_records)
        with check:
            assert all(leaf.total >= 1 for leaf in leaves)
        with check:
            assert leaf_count(tree) == len(leaves)

    def test_conflicting_duplicates_terminate_in_mixed_leaf(
        self, fruit_records: list[Record], fruit_schema: FeatureSchema
    ) -> None:
        """Records no feature can tell apart should end up together in one mixed leaf.

        Args:
            fruit_records (list[Record]): Training records fixture; the yellow
                apple and yellow lemon share every feature value.
            fruit_schema (FeatureSchema): Schema fixture.
        """
        tree = build_tree(fruit_records, fruit_schema)
        mixed = [leaf for leaf in _collect_leaves(tree) if len(leaf.distribution) > 1]

        assert len(mixed) == 1 and mixed[0].total == 2

    def test_training_records_classify_into_leaves_containing_their_label(
        self, fruit_records: list[Record], fruit_schema: FeatureSchema
    ) -> None:
        """Classifying a training record should reach a leaf that counted its label.

        Args:
            fruit_records (list[Record]): Training records fixture.
            fruit_schema (FeatureSchema): Schema fixture.
        """
        tree = build_tree(fruit_records, fruit_schema)

        for record in fruit_records:
            with check:
                assert record.label in classify(record, tree)

    def test_repeated_builds_are_identical(self, fruit_records: list[Record], fruit_schema: FeatureSchema) -> None:
        """Building twice from the same input should give the same tree.

        Args:
            fruit_records (list[Record]): Training records fixture.
            fruit_schema (FeatureSchema): Schema fixture.
        """
        assert build_tree(fruit_records, fruit_schema) == build_tree(fruit_records, fruit_schema)

    def test_input_records_unchanged(self, fruit_records: list[Record], fruit_schema: FeatureSchema) -> None:
        """Training should not reorder or alter the caller's records.

        Args:
            fruit_records (list[Record]): Training records fixture.
            fruit_schema (FeatureSchema): Schema fixture.
        """
        snapshot = list(fruit_records)

        build_tree(fruit_records, fruit_schema)

        assert fruit_records == snapshot

    def test_empty_training_set_raises(self) -> None:
        """Building from zero records should fail fast."""
        with pytest.raises(EmptyTrainingSetError):
            build_tree([], FeatureSchema.of(equality=["color"]))

    def test_record_missing_schema_feature_raises(self) -> None:
        """A training record lacking a schema feature should be rejected before induction."""
        schema = FeatureSchema.of(equality=["color"], ordered=["diameter"])
        records = [Record(values={"color": "Red"}, label="Apple")]

        with pytest.raises(FeaturesNotFoundError):
            build_tree(records, schema)
