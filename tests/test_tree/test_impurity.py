"""Tests for Gini impurity and information gain."""

from __future__ import annotations

import math

import pytest
from pytest_check import check

from treekit.schema import Record
from treekit.tree.impurity import gini_impurity, information_gain


def _records(labels: str) -> list[Record]:
    """Build feature-less records, one per character label.

    Args:
        labels (str): One character per record, used as its label.

    Returns:
        list[Record]: The records.
    """
    return [Record(values={}, label=label) for label in labels]


class TestGiniImpurity:
    """Tests for `gini_impurity`."""

    @pytest.mark.parametrize("labels", ["A", "AAAA", "BBBBBBB"])
    def test_single_class_is_pure(self, labels: str) -> None:
        """Sets with one label should have zero impurity.

        Args:
            labels (str): Labels of a single-class set.
        """
        assert gini_impurity(_records(labels)) == 0.0

    @pytest.mark.parametrize(
        ("labels", "expected"),
        [("AB", 0.5), ("AAB", 4 / 9), ("ABC", 2 / 3), ("AABB", 0.5), ("AAAB", 0.375)],
    )
    def test_mixed_sets(self, labels: str, expected: float) -> None:
        """Impurity should equal one minus the sum of squared label shares.

        Args:
            labels (str): Labels of the set.
            expected (float): Expected impurity.
        """
        assert math.isclose(gini_impurity(_records(labels)), expected)

    def test_result_stays_below_one(self) -> None:
        """Even many evenly spread labels keep impurity strictly below one."""
        impurity = gini_impurity(_records("ABCDEFGHIJ"))

        with check:
            assert 0.0 < impurity < 1.0
        with check:
            assert math.isclose(impurity, 0.9)

    def test_empty_set_raises(self) -> None:
        """Impurity of an empty set is undefined and should raise."""
        with pytest.raises(ValueError, match="empty record set"):
            gini_impurity([])


class TestInformationGain:
    """Tests for `information_gain`."""

    def test_perfect_split_recovers_parent_impurity(self) -> None:
        """Splitting into two pure sides should gain the full parent impurity."""
        left, right = _records("AA"), _records("B")
        parent = gini_impurity(left + right)

        assert math.isclose(information_gain(left, right, parent), 4 / 9)

    def test_weighted_by_side_size(self) -> None:
        """Gain should weight each side's impurity by its share of records."""
        left, right = _records("AB"), _records("AA")
        parent = gini_impurity(left + right)

        # parent 0.375, left 0.5 weighted by 0.5, right pure
        assert math.isclose(information_gain(left, right, parent), 0.125)

    def test_uninformative_split_gains_nothing(self) -> None:
        """A split whose sides mirror the parent distribution should gain about zero."""
        left, right = _records("AB"), _records("AB")
        parent = gini_impurity(left + right)

        assert math.isclose(information_gain(left, right, parent), 0.0, abs_tol=1e-12)

    @pytest.mark.parametrize(("left", "right"), [("", "AB"), ("AB", "")])
    def test_empty_side_raises(self, left: str, right: str) -> None:
        """Either side being empty should raise.

        Args:
            left (str): Labels of the left side.
            right (str): Labels of the right side.
        """
        with pytest.raises(ValueError, match="non-empty"):
            information_gain(_records(left), _records(right), 0.5)
