"""Shared fixtures: a small fruit dataset over one categorical and one numeric feature."""

from __future__ import annotations

from enum import Enum

import pytest

from treekit.schema import FeatureSchema, Record


class Color(Enum):
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"


class Fruit(Enum):
    APPLE = "apple"
    LIME = "lime"
    GRAPE = "grape"
    LEMON = "lemon"


@pytest.fixture
def fruit_schema() -> FeatureSchema:
    """Schema with `color` compared by equality and `diameter` compared by threshold.

    Returns:
        FeatureSchema: The fruit schema.
    """
    return FeatureSchema.of(equality=["color"], ordered=["diameter"])


@pytest.fixture
def fruit_records() -> list[Record]:
    """Five labelled fruits; the two red ones differ only in diameter.

    Returns:
        list[Record]: Training records.
    """
    rows = [
        (Color.GREEN, 3, Fruit.APPLE),
        (Color.YELLOW, 3, Fruit.APPLE),
        (Color.RED, 1, Fruit.GRAPE),
        (Color.RED, 1, Fruit.GRAPE),
        (Color.YELLOW, 3, Fruit.LEMON),
    ]
    return [Record(values={"color": color, "diameter": diameter}, label=fruit) for color, diameter, fruit in rows]
