"""Demonstrates training, rendering, and testing a treekit decision tree.

Key concepts shown here:

- ``FeatureSchema.of``: declares which features compare by equality (categorical)
  and which compare by threshold (numeric).
- ``build_tree``: grows the tree from labelled ``Record`` objects.
- ``print_tree``: shows the learned questions and leaf label shares.
- ``run_tests`` / ``evaluate``: compare held-out labels with the tree's answers.
- ``enable_logging``: at the ``SPLIT`` level every chosen question is logged.
"""

from enum import Enum

from treekit import FeatureSchema, Record, build_tree, classify, enable_logging, evaluate, print_tree, run_tests


class Color(Enum):
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"


class Fruit(Enum):
    APPLE = "apple"
    LIME = "lime"
    LEMON = "lemon"
    GRAPE = "grape"


schema = FeatureSchema.of(equality=["color"], ordered=["size"])


def fruit(color: Color, size: int, label: Fruit) -> Record:
    return Record(values={"color": color, "size": size}, label=label)


training_data = [
    fruit(Color.RED, 50, Fruit.APPLE),
    fruit(Color.GREEN, 48, Fruit.APPLE),
    fruit(Color.GREEN, 30, Fruit.LIME),
    fruit(Color.YELLOW, 35, Fruit.LEMON),
    fruit(Color.RED, 5, Fruit.GRAPE),
    fruit(Color.GREEN, 6, Fruit.GRAPE),
]

test_data = [
    fruit(Color.RED, 55, Fruit.APPLE),
    fruit(Color.GREEN, 28, Fruit.LIME),
    fruit(Color.YELLOW, 40, Fruit.LEMON),
    fruit(Color.GREEN, 4, Fruit.GRAPE),
]

with enable_logging(level="SPLIT"):
    tree = build_tree(training_data, schema)

print_tree(tree)
run_tests(test_data, tree)

print(f"\nA small green fruit: {classify({'color': Color.GREEN, 'size': 7}, tree)}")
print(f"Accuracy on held-out fruit: {evaluate(test_data, tree).accuracy:.0%}")
