"""Tree traversal: classification, structural statistics, and text rendering."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import Any, TextIO

from treekit.schema import Record
from treekit.settings import get_settings
from treekit.tree.models import Decision, LabelDistribution, Leaf, TreeNode, format_value

# ---------------------------------------------------------------------------
# Public interface -- Classification
# ---------------------------------------------------------------------------


def classify(record: Record | Mapping[str, Any], tree: TreeNode) -> LabelDistribution:
    """Route a record down the tree and return the distribution of the leaf it reaches.

    Args:
        record (Record | Mapping[str, Any]): The record to classify; its label,
            if any, is ignored.
        tree (TreeNode): Root of a grown tree.

    Returns:
        LabelDistribution: A copy of the reached leaf's label counts.

    Raises:
        FeaturesNotFoundError: If the record lacks a feature tested on its path.
    """
    node = tree
    while isinstance(node, Decision):
        node = node.true_branch if node.question.matches(record) else node.false_branch
    return dict(node.distribution)


def predict(record: Record | Mapping[str, Any], tree: TreeNode) -> Any:
    """Return the most frequent label of the leaf `record` reaches.

    Count ties go to the label seen first during training.
    """
    distribution = classify(record, tree)
    return max(distribution, key=distribution.__getitem__)


# ---------------------------------------------------------------------------
# Public interface -- Structure
# ---------------------------------------------------------------------------


def tree_depth(tree: TreeNode) -> int:
    """Return the number of decisions on the longest root-to-leaf path."""
    if isinstance(tree, Leaf):
        return 0
    return 1 + max(tree_depth(tree.true_branch), tree_depth(tree.false_branch))


def leaf_count(tree: TreeNode) -> int:
    """Return the number of leaves in the tree."""
    if isinstance(tree, Leaf):
        return 1
    return leaf_count(tree.true_branch) + leaf_count(tree.false_branch)


# ---------------------------------------------------------------------------
# Public interface -- Rendering
# ---------------------------------------------------------------------------


def render(tree: TreeNode, indent: str = "", *, indent_unit: str | None = None) -> str:
    """Render a tree as indented text, depth-first, true branch before false.

    Decision nodes print their question followed by `--> True:` and
    `--> False:` headers, each branch indented one more level. Leaves print
    each label's share of the leaf as a percentage truncated to an integer.

    Args:
        tree (TreeNode): Root of the (sub)tree to render.
        indent (str): Prefix for the first line.
        indent_unit (str | None): Extra prefix per level. Defaults to
            `TreeKitSettings.render_indent`.

    Returns:
        str: The rendered tree, one line per question, header, or leaf.

    Raises:
        UnsupportedFeatureKindError: If a stored question has an unknown kind.

    Examples:
        >>> leaf = Leaf(distribution={"A": 2, "B": 1})
        >>> render(leaf)
        'A: 66%, B: 33%'
    """
    unit = get_settings().render_indent if indent_unit is None else indent_unit
    lines: list[str] = []
    _render_node(tree, indent, unit, lines)
    return "\n".join(lines)


def print_tree(tree: TreeNode, file: TextIO | None = None) -> None:
    """Write `render(tree)` to `file` (stdout by default)."""
    print(render(tree), file=file or sys.stdout)


def format_distribution(distribution: LabelDistribution) -> str:
    """Format label counts as `"LABEL: PCT%"` shares joined by commas.

    Examples:
        >>> format_distribution({"Apple": 1, "Lime": 3})
        'Apple: 25%, Lime: 75%'
    """
    total = sum(distribution.values())
    if not total:
        return ""
    return ", ".join(f"{format_value(label)}: {count * 100 // total}%" for label, count in distribution.items())


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _render_node(node: TreeNode, indent: str, unit: str, lines: list[str]) -> None:
    if isinstance(node, Leaf):
        lines.append(indent + format_distribution(node.distribution))
        return
    lines.append(f"{indent}{node.question}")
    lines.append(f"{indent}--> True:")
    _render_node(node.true_branch, indent + unit, unit, lines)
    lines.append(f"{indent}--> False:")
    _render_node(node.false_branch, indent + unit, unit, lines)
