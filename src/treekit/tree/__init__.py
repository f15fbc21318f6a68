"""Decision tree sub-package: models, impurity, split search, fitting, and inference."""

from __future__ import annotations

from treekit.tree.fitting import build_tree
from treekit.tree.impurity import gini_impurity, information_gain
from treekit.tree.inference import (
    classify,
    format_distribution,
    leaf_count,
    predict,
    print_tree,
    render,
    tree_depth,
)
from treekit.tree.models import (
    Decision,
    LabelDistribution,
    Leaf,
    Question,
    TreeNode,
    label_counts,
)
from treekit.tree.splitting import SplitResult, candidate_questions, find_best_split, partition

__all__ = [
    "Decision",
    "LabelDistribution",
    "Leaf",
    "Question",
    "SplitResult",
    "TreeNode",
    "build_tree",
    "candidate_questions",
    "classify",
    "find_best_split",
    "format_distribution",
    "gini_impurity",
    "information_gain",
    "label_counts",
    "leaf_count",
    "partition",
    "predict",
    "print_tree",
    "render",
    "tree_depth",
]
