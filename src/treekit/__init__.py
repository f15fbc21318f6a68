"""treekit: Gini decision-tree classification over caller-declared feature schemas."""

from loguru import logger

from treekit.dataframe import infer_schema, records_from_dataframe
from treekit.evaluation import EvaluationReport, Prediction, evaluate, run_tests
from treekit.logging import PACKAGE_NAME, enable_logging
from treekit.schema import FeatureKind, FeatureSchema, FeatureSpec, Record
from treekit.settings import TreeKitSettings, get_settings
from treekit.tree import (
    Decision,
    Leaf,
    Question,
    TreeNode,
    build_tree,
    classify,
    predict,
    print_tree,
    render,
)

logger.disable(PACKAGE_NAME)  # noqa: RUF067 - Disable logging for the treekit package by default

__all__ = [
    "Decision",
    "EvaluationReport",
    "FeatureKind",
    "FeatureSchema",
    "FeatureSpec",
    "Leaf",
    "Prediction",
    "Question",
    "Record",
    "TreeKitSettings",
    "TreeNode",
    "build_tree",
    "classify",
    "enable_logging",
    "evaluate",
    "get_settings",
    "infer_schema",
    "predict",
    "print_tree",
    "records_from_dataframe",
    "render",
    "run_tests",
]
