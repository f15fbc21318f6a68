"""Custom exceptions for treekit.

This module defines the errors raised while declaring schemas, loading
records, and growing or walking a decision tree. All of them subclass
`ValueError` so callers may catch either the specific class or the
builtin:

- FeaturesNotFoundError: Raised when a record or DataFrame lacks schema features.
- DuplicateFeaturesError: Raised when a schema declares the same feature twice.
- EmptyTrainingSetError: Raised when a tree is requested from zero records.
- UnsupportedFeatureKindError: Raised when a question carries a comparison kind
  the engine cannot evaluate.
- UnsupportedColumnTypeError: Raised when a DataFrame column dtype has no
  feature kind.
"""

from __future__ import annotations


class FeaturesNotFoundError(ValueError):
    """Raised when schema features are missing from a record or DataFrame.

    Attributes:
        missing_features (list[str]): Feature names that were not found.
        available_features (list[str]): Feature names that were present.

    Examples:
        >>> err = FeaturesNotFoundError(
        ...     missing_features=["size"],
        ...     available_features=["color"],
        ... )
        >>> err.missing_features
        ['size']
        >>> str(err)
        "Features not found: ['size']"
    """

    missing_features: list[str]
    available_features: list[str]

    def __init__(
        self,
        missing_features: list[str],
        available_features: list[str],
    ) -> None:
        """Initialize FeaturesNotFoundError.

        Args:
            missing_features (list[str]): Feature names that were not found.
            available_features (list[str]): Feature names that were present.
        """
        super().__init__(f"Features not found: {sorted(missing_features)}")
        self.missing_features = missing_features
        self.available_features = available_features


class DuplicateFeaturesError(ValueError):
    """Raised when a feature schema declares the same name more than once.

    Attributes:
        features (list[str]): The declared feature names, in order.
        duplicate_features (list[str]): Names that appear more than once
            (each listed once).

    Examples:
        >>> err = DuplicateFeaturesError(features=["color", "color", "size"])
        >>> err.duplicate_features
        ['color']
    """

    features: list[str]
    duplicate_features: list[str]

    def __init__(self, features: list[str]) -> None:
        """Initialize DuplicateFeaturesError.

        Args:
            features (list[str]): The declared feature names containing duplicates.
        """
        super().__init__("Duplicate feature names are not allowed")
        self.features = features
        seen: set[str] = set()
        self.duplicate_features = []
        for name in features:
            if name in seen and name not in self.duplicate_features:
                self.duplicate_features.append(name)
            seen.add(name)


class EmptyTrainingSetError(ValueError):
    """Raised when a decision tree is requested from an empty training set."""

    def __init__(self) -> None:
        """Initialize EmptyTrainingSetError."""
        super().__init__("Cannot build a decision tree from an empty training set")


class UnsupportedFeatureKindError(ValueError):
    """Raised when a feature kind is neither `"equality"` nor `"ordered"`.

    Attributes:
        feature (str): Name of the feature carrying the kind.
        kind (object): The unrecognized kind value.

    Examples:
        >>> err = UnsupportedFeatureKindError(feature="color", kind="fuzzy")
        >>> str(err)
        "Unsupported feature kind 'fuzzy' for feature 'color'"
    """

    feature: str
    kind: object

    def __init__(self, feature: str, kind: object) -> None:
        """Initialize UnsupportedFeatureKindError.

        Args:
            feature (str): Name of the feature carrying the kind.
            kind (object): The unrecognized kind value.
        """
        super().__init__(f"Unsupported feature kind {kind!r} for feature {feature!r}")
        self.feature = feature
        self.kind = kind


class UnsupportedColumnTypeError(ValueError):
    """Raised when a DataFrame column's dtype cannot be mapped to a feature kind.

    Attributes:
        column (str): The offending column name.
        dtype (str): String form of the column's dtype.
    """

    column: str
    dtype: str

    def __init__(self, column: str, dtype: str) -> None:
        """Initialize UnsupportedColumnTypeError.

        Args:
            column (str): The offending column name.
            dtype (str): String form of the column's dtype.
        """
        super().__init__(f"Column {column!r} has dtype {dtype} which cannot be used as a feature")
        self.column = column
        self.dtype = dtype
