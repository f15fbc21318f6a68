"""Polars ingestion: schema inference from column dtypes and record extraction from rows."""

from __future__ import annotations

import polars as pl

from treekit.exceptions import FeaturesNotFoundError, UnsupportedColumnTypeError
from treekit.schema import FeatureKind, FeatureSchema, FeatureSpec, Record

# ---------------------------------------------------------------------------
# Private helpers -- Column kind classification
# ---------------------------------------------------------------------------

_DTYPE_TO_FEATURE_KIND: dict[type[pl.DataType] | pl.DataType, FeatureKind] = {
    pl.Int8: "ordered",
    pl.Int16: "ordered",
    pl.Int32: "ordered",
    pl.Int64: "ordered",
    pl.UInt8: "ordered",
    pl.UInt16: "ordered",
    pl.UInt32: "ordered",
    pl.UInt64: "ordered",
    pl.Float32: "ordered",
    pl.Float64: "ordered",
    pl.Boolean: "equality",
    pl.String: "equality",
    pl.Categorical: "equality",
}


def _feature_kind(column: str, dtype: pl.DataType) -> FeatureKind:
    """Map a Polars dtype to the comparison kind used for the feature.

    The lookup map is keyed by bare dtype classes; parameterized instances
    such as `Enum([...])` or `Datetime("us")` fall through to the
    `isinstance` checks.

    Args:
        column (str): Column name, used in the error message.
        dtype (pl.DataType): The column's dtype.

    Returns:
        FeatureKind: `"ordered"` for numeric and temporal columns, `"equality"`
            for boolean and categorical columns.

    Raises:
        UnsupportedColumnTypeError: For nested, binary, or otherwise
            unsupported dtypes.
    """
    kind = _DTYPE_TO_FEATURE_KIND.get(dtype)
    if kind is not None:
        return kind
    if isinstance(dtype, (pl.Enum, pl.Categorical, pl.String, pl.Boolean)):
        return "equality"
    if dtype.is_numeric() or isinstance(dtype, (pl.Datetime, pl.Date, pl.Time, pl.Duration)):
        return "ordered"
    raise UnsupportedColumnTypeError(column=column, dtype=str(dtype))


def _check_columns(df: pl.DataFrame, columns: list[str]) -> None:
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise FeaturesNotFoundError(missing_features=missing, available_features=list(df.columns))


# ---------------------------------------------------------------------------
# Public interface
# ---------------------------------------------------------------------------


def infer_schema(
    df: pl.DataFrame,
    target: str,
    *,
    features: list[str] | None = None,
) -> FeatureSchema:
    """Infer a feature schema from DataFrame column dtypes.

    Args:
        df (pl.DataFrame): Source data.
        target (str): Label column; never part of the schema.
        features (list[str] | None): Feature columns, in search order. When
            `None`, every column except `target` is used in DataFrame order.

    Returns:
        FeatureSchema: One feature per selected column.

    Raises:
        FeaturesNotFoundError: If `target` or a requested feature is not a column.
        UnsupportedColumnTypeError: If a selected column has no feature kind.
        ValueError: If no feature columns remain.

    Examples:
        >>> df = pl.DataFrame({"color": ["Red"], "size": [3], "fruit": ["Apple"]})
        >>> infer_schema(df, "fruit").names
        ('color', 'size')
    """
    feature_columns = features if features is not None else [col for col in df.columns if col != target]
    _check_columns(df, [target, *feature_columns])
    specs = [
        FeatureSpec(name=col, kind=_feature_kind(col, df.schema[col])) for col in feature_columns if col != target
    ]
    return FeatureSchema(specs)


def records_from_dataframe(df: pl.DataFrame, schema: FeatureSchema, target: str) -> list[Record]:
    """Convert each DataFrame row into a `Record` over the schema's features.

    Args:
        df (pl.DataFrame): Source data.
        schema (FeatureSchema): Features to copy into each record.
        target (str): Column holding the label.

    Returns:
        list[Record]: One record per row, in row order.

    Raises:
        FeaturesNotFoundError: If `target` or a schema feature is not a column.
    """
    names = list(schema.names)
    _check_columns(df, [*names, target])
    return [
        Record(values={name: row[name] for name in names}, label=row[target])
        for row in df.select(list(dict.fromkeys([*names, target]))).iter_rows(named=True)
    ]
