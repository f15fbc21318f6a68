"""Runtime feature schemas and the record type they describe."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Annotated, Any, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer

from treekit.exceptions import DuplicateFeaturesError, FeaturesNotFoundError

type FeatureKind = Literal["equality", "ordered"]
"""How a feature is compared: `==` for categorical, `>=` for numeric."""


def _read_only(values: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(values))


def _as_dict(values: Mapping[str, Any]) -> dict[str, Any]:
    return dict(values)


FeatureValues = Annotated[Mapping[str, Any], AfterValidator(_read_only), PlainSerializer(_as_dict)]
"""Read-only feature-name to value mapping; serialized as a plain `dict`."""


class FeatureSpec(BaseModel):
    """A single feature declaration: its name and comparison kind.

    Attributes:
        name (str): Feature identifier, used as the key in `Record.values`.
        kind (FeatureKind): `"equality"` for categorical features compared
            with `==`, `"ordered"` for numeric features compared with `>=`.

    Examples:
        >>> FeatureSpec(name="size", kind="ordered")
        FeatureSpec(name='size', kind='ordered')
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Feature identifier.")
    kind: FeatureKind = Field(description='Comparison kind: "equality" or "ordered".')


class FeatureSchema:
    """An ordered, immutable set of feature declarations.

    The order of features is the order in which split search visits them,
    which decides ties between equally good questions.

    Args:
        features (Iterable[FeatureSpec]): Feature declarations, in order.

    Raises:
        ValueError: If no features are declared.
        DuplicateFeaturesError: If a feature name is declared twice.

    Examples:
        >>> schema = FeatureSchema.of(equality=["color"], ordered=["size"])
        >>> schema.names
        ('color', 'size')
        >>> schema.kind_of("size")
        'ordered'
    """

    __slots__ = ("_features", "_kinds")

    def __init__(self, features: Iterable[FeatureSpec]) -> None:
        specs = tuple(features)
        if not specs:
            raise ValueError("A feature schema needs at least one feature")
        names = [spec.name for spec in specs]
        if len(set(names)) != len(names):
            raise DuplicateFeaturesError(features=names)
        self._features: tuple[FeatureSpec, ...] = specs
        self._kinds: dict[str, FeatureKind] = {spec.name: spec.kind for spec in specs}

    @classmethod
    def of(
        cls,
        *,
        equality: Sequence[str] = (),
        ordered: Sequence[str] = (),
    ) -> FeatureSchema:
        """Build a schema from name lists, equality features first.

        Args:
            equality (Sequence[str]): Names of categorical features.
            ordered (Sequence[str]): Names of numeric features.

        Returns:
            FeatureSchema: The declared schema.
        """
        specs = [FeatureSpec(name=name, kind="equality") for name in equality]
        specs.extend(FeatureSpec(name=name, kind="ordered") for name in ordered)
        return cls(specs)

    @property
    def features(self) -> tuple[FeatureSpec, ...]:
        """Feature declarations in search order."""
        return self._features

    @property
    def names(self) -> tuple[str, ...]:
        """Feature names in search order."""
        return tuple(spec.name for spec in self._features)

    def kind_of(self, name: str) -> FeatureKind:
        """Return the comparison kind declared for `name`.

        Raises:
            FeaturesNotFoundError: If `name` is not part of the schema.
        """
        try:
            return self._kinds[name]
        except KeyError:
            raise FeaturesNotFoundError(missing_features=[name], available_features=list(self._kinds)) from None

    def validate_record(self, record: Record) -> None:
        """Check that `record` carries a value for every schema feature.

        Raises:
            FeaturesNotFoundError: If any schema feature is missing.
        """
        missing = [name for name in self._kinds if name not in record.values]
        if missing:
            raise FeaturesNotFoundError(missing_features=missing, available_features=list(record.values))

    def validate_records(self, records: Iterable[Record]) -> None:
        """Run `validate_record` over every record."""
        for record in records:
            self.validate_record(record)

    def __iter__(self) -> Iterator[FeatureSpec]:
        return iter(self._features)

    def __len__(self) -> int:
        return len(self._features)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FeatureSchema):
            return NotImplemented
        return self._features == other._features

    def __hash__(self) -> int:
        return hash(self._features)

    def __repr__(self) -> str:
        inner = ", ".join(f"{spec.name}:{spec.kind}" for spec in self._features)
        return f"FeatureSchema({inner})"


class Record(BaseModel):
    """One labelled data point.

    Records are immutable values; two records with the same feature values and
    label are equal and hash equal. Feature values and labels must be hashable.

    Attributes:
        values (Mapping[str, Any]): Read-only mapping of feature name to value.
            Built from a copy of the input, so later changes to the caller's
            dict do not reach the record.
        label (Any): The class label, e.g. a string or an `Enum` member.

    Examples:
        >>> a = Record(values={"color": "Red"}, label="Apple")
        >>> a == Record(values={"color": "Red"}, label="Apple")
        True
        >>> a["color"]
        'Red'
    """

    model_config = ConfigDict(frozen=True)

    values: FeatureValues = Field(description="Read-only mapping of feature name to feature value.")
    label: Any = Field(description="The class label of this record.")

    def __getitem__(self, feature: str) -> Any:
        return self.values[feature]

    def __hash__(self) -> int:
        return hash((frozenset(self.values.items()), self.label))
