"""Option and positional value specifications consumed by the help renderer."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Any, Union

from .constants import LONG_NAME_PREFIX, NAME_SEPARATOR, SHORT_NAME_PREFIX
from .errors import InvalidSpecificationError
from .value_sets import ValueSet


@dataclass(frozen=True, slots=True)
class OptionSpecification:
    """One named option (``-s``/``--long``)."""

    short_name: str = ""
    long_name: str = ""
    required: bool = False
    meta_value: str = ""
    help_text: str = ""
    default_value: Any = None
    value_set_text: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.short_name and not self.long_name:
            raise InvalidSpecificationError("Option needs a short or a long name.")
        object.__setattr__(self, "value_set_text", tuple(self.value_set_text))

    @classmethod
    def switch(cls, long_name: str, help_text: str, short_name: str = "") -> "OptionSpecification":
        """Create an optional boolean switch without meta value."""
        return cls(short_name=short_name, long_name=long_name, help_text=help_text)


@dataclass(frozen=True, slots=True)
class ValueSpecification:
    """One positional value, bound by its index."""

    index: int
    meta_name: str = ""
    meta_value: str = ""
    help_text: str = ""
    required: bool = False
    default_value: Any = None
    value_set_text: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int) or self.index < 0:
            raise InvalidSpecificationError(
                f"Value index must be a non-negative integer, got {self.index!r}."
            )
        object.__setattr__(self, "value_set_text", tuple(self.value_set_text))


Specification = Union[OptionSpecification, ValueSpecification]


def with_value_set(specification: Specification, value_set: ValueSet) -> Specification:
    """Return a copy of ``specification`` describing the allowed values."""
    return replace(specification, value_set_text=value_set.description)


def order_for_rendering(
    specifications: Iterable[Specification],
    trailing: Sequence[OptionSpecification] = (),
) -> list[Specification]:
    """Order specifications the way the options block lists them.

    Options keep declaration order and are followed by ``trailing`` entries;
    positional values come last, sorted by index.
    """
    options: list[Specification] = []
    values: list[ValueSpecification] = []
    seen_indexes: set[int] = set()

    for specification in specifications:
        if isinstance(specification, ValueSpecification):
            if specification.index in seen_indexes:
                raise InvalidSpecificationError(
                    f"Duplicate value index: {specification.index}."
                )
            seen_indexes.add(specification.index)
            values.append(specification)
        else:
            options.append(specification)

    options.extend(trailing)
    values.sort(key=lambda value: value.index)
    return [*options, *values]


def option_label(specification: OptionSpecification, add_dashes: bool) -> str:
    """Return ``-s META, --long=META`` (dashes optional)."""
    parts: list[str] = []
    if specification.short_name:
        short_part = (SHORT_NAME_PREFIX if add_dashes else "") + specification.short_name
        if specification.meta_value:
            short_part += f" {specification.meta_value}"
        parts.append(short_part)
    if specification.long_name:
        long_part = (LONG_NAME_PREFIX if add_dashes else "") + specification.long_name
        if specification.meta_value:
            long_part += f"={specification.meta_value}"
        parts.append(long_part)
    return NAME_SEPARATOR.join(parts)


def value_label(specification: ValueSpecification) -> str:
    """Return ``NAME (pos. N)`` or ``value pos. N``, followed by the meta value."""
    if specification.meta_name:
        label = f"{specification.meta_name} (pos. {specification.index})"
    else:
        label = f"value pos. {specification.index}"
    if specification.meta_value:
        label += f" {specification.meta_value}"
    return label


def specification_label(specification: Specification, add_dashes: bool) -> str:
    if isinstance(specification, ValueSpecification):
        return value_label(specification)
    return option_label(specification, add_dashes)
