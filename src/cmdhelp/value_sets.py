"""Valid-value resolution for option arguments.

A value set pairs a predicate ("is this candidate acceptable") with the lines
that describe the acceptable values in help output. Sources are either the
explicit variants below or a class exposing one of two capabilities:

- iteration over a small fixed set of values (``__iter__``), or
- an ``is_valid(value)`` method for open or very large sets.

Enum classes are accepted directly and enumerate their members.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .errors import InvalidValueSetSourceError, ValueSetSourceNotConstructibleError

logger = logging.getLogger(__name__)

# Class attribute (or instance attribute) a source type may use to describe itself.
SELF_DESCRIPTION_ATTRIBUTE = "valid_values_text"


@dataclass(frozen=True, slots=True)
class ValueSet:
    """Resolved predicate plus human-readable description of allowed values."""

    predicate: Callable[[Any], bool]
    description: tuple[str, ...] = ()

    def is_valid(self, value: Any) -> bool:
        return bool(self.predicate(value))


@dataclass(frozen=True, slots=True)
class FiniteValues:
    """Closed set of candidate values, optionally with explicit description lines."""

    values: tuple[Any, ...]
    text: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))
        if self.text is not None:
            object.__setattr__(self, "text", tuple(self.text))


@dataclass(frozen=True, slots=True)
class CustomValues:
    """Open set defined by a predicate; ``text`` describes it since nothing enumerates."""

    predicate: Callable[[Any], bool]
    text: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", tuple(self.text))


ValueSetSource = Union[FiniteValues, CustomValues, type]


def value_to_text(value: Any) -> str:
    """Return the display form of one allowed value."""
    if isinstance(value, Enum):
        return value.name
    return str(value)


def resolve(source: ValueSetSource, text: Iterable[str] | None = None) -> ValueSet:
    """Resolve a value-set source into a predicate and description.

    Class sources are instantiated once per class and description; later calls
    return the same value set.

    Args:
        source: ``FiniteValues``, ``CustomValues`` or a capability-bearing class
        text: Caller-supplied description, overriding every other source of text

    Raises:
        InvalidValueSetSourceError: If the source neither enumerates nor validates
        ValueSetSourceNotConstructibleError: If a source class needs constructor arguments
    """
    explicit = None if text is None else tuple(text)

    if isinstance(source, FiniteValues):
        return _finite_value_set(source.values, _first_text(explicit, source.text))

    if isinstance(source, CustomValues):
        return ValueSet(
            predicate=source.predicate,
            description=_first_text(explicit, source.text) or (),
        )

    if isinstance(source, type):
        return _resolve_type(source, explicit)

    raise InvalidValueSetSourceError(
        f"Unsupported value-set source: {type(source).__name__}."
    )


@functools.lru_cache(maxsize=None)
def _resolve_type(source_type: type, explicit: tuple[str, ...] | None) -> ValueSet:
    if issubclass(source_type, Enum):
        logger.debug("Resolving value set from enum %s", source_type.__name__)
        return _finite_value_set(tuple(source_type), explicit)

    validates = callable(getattr(source_type, "is_valid", None))
    enumerates = callable(getattr(source_type, "__iter__", None))
    if not (validates or enumerates):
        raise InvalidValueSetSourceError(
            f"{source_type.__name__} must be iterable or define is_valid(value)."
        )

    try:
        instance = source_type()
    except TypeError as exc:
        raise ValueSetSourceNotConstructibleError(source_type) from exc

    description = _first_text(explicit, _self_description(instance))

    if validates:
        logger.debug("Resolving custom value set from %s", source_type.__name__)
        if description is None and enumerates:
            description = tuple(value_to_text(value) for value in instance)
        return ValueSet(predicate=instance.is_valid, description=description or ())

    logger.debug("Resolving finite value set from %s", source_type.__name__)
    return _finite_value_set(tuple(instance), description)


def _finite_value_set(values: tuple[Any, ...], description: tuple[str, ...] | None) -> ValueSet:
    try:
        members = frozenset(values)
    except TypeError as exc:
        raise InvalidValueSetSourceError("Value-set members must be hashable.") from exc

    def is_member(value: Any) -> bool:
        try:
            return value in members
        except TypeError:
            # Unhashable candidates cannot be members.
            return False

    if description is None:
        description = tuple(value_to_text(value) for value in values)
    return ValueSet(predicate=is_member, description=description)


def _self_description(instance: Any) -> tuple[str, ...] | None:
    describe = getattr(instance, "describe", None)
    if callable(describe):
        return _as_text(describe())
    return _as_text(getattr(instance, SELF_DESCRIPTION_ATTRIBUTE, None))


def _as_text(value: Any) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    return tuple(str(line) for line in value)


def _first_text(*candidates: tuple[str, ...] | None) -> tuple[str, ...] | None:
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None
