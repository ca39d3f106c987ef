"""Dataclasses shared between the binder contract and the help renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .parse_errors import ParseError


@dataclass(frozen=True, slots=True)
class FormatStyle:
    """How one usage example command line is reconstructed."""

    prefer_short_name: bool = False
    group_switches: bool = False
    use_equal_token: bool = False


DEFAULT_FORMAT_STYLES = (FormatStyle(),)


@dataclass(frozen=True, slots=True)
class Example:
    """A usage example: description plus a populated options sample."""

    help_text: str
    sample: Any
    format_styles: tuple[FormatStyle, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "format_styles", tuple(self.format_styles))

    def format_styles_or_default(self) -> tuple[FormatStyle, ...]:
        return self.format_styles or DEFAULT_FORMAT_STYLES


@dataclass(frozen=True, slots=True)
class Usage:
    """Usage examples declared for an options type."""

    examples: tuple[Example, ...] = ()
    application_alias: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "examples", tuple(self.examples))


@dataclass(frozen=True, slots=True)
class VerbInfo:
    name: str
    help_text: str = ""


@dataclass(frozen=True, slots=True)
class TypeInfo:
    """Options type being parsed plus the verb types it could have been."""

    current: type
    choices: tuple[type, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "choices", tuple(self.choices))


@dataclass(frozen=True, slots=True)
class Parsed:
    type_info: TypeInfo
    value: Any


@dataclass(frozen=True, slots=True)
class NotParsed:
    type_info: TypeInfo
    errors: tuple[ParseError, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))


ParserResult = Union[Parsed, NotParsed]
