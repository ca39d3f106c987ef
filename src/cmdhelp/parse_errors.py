"""Parse errors reported by the argument binder.

The help renderer only classifies and formats these; it never creates them.
Each error kind is its own frozen dataclass tagged with a ``kind`` class
attribute.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    """Parse error categories."""

    BAD_FORMAT_TOKEN = "bad_format_token"
    MISSING_VALUE_OPTION = "missing_value_option"
    UNKNOWN_OPTION = "unknown_option"
    MISSING_REQUIRED_OPTION = "missing_required_option"
    MUTUALLY_EXCLUSIVE_SET = "mutually_exclusive_set"
    BAD_FORMAT_CONVERSION = "bad_format_conversion"
    SEQUENCE_OUT_OF_RANGE = "sequence_out_of_range"
    REPEATED_OPTION = "repeated_option"
    NO_VERB_SELECTED = "no_verb_selected"
    BAD_VERB_SELECTED = "bad_verb_selected"
    HELP_REQUESTED = "help_requested"
    HELP_VERB_REQUESTED = "help_verb_requested"
    VERSION_REQUESTED = "version_requested"


# Sentinel requests that end parsing without anything being wrong.
INFORMATIONAL_KINDS = frozenset(
    {
        ErrorKind.HELP_REQUESTED,
        ErrorKind.HELP_VERB_REQUESTED,
        ErrorKind.VERSION_REQUESTED,
    }
)


@dataclass(frozen=True, slots=True)
class NameInfo:
    """Short and long name of the option an error refers to."""

    short_name: str = ""
    long_name: str = ""

    @property
    def name_text(self) -> str:
        return self.long_name or self.short_name

    @property
    def is_empty(self) -> bool:
        return not self.short_name and not self.long_name


EMPTY_NAME = NameInfo()


@dataclass(frozen=True, slots=True)
class ParseError:
    """Base class for all parse errors."""

    kind: ClassVar[ErrorKind]

    @property
    def is_meaningful(self) -> bool:
        return self.kind not in INFORMATIONAL_KINDS


@dataclass(frozen=True, slots=True)
class BadFormatTokenError(ParseError):
    kind: ClassVar[ErrorKind] = ErrorKind.BAD_FORMAT_TOKEN
    token: str


@dataclass(frozen=True, slots=True)
class UnknownOptionError(ParseError):
    kind: ClassVar[ErrorKind] = ErrorKind.UNKNOWN_OPTION
    token: str


@dataclass(frozen=True, slots=True)
class BadVerbSelectedError(ParseError):
    kind: ClassVar[ErrorKind] = ErrorKind.BAD_VERB_SELECTED
    token: str


@dataclass(frozen=True, slots=True)
class MissingValueOptionError(ParseError):
    kind: ClassVar[ErrorKind] = ErrorKind.MISSING_VALUE_OPTION
    name: NameInfo


@dataclass(frozen=True, slots=True)
class MissingRequiredOptionError(ParseError):
    kind: ClassVar[ErrorKind] = ErrorKind.MISSING_REQUIRED_OPTION
    name: NameInfo = EMPTY_NAME


@dataclass(frozen=True, slots=True)
class BadFormatConversionError(ParseError):
    kind: ClassVar[ErrorKind] = ErrorKind.BAD_FORMAT_CONVERSION
    name: NameInfo = EMPTY_NAME


@dataclass(frozen=True, slots=True)
class SequenceOutOfRangeError(ParseError):
    kind: ClassVar[ErrorKind] = ErrorKind.SEQUENCE_OUT_OF_RANGE
    name: NameInfo = EMPTY_NAME


@dataclass(frozen=True, slots=True)
class RepeatedOptionError(ParseError):
    kind: ClassVar[ErrorKind] = ErrorKind.REPEATED_OPTION
    name: NameInfo


@dataclass(frozen=True, slots=True)
class MutuallyExclusiveSetError(ParseError):
    """Option supplied together with options from another exclusive set."""

    kind: ClassVar[ErrorKind] = ErrorKind.MUTUALLY_EXCLUSIVE_SET
    name: NameInfo
    set_name: str


@dataclass(frozen=True, slots=True)
class NoVerbSelectedError(ParseError):
    kind: ClassVar[ErrorKind] = ErrorKind.NO_VERB_SELECTED


@dataclass(frozen=True, slots=True)
class HelpRequestedError(ParseError):
    kind: ClassVar[ErrorKind] = ErrorKind.HELP_REQUESTED


@dataclass(frozen=True, slots=True)
class VersionRequestedError(ParseError):
    kind: ClassVar[ErrorKind] = ErrorKind.VERSION_REQUESTED


@dataclass(frozen=True, slots=True)
class HelpVerbRequestedError(ParseError):
    """``help <verb>`` request; ``verb_type`` is set when the verb matched."""

    kind: ClassVar[ErrorKind] = ErrorKind.HELP_VERB_REQUESTED
    verb: str = ""
    verb_type: type | None = None
    matched: bool = False


def only_meaningful(errors: Iterable[ParseError]) -> list[ParseError]:
    """Drop informational help/version requests."""
    return [error for error in errors if error.is_meaningful]


def has_kind(errors: Iterable[ParseError], kind: ErrorKind) -> bool:
    return any(error.kind is kind for error in errors)
