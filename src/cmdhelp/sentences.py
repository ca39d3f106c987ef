"""Localizable sentences used while rendering help.

``SentenceBuilder`` itself provides the English texts. Subclass it and
override methods to localize.
"""

from __future__ import annotations

from collections.abc import Iterable

from . import constants
from .parse_errors import (
    BadFormatConversionError,
    BadFormatTokenError,
    BadVerbSelectedError,
    MissingRequiredOptionError,
    MissingValueOptionError,
    MutuallyExclusiveSetError,
    NoVerbSelectedError,
    ParseError,
    RepeatedOptionError,
    SequenceOutOfRangeError,
    UnknownOptionError,
)


class SentenceBuilder:
    """Default (English) provider of fixed help sentences."""

    def required_word(self) -> str:
        return constants.REQUIRED_WORD

    def help_command_text(self, add_dashes_to_option: bool) -> str:
        if add_dashes_to_option:
            return constants.HELP_COMMAND_TEXT
        return constants.HELP_VERB_COMMAND_TEXT

    def version_command_text(self, add_dashes_to_option: bool) -> str:
        return constants.VERSION_COMMAND_TEXT

    def usage_heading_text(self) -> str:
        return constants.USAGE_HEADING_TEXT

    def errors_heading_text(self) -> str:
        return constants.ERRORS_HEADING_TEXT

    def format_error(self, error: ParseError) -> str:
        """Return the one-line message for a single parse error."""
        if isinstance(error, BadFormatTokenError):
            return f"Token '{error.token}' is not recognized."
        if isinstance(error, MissingValueOptionError):
            return f"Option '{error.name.name_text}' has no value."
        if isinstance(error, UnknownOptionError):
            return f"Option '{error.token}' is unknown."
        if isinstance(error, MissingRequiredOptionError):
            if error.name.is_empty:
                return "A required value not bound to option name is missing."
            return f"Required option '{error.name.name_text}' is missing."
        if isinstance(error, BadFormatConversionError):
            if error.name.is_empty:
                return "A value not bound to option name is defined with a bad format."
            return f"Option '{error.name.name_text}' is defined with a bad format."
        if isinstance(error, SequenceOutOfRangeError):
            if error.name.is_empty:
                return "A sequence value not bound to option name is defined with fewer items than required."
            return (
                f"A sequence option '{error.name.name_text}' is defined "
                "with fewer or more items than required."
            )
        if isinstance(error, BadVerbSelectedError):
            return f"Verb '{error.token}' is not recognized."
        if isinstance(error, NoVerbSelectedError):
            return "No verb selected."
        if isinstance(error, RepeatedOptionError):
            return f"Option '{error.name.name_text}' is defined multiple times."
        if isinstance(error, MutuallyExclusiveSetError):
            return f"Option '{error.name.name_text}' conflicts with set '{error.set_name}'."
        return ""

    def format_mutually_exclusive_set_errors(
        self, errors: Iterable[MutuallyExclusiveSetError]
    ) -> str:
        """Describe exclusivity violations, one line per exclusive set."""
        by_set: dict[str, list[str]] = {}
        for error in errors:
            names = by_set.setdefault(error.set_name, [])
            if error.name.name_text not in names:
                names.append(error.name.name_text)

        lines: list[str] = []
        for set_name, names in by_set.items():
            incompatible: list[str] = []
            for other_set, other_names in by_set.items():
                if other_set == set_name:
                    continue
                incompatible.extend(name for name in other_names if name not in incompatible)

            subject = "Options" if len(names) > 1 else "Option"
            verb = "are" if len(names) > 1 else "is"
            quoted = ", ".join(f"'{name}'" for name in names)
            if incompatible:
                others = ", ".join(f"'{name}'" for name in incompatible)
                lines.append(f"{subject}: {quoted} {verb} not compatible with: {others}.")
            else:
                lines.append(f"{subject}: {quoted} {verb} mutually exclusive.")

        return "\n".join(lines)
