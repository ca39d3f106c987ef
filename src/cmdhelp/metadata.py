"""Callbacks through which the binder describes options types to the renderer."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from .errors import MissingCollaboratorError
from .models import FormatStyle, Usage, VerbInfo
from .specifications import Specification


def _no_usage(_options_type: type) -> Usage | None:
    return None


@dataclass(frozen=True, slots=True)
class ParserMetadata:
    """Reflection and formatting collaborators supplied by the binder.

    ``specifications`` must not include the built-in help/version entries; the
    renderer appends those itself.
    """

    specifications: Callable[[type], Sequence[Specification]]
    verb_info: Callable[[type], VerbInfo] | None = None
    usage: Callable[[type], Usage | None] = _no_usage
    format_command_line: Callable[[Any, FormatStyle], str] | None = None

    def specifications_for(self, options_type: type) -> list[Specification]:
        return list(self.specifications(options_type))

    def verbs_for(self, verb_types: Sequence[type]) -> list[VerbInfo]:
        if self.verb_info is None:
            raise MissingCollaboratorError("verb_info")
        return [self.verb_info(verb_type) for verb_type in verb_types]

    def usage_for(self, options_type: type) -> Usage | None:
        return self.usage(options_type)

    def command_line_formatter(self) -> Callable[[Any, FormatStyle], str]:
        if self.format_command_line is None:
            raise MissingCollaboratorError("format_command_line")
        return self.format_command_line
