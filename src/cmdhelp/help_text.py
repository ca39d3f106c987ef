"""Help screen renderer.

``HelpText`` accumulates the sections of one help document (heading,
copyright, lines before and after the options block, and the options block
itself) and joins them on ``str()``. An instance belongs to a single render;
build a new one for every screen.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from typing import Any

from .constants import (
    DEFAULT_MAXIMUM_DISPLAY_WIDTH,
    HELP_ENTRY_NAME,
    OPTION_COLUMN_OVERHEAD,
    OPTION_LABEL_GAP,
    OPTION_LEFT_MARGIN,
    USAGE_INDENT,
    VALID_VALUES_PREFIX,
    VALID_VALUES_SEPARATOR,
    VERSION_ENTRY_NAME,
)
from .errors import InvalidSpecificationError
from .models import Example, FormatStyle, Usage, VerbInfo
from .parse_errors import MutuallyExclusiveSetError, ParseError, only_meaningful
from .sentences import SentenceBuilder
from .specifications import (
    OptionSpecification,
    Specification,
    order_for_rendering,
    specification_label,
)
from .value_sets import value_to_text
from .wrapping import wrap, wrap_indented


class HelpText:
    """Mutable help document for one render."""

    def __init__(
        self,
        heading: str = "",
        copyright: str = "",
        sentence_builder: SentenceBuilder | None = None,
        *,
        maximum_display_width: int = DEFAULT_MAXIMUM_DISPLAY_WIDTH,
        add_dashes_to_option: bool = False,
        additional_new_line_after_option: bool = False,
        add_value_set_text: bool = False,
    ) -> None:
        self.heading = heading
        self.copyright = copyright
        self.sentence_builder = sentence_builder or SentenceBuilder()
        self.maximum_display_width = maximum_display_width
        self.add_dashes_to_option = add_dashes_to_option
        self.additional_new_line_after_option = additional_new_line_after_option
        self.add_value_set_text = add_value_set_text
        self._pre_options_lines: list[str] = []
        self._options_lines: list[str] = []
        self._post_options_lines: list[str] = []

    @property
    def pre_options_lines(self) -> tuple[str, ...]:
        return tuple(self._pre_options_lines)

    @property
    def post_options_lines(self) -> tuple[str, ...]:
        return tuple(self._post_options_lines)

    @property
    def options_block(self) -> str:
        return "".join(f"{line}\n" for line in self._options_lines)

    def add_pre_options_line(self, value: str) -> "HelpText":
        """Add a line between copyright and options, wrapped to the display width."""
        self._pre_options_lines.extend(self._wrap_block(value))
        return self

    def add_pre_options_lines(self, lines: Iterable[str]) -> "HelpText":
        for line in lines:
            self.add_pre_options_line(line)
        return self

    def add_pre_options_text(self, text: str) -> "HelpText":
        return self.add_pre_options_lines(text.split("\n"))

    def add_post_options_line(self, value: str) -> "HelpText":
        """Add a line after the options block, wrapped to the display width."""
        self._post_options_lines.extend(self._wrap_block(value))
        return self

    def add_post_options_lines(self, lines: Iterable[str]) -> "HelpText":
        for line in lines:
            self.add_post_options_line(line)
        return self

    def add_post_options_text(self, text: str) -> "HelpText":
        return self.add_post_options_lines(text.split("\n"))

    def add_options(self, specifications: Iterable[Specification]) -> "HelpText":
        """Render the options block; built-in help/version entries are appended."""
        ordered = order_for_rendering(specifications, trailing=self._builtin_entries())
        return self._set_options_block(ordered)

    def add_verbs(self, verbs: Sequence[VerbInfo]) -> "HelpText":
        """Render verbs as dashless switches followed by help/version entries."""
        if not verbs:
            raise InvalidSpecificationError("At least one verb is required.")
        switches = [OptionSpecification.switch(verb.name, verb.help_text) for verb in verbs]
        return self._set_options_block([*switches, *self._builtin_entries()])

    def __str__(self) -> str:
        sections: list[str] = []
        if self.heading:
            sections.append(self.heading)
        if self.copyright:
            sections.append(self.copyright)
        if self._pre_options_lines:
            sections.append("\n".join(self._pre_options_lines))
        if self._options_lines:
            # Blank line between the preceding sections and the options block.
            sections.append(f"\n{self.options_block}" if sections else self.options_block)
        if self._post_options_lines:
            sections.append("\n".join(self._post_options_lines))
        return "\n".join(sections)

    def _wrap_block(self, value: str) -> list[str]:
        lines: list[str] = []
        for raw_line in value.split("\n"):
            lines.extend(wrap_indented(raw_line.rstrip("\r"), self.maximum_display_width))
        return lines

    def _builtin_entries(self) -> list[OptionSpecification]:
        return [
            OptionSpecification.switch(
                HELP_ENTRY_NAME,
                self.sentence_builder.help_command_text(self.add_dashes_to_option),
            ),
            OptionSpecification.switch(
                VERSION_ENTRY_NAME,
                self.sentence_builder.version_command_text(self.add_dashes_to_option),
            ),
        ]

    def _set_options_block(self, specifications: Sequence[Specification]) -> "HelpText":
        labels = [specification_label(spec, self.add_dashes_to_option) for spec in specifications]
        label_width = max((len(label) for label in labels), default=0)
        help_width = max(self.maximum_display_width - (label_width + OPTION_COLUMN_OVERHEAD), 1)
        continuation_prefix = " " * (label_width + OPTION_COLUMN_OVERHEAD)
        required_word = self.sentence_builder.required_word()

        lines: list[str] = []
        for specification, label in zip(specifications, labels):
            help_lines = wrap(self._compose_help_text(specification, required_word), help_width)
            first_line = help_lines[0] if help_lines else ""
            lines.append(f"{OPTION_LEFT_MARGIN}{label.ljust(label_width)}{OPTION_LABEL_GAP}{first_line}")
            lines.extend(f"{continuation_prefix}{line}" for line in help_lines[1:])
            if self.additional_new_line_after_option:
                lines.append("")

        self._options_lines = lines
        return self

    def _compose_help_text(self, specification: Specification, required_word: str) -> str:
        text = specification.help_text
        if self.add_value_set_text and specification.value_set_text:
            text += VALID_VALUES_PREFIX + VALID_VALUES_SEPARATOR.join(specification.value_set_text)
        if specification.default_value is not None:
            text = f"(Default: {format_default_value(specification.default_value)}) {text}"
        if specification.required:
            text = f"{required_word} {text}"
        return text


def format_default_value(value: Any) -> str:
    """Render a default value the way it is shown after ``(Default: ``."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, str):
        return value
    if isinstance(value, Iterable):
        return " ".join(value_to_text(item) for item in value)
    return str(value)


def render_parsing_errors_text_as_lines(
    errors: Iterable[ParseError],
    format_error: Callable[[ParseError], str],
    format_mutually_exclusive_set_errors: Callable[[list[MutuallyExclusiveSetError]], str],
    indent: int,
) -> list[str]:
    """Format meaningful errors; exclusivity violations follow as one group."""
    meaningful = only_meaningful(errors)
    if not meaningful:
        return []

    prefix = " " * indent
    lines = [
        prefix + format_error(error)
        for error in meaningful
        if not isinstance(error, MutuallyExclusiveSetError)
    ]

    exclusive = [error for error in meaningful if isinstance(error, MutuallyExclusiveSetError)]
    if exclusive:
        group_text = format_mutually_exclusive_set_errors(exclusive)
        if group_text:
            lines.extend(group_text.split("\n"))
    return lines


def render_parsing_errors_text(
    errors: Iterable[ParseError],
    format_error: Callable[[ParseError], str],
    format_mutually_exclusive_set_errors: Callable[[list[MutuallyExclusiveSetError]], str],
    indent: int,
) -> str:
    return "\n".join(
        render_parsing_errors_text_as_lines(
            errors, format_error, format_mutually_exclusive_set_errors, indent
        )
    )


def render_usage_text_as_lines(
    usage: Usage | None,
    format_command_line: Callable[[Any, FormatStyle], str],
    program_name: str = "",
    on_example: Callable[[Example], Example] | None = None,
) -> list[str]:
    """Render usage examples: a description line, then one command line per style."""
    if usage is None:
        return []

    alias = usage.application_alias or program_name
    lines: list[str] = []
    for example in usage.examples:
        if on_example is not None:
            example = on_example(example)
        lines.append(f"{example.help_text}:")
        for style in example.format_styles_or_default():
            command_line = format_command_line(example.sample, style)
            lines.append(USAGE_INDENT + " ".join(part for part in (alias, command_line) if part))
    return lines


def render_usage_text(
    usage: Usage | None,
    format_command_line: Callable[[Any, FormatStyle], str],
    program_name: str = "",
    on_example: Callable[[Example], Example] | None = None,
) -> str:
    return "\n".join(
        render_usage_text_as_lines(usage, format_command_line, program_name, on_example)
    )
