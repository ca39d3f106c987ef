"""Automatic help screen construction from a parse outcome."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .constants import ERRORS_INDENT
from .defaults import HelpDefaults, get_default_help_defaults
from .errors import ExpectedNotParsedResultError
from .help_text import HelpText, render_parsing_errors_text_as_lines, render_usage_text_as_lines
from .metadata import ParserMetadata
from .models import Example, NotParsed, ParserResult, TypeInfo, Usage
from .parse_errors import ErrorKind, HelpVerbRequestedError, has_kind, only_meaningful
from .sentences import SentenceBuilder
from .settings import HelpSettings

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[HelpText], HelpText]
ExampleHandler = Callable[[Example], Example]


class HelpTextFactory:
    """Decide what a help screen shows and assemble it."""

    def __init__(
        self,
        metadata: ParserMetadata,
        settings: HelpSettings | None = None,
        defaults: HelpDefaults | None = None,
    ) -> None:
        self.metadata = metadata
        self.settings = settings or HelpSettings()
        self._defaults = defaults

    @property
    def defaults(self) -> HelpDefaults:
        if self._defaults is None:
            return get_default_help_defaults()
        return self._defaults

    @property
    def heading(self) -> str:
        if self.settings.heading is not None:
            return self.settings.heading
        return self.defaults.heading

    @property
    def copyright(self) -> str:
        if self.settings.copyright is not None:
            return self.settings.copyright
        return self.defaults.copyright

    @property
    def sentence_builder(self) -> SentenceBuilder:
        return self.defaults.sentence_builder

    def build(
        self,
        result: ParserResult,
        on_error: ErrorHandler | None = None,
        on_example: ExampleHandler | None = None,
        verbs_index: bool = False,
    ) -> HelpText:
        """Build a help screen for ``result``.

        Args:
            result: Parsed or NotParsed outcome from the binder
            on_error: Decorates the screen when meaningful errors are present
            on_example: Maps each usage example before it is rendered
            verbs_index: List verbs (no dashes) instead of options
        """
        add_dashes = self.settings.add_dashes_to_option
        if add_dashes is None:
            add_dashes = not verbs_index

        help_text = HelpText(
            self.heading,
            self.copyright,
            self.sentence_builder,
            maximum_display_width=self.settings.maximum_display_width,
            add_dashes_to_option=add_dashes,
            additional_new_line_after_option=self.settings.additional_new_line_after_option,
            add_value_set_text=self.settings.add_value_set_text,
        )

        errors = result.errors if isinstance(result, NotParsed) else ()
        if on_error is not None and only_meaningful(errors):
            help_text = on_error(help_text)

        defaults = self.defaults
        help_text.add_pre_options_lines(defaults.license_lines)

        usage_lines = self._usage_lines(self.metadata.usage_for(result.type_info.current), on_example)
        if defaults.usage_lines or usage_lines:
            usage_heading = help_text.sentence_builder.usage_heading_text()
            if usage_heading:
                help_text.add_pre_options_line(usage_heading)
        help_text.add_pre_options_lines(defaults.usage_lines)
        help_text.add_pre_options_lines(usage_lines)

        choices = result.type_info.choices
        if choices and (verbs_index or has_kind(errors, ErrorKind.NO_VERB_SELECTED)):
            logger.debug("Rendering verb listing for %s", result.type_info.current.__name__)
            help_text.add_dashes_to_option = False
            help_text.add_verbs(self.metadata.verbs_for(choices))
        else:
            logger.debug("Rendering options for %s", result.type_info.current.__name__)
            help_text.add_options(self.metadata.specifications_for(result.type_info.current))

        return help_text

    def build_for(self, result: ParserResult) -> HelpText:
        """Build the screen shown automatically after a failed parse.

        Raises:
            ExpectedNotParsedResultError: If ``result`` is not a NotParsed outcome
        """
        if not isinstance(result, NotParsed):
            raise ExpectedNotParsedResultError()

        if has_kind(result.errors, ErrorKind.VERSION_REQUESTED):
            logger.debug("Version requested; rendering heading and copyright only")
            return self.build_heading(include_copyright=True)

        help_verb = next(
            (error for error in result.errors if isinstance(error, HelpVerbRequestedError)),
            None,
        )
        if help_verb is None:
            return self.build(result, self._errors_handler(result))

        if help_verb.matched and help_verb.verb_type is not None:
            logger.debug("Help requested for verb %s", help_verb.verb)
            verb_result = NotParsed(TypeInfo(help_verb.verb_type))
            return self.build(verb_result, self._errors_handler(verb_result))

        logger.debug("Help requested for unknown verb %r; listing verbs", help_verb.verb)
        return self.build(result, self._errors_handler(result), verbs_index=True)

    def default_parsing_errors_handler(self, result: ParserResult, current: HelpText) -> HelpText:
        """Append the errors heading and one line per meaningful error."""
        if not isinstance(result, NotParsed) or not only_meaningful(result.errors):
            return current

        sentences = current.sentence_builder
        lines = render_parsing_errors_text_as_lines(
            result.errors,
            sentences.format_error,
            sentences.format_mutually_exclusive_set_errors,
            ERRORS_INDENT,
        )
        if not lines:
            return current

        return current.add_pre_options_line(
            "\n" + sentences.errors_heading_text()
        ).add_pre_options_lines(lines)

    def build_heading(self, include_copyright: bool = False) -> HelpText:
        """Heading without any options.

        The copyright is added when ``include_copyright`` is set or the settings
        ask for it to be always printed.
        """
        show_copyright = include_copyright or self.settings.always_print_copyright
        copyright_text = self.copyright if show_copyright else ""
        return HelpText(
            self.heading,
            copyright_text,
            self.sentence_builder,
            maximum_display_width=self.settings.maximum_display_width,
        )

    def _errors_handler(self, result: ParserResult) -> ErrorHandler:
        return lambda current: self.default_parsing_errors_handler(result, current)

    def _usage_lines(self, usage: Usage | None, on_example: ExampleHandler | None) -> list[str]:
        if usage is None or not usage.examples:
            return []
        return render_usage_text_as_lines(
            usage,
            self.metadata.command_line_formatter(),
            self.defaults.program_name,
            on_example,
        )
