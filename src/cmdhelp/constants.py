"""Literal constants used by cmdhelp."""

# Default console width for rendered help.
DEFAULT_MAXIMUM_DISPLAY_WIDTH = 80

# Options block layout: two leading spaces, label, four spaces, help text.
OPTION_LEFT_MARGIN = "  "
OPTION_LABEL_GAP = "    "
OPTION_COLUMN_OVERHEAD = len(OPTION_LEFT_MARGIN) + len(OPTION_LABEL_GAP)

SHORT_NAME_PREFIX = "-"
LONG_NAME_PREFIX = "--"
NAME_SEPARATOR = ", "

HELP_ENTRY_NAME = "help"
VERSION_ENTRY_NAME = "version"

VALID_VALUES_PREFIX = " Valid values: "
VALID_VALUES_SEPARATOR = ", "

ERRORS_INDENT = 2
USAGE_INDENT = "  "

# Default English sentences.
REQUIRED_WORD = "Required."
HELP_COMMAND_TEXT = "Display this help screen."
HELP_VERB_COMMAND_TEXT = "Display more information on a specific command."
VERSION_COMMAND_TEXT = "Display version information."
USAGE_HEADING_TEXT = "USAGE:"
ERRORS_HEADING_TEXT = "ERROR(S):"
